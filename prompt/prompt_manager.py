"""
Prompt manager - generation templates with their token budget and result cap
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class PromptTemplate:
    template: str
    max_tokens: int
    limit: int

    def render(self, **fields: str) -> str:
        return self.template.format(**fields)


DEFAULT_TEMPLATES: Dict[str, PromptTemplate] = {
    "title": PromptTemplate(
        template=(
            "Generate 10 short catchy stream titles (max 70 chars). "
            "Game: {game}. Keywords: {keywords}. Voice: {voice}. Output one per line."
        ),
        max_tokens=160,
        limit=10,
    ),
    "name": PromptTemplate(
        template="Generate 15 creative Twitch usernames. Keywords: {keywords}. Style: {style}. One per line.",
        max_tokens=200,
        limit=15,
    ),
    "bio": PromptTemplate(
        template="Write 5 Twitch bio lines with vibe: {vibe}. Length: {length}. Output one per line.",
        max_tokens=160,
        limit=5,
    ),
}


class PromptManager:
    """Lookup for the fixed generation prompts"""

    def __init__(self):
        self.templates = dict(DEFAULT_TEMPLATES)

    def get_template(self, name: str) -> PromptTemplate:
        try:
            return self.templates[name]
        except KeyError:
            raise ValueError(f"Unknown prompt template: {name}") from None

    def build_prompt(self, name: str, **fields: str) -> str:
        return self.get_template(name).render(**fields)


_prompt_manager = None

def get_prompt_manager() -> PromptManager:
    """Shared prompt manager instance"""
    global _prompt_manager
    if _prompt_manager is None:
        _prompt_manager = PromptManager()
    return _prompt_manager
