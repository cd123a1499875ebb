"""
Mock text templates for offline development
Returns one item per line, the way the real provider is prompted to
"""

import re
from typing import Dict, List

DEFAULT_COUNT = 5

MOCK_LINES: Dict[str, List[str]] = {
    "title": [
        "Chill Vibes and Clutch Plays",
        "Road to Top 500 | Day One",
        "No Sleep Until Victory",
        "Chat Picks My Loadout",
        "Speedrun Attempts All Night",
    ],
    "name": [
        "PixelDrift",
        "NovaByte",
        "LagWizard",
        "CozyCrit",
        "RespawnRae",
    ],
    "bio": [
        "Streaming good vibes and questionable aim.",
        "Here for the games, staying for the community.",
        "Coffee in one hand, controller in the other.",
        "Every stream is a new adventure.",
        "Built on clutch moments and terrible puns.",
    ],
}


class MockTextGenerator:
    """Deterministic line generator keyed on the prompt wording"""

    def generate(self, prompt: str) -> str:
        kind = self._detect_kind(prompt)
        count = self._requested_count(prompt)
        pool = MOCK_LINES[kind]

        lines = []
        for index in range(count):
            line = pool[index % len(pool)]
            rounds = index // len(pool)
            if rounds:
                line = f"{line} {rounds + 1}"
            lines.append(line)
        return "\n".join(lines)

    @staticmethod
    def _detect_kind(prompt: str) -> str:
        lowered = prompt.lower()
        if "username" in lowered:
            return "name"
        if "bio" in lowered:
            return "bio"
        return "title"

    @staticmethod
    def _requested_count(prompt: str) -> int:
        match = re.search(r"\d+", prompt)
        return int(match.group()) if match else DEFAULT_COUNT
