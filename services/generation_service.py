"""
Creative text generation service (prompt -> provider -> item list)
"""

from typing import List, Optional, Tuple
import logging
import time

from models.request_models import BioRequest, NameRequest, TitleRequest
from models.response_models import BioResponse, NameResponse, TitleResponse
from prompt.prompt_manager import PromptManager, get_prompt_manager
from providers.llm_provider import LLMProvider
from utils.text_parser import parse_lines

logger = logging.getLogger(__name__)


class GenerationService:
    """Builds the prompt for each endpoint and splits the answer into items"""

    def __init__(self, provider: LLMProvider, prompt_manager: Optional[PromptManager] = None):
        self.provider = provider
        self.prompt_manager = prompt_manager or get_prompt_manager()

    async def generate_titles(self, request: TitleRequest) -> TitleResponse:
        titles, raw = await self._generate_lines(
            "title", game=request.game, keywords=request.keywords, voice=request.voice
        )
        return TitleResponse(titles=titles, raw=raw)

    async def generate_names(self, request: NameRequest) -> NameResponse:
        names, raw = await self._generate_lines("name", keywords=request.keywords, style=request.style)
        return NameResponse(names=names, raw=raw)

    async def generate_bios(self, request: BioRequest) -> BioResponse:
        bios, raw = await self._generate_lines("bio", vibe=request.vibe, length=request.length)
        return BioResponse(bios=bios, raw=raw)

    async def _generate_lines(self, template_name: str, **fields: str) -> Tuple[List[str], str]:
        template = self.prompt_manager.get_template(template_name)
        prompt = self.prompt_manager.build_prompt(template_name, **fields)

        start_time = time.time()
        raw = await self.provider.generate(prompt, template.max_tokens)
        lines = parse_lines(raw, template.limit)

        logger.info(
            "%s generation: %d items from %s in %.2fs",
            template_name, len(lines), self.provider.get_provider_name(), time.time() - start_time
        )
        return lines, raw
