"""
LLM Provider (chat-completion relay)
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
import aiohttp
import logging
import time

from config.settings import Settings

logger = logging.getLogger(__name__)

OPENAI_CHAT_URL = "https://api.openai.com/v1/chat/completions"
SYSTEM_INSTRUCTION = "You are a helpful creative assistant."
TEMPERATURE = 0.8


class UpstreamError(Exception):
    """Base error for upstream AI calls"""


class UpstreamConfigError(UpstreamError):
    """No upstream credential configured"""


class UpstreamRequestError(UpstreamError):
    """Upstream answered with a non-success status"""

    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        super().__init__(f"OpenAI error {status}: {body}")


class LLMProvider(ABC):
    @abstractmethod
    async def generate(self, prompt: str, max_tokens: int = 150) -> str:
        pass

    @abstractmethod
    def get_provider_name(self) -> str:
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Whether the provider can serve requests"""
        pass


class OpenAIProvider(LLMProvider):
    """OpenAI chat-completion provider"""

    def __init__(self, api_key: str, model: str = "gpt-4o-mini", base_url: str = OPENAI_CHAT_URL):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url

    def is_available(self) -> bool:
        return bool(self.api_key)

    def build_payload(self, prompt: str, max_tokens: int) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_INSTRUCTION},
                {"role": "user", "content": prompt}
            ],
            "temperature": TEMPERATURE,
            "max_tokens": max_tokens
        }

    async def generate(self, prompt: str, max_tokens: int = 150) -> str:
        if not self.is_available():
            logger.error("OpenAIProvider unavailable: OPENAI_API_KEY is not set")
            raise UpstreamConfigError("OPENAI_API_KEY missing in env")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json"
        }
        payload = self.build_payload(prompt, max_tokens)

        start_time = time.time()
        async with aiohttp.ClientSession() as session:
            async with session.post(self.base_url, headers=headers, json=payload) as response:
                response_time = time.time() - start_time

                if not 200 <= response.status < 300:
                    error_text = await response.text()
                    logger.error("OpenAI API error: status %s after %.2fs", response.status, response_time)
                    raise UpstreamRequestError(response.status, error_text)

                result = await response.json(content_type=None)

        logger.debug("OpenAI API answered in %.2fs", response_time)
        return self._extract_content(result)

    @staticmethod
    def _extract_content(result: Any) -> str:
        """First choice message content, or an empty string when absent"""
        if not isinstance(result, dict):
            return ""
        choices = result.get("choices")
        if not isinstance(choices, list) or not choices:
            return ""
        first = choices[0]
        message = first.get("message") if isinstance(first, dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        if content is None:
            return ""
        return content if isinstance(content, str) else str(content)

    def get_provider_name(self) -> str:
        return f"OpenAI {self.model}"


class MockProvider(LLMProvider):
    """Canned text provider for offline development"""

    def __init__(self):
        from templates.mock_templates import MockTextGenerator
        self.generator = MockTextGenerator()

    def is_available(self) -> bool:
        return True

    async def generate(self, prompt: str, max_tokens: int = 150) -> str:
        return self.generator.generate(prompt)

    def get_provider_name(self) -> str:
        return "Mock Provider"


class LLMProviderFactory:
    """LLM Provider factory"""

    @staticmethod
    def get_provider(settings: Optional[Settings] = None) -> LLMProvider:
        settings = settings or Settings()
        provider_name = settings.AI_PROVIDER.lower()

        if provider_name == "mock":
            return MockProvider()

        # no silent mock fallback: a missing key must surface as UpstreamConfigError
        provider = OpenAIProvider(
            api_key=settings.OPENAI_API_KEY,
            model=settings.OPENAI_MODEL,
            base_url=settings.OPENAI_BASE_URL
        )
        if not provider.is_available():
            logger.warning("OpenAI provider created without OPENAI_API_KEY")
        return provider
