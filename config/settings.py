"""
Environment settings management
"""

from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

KNOWN_PROVIDERS = ["openai", "mock"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",  # ignore unrelated environment variables
        frozen=True,
    )

    # AI provider
    AI_PROVIDER: str = "openai"

    # OpenAI
    OPENAI_API_KEY: str = ""
    OPENAI_MODEL: str = "gpt-4o-mini"
    OPENAI_BASE_URL: str = "https://api.openai.com/v1/chat/completions"

    # Request gate
    ALLOWED_ORIGINS: Optional[str] = None
    CLIENT_API_KEY: Optional[str] = None

    # Server
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    def get_allowed_origins(self) -> Optional[List[str]]:
        """Allowed origin list, or None when every origin is allowed"""
        if not self.ALLOWED_ORIGINS:
            return None
        origins = [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]
        return [origin for origin in origins if origin]

    def is_auth_enabled(self) -> bool:
        return bool(self.CLIENT_API_KEY)

    def get_current_provider_info(self) -> dict:
        """Current provider info"""
        if self.AI_PROVIDER.lower() == "mock":
            return {
                "provider": "mock",
                "model": "mock_generator",
                "status": "configured"
            }
        return {
            "provider": "openai",
            "model": self.OPENAI_MODEL,
            "status": "configured" if self.OPENAI_API_KEY else "missing_credential"
        }

    def validate_settings(self) -> list:
        """Validate settings and return warnings"""
        warnings = []

        if self.AI_PROVIDER.lower() not in KNOWN_PROVIDERS:
            warnings.append(f"Unknown AI_PROVIDER: {self.AI_PROVIDER}, using openai")

        if self.AI_PROVIDER.lower() != "mock" and not self.OPENAI_API_KEY:
            warnings.append("OPENAI_API_KEY is not set; generation endpoints will fail.")

        if not self.is_auth_enabled():
            warnings.append("CLIENT_API_KEY is not set; requests are not authenticated.")

        if self.get_allowed_origins() is None:
            warnings.append("ALLOWED_ORIGINS is not set; every origin is allowed.")

        return warnings
