"""
Request gate - origin allow-list and shared-secret header check
"""

import hmac
from typing import Iterable, List, Optional

from config.settings import Settings

API_KEY_HEADER = "x-api-key"
UNAUTHORIZED_MESSAGE = "Missing or invalid x-api-key header"
CORS_REJECTED_MESSAGE = "CORS not allowed"

# liveness probes do not carry the client secret
AUTH_EXEMPT_PATHS = ("/health",)


class RequestGate:
    def __init__(
        self,
        allowed_origins: Optional[List[str]] = None,
        client_api_key: Optional[str] = None,
        exempt_paths: Iterable[str] = AUTH_EXEMPT_PATHS,
    ):
        self.allowed_origins = allowed_origins
        self.client_api_key = client_api_key or None
        self.exempt_paths = frozenset(exempt_paths)

    @classmethod
    def from_settings(cls, settings: Settings) -> "RequestGate":
        return cls(
            allowed_origins=settings.get_allowed_origins(),
            client_api_key=settings.CLIENT_API_KEY,
        )

    def is_origin_allowed(self, origin: Optional[str]) -> bool:
        """Requests without an Origin header (curl, servers) always pass"""
        if self.allowed_origins is None or not origin:
            return True
        return origin in self.allowed_origins

    def cors_origins(self) -> List[str]:
        if self.allowed_origins is None:
            return ["*"]
        return list(self.allowed_origins)

    def requires_api_key(self, path: str) -> bool:
        return self.client_api_key is not None and path not in self.exempt_paths

    def is_api_key_valid(self, incoming: Optional[str]) -> bool:
        if self.client_api_key is None:
            return True
        if not incoming:
            return False
        return hmac.compare_digest(incoming.encode("utf-8"), self.client_api_key.encode("utf-8"))
