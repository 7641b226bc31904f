"""Token pair returned by a refresh exchange."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .errors import AuthenticationError


@dataclass(frozen=True)
class Token:
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Token":
        access_token = data.get("access_token")
        if not isinstance(access_token, str) or not access_token:
            raise AuthenticationError("token response is missing 'access_token'")
        expires_in = data.get("expires_in")
        try:
            expires_in = int(expires_in) if expires_in is not None else None
        except (TypeError, ValueError):
            expires_in = None
        return cls(
            access_token=access_token,
            refresh_token=str(data.get("refresh_token") or ""),
            token_type=str(data.get("token_type") or "bearer"),
            expires_in=expires_in,
        )

    def token(self) -> str:
        """Return the value sent in an ``Authorization`` header."""

        return f"{self.token_type} {self.access_token}"
