"""Typed token-exchange errors."""

from __future__ import annotations


class AuthenticationError(RuntimeError):
    """Base authentication error."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthRequestError(AuthenticationError):
    """The token service could not be reached."""


class InvalidTokenError(AuthenticationError):
    """The token service rejected the refresh token or client credentials."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        code: str | None = None,
        description: str | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.code = code
        self.description = description


class ServerError(AuthenticationError):
    """The token service failed while handling the request."""
