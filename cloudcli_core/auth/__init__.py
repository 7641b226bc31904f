"""Token-exchange clients for the IAM and UAA services."""

from .errors import AuthenticationError, AuthRequestError, InvalidTokenError, ServerError
from .iam import IAMAuthRepository, IAMConfig
from .rest import RestClient
from .tokens import Token
from .uaa import UAAConfig, UAARepository

__all__ = [
    "AuthenticationError",
    "AuthRequestError",
    "IAMAuthRepository",
    "IAMConfig",
    "InvalidTokenError",
    "RestClient",
    "ServerError",
    "Token",
    "UAAConfig",
    "UAARepository",
]
