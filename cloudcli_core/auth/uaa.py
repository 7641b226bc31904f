"""CloudFoundry UAA token service client."""

from __future__ import annotations

from dataclasses import dataclass

from cloudcli_core.consts import UAA_TOKEN_PATH

from .rest import RestClient
from .tokens import Token


@dataclass(frozen=True)
class UAAConfig:
    uaa_endpoint: str
    client_id: str = "cf"
    client_secret: str = ""

    @property
    def token_endpoint(self) -> str:
        return self.uaa_endpoint.rstrip("/") + UAA_TOKEN_PATH


class UAARepository:
    """Exchange UAA refresh tokens for a new access/refresh pair."""

    def __init__(self, config: UAAConfig, client: RestClient) -> None:
        self.config = config
        self.client = client

    def refresh_token(self, refresh_token: str) -> Token:
        payload = self.client.post_form(
            self.config.token_endpoint,
            {"grant_type": "refresh_token", "refresh_token": refresh_token},
            auth=(self.config.client_id, self.config.client_secret),
        )
        return Token.from_dict(payload)
