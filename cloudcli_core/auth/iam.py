"""IAM token service client."""

from __future__ import annotations

from dataclasses import dataclass

from .rest import RestClient
from .tokens import Token


@dataclass(frozen=True)
class IAMConfig:
    token_endpoint: str
    client_id: str = "cloudcli"
    client_secret: str = "cloudcli"


class IAMAuthRepository:
    """Exchange IAM refresh tokens against the configured token endpoint."""

    def __init__(self, config: IAMConfig, client: RestClient) -> None:
        self.config = config
        self.client = client

    def refresh_token(self, refresh_token: str) -> Token:
        payload = self.client.post_form(
            self.config.token_endpoint,
            {
                "grant_type": "refresh_token",
                "refresh_token": refresh_token,
                "response_type": "cloud_iam",
            },
            auth=(self.config.client_id, self.config.client_secret),
        )
        return Token.from_dict(payload)
