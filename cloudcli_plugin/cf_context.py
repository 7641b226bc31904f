"""CloudFoundry credential context exposed to plugins."""

from __future__ import annotations

import logging
from typing import Callable

from cloudcli_core.auth import RestClient, UAAConfig, UAARepository
from cloudcli_core.config import CFConfig
from cloudcli_core.models import OrganizationFields, SpaceFields

from .errors import EndpointNotSetError

logger = logging.getLogger(__name__)


class CFContext:
    """Read access to the targeted CloudFoundry session plus UAA refresh."""

    def __init__(
        self,
        config: CFConfig,
        client_factory: Callable[[], RestClient] = RestClient,
    ) -> None:
        self.config = config
        self._client_factory = client_factory

    def api_endpoint(self) -> str:
        return self.config.api_endpoint()

    def has_api_endpoint(self) -> bool:
        return self.api_endpoint() != ""

    def api_version(self) -> str:
        return self.config.api_version()

    def doppler_endpoint(self) -> str:
        return self.config.doppler_endpoint()

    def uaa_endpoint(self) -> str:
        return self.config.uaa_endpoint()

    def is_logged_in(self) -> bool:
        return self.config.is_logged_in()

    def username(self) -> str:
        return self.config.username()

    def user_email(self) -> str:
        return self.config.user_email()

    def user_guid(self) -> str:
        return self.config.user_guid()

    def uaa_token(self) -> str:
        """Return the stored UAA access token; it may be expired."""

        return self.config.uaa_token()

    def uaa_refresh_token(self) -> str:
        return self.config.uaa_refresh_token()

    def current_organization(self) -> OrganizationFields:
        return self.config.current_organization()

    def has_targeted_organization(self) -> bool:
        return self.config.has_targeted_organization()

    def current_space(self) -> SpaceFields:
        return self.config.current_space()

    def has_targeted_space(self) -> bool:
        return self.config.has_targeted_space()

    def refresh_uaa_token(self) -> str:
        """Exchange the stored refresh token and persist the new pair.

        Raises :class:`EndpointNotSetError` when no CloudFoundry API endpoint
        is targeted; token service errors propagate unchanged and leave the
        stored tokens untouched.
        """

        if not self.has_api_endpoint():
            raise EndpointNotSetError("CloudFoundry API endpoint is not set")

        config = UAAConfig(uaa_endpoint=self.config.authentication_endpoint())
        repository = UAARepository(config, self._client_factory())
        logger.debug("refreshing UAA token via %s", config.token_endpoint)
        token = repository.refresh_token(self.uaa_refresh_token())

        self.config.set_uaa_token(token.token())
        self.config.set_uaa_refresh_token(token.refresh_token)
        return token.token()
