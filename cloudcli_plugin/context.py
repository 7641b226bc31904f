"""Runtime context handed to a plugin for one invocation."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

from cloudcli_core import consts
from cloudcli_core.auth import IAMAuthRepository, IAMConfig, RestClient
from cloudcli_core.config import CoreConfig
from cloudcli_core.models import Account, Region, ResourceGroup

from .cf_context import CFContext
from .env import get_from_env_or_config
from .errors import EndpointNotSetError
from .metadata import PluginMetadata
from .plugin_config import PluginConfig
from .versions import compare_versions

logger = logging.getLogger(__name__)


class PluginContext:
    """Stable, SDK-version aware view of the host session for a plugin.

    The wrapped :class:`CoreConfig` is shared with the host: token refreshes
    are written back to it and are visible to every other holder. Instances
    are meant to be used from a single thread.
    """

    def __init__(
        self,
        plugin_path: Path | str,
        core_config: CoreConfig,
        metadata: PluginMetadata | None = None,
        *,
        env: Mapping[str, str] | None = None,
        rest_client: RestClient | None = None,
    ) -> None:
        self._plugin_path = str(plugin_path)
        self._core_config = core_config
        self._metadata = metadata
        self._env = os.environ if env is None else env
        self._rest_client = rest_client
        self._plugin_config = PluginConfig(
            Path(self._plugin_path) / consts.PLUGIN_CONFIG_FILE_NAME
        )
        self._cf = CFContext(core_config.cf_config(), self._new_rest_client)

    def _new_rest_client(self) -> RestClient:
        if self._rest_client is not None:
            return self._rest_client
        return RestClient.from_settings(
            http_timeout=self._core_config.http_timeout(),
            ssl_disabled=self._core_config.is_ssl_disabled(),
        )

    # ---------- Endpoints ----------

    def sdk_version(self) -> str:
        """Return the SDK version the running plugin was built against."""

        if self._metadata is not None:
            return str(self._metadata.sdk_version)
        return self._core_config.sdk_version()

    def api_endpoint(self) -> str:
        # The platform endpoint replaced the CF one in SDK 0.1.1; older
        # plugins keep receiving the CF-scoped value.
        if compare_versions(self.sdk_version(), consts.LEGACY_ENDPOINT_SDK_VERSION) < 0:
            return self._core_config.cf_config().api_endpoint()
        return self._core_config.api_endpoint()

    def has_api_endpoint(self) -> bool:
        return self.api_endpoint() != ""

    def console_endpoint(self) -> str:
        return self._core_config.console_endpoint()

    def iam_endpoint(self) -> str:
        return self._core_config.iam_endpoint()

    def cloud_name(self) -> str:
        return get_from_env_or_config(
            consts.ENV_CLOUD_NAME, self._core_config.cloud_name(), self._env
        )

    def cloud_type(self) -> str:
        return self._core_config.cloud_type()

    def current_region(self) -> Region:
        return self._core_config.current_region()

    # ---------- Session ----------

    def iam_token(self) -> str:
        return self._core_config.iam_token()

    def iam_refresh_token(self) -> str:
        return self._core_config.iam_refresh_token()

    def refresh_iam_token(self) -> str:
        """Refresh the IAM access token, persist the new pair and return it."""

        endpoint = get_from_env_or_config(
            consts.ENV_IAM_ENDPOINT, self._core_config.iam_endpoint(), self._env
        )
        if not endpoint:
            raise EndpointNotSetError("IAM endpoint is not set")

        config = IAMConfig(token_endpoint=endpoint + consts.IAM_TOKEN_PATH)
        repository = IAMAuthRepository(config, self._new_rest_client())
        logger.debug("refreshing IAM token via %s", config.token_endpoint)
        token = repository.refresh_token(self._core_config.iam_refresh_token())

        self._core_config.set_iam_token(token.token())
        self._core_config.set_iam_refresh_token(token.refresh_token)
        return token.token()

    def user_email(self) -> str:
        return self._core_config.user_email()

    def is_logged_in(self) -> bool:
        return self._core_config.is_logged_in()

    def ims_account_id(self) -> str:
        return self._core_config.ims_account_id()

    def current_account(self) -> Account:
        return self._core_config.current_account()

    def has_targeted_account(self) -> bool:
        return self._core_config.has_targeted_account()

    def current_resource_group(self) -> ResourceGroup:
        return self._core_config.current_resource_group()

    def has_targeted_resource_group(self) -> bool:
        return self._core_config.has_targeted_resource_group()

    def cf(self) -> CFContext:
        return self._cf

    def has_targeted_cf(self) -> bool:
        return self._cf.has_api_endpoint()

    # ---------- User settings ----------

    def locale(self) -> str:
        return self._core_config.locale()

    def trace(self) -> str:
        """Return ``"true"``, ``"false"`` or the path of a trace file."""

        return get_from_env_or_config(consts.ENV_TRACE, self._core_config.trace(), self._env)

    def color_enabled(self) -> str:
        return get_from_env_or_config(
            consts.ENV_COLOR, self._core_config.color_enabled(), self._env
        )

    def is_ssl_disabled(self) -> bool:
        return self._core_config.is_ssl_disabled()

    def http_timeout(self) -> int:
        return self._core_config.http_timeout()

    def version_check_enabled(self) -> bool:
        return not self._core_config.check_cli_version_disabled()

    # ---------- Plugin ----------

    def plugin_directory(self) -> str:
        return self._plugin_path

    def plugin_config(self) -> PluginConfig:
        return self._plugin_config

    def command_namespace(self) -> str:
        return get_from_env_or_config(consts.ENV_PLUGIN_NAMESPACE, "", self._env)

    def cli_name(self) -> str:
        return get_from_env_or_config(
            consts.ENV_CLI_NAME, consts.DEFAULT_CLI_NAME, self._env
        )


def create_plugin_context(
    plugin_path: Path | str,
    core_config: CoreConfig,
    metadata: PluginMetadata | None = None,
    *,
    env: Mapping[str, str] | None = None,
    rest_client: RestClient | None = None,
) -> PluginContext:
    """Build the context the host passes to ``Plugin.run``."""

    return PluginContext(
        plugin_path,
        core_config,
        metadata,
        env=env,
        rest_client=rest_client,
    )
