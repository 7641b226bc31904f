"""Persisted CLI session configuration shared by the host and its plugins."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from platformdirs import user_config_dir

from .consts import CONFIG_FILE_NAME, DEFAULT_APP_NAME, ENV_HOME
from .errors import ConfigError
from .fileio import write_json_atomic
from .models import Account, OrganizationFields, Region, ResourceGroup, SpaceFields

logger = logging.getLogger(__name__)

CF_SECTION = "cf"

_MISSING = object()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Return the config path, honoring the ``CLOUDCLI_HOME`` override."""

    environ = os.environ if env is None else env
    if override := environ.get(ENV_HOME):
        return Path(override).expanduser() / CONFIG_FILE_NAME
    base_dir = Path(user_config_dir(DEFAULT_APP_NAME, appauthor=False))
    return base_dir / CONFIG_FILE_NAME


@dataclass
class ConfigStore:
    """JSON document on disk; every write is persisted immediately."""

    path: Path = field(default_factory=default_config_path)
    _store: dict[str, Any] = field(default_factory=dict, init=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.load()

    def load(self) -> None:
        if not self.path.exists():
            self._store = {}
            return
        try:
            document = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigError(f"unable to read configuration at {self.path}") from exc
        if not isinstance(document, dict):
            raise ConfigError(f"configuration at {self.path} must be a JSON object")
        self._store = document
        logger.debug("loaded configuration from %s", self.path)

    def save(self) -> None:
        try:
            write_json_atomic(self.path, self._store, prefix=".config-")
        except (OSError, TypeError, ValueError) as exc:
            raise ConfigError(f"unable to write configuration at {self.path}") from exc
        logger.debug("saved configuration to %s", self.path)

    def get(self, key: str, default: Any | None = None, *, section: str | None = None) -> Any | None:
        container = self._section(section) if section else self._store
        return container.get(key, default)

    def set(self, key: str, value: Any, *, section: str | None = None) -> None:
        """Store ``value`` and persist it; on failure the document is left unchanged."""

        top_key = section or key
        previous = self._store.get(top_key, _MISSING)
        if section:
            updated = dict(previous) if isinstance(previous, dict) else {}
            updated[key] = value
        else:
            updated = value
        self._store[top_key] = updated
        try:
            self.save()
        except ConfigError:
            if previous is _MISSING:
                self._store.pop(top_key, None)
            else:
                self._store[top_key] = previous
            raise

    def _section(self, name: str) -> dict[str, Any]:
        value = self._store.get(name)
        return value if isinstance(value, dict) else {}


class _ConfigView:
    """Typed accessors over one section of a :class:`ConfigStore`."""

    _section: str | None = None

    def __init__(self, store: ConfigStore) -> None:
        self.store = store

    def _str(self, key: str) -> str:
        value = self.store.get(key, section=self._section)
        return "" if value is None else str(value)

    def _bool(self, key: str) -> bool:
        # Only true booleans or the string "true" enable a flag.
        value = self.store.get(key, False, section=self._section)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.strip().lower() == "true"
        return False

    def _mapping(self, key: str) -> Mapping[str, Any] | None:
        value = self.store.get(key, section=self._section)
        return value if isinstance(value, Mapping) else None

    def _set(self, key: str, value: Any) -> None:
        self.store.set(key, value, section=self._section)


class CFConfig(_ConfigView):
    """CloudFoundry-scoped session fields stored under the ``cf`` section."""

    _section = CF_SECTION

    def api_endpoint(self) -> str:
        return self._str("api_endpoint")

    def has_api_endpoint(self) -> bool:
        return self.api_endpoint() != ""

    def api_version(self) -> str:
        return self._str("api_version")

    def doppler_endpoint(self) -> str:
        return self._str("doppler_endpoint")

    def uaa_endpoint(self) -> str:
        return self._str("uaa_endpoint")

    def authentication_endpoint(self) -> str:
        return self._str("authentication_endpoint") or self.uaa_endpoint()

    def uaa_token(self) -> str:
        return self._str("uaa_token")

    def uaa_refresh_token(self) -> str:
        return self._str("uaa_refresh_token")

    def is_logged_in(self) -> bool:
        return self.uaa_token() != ""

    def username(self) -> str:
        return self._str("username")

    def user_email(self) -> str:
        return self._str("user_email")

    def user_guid(self) -> str:
        return self._str("user_guid")

    def current_organization(self) -> OrganizationFields:
        return OrganizationFields.from_dict(self._mapping("organization"))

    def has_targeted_organization(self) -> bool:
        return self.current_organization().guid != ""

    def current_space(self) -> SpaceFields:
        return SpaceFields.from_dict(self._mapping("space"))

    def has_targeted_space(self) -> bool:
        return self.current_space().guid != ""

    def set_api_endpoint(self, endpoint: str) -> None:
        self._set("api_endpoint", endpoint)

    def set_api_version(self, version: str) -> None:
        self._set("api_version", version)

    def set_doppler_endpoint(self, endpoint: str) -> None:
        self._set("doppler_endpoint", endpoint)

    def set_uaa_endpoint(self, endpoint: str) -> None:
        self._set("uaa_endpoint", endpoint)

    def set_authentication_endpoint(self, endpoint: str) -> None:
        self._set("authentication_endpoint", endpoint)

    def set_uaa_token(self, token: str) -> None:
        self._set("uaa_token", token)

    def set_uaa_refresh_token(self, token: str) -> None:
        self._set("uaa_refresh_token", token)

    def set_user(self, *, username: str = "", email: str = "", guid: str = "") -> None:
        self._set("username", username)
        self._set("user_email", email)
        self._set("user_guid", guid)

    def set_organization(self, organization: OrganizationFields) -> None:
        self._set("organization", organization.to_dict())

    def set_space(self, space: SpaceFields) -> None:
        self._set("space", space.to_dict())


class CoreConfig(_ConfigView):
    """Platform-wide session fields plus access to the CF section."""

    @classmethod
    def load(cls, path: Path | None = None) -> "CoreConfig":
        return cls(ConfigStore(path) if path is not None else ConfigStore())

    def cf_config(self) -> CFConfig:
        return CFConfig(self.store)

    def api_endpoint(self) -> str:
        return self._str("api_endpoint")

    def has_api_endpoint(self) -> bool:
        return self.api_endpoint() != ""

    def console_endpoint(self) -> str:
        return self._str("console_endpoint")

    def iam_endpoint(self) -> str:
        return self._str("iam_endpoint")

    def cloud_name(self) -> str:
        return self._str("cloud_name")

    def cloud_type(self) -> str:
        return self._str("cloud_type")

    def current_region(self) -> Region:
        return Region.from_dict(self._mapping("region"))

    def iam_token(self) -> str:
        return self._str("iam_token")

    def iam_refresh_token(self) -> str:
        return self._str("iam_refresh_token")

    def is_logged_in(self) -> bool:
        return self.iam_token() != ""

    def user_email(self) -> str:
        return self._str("user_email")

    def ims_account_id(self) -> str:
        return self._str("ims_account_id")

    def current_account(self) -> Account:
        return Account.from_dict(self._mapping("account"))

    def has_targeted_account(self) -> bool:
        return self.current_account().guid != ""

    def current_resource_group(self) -> ResourceGroup:
        return ResourceGroup.from_dict(self._mapping("resource_group"))

    def has_targeted_resource_group(self) -> bool:
        return self.current_resource_group().guid != ""

    def locale(self) -> str:
        return self._str("locale")

    def trace(self) -> str:
        return self._str("trace")

    def color_enabled(self) -> str:
        return self._str("color_enabled")

    def is_ssl_disabled(self) -> bool:
        return self._bool("ssl_disabled")

    def http_timeout(self) -> int:
        value = self.store.get("http_timeout", 0)
        try:
            return int(value)
        except (TypeError, ValueError):
            return 0

    def check_cli_version_disabled(self) -> bool:
        return self._bool("check_cli_version_disabled")

    def sdk_version(self) -> str:
        return self._str("sdk_version")

    def set_api_endpoint(self, endpoint: str) -> None:
        self._set("api_endpoint", endpoint)

    def set_console_endpoint(self, endpoint: str) -> None:
        self._set("console_endpoint", endpoint)

    def set_iam_endpoint(self, endpoint: str) -> None:
        self._set("iam_endpoint", endpoint)

    def set_cloud(self, *, name: str, cloud_type: str = "") -> None:
        self._set("cloud_name", name)
        self._set("cloud_type", cloud_type)

    def set_region(self, region: Region) -> None:
        self._set("region", region.to_dict())

    def set_iam_token(self, token: str) -> None:
        self._set("iam_token", token)

    def set_iam_refresh_token(self, token: str) -> None:
        self._set("iam_refresh_token", token)

    def set_user_email(self, email: str) -> None:
        self._set("user_email", email)

    def set_ims_account_id(self, account_id: str) -> None:
        self._set("ims_account_id", account_id)

    def set_account(self, account: Account) -> None:
        self._set("account", account.to_dict())

    def set_resource_group(self, group: ResourceGroup) -> None:
        self._set("resource_group", group.to_dict())

    def set_locale(self, locale: str) -> None:
        self._set("locale", locale)

    def set_trace(self, trace: str) -> None:
        self._set("trace", trace)

    def set_color_enabled(self, enabled: str) -> None:
        self._set("color_enabled", enabled)

    def set_ssl_disabled(self, disabled: bool) -> None:
        self._set("ssl_disabled", bool(disabled))

    def set_http_timeout(self, seconds: int) -> None:
        self._set("http_timeout", int(seconds))

    def set_check_cli_version_disabled(self, disabled: bool) -> None:
        self._set("check_cli_version_disabled", bool(disabled))

    def set_sdk_version(self, version: str) -> None:
        self._set("sdk_version", version)
