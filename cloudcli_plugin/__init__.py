"""Plugin SDK for cloudcli: metadata types and the runtime plugin context."""

from .cf_context import CFContext
from .context import PluginContext, create_plugin_context
from .env import get_from_env_or_config
from .errors import (
    EndpointNotSetError,
    PluginConfigError,
    PluginConfigInvalidDataError,
    PluginError,
)
from .metadata import (
    SDK_VERSION,
    Command,
    Flag,
    Namespace,
    Plugin,
    PluginMetadata,
    VersionType,
)
from .plugin_config import PluginConfig
from .versions import compare_versions

__all__ = [
    "CFContext",
    "Command",
    "EndpointNotSetError",
    "Flag",
    "Namespace",
    "Plugin",
    "PluginConfig",
    "PluginConfigError",
    "PluginConfigInvalidDataError",
    "PluginContext",
    "PluginError",
    "PluginMetadata",
    "SDK_VERSION",
    "VersionType",
    "compare_versions",
    "create_plugin_context",
    "get_from_env_or_config",
]
