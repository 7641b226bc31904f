"""Host-side session configuration and authentication for cloudcli."""

from .config import CFConfig, ConfigStore, CoreConfig, default_config_path
from .errors import ConfigError
from .models import Account, OrganizationFields, Region, ResourceGroup, SpaceFields

__all__ = [
    "Account",
    "CFConfig",
    "ConfigError",
    "ConfigStore",
    "CoreConfig",
    "OrganizationFields",
    "Region",
    "ResourceGroup",
    "SpaceFields",
    "default_config_path",
]
