"""Plugin SDK error types."""


class PluginError(Exception):
    """Base type for plugin SDK failures."""


class EndpointNotSetError(PluginError):
    """Raised when a token refresh is attempted without a targeted endpoint."""


class PluginConfigError(PluginError):
    """Raised when the plugin configuration file cannot be read or written."""


class PluginConfigInvalidDataError(PluginConfigError):
    """Raised when a plugin configuration value has an unexpected type."""

    def __init__(self, key: str, expected: str, value: object) -> None:
        super().__init__(
            f"value of '{key}' is {type(value).__name__}, expected {expected}"
        )
        self.key = key
        self.expected = expected
        self.value = value
