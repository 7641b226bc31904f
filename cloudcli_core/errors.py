"""Errors raised by the persisted configuration store."""


class ConfigError(Exception):
    """Raised when the persisted configuration cannot be read or written."""
