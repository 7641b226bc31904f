"""Environment overrides layered over persisted configuration values."""

from __future__ import annotations

import os
from typing import Mapping


def get_from_env_or_config(
    env_key: str,
    config_value: str,
    env: Mapping[str, str] | None = None,
) -> str:
    """Prefer a non-empty ``env_key`` value over ``config_value``."""

    environ = os.environ if env is None else env
    if value := environ.get(env_key):
        return value
    return config_value
