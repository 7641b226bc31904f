"""Atomic JSON document writes shared by the config stores."""

from __future__ import annotations

import contextlib
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Mapping


def write_json_atomic(path: Path, document: Mapping[str, Any], *, prefix: str) -> None:
    """Write ``document`` to ``path`` through a temp file in the same directory.

    Raises ``OSError`` when the directory or file cannot be written and
    ``TypeError``/``ValueError`` when the document is not JSON serializable.
    No temp file is left behind on failure.
    """

    payload = json.dumps(document, indent=2, sort_keys=True)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=prefix, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(payload)
        os.replace(tmp_name, path)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        raise
