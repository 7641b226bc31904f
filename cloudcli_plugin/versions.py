"""Lenient dotted-version comparison used for SDK compatibility gates."""

from __future__ import annotations

import re

__all__ = ["compare_versions", "parse_segment"]

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_segment(segment: str) -> int:
    """Return the integer value of ``segment``; anything unparseable counts as 0.

    Only plain ASCII integers are accepted: whitespace, ``_`` separators and
    non-ASCII digits make the segment count as 0.
    """

    if _INTEGER.fullmatch(segment):
        return int(segment)
    return 0


def compare_versions(v1: str, v2: str) -> int:
    """Return -1, 0 or 1 as ``v1`` is lower than, equal to or greater than ``v2``.

    The shorter version is padded with zero segments, so ``"0.1.1.0"`` equals
    ``"0.1.1"``. Malformed input never raises.
    """

    s1 = (v1 or "").split(".")
    s2 = (v2 or "").split(".")
    for i in range(max(len(s1), len(s2))):
        p1 = parse_segment(s1[i]) if i < len(s1) else 0
        p2 = parse_segment(s2[i]) if i < len(s2) else 0
        if p1 > p2:
            return 1
        if p1 < p2:
            return -1
    return 0
