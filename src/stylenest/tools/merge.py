"""Shallow merge of style fragments."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def mix(*candidates: object) -> dict[str, Any]:
    """Merge mappings left to right; later keys win.

    Arguments that are not mappings (``None``, ``False``, the result of a
    failed ``cond and {...}``) are skipped.
    """
    result: dict[str, Any] = {}
    for candidate in candidates:
        if isinstance(candidate, Mapping):
            result.update(candidate)
    return result
