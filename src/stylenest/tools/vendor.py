"""Vendor-prefixed and repeated property helpers."""
from __future__ import annotations

from collections.abc import Iterable, Sequence

from stylenest.properties import ordinal_key

DEFAULT_VENDORS: tuple[str, ...] = ("webkit", "moz", "ms", "o")


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def prefix(prop: str, value: object, vendors: Iterable[str] | None = None) -> dict[str, object]:
    """Fan *prop* out into one vendor-prefixed key per vendor.

    ``prefix("borderRadius", 10)`` gives ``{"WebkitBorderRadius": 10, ...}``,
    which renders as ``-webkit-border-radius: 10;``.
    """
    if vendors is None:
        vendors = DEFAULT_VENDORS
    return {f"{_capitalize(vendor)}{_capitalize(prop)}": value for vendor in vendors}


def multivalue(prop: str, values: Sequence[object]) -> dict[str, object]:
    """Give one property several values, rendered as repeated declarations.

    ``multivalue("src", ["a", "b"])`` gives ``{"src/*0*/": "a", "src/*1*/": "b"}``.
    """
    return {ordinal_key(prop, index): value for index, value in enumerate(values)}
