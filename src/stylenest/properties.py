"""Property name canonicalization.

Style trees use camel-cased keys (``minWidth``) so they can be written as
plain identifiers. Vendor-prefixed properties carry the vendor token
capitalized at the front (``WebkitBorderRadius``), which the same rule turns
into the dashed form (``-webkit-border-radius``).
"""

from __future__ import annotations

import re

__all__ = ["to_css_property", "strip_ordinal_marker", "ordinal_key"]

_UPPER_RE = re.compile(r"([A-Z])")

# Trailing ordinal marker used to repeat a property: ``src/*1*/``
_ORDINAL_RE = re.compile(r"/\*\d+\*/$")


def to_css_property(key: str) -> str:
    """Return the CSS property text for a camel-cased property key."""
    return _UPPER_RE.sub(r"-\1", key).lower()


def strip_ordinal_marker(name: str) -> str:
    return _ORDINAL_RE.sub("", name)


def ordinal_key(name: str, index: int) -> str:
    """Build the key for the *index*-th value of a repeated property."""
    return f"{name}/*{index}*/"
