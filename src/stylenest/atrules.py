"""Static registry of at-rule categories.

The category decides how an at-rule's value is treated. It is looked up by
name only: ``@media`` and ``@font-face`` both take a mapping, so the value's
shape cannot tell them apart.
"""

from __future__ import annotations

import logging
import re
from enum import Enum

__all__ = ["AtRuleKind", "classify", "is_at_rule", "split_at_rule"]

log = logging.getLogger(__name__)


class AtRuleKind(Enum):
    """How an at-rule's value is treated."""

    GROUPING = "grouping"  # conditional, body holds selectors and nests
    FLAT_DECLARATION = "flat_declaration"  # body is a plain declaration block
    FLAT_VALUE = "flat_value"  # value is a single scalar


_REGISTRY: dict[str, AtRuleKind] = {
    "media": AtRuleKind.GROUPING,
    "supports": AtRuleKind.GROUPING,
    "document": AtRuleKind.GROUPING,
    "font-face": AtRuleKind.FLAT_DECLARATION,
    "page": AtRuleKind.FLAT_DECLARATION,
    "viewport": AtRuleKind.FLAT_DECLARATION,
    "counter-style": AtRuleKind.FLAT_DECLARATION,
    "charset": AtRuleKind.FLAT_VALUE,
    "import": AtRuleKind.FLAT_VALUE,
    "namespace": AtRuleKind.FLAT_VALUE,
}

_AT_RULE_RE = re.compile(r"^@(?P<name>[-\w]*)\s*(?P<rest>.*)$", re.DOTALL)


def is_at_rule(key: str) -> bool:
    return key.startswith("@")


def split_at_rule(key: str) -> tuple[str, str]:
    """Split ``"@media screen"`` into ``("media", "screen")``.

    The name is lower-cased; the condition/parameter text is stripped and
    may be empty.
    """
    match = _AT_RULE_RE.match(key.strip())
    if match is None:
        raise ValueError(f"Not an at-rule: {key!r}")
    return match.group("name").lower(), match.group("rest").strip()


def classify(key: str) -> AtRuleKind:
    """Return the category of the at-rule *key*.

    Unknown at-rules classify as FLAT_VALUE so that new single-value
    at-rules pass through untouched.
    """
    name, _ = split_at_rule(key)
    kind = _REGISTRY.get(name)
    if kind is None:
        log.debug("Unknown at-rule %r treated as %s", key, AtRuleKind.FLAT_VALUE.value)
        return AtRuleKind.FLAT_VALUE
    return kind
