"""Merging of nested grouping at-rule conditions.

Grammar of a merged key:
    MergedKey = '@' Name Condition ( 'and' Condition )*

Nesting ``@media (min-width: 500px)`` inside ``@media screen`` is the same
as a single ``@media screen and (min-width: 500px)`` block, so the
flattened representation only ever holds merged keys.
"""

from __future__ import annotations

import logging

from stylenest.atrules import split_at_rule
from stylenest.errors import UnsupportedStructureError

__all__ = ["merge_condition", "AND_JOINER"]

log = logging.getLogger(__name__)

AND_JOINER = "and"


def _format_key(name: str, condition: str) -> str:
    if not condition:
        return f"@{name}"
    return f"@{name} {condition}"


def merge_condition(active: str | None, key: str) -> str:
    """Combine the *active* condition key with a nested grouping at-rule *key*.

    - No active condition -> *key* itself, unchanged
    - Active condition    -> '@name <active text> and <new text>'

    Applied at every level, this folds left so deeper nesting keeps
    AND-chaining.  Raises UnsupportedStructureError when the two at-rules
    have different names, as no single key can express that.
    """
    if active is None:
        return key

    name, condition = split_at_rule(key)
    active_name, active_condition = split_at_rule(active)
    if active_name != name:
        raise UnsupportedStructureError(
            f"Cannot nest @{name} inside @{active_name}: "
            "only at-rules of the same name can be merged"
        )

    parts = [c for c in (active_condition, condition) if c]
    merged = _format_key(name, f" {AND_JOINER} ".join(parts))
    log.debug("Merged condition %r + %r -> %r", active, key, merged)
    return merged
