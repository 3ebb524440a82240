"""Normalizer: flattens a nested style tree into a single-level mapping.

Input keys are selectors, at-rules or camel-cased properties at any depth::

    {"div": {"height": "50px", "@media screen": {".c": {"zIndex": 45}}}}

Output is keyed by full selector path, merged grouping at-rule, or root
level pass-through at-rule::

    {"div": {"height": "50px"}, "@media screen": {"div .c": {"z-index": 45}}}
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from stylenest.atrules import AtRuleKind, classify, is_at_rule
from stylenest.conditions import merge_condition
from stylenest.errors import (
    MalformedInputError,
    UnknownAtRuleShapeError,
    UnsupportedStructureError,
)
from stylenest.properties import ordinal_key, strip_ordinal_marker, to_css_property

__all__ = ["normalize", "Declarations", "Flattened"]

log = logging.getLogger(__name__)

Scalar = str | int | float
Declarations = dict[str, Scalar]
# selector -> declarations | grouping key -> {selector -> declarations}
# | pass-through at-rule -> scalar or declarations
Flattened = dict[str, Any]


def _is_scalar(value: object) -> bool:
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


def _join_selector(selector: str, key: str) -> str:
    if not selector:
        return key
    return f"{selector} {key}"


def _bucket(out: Flattened, condition: str | None, selector: str) -> Declarations:
    if condition is None:
        return out.setdefault(selector, {})
    return out.setdefault(condition, {}).setdefault(selector, {})


def _set_repeated(bucket: Declarations, prop: str, values: list | tuple) -> None:
    """Write *values* as ``prop/*N*/`` entries, replacing any earlier ones."""
    for name in [n for n in bucket if n != prop and strip_ordinal_marker(n) == prop]:
        del bucket[name]
    for index, item in enumerate(values):
        bucket[ordinal_key(prop, index)] = item


def _add_declaration(
    out: Flattened,
    condition: str | None,
    selector: str,
    key: str,
    value: object,
    path: tuple[str, ...],
) -> None:
    if not selector:
        raise UnsupportedStructureError(
            f"Property {key!r} has no enclosing selector", path=path
        )

    prop = to_css_property(key)
    if _is_scalar(value):
        _bucket(out, condition, selector)[prop] = value  # type: ignore[assignment]
        return

    # A list is the sequence form of a repeated property.
    if isinstance(value, (list, tuple)):
        if not all(_is_scalar(v) for v in value):
            raise MalformedInputError(
                f"Values of repeated property {key!r} must be strings or numbers",
                path=path,
            )
        _set_repeated(_bucket(out, condition, selector), prop, value)
        return

    raise MalformedInputError(
        f"Invalid value for property {key!r}: {type(value).__name__}", path=path
    )


def _copy_flat_at_rule(
    key: str, kind: AtRuleKind, value: object, path: tuple[str, ...]
) -> Scalar | Declarations:
    if kind is AtRuleKind.FLAT_VALUE:
        if not _is_scalar(value):
            raise UnknownAtRuleShapeError(
                f"{key} expects a single value, got {type(value).__name__}", path=path
            )
        return value  # type: ignore[return-value]

    if not isinstance(value, Mapping):
        raise UnknownAtRuleShapeError(
            f"{key} expects a declaration block, got {type(value).__name__}",
            path=path,
        )
    declarations: Declarations = {}
    for prop, prop_value in value.items():
        if isinstance(prop, str) and isinstance(prop_value, (list, tuple)):
            if all(_is_scalar(v) for v in prop_value):
                _set_repeated(declarations, prop, prop_value)
                continue
        elif isinstance(prop, str) and _is_scalar(prop_value):
            declarations[prop] = prop_value  # type: ignore[assignment]
            continue
        raise UnknownAtRuleShapeError(
            f"{key} declarations must map property names to values",
            path=path + (str(prop),),
        )
    return declarations


def _walk(
    node: Mapping,
    selector: str,
    condition: str | None,
    out: Flattened,
    path: tuple[str, ...],
) -> None:
    for key, value in node.items():
        if not isinstance(key, str):
            raise MalformedInputError(f"Style keys must be strings, got {key!r}", path=path)
        key_path = path + (key,)

        if is_at_rule(key):
            kind = classify(key)
            if kind is AtRuleKind.GROUPING:
                if not isinstance(value, Mapping):
                    raise UnknownAtRuleShapeError(
                        f"{key} expects a nested style block, got {type(value).__name__}",
                        path=key_path,
                    )
                try:
                    merged = merge_condition(condition, key)
                except UnsupportedStructureError as exc:
                    raise UnsupportedStructureError(str(exc), path=key_path) from exc
                _walk(value, selector, merged, out, key_path)
                continue

            if selector or condition is not None:
                raise UnsupportedStructureError(
                    f"{key} is only supported at the top level of a style tree",
                    path=key_path,
                )
            out[key] = _copy_flat_at_rule(key, kind, value, key_path)
            continue

        if isinstance(value, Mapping):
            _walk(value, _join_selector(selector, key), condition, out, key_path)
        else:
            _add_declaration(out, condition, selector, key, value, key_path)


def normalize(tree: Mapping) -> Flattened:
    """Flatten a nested style tree.

    Returns a new dict; *tree* is never modified.  Normalizing an already
    flattened representation returns an equal dict.  A list value for a
    property replaces every earlier value of that property in the same
    bucket, so the later list wins as a whole.

    Raises:
        MalformedInputError: *tree* is not a mapping, or holds a non-string
            key or a non-scalar property value.
        UnknownAtRuleShapeError: an at-rule value has the wrong shape.
        UnsupportedStructureError: a flat at-rule below the top level, a
            property outside any selector, or differently named grouping
            at-rules nested in each other.
    """
    if not isinstance(tree, Mapping):
        raise MalformedInputError(
            f"Style tree must be a mapping, got {type(tree).__name__}"
        )
    out: Flattened = {}
    _walk(tree, "", None, out, ())
    log.debug("Normalized style tree into %d top-level entries", len(out))
    return out
