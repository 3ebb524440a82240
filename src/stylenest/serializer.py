"""Serializer: renders a flattened style representation as stylesheet text.

Output example::

    @charset "utf-8";
    div {
      height: 50px;
    }
    @media screen {
      div .c {
        z-index: 45;
      }
    }
"""

from __future__ import annotations

from collections.abc import Mapping

from stylenest.atrules import AtRuleKind, classify, is_at_rule
from stylenest.config import SheetFormat
from stylenest.errors import MalformedInputError, UnknownAtRuleShapeError
from stylenest.normalizer import Flattened, normalize
from stylenest.properties import strip_ordinal_marker, to_css_property

__all__ = ["render", "generate_sheet"]

_DEFAULT_FORMAT = SheetFormat()


def _render_declarations(declarations: Mapping, fmt: SheetFormat, depth: int) -> list[str]:
    pad = fmt.indent * depth
    lines = []
    for prop, value in declarations.items():
        name = strip_ordinal_marker(to_css_property(prop))
        lines.append(f"{pad}{name}: {value};")
    return lines


def _render_block(
    head: str, declarations: Mapping, fmt: SheetFormat, depth: int = 0
) -> list[str]:
    pad = fmt.indent * depth
    return [
        f"{pad}{head} {{",
        *_render_declarations(declarations, fmt, depth + 1),
        f"{pad}}}",
    ]


def _render_entry(key: str, value: object, fmt: SheetFormat) -> list[str]:
    if not isinstance(value, Mapping):
        if not is_at_rule(key):
            raise MalformedInputError(
                f"Selector {key!r} must map to declarations, got {type(value).__name__}",
                path=(key,),
            )
        return [f"{key} {value};"]

    if not is_at_rule(key):
        return _render_block(key, value, fmt)

    if classify(key) is not AtRuleKind.GROUPING:
        return _render_block(key, value, fmt)

    lines = [f"{key} {{"]
    for selector, declarations in value.items():
        if not isinstance(declarations, Mapping):
            raise UnknownAtRuleShapeError(
                f"{key} must map selectors to declarations",
                path=(key, str(selector)),
            )
        lines.extend(_render_block(selector, declarations, fmt, depth=1))
    lines.append("}")
    return lines


def render(flat: Flattened, fmt: SheetFormat | None = None) -> str:
    """Render an already flattened representation, in its iteration order."""
    if not isinstance(flat, Mapping):
        raise MalformedInputError(
            f"Flattened styles must be a mapping, got {type(flat).__name__}"
        )
    fmt = fmt or _DEFAULT_FORMAT
    lines: list[str] = []
    for key, value in flat.items():
        lines.extend(_render_entry(key, value, fmt))
    if not lines:
        return ""
    return fmt.newline.join(lines) + fmt.newline


def generate_sheet(tree: Mapping, fmt: SheetFormat | None = None) -> str:
    """Normalize *tree* and render it as stylesheet text.

    Accepts either a nested style tree or a representation returned by
    :func:`~stylenest.normalizer.normalize`; both render the same.
    """
    return render(normalize(tree), fmt)
