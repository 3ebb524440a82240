"""Error hierarchy for style tree normalization and rendering."""
from __future__ import annotations


class StyleError(Exception):
    """Base error for all stylenest errors.

    *path* is the sequence of keys leading from the root of the tree to the
    offending node, when known.
    """

    def __init__(self, message: str, *, path: tuple[str, ...] | None = None) -> None:
        self.path = path
        if path:
            message = f"{message} (at {' > '.join(path)})"
        super().__init__(message)


class MalformedInputError(StyleError, TypeError):
    """A value of the wrong type was passed where a mapping or scalar is required."""


class UnknownAtRuleShapeError(StyleError, TypeError):
    """An at-rule value does not match the shape its name calls for."""


class UnsupportedStructureError(StyleError, ValueError):
    """A well-typed but unsupported nesting, e.g. ``@font-face`` under a selector."""
