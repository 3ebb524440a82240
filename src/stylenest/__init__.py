"""stylenest: flatten nested style trees into stylesheets."""
from __future__ import annotations

__version__ = "0.1.0"

from stylenest.config import SheetFormat
from stylenest.errors import (
    MalformedInputError,
    StyleError,
    UnknownAtRuleShapeError,
    UnsupportedStructureError,
)
from stylenest.normalizer import normalize
from stylenest.serializer import generate_sheet, render

__all__ = [
    "__version__",
    "SheetFormat",
    "StyleError",
    "MalformedInputError",
    "UnknownAtRuleShapeError",
    "UnsupportedStructureError",
    "normalize",
    "generate_sheet",
    "render",
]
