from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SheetFormat:
    indent: str = "  "
    newline: str = "\n"

    @classmethod
    def with_indent(cls, width: int) -> SheetFormat:
        return cls(indent=" " * width)
