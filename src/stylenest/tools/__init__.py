"""Helpers for building style trees.

None of these touch the normalizer; their output is merged into a tree
with :func:`mix` before normalization::

    button = mix(
        {"padding": "4px"},
        prefix("borderRadius", "3px"),
        is_wide and {"width": "100%"},
    )
"""
from __future__ import annotations

from stylenest.tools.color import change_light
from stylenest.tools.merge import mix
from stylenest.tools.vendor import DEFAULT_VENDORS, multivalue, prefix

__all__ = ["DEFAULT_VENDORS", "change_light", "mix", "multivalue", "prefix"]
