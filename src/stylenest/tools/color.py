"""Colour brightness adjustment."""
from __future__ import annotations

import colorsys
import re

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")


def _parse_hex(color: str) -> tuple[float, float, float]:
    match = _HEX_RE.match(color.strip())
    if match is None:
        raise ValueError(f"Expected a 6-digit hex colour, got {color!r}")
    digits = match.group(1)
    return tuple(int(digits[i:i + 2], 16) / 255 for i in (0, 2, 4))  # type: ignore[return-value]


def change_light(color: str, factor: float) -> str:
    """Scale the brightness of *color* by *factor*.

    Brightness is the HSV value, clamped to [0, 1]; hue and saturation are
    kept.  ``change_light("#3388cc", 1.25) == "#40aaff"``.
    """
    if factor < 0:
        raise ValueError(f"Lightness factor must be non-negative, got {factor}")
    h, s, v = colorsys.rgb_to_hsv(*_parse_hex(color))
    v = min(max(v * factor, 0.0), 1.0)
    r, g, b = colorsys.hsv_to_rgb(h, s, v)
    return "#" + "".join(f"{round(c * 255):02x}" for c in (r, g, b))
