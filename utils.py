import re
from typing import Any

from faces.core import CHANNEL_MAX, Color


_HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{12})$")


def hex_to_rgb16(value: str) -> Color:
    """'#rrggbb' (8-bit) or '#rrrrggggbbbb' (16-bit) to a 16-bit triple."""
    m = _HEX_COLOR.match(value.strip())
    if not m:
        raise ValueError(f"not a hex color: {value!r}")
    digits = m.group(1)
    if len(digits) == 6:
        return tuple(int(digits[i:i + 2], 16) * 257 for i in (0, 2, 4))  # type: ignore[return-value]
    return tuple(int(digits[i:i + 4], 16) for i in (0, 4, 8))  # type: ignore[return-value]


def rgb16_to_hex(color: Color) -> str:
    """16-bit triple to '#rrggbb' for display."""
    return "#" + "".join(f"{round(c / 257):02x}" for c in color)


def parse_color(value: Any) -> Color:
    """Accept a hex string or a sequence of three 16-bit channels."""
    if isinstance(value, str):
        return hex_to_rgb16(value)
    try:
        channels = tuple(int(c) for c in value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"not a color: {value!r}") from exc
    if len(channels) != 3 or any(c < 0 or c > CHANNEL_MAX for c in channels):
        raise ValueError(f"color needs three channels within 0..{CHANNEL_MAX}: {value!r}")
    return channels  # type: ignore[return-value]
