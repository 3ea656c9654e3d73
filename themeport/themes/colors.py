"""Hex color helpers."""

from __future__ import annotations

import math
import re
import string

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def is_valid_hex(value: str) -> bool:
    return bool(_HEX_COLOR_RE.match(value))


def normalize_hex(value: str) -> str:
    """Return a 6-digit ``#rrggbb`` form, or ``value`` unchanged if it is not hex."""
    if not is_valid_hex(value):
        return value
    digits = value[1:]
    if len(digits) == 3:
        return "#" + "".join(ch * 2 for ch in digits)
    if len(digits) == 8:
        return "#" + digits[:6]
    return value


def adjust_brightness(value: str, amount: float) -> str:
    """Shift every RGB channel by ``255 * amount``, clamped to a byte.

    Positive amounts lighten, negative amounts darken. Input that does not
    parse as hex comes back unchanged.
    """
    digits = value.replace("#", "", 1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    digits = digits[:6]
    if len(digits) < 6 or any(ch not in string.hexdigits for ch in digits):
        return value

    channels = (int(digits[index:index + 2], 16) for index in (0, 2, 4))
    return "#" + "".join(f"{_shift_channel(channel, amount):02x}" for channel in channels)


def _shift_channel(channel: int, amount: float) -> int:
    # round half up
    shifted = math.floor(channel + 255 * amount + 0.5)
    return max(0, min(255, shifted))
