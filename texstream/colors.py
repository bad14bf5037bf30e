"""Packed 32-bit RGBA colours and helpers for them."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Named colours packed as 0xRRGGBBAA."""

    BLACK = 0x000000FF
    WHITE = 0xFFFFFFFF
    RED = 0xFF0000FF
    GREEN = 0x00FF00FF
    BLUE = 0x0000FFFF
    CYAN = 0x00FFFFFF
    MAGENTA = 0xFF00FFFF
    YELLOW = 0xFFFF00FF


def color_encode(r: int, g: int, b: int, a: int) -> int:
    """Pack four byte channels into 0xRRGGBBAA; each channel is taken modulo 256."""
    return (r & 0xFF) << 24 | (g & 0xFF) << 16 | (b & 0xFF) << 8 | (a & 0xFF)


def color_encode_float(r: float, g: float, b: float, a: float) -> int:
    """Pack channels given in [0, 1], truncating each scaled value."""
    return color_encode(int(r * 255.0), int(g * 255.0), int(b * 255.0), int(a * 255.0))


def color_decode(value: int) -> tuple[int, int, int, int]:
    """Split a packed colour into (r, g, b, a) bytes."""
    return (
        (value >> 24) & 0xFF,
        (value >> 16) & 0xFF,
        (value >> 8) & 0xFF,
        value & 0xFF,
    )


def color_decode_float(value: int) -> tuple[float, float, float, float]:
    """Split a packed colour into (r, g, b, a) channels in [0, 1]."""
    r, g, b, a = color_decode(value)
    return r / 255.0, g / 255.0, b / 255.0, a / 255.0


def color_sum(color_a: int, color_b: int) -> int:
    """Add two colours channel by channel, wrapping each at 256."""
    channels = zip(color_decode(color_a), color_decode(color_b))
    return color_encode(*(x + y for x, y in channels))


def bounce01(value: float) -> float:
    """Fold a value back into [0, 1]: values above 1 reflect, values below 0 become 0."""
    while value < 0.0 or value > 1.0:
        if value < 0.0:
            value -= value
        if value > 1.0:
            value = 2.0 - value
    return value