"""Color conversion between hex, RGB and HSL.

All functions are pure. RGB channels are integers in [0, 255]; HSL
components are floats in [0, 1].
"""

import math
import string

from hobbycard_api.core.exceptions import InvalidFormatError

RGB = tuple[int, int, int]
HSL = tuple[float, float, float]

# Hue sector width and offsets, in radians
_SECTOR = math.pi / 3
_FULL_CIRCLE = 2 * math.pi

# Luma above which black text reads better than white
_LUMA_THRESHOLD = 186

_HEX_DIGITS = frozenset(string.hexdigits)


def _round(value: float) -> int:
    """Round half up, as colors are rounded in the browser."""
    return math.floor(value + 0.5)


def normalize_hex(hex_color: str) -> str:
    """Strip ``#`` and expand a 3-digit color to 6 lowercase digits.

    Raises:
        InvalidFormatError: if the result is not six hexadecimal digits.
    """
    value = hex_color[1:] if hex_color.startswith("#") else hex_color

    if len(value) == 3:
        value = "".join(char * 2 for char in value)

    if len(value) != 6 or not _HEX_DIGITS.issuperset(value):
        raise InvalidFormatError(hex_color)

    return value.lower()


def hex_to_rgb(hex_color: str) -> RGB:
    """Convert a hex color (full or shorthand, ``#`` optional) to RGB.

    >>> hex_to_rgb("#fff")
    (255, 255, 255)
    """
    value = normalize_hex(hex_color)
    return (
        int(value[0:2], 16),
        int(value[2:4], 16),
        int(value[4:6], 16),
    )


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """Convert RGB to HSL, every component in [0, 1].

    Pure blue (0, 0, 255) gives a hue of 2/3, full saturation and a
    lightness of 0.5.
    """
    red, green, blue = r / 255, g / 255, b / 255

    high = max(red, green, blue)
    low = min(red, green, blue)
    delta = high - low

    lightness = (high + low) / 2

    if delta == 0:
        # achromatic
        return 0, 0, lightness

    # Hue depends on which channel is the highest
    if high == red:
        hue = _SECTOR * (green - blue) / delta + (_FULL_CIRCLE if green < blue else 0)
    elif high == green:
        hue = _SECTOR * (blue - red) / delta + 2 * _SECTOR
    else:
        hue = _SECTOR * (red - green) / delta + 4 * _SECTOR
    hue /= _FULL_CIRCLE

    if lightness > 0.5:
        saturation = delta / (2 - high - low)
    else:
        saturation = delta / (high + low)

    return hue, saturation, lightness


def _hue_to_channel(p: float, q: float, t: float) -> float:
    """Map a hue offset to one channel between the ``p`` and ``q`` bounds."""
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:  # noqa: E741
    """Convert HSL (each in [0, 1]) to integer RGB channels."""
    if s == 0:
        gray = _round(l * 255)
        return gray, gray, gray

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q

    return (
        _round(_hue_to_channel(p, q, h + 1 / 3) * 255),
        _round(_hue_to_channel(p, q, h) * 255),
        _round(_hue_to_channel(p, q, h - 1 / 3) * 255),
    )


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB channels to a lowercase ``#rrggbb`` string.

    The leading 1 of ``0x1000000`` keeps every channel two digits wide.
    """
    packed = (r << 16) | (g << 8) | b
    return "#" + format(0x1000000 | packed, "x")[1:]


def hex_to_complementary(hex_color: str) -> str:
    """Return the color opposite ``hex_color`` on the hue wheel.

    Saturation and lightness are kept; only the hue is rotated by 180
    degrees.
    """
    r, g, b = hex_to_rgb(hex_color)
    h, s, l = rgb_to_hsl(r, g, b)  # noqa: E741

    h = (h * 360 + 180) % 360 / 360

    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def luma(r: int, g: int, b: int) -> float:
    """Perceived brightness on the 0-255 scale."""
    return r * 0.299 + g * 0.587 + b * 0.114


def invert_color(hex_color: str, black_white: bool = False) -> str:
    """Invert a hex color.

    With ``black_white`` the result is black or white, whichever contrasts
    better with the input.

    Raises:
        InvalidFormatError: if ``hex_color`` is not a valid hex color.
    """
    r, g, b = hex_to_rgb(hex_color)

    if black_white:
        return "#000000" if luma(r, g, b) > _LUMA_THRESHOLD else "#FFFFFF"

    return f"#{255 - r:02x}{255 - g:02x}{255 - b:02x}"
