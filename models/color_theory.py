"""HSL-based color harmony helpers for palette-driven outfit scoring."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

logger = logging.getLogger(__name__)

_HEX_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")


class InvalidColorFormat(ValueError):
    """Raised when a color string is not ``#`` followed by six hex digits."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid color '{value}': expected #RRGGBB")
        self.value = value


class HarmonyType(str, Enum):
    COMPLEMENTARY = "Complementary"
    ANALOGOUS = "Analogous"
    TRIADIC = "Triadic"
    MONOCHROMATIC = "Monochromatic"
    SPLIT_COMPLEMENTARY = "Split Complementary"
    NEUTRAL = "Neutral"
    CUSTOM = "Custom"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class HSLColor:
    """Hue in degrees [0, 360), saturation and lightness in percent."""

    h: int
    s: int
    l: int  # noqa: E741


@dataclass(frozen=True)
class ColorHarmonyResult:
    """Represents the outcome of a pairwise harmony evaluation."""

    score: int
    harmony: HarmonyType


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def normalize_hex(color: object) -> str:
    """Validate a hex color and return its upper-case canonical form."""

    if not isinstance(color, str) or not _HEX_PATTERN.match(color.strip()):
        raise InvalidColorFormat(color)
    return color.strip().upper()


def _hex_to_rgb(color: str) -> Tuple[float, float, float]:
    hex_value = normalize_hex(color)
    return tuple(int(hex_value[i : i + 2], 16) / 255 for i in (1, 3, 5))  # type: ignore[return-value]


def hex_to_hsl(color: str) -> HSLColor:
    """Convert an ``#RRGGBB`` string to rounded HSL components.

    Raises :class:`InvalidColorFormat` for malformed input instead of falling
    back to a default color.
    """

    r, g, b = _hex_to_rgb(color)
    high, low = max(r, g, b), min(r, g, b)
    lightness = (high + low) / 2
    hue = saturation = 0.0

    if high != low:
        chroma = high - low
        if lightness > 0.5:
            saturation = chroma / (2 - high - low)
        else:
            saturation = chroma / (high + low)
        if high == r:
            hue = (g - b) / chroma + (6 if g < b else 0)
        elif high == g:
            hue = (b - r) / chroma + 2
        else:
            hue = (r - g) / chroma + 4
        hue /= 6

    return HSLColor(
        h=_round_half_up(hue * 360) % 360,
        s=_round_half_up(saturation * 100),
        l=_round_half_up(lightness * 100),
    )


def calculate_color_harmony(color_a: str, color_b: str) -> ColorHarmonyResult:
    """Score and classify the relationship between two colors.

    The rules are checked in order and the first match wins. Hue distance is
    the plain absolute difference of the two hues, so the result does not
    depend on argument order.
    """

    hsl_a, hsl_b = hex_to_hsl(color_a), hex_to_hsl(color_b)
    hue_diff = abs(hsl_a.h - hsl_b.h)
    sat_diff = abs(hsl_a.s - hsl_b.s)
    light_diff = abs(hsl_a.l - hsl_b.l)

    if 150 <= hue_diff <= 210:
        result = ColorHarmonyResult(95, HarmonyType.COMPLEMENTARY)
    elif hue_diff <= 30:
        result = ColorHarmonyResult(88, HarmonyType.ANALOGOUS)
    elif 100 <= hue_diff <= 140 or 220 <= hue_diff <= 260:
        result = ColorHarmonyResult(85, HarmonyType.TRIADIC)
    elif hue_diff <= 15 and (sat_diff > 20 or light_diff > 20):
        # Unreachable: the analogous rule already covers hue_diff <= 15.
        result = ColorHarmonyResult(82, HarmonyType.MONOCHROMATIC)
    elif 120 <= hue_diff <= 240:
        result = ColorHarmonyResult(78, HarmonyType.SPLIT_COMPLEMENTARY)
    elif hsl_a.s <= 20 or hsl_b.s <= 20:
        result = ColorHarmonyResult(75, HarmonyType.NEUTRAL)
    else:
        result = ColorHarmonyResult(60, HarmonyType.CUSTOM)

    logger.debug(
        "harmony %s vs %s (dh=%s ds=%s dl=%s) -> %s/%s",
        color_a,
        color_b,
        hue_diff,
        sat_diff,
        light_diff,
        result.harmony.value,
        result.score,
    )
    return result


__all__ = [
    "InvalidColorFormat",
    "HarmonyType",
    "HSLColor",
    "ColorHarmonyResult",
    "normalize_hex",
    "hex_to_hsl",
    "calculate_color_harmony",
]
