"""Color conversion and pairwise harmony classification tests."""
from __future__ import annotations

import itertools
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from models.color_theory import (
    ColorHarmonyResult,
    HarmonyType,
    HSLColor,
    InvalidColorFormat,
    calculate_color_harmony,
    hex_to_hsl,
    normalize_hex,
)

SAMPLE_COLORS = [
    "#" + "".join(f"{channel:02X}" for channel in rgb)
    for rgb in itertools.product((0, 64, 128, 200, 255), repeat=3)
]


def test_hex_to_hsl_primary_and_neutral_colors() -> None:
    assert hex_to_hsl("#FF0000") == HSLColor(h=0, s=100, l=50)
    assert hex_to_hsl("#00FFFF") == HSLColor(h=180, s=100, l=50)
    assert hex_to_hsl("#000080") == HSLColor(h=240, s=100, l=25)
    assert hex_to_hsl("#000000") == HSLColor(h=0, s=0, l=0)
    assert hex_to_hsl("#FFFFFF") == HSLColor(h=0, s=0, l=100)
    assert hex_to_hsl("#808080") == HSLColor(h=0, s=0, l=50)


def test_hex_to_hsl_accepts_lowercase_and_wraps_hue() -> None:
    assert hex_to_hsl("#ff0000") == hex_to_hsl("#FF0000")
    # 359.76 degrees rounds to 360, which wraps back to 0.
    assert hex_to_hsl("#FF0001").h == 0


def test_hex_to_hsl_stays_in_range() -> None:
    for color in SAMPLE_COLORS:
        hsl = hex_to_hsl(color)
        assert 0 <= hsl.h < 360, color
        assert 0 <= hsl.s <= 100, color
        assert 0 <= hsl.l <= 100, color


@pytest.mark.parametrize("bad", ["#FFF", "FF0000", "#GG0000", "#FF00000", "", None, 0xFF0000])
def test_malformed_colors_raise(bad: object) -> None:
    with pytest.raises(InvalidColorFormat):
        hex_to_hsl(bad)  # type: ignore[arg-type]


def test_invalid_color_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="#RRGGBB"):
        normalize_hex("navy")


def test_normalize_hex_canonicalises_case() -> None:
    assert normalize_hex(" #c19a6b ") == "#C19A6B"


@pytest.mark.parametrize(
    "color_a, color_b, expected",
    [
        ("#FF0000", "#00FFFF", ColorHarmonyResult(95, HarmonyType.COMPLEMENTARY)),
        ("#FF0000", "#FF3300", ColorHarmonyResult(88, HarmonyType.ANALOGOUS)),
        ("#FF0000", "#00FF00", ColorHarmonyResult(85, HarmonyType.TRIADIC)),
        ("#FF0000", "#0000FF", ColorHarmonyResult(85, HarmonyType.TRIADIC)),
        ("#FF0000", "#006AFF", ColorHarmonyResult(78, HarmonyType.SPLIT_COMPLEMENTARY)),
        ("#808080", "#FFFF00", ColorHarmonyResult(75, HarmonyType.NEUTRAL)),
        ("#FF0000", "#FFFF00", ColorHarmonyResult(60, HarmonyType.CUSTOM)),
    ],
)
def test_harmony_rules(color_a: str, color_b: str, expected: ColorHarmonyResult) -> None:
    assert calculate_color_harmony(color_a, color_b) == expected


def test_hue_difference_is_not_wrapped() -> None:
    # Red (0) and magenta (300) are 300 degrees apart, not 60.
    result = calculate_color_harmony("#FF0000", "#FF00FF")
    assert result.harmony is HarmonyType.CUSTOM
    assert result.score == 60


def test_color_against_itself_is_analogous() -> None:
    for color in SAMPLE_COLORS[::7]:
        assert calculate_color_harmony(color, color) == ColorHarmonyResult(88, HarmonyType.ANALOGOUS)


def test_harmony_is_symmetric() -> None:
    subset = SAMPLE_COLORS[::9]
    for color_a, color_b in itertools.combinations(subset, 2):
        assert calculate_color_harmony(color_a, color_b) == calculate_color_harmony(color_b, color_a)


def test_monochromatic_rule_is_shadowed_by_analogous() -> None:
    # Same hue, very different lightness: analogous fires first.
    result = calculate_color_harmony("#000080", "#0000FF")
    assert result.harmony is HarmonyType.ANALOGOUS


def test_harmony_labels_render_as_plain_strings() -> None:
    assert str(HarmonyType.SPLIT_COMPLEMENTARY) == "Split Complementary"
    assert HarmonyType("Neutral") is HarmonyType.NEUTRAL


def test_harmony_rejects_malformed_colors() -> None:
    with pytest.raises(InvalidColorFormat):
        calculate_color_harmony("#FF0000", "red")
