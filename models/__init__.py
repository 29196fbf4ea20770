"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.color_theory import ColorHarmonyResult, HarmonyType, HSLColor, InvalidColorFormat
from models.outfit import OutfitCombination
from models.product import Product, from_raw_metadata

__all__ = [
    "ColorHarmonyResult",
    "HarmonyType",
    "HSLColor",
    "InvalidColorFormat",
    "OutfitCombination",
    "Product",
    "from_raw_metadata",
]
