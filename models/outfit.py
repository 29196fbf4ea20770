"""Outfit combination schema."""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from models.product import Product


@dataclass
class OutfitCombination:
    combination_id: str
    occasion: str
    match_score: int
    color_harmony: str
    style_description: str
    items: List[Product] = field(default_factory=list)

    @property
    def categories(self) -> List[str]:
        return [item.category for item in self.items]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.combination_id,
            "items": [asdict(item) for item in self.items],
            "match_score": self.match_score,
            "color_harmony": self.color_harmony,
            "occasion": self.occasion,
            "style_description": self.style_description,
        }
