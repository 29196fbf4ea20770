"""User palette profiles backed by JSON files."""

from __future__ import annotations

import json
import re
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from models.color_theory import normalize_hex
from tools.observability import instrument_call

MIN_PALETTE_SIZE = 4
MAX_PALETTE_SIZE = 6
USER_ID_PATTERN = r"^[\w-]+$"


@dataclass
class UserPalette:
    user_id: str
    skin_tone: str
    palette: List[str] = field(default_factory=list)
    updated_at: Optional[str] = None


class PaletteInput(BaseModel):
    """Validated payload for palette updates."""

    user_id: str = Field(pattern=USER_ID_PATTERN)
    skin_tone: str = Field(min_length=1)
    palette: List[str] = Field(min_length=MIN_PALETTE_SIZE, max_length=MAX_PALETTE_SIZE)

    @field_validator("palette")
    @classmethod
    def _canonical_colors(cls, palette: List[str]) -> List[str]:
        return [normalize_hex(color) for color in palette]


class UserPaletteService:
    """Simple JSON-backed palette store, one file per user."""

    def __init__(self, base_dir: str | Path = "data/palettes") -> None:
        self.base_dir = Path(base_dir)
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def _profile_path(self, user_id: str) -> Path:
        return self.base_dir / f"{user_id}.json"

    def get_user_palette(self, user_id: str) -> Optional[UserPalette]:
        """Return the stored palette, or ``None`` for guests and unknown users."""

        if not user_id or not re.match(USER_ID_PATTERN, user_id):
            return None
        path = self._profile_path(user_id)
        if not path.exists():
            return None
        data = json.loads(path.read_text())
        return UserPalette(
            user_id=data.get("user_id", user_id),
            skin_tone=data.get("skin_tone", ""),
            palette=list(data.get("palette", [])),
            updated_at=data.get("updated_at"),
        )

    @instrument_call("save_user_palette", input_model=PaletteInput)
    def save_user_palette(self, *, user_id: str, skin_tone: str, palette: List[str]) -> UserPalette:
        """Upsert a user's palette; arguments are validated by :class:`PaletteInput`."""

        profile = UserPalette(
            user_id=user_id,
            skin_tone=skin_tone,
            palette=list(palette),
            updated_at=datetime.now(timezone.utc).isoformat(),
        )
        self._profile_path(user_id).write_text(json.dumps(asdict(profile), indent=2))
        return profile


__all__ = ["UserPalette", "PaletteInput", "UserPaletteService", "MIN_PALETTE_SIZE", "MAX_PALETTE_SIZE"]
