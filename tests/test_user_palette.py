"""Unit tests for the JSON-backed palette profile store."""

import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

sys.path.append(str(Path(__file__).resolve().parents[1]))

from memory.user_profile import UserPalette, UserPaletteService


def test_palette_roundtrip_canonicalises_colors(tmp_path: Path) -> None:
    service = UserPaletteService(base_dir=tmp_path)
    saved = service.save_user_palette(
        user_id="user-123", skin_tone="warm", palette=["#ffb74d", "#FF8A65", "#ffab40", "#FF9800"]
    )
    assert saved.palette == ["#FFB74D", "#FF8A65", "#FFAB40", "#FF9800"]

    loaded = service.get_user_palette("user-123")
    assert isinstance(loaded, UserPalette)
    assert loaded.skin_tone == "warm"
    assert loaded.palette == saved.palette


def test_unknown_and_guest_users_have_no_palette(tmp_path: Path) -> None:
    service = UserPaletteService(base_dir=tmp_path)
    assert service.get_user_palette("nobody") is None
    assert service.get_user_palette("") is None
    assert service.get_user_palette("../escape") is None


def test_save_is_an_upsert(tmp_path: Path) -> None:
    service = UserPaletteService(base_dir=tmp_path)
    service.save_user_palette(user_id="u1", skin_tone="cool", palette=["#E3F2FD"] * 4)
    service.save_user_palette(user_id="u1", skin_tone="deep", palette=["#1976D2", "#7B1FA2", "#388E3C", "#F57C00", "#C2185B"])
    loaded = service.get_user_palette("u1")
    assert loaded.skin_tone == "deep"
    assert len(loaded.palette) == 5


@pytest.mark.parametrize(
    "user_id, palette",
    [
        ("u1", ["#FFFFFF", "#000000", "#808080"]),
        ("u1", ["#FFFFFF"] * 7),
        ("u1", ["#FFFFFF", "#000000", "#808080", "teal"]),
        ("../etc", ["#FFFFFF", "#000000", "#808080", "#008080"]),
    ],
)
def test_invalid_palettes_are_rejected(tmp_path: Path, user_id: str, palette: list) -> None:
    service = UserPaletteService(base_dir=tmp_path)
    with pytest.raises(ValidationError):
        service.save_user_palette(user_id=user_id, skin_tone="neutral", palette=palette)
    assert list(tmp_path.iterdir()) == []
