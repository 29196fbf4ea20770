"""Configuration helpers for the palette stylist service."""

from dataclasses import dataclass, field
from pathlib import Path
import os
from typing import List, Optional

from models.color_theory import normalize_hex

DEFAULT_CATALOG_DB_PATH = "data/catalog.db"
DEFAULT_PALETTE_STORE_DIR = "data/palettes"


def _split_colors(raw: Optional[str]) -> List[str]:
    """Parse a comma-separated palette, raising on malformed colors."""

    if not raw:
        return []
    return [normalize_hex(part) for part in raw.split(",") if part.strip()]


@dataclass
class StylistConfig:
    """Configuration values for the stylist service.

    ``guest_palette`` is used for requests that carry no palette of their own
    and belong to a user without a stored profile. It may be empty, in which
    case scoring runs without a color bonus.
    """

    catalog_db_path: str = DEFAULT_CATALOG_DB_PATH
    palette_store_dir: str = DEFAULT_PALETTE_STORE_DIR
    default_occasion: str = "casual"
    max_combinations: int = 6
    guest_palette: List[str] = field(default_factory=list)
    log_level: str = "INFO"
    environment: str | None = None

    @classmethod
    def from_env(cls) -> "StylistConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default and is merged with environment variables, which take precedence.
        A malformed ``guest_palette`` color raises
        :class:`~models.color_theory.InvalidColorFormat` here rather than on the
        first guest request.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("STYLIST_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        max_combinations = get_value("max_combinations", "6")
        return cls(
            catalog_db_path=str(get_value("catalog_db_path") or DEFAULT_CATALOG_DB_PATH),
            palette_store_dir=str(get_value("palette_store_dir") or DEFAULT_PALETTE_STORE_DIR),
            default_occasion=str(get_value("default_occasion") or "casual").strip().lower(),
            max_combinations=int(max_combinations or 6),
            guest_palette=_split_colors(get_value("guest_palette")),
            log_level=str(get_value("log_level") or "INFO"),
            environment=env_name,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal YAML/INI-style config without external dependencies."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
