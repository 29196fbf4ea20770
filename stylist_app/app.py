"""Service bootstrap wiring stores, palettes and the outfit engine together."""

from __future__ import annotations

import logging
import random
from dataclasses import asdict
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from logic.outfit_builder import RandomSource, compose_outfits
from logic.product_scoring import calculate_advanced_product_match
from logic.validation import OutfitRequest, OutfitResponse, validation_failure
from memory.user_profile import UserPaletteService
from models.color_theory import calculate_color_harmony
from models.taxonomy import normalize_occasion
from stylist_app.config import StylistConfig
from stylist_app.logging_config import configure_logging, get_logger, log_event, operation_context
from tools.catalog_store import CatalogStore, SQLiteCatalogStore

LOGGER = get_logger(__name__)


class StylistApp:
    """Wires together the catalog, palette profiles and scoring engine."""

    def __init__(
        self,
        config: StylistConfig | None = None,
        catalog_store: CatalogStore | None = None,
        palette_service: UserPaletteService | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self.config = config or StylistConfig.from_env()
        configure_logging(self.config.log_level)
        self.catalog_store = catalog_store or SQLiteCatalogStore(self.config.catalog_db_path)
        self.palette_service = palette_service or UserPaletteService(self.config.palette_store_dir)
        self.rng = rng
        log_event(
            LOGGER,
            logging.INFO,
            "stylist_app_initialised",
            environment=self.config.environment or "local",
            default_occasion=self.config.default_occasion,
        )

    def resolve_palette(
        self, user_id: Optional[str], palette: Optional[List[str]] = None
    ) -> Tuple[List[str], str]:
        """Pick the palette for a request: explicit, then stored, then guest."""

        if palette:
            return list(palette), "request"
        if user_id:
            profile = self.palette_service.get_user_palette(user_id)
            if profile and profile.palette:
                return list(profile.palette), "profile"
        return list(self.config.guest_palette), "guest"

    def color_harmony(self, color_a: str, color_b: str) -> Dict[str, Any]:
        result = calculate_color_harmony(color_a, color_b)
        return {"score": result.score, "harmony": result.harmony.value}

    def score_products(
        self,
        user_id: Optional[str] = None,
        occasion: Optional[str] = None,
        category: Optional[str] = None,
        gender: Optional[str] = None,
        palette: Optional[List[str]] = None,
    ) -> List[Dict[str, Any]]:
        """Score catalog products for a user, best match first."""

        occasion_key = normalize_occasion(occasion or self.config.default_occasion)
        with operation_context("score_products", occasion=occasion_key):
            swatches, source = self.resolve_palette(user_id, palette)
            products = self.catalog_store.fetch_products(category=category, gender=gender)
            scored = [
                {
                    "product": asdict(product),
                    "match_score": calculate_advanced_product_match(product, swatches, occasion_key),
                }
                for product in products
            ]
            scored.sort(key=lambda entry: entry["match_score"], reverse=True)
            log_event(
                LOGGER,
                logging.INFO,
                "products_scored",
                count=len(scored),
                palette_source=source,
                occasion=occasion_key,
            )
            return scored

    def recommend_outfits(
        self,
        user_id: Optional[str] = None,
        occasion: Optional[str] = None,
        gender: Optional[str] = None,
        max_combinations: Optional[int] = None,
        palette: Optional[List[str]] = None,
        rng: RandomSource | None = None,
    ) -> Dict[str, Any]:
        """Compose ranked outfits from the active catalog for a user."""

        occasion_key = normalize_occasion(occasion or self.config.default_occasion)
        limit = self.config.max_combinations if max_combinations is None else max_combinations
        with operation_context("recommend_outfits", occasion=occasion_key):
            swatches, source = self.resolve_palette(user_id, palette)
            products = self.catalog_store.fetch_products(gender=gender)
            result = compose_outfits(products, swatches, occasion_key, limit, rng or self.rng)
            log_event(
                LOGGER,
                logging.INFO,
                "outfits_composed",
                occasion=occasion_key,
                palette_source=source,
                catalog_size=len(products),
                kept=len(result.outfits),
                best_score=result.diagnostics.get("best_score"),
            )
            response = OutfitResponse(
                status="ok" if result.outfits else "empty",
                occasion=occasion_key,
                palette=swatches,
                palette_source=source,
                outfits=[outfit.to_dict() for outfit in result.outfits],
                debug_summary=result.diagnostics,
            )
            return response.model_dump()

    def plan_outfits(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Validate a raw request payload, then compose outfits for it."""

        try:
            request = OutfitRequest.model_validate(payload)
        except ValidationError as exc:
            log_event(LOGGER, logging.WARNING, "outfit_request_invalid", errors=len(exc.errors()))
            return validation_failure("Invalid outfit request", exc)

        rng = random.Random(request.seed) if request.seed is not None else None
        return self.recommend_outfits(
            user_id=request.user_id,
            occasion=request.occasion,
            gender=request.gender,
            max_combinations=request.max_combinations,
            palette=request.palette,
            rng=rng,
        )


__all__ = ["StylistApp"]
