"""FastAPI server exposing palette scoring and outfit composition."""

from __future__ import annotations

from dataclasses import asdict
from functools import lru_cache
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from logic.validation import (
    HarmonyRequest,
    HarmonyResponse,
    OutfitRequest,
    PaletteUpdate,
    ProductFilter,
    ProductScoreRequest,
)
from models.color_theory import InvalidColorFormat
from models.taxonomy import normalize_occasion
from stylist_app.app import StylistApp

app = FastAPI(title="Palette Stylist", version="0.1.0")


@lru_cache(maxsize=1)
def get_stylist() -> StylistApp:
    """Build the shared service lazily so tests can override it."""

    return StylistApp()


@app.exception_handler(InvalidColorFormat)
async def invalid_color_handler(_: Request, exc: InvalidColorFormat) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.get("/healthz")
async def healthcheck(stylist: StylistApp = Depends(get_stylist)) -> dict:
    """Lightweight readiness probe."""

    return {
        "status": "ok",
        "service": "palette-stylist",
        "environment": stylist.config.environment or "local",
    }


@app.post("/harmony", response_model=HarmonyResponse)
async def harmony(request: HarmonyRequest, stylist: StylistApp = Depends(get_stylist)) -> dict:
    """Score and classify the relationship between two colors."""

    return stylist.color_harmony(request.color_a, request.color_b)


@app.get("/products")
async def list_products(
    category: Optional[str] = None,
    gender: Optional[str] = None,
    stylist: StylistApp = Depends(get_stylist),
) -> dict:
    """List active catalog products, optionally filtered."""

    try:
        filters = ProductFilter(category=category, gender=gender)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.errors(include_url=False, include_context=False)) from exc
    products = stylist.catalog_store.fetch_products(category=filters.category, gender=filters.gender)
    return {"products": [asdict(product) for product in products]}


@app.post("/products/score")
async def score_products(request: ProductScoreRequest, stylist: StylistApp = Depends(get_stylist)) -> dict:
    """Score catalog products against a palette and occasion."""

    scored = stylist.score_products(
        user_id=request.user_id,
        occasion=request.occasion,
        category=request.category,
        gender=request.gender,
        palette=request.palette,
    )
    return {"occasion": normalize_occasion(request.occasion), "results": scored}


@app.post("/outfits")
async def plan_outfits(request: OutfitRequest, stylist: StylistApp = Depends(get_stylist)) -> dict:
    """Compose ranked outfits for the given palette, user and occasion."""

    return stylist.plan_outfits(request.model_dump())


@app.get("/users/{user_id}/palette")
async def get_palette(user_id: str, stylist: StylistApp = Depends(get_stylist)) -> dict:
    profile = stylist.palette_service.get_user_palette(user_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="No palette stored for user")
    return asdict(profile)


@app.put("/users/{user_id}/palette")
async def put_palette(
    user_id: str, request: PaletteUpdate, stylist: StylistApp = Depends(get_stylist)
) -> dict:
    """Store the palette produced by the skin analysis flow."""

    try:
        profile = stylist.palette_service.save_user_palette(
            user_id=user_id, skin_tone=request.skin_tone, palette=request.palette
        )
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.errors(include_url=False, include_context=False)) from exc
    return asdict(profile)


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:app", host="0.0.0.0", port=int("8080"), reload=False)
