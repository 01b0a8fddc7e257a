"""FastAPI server exposing wardrobe and outfit suggestion endpoints."""

from typing import Any, Dict

from fastapi import FastAPI, HTTPException
from pydantic import ValidationError

from logic.validation import (
    AppSettings,
    OutfitRecord,
    SettingsUpdate,
    SuggestionRequest,
    WardrobeItemInput,
)
from stylist_app.app import WardrobeStylistApp


def create_app(stylist_app: WardrobeStylistApp | None = None) -> FastAPI:
    """Build the FastAPI instance around a stylist app."""

    stylist = stylist_app or WardrobeStylistApp()
    app = FastAPI(title="Wardrobe Stylist", version="0.1.0")
    app.state.stylist = stylist

    @app.get("/healthz")
    async def healthcheck() -> dict:
        """Lightweight readiness check."""

        return {
            "status": "ok",
            "service": "wardrobe-stylist",
            "environment": stylist.config.environment or "local",
        }

    @app.get("/wardrobe/items")
    def list_items(category: str | None = None) -> list:
        try:
            return stylist.list_items(category=category)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

    @app.get("/wardrobe/summary")
    def wardrobe_summary() -> dict:
        counts = stylist.category_counts()
        return {"total": sum(counts.values()), "counts": counts}

    @app.delete("/data")
    def clear_all_data() -> dict:
        stylist.clear_all()
        return {"cleared": True}

    @app.post("/wardrobe/items", status_code=201)
    def add_item(request: WardrobeItemInput) -> dict:
        try:
            return stylist.add_item(**request.model_dump())
        except (ValidationError, ValueError) as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

    @app.delete("/wardrobe/items/{item_id}")
    def delete_item(item_id: str) -> dict:
        if not stylist.delete_item(item_id=item_id):
            raise HTTPException(status_code=404, detail=f"Wardrobe item '{item_id}' not found")
        return {"deleted": item_id}

    @app.post("/outfits/suggestions")
    def suggest_outfits(request: SuggestionRequest) -> dict:
        """Generate a fresh batch of ranked outfit suggestions."""

        suggestions = stylist.suggest_outfits(**request.model_dump())
        return {"suggestions": suggestions}

    @app.get("/outfits/saved")
    def list_saved_outfits() -> list:
        return stylist.list_saved_outfits()

    @app.post("/outfits/saved", status_code=201)
    def save_outfit(request: OutfitRecord) -> Dict[str, Any]:
        return stylist.save_outfit(outfit=request.model_dump())

    @app.delete("/outfits/saved/{outfit_id}")
    def delete_saved_outfit(outfit_id: str) -> dict:
        if not stylist.delete_saved_outfit(outfit_id=outfit_id):
            raise HTTPException(status_code=404, detail=f"Saved outfit '{outfit_id}' not found")
        return {"deleted": outfit_id}

    @app.get("/settings")
    def get_settings() -> AppSettings:
        return stylist.get_settings()

    @app.put("/settings")
    def update_settings(request: SettingsUpdate) -> AppSettings:
        return stylist.update_settings(**request.model_dump())

    return app


def get_app() -> FastAPI:
    """Expose a FastAPI instance for ASGI servers."""

    return create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:get_app", factory=True, host="0.0.0.0", port=8080, reload=False)
