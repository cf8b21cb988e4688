# portfolio/main.py
import logging
from typing import Optional

from fastapi import FastAPI

from .catalog import CatalogStore, catalog_router, create_store
from .config import get_settings


def create_app(store: Optional[CatalogStore] = None) -> FastAPI:
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)

    app = FastAPI(
        title="Portfolio Gallery",
        description=(
            "Catalogue local d'œuvres créatives : ajout, tags, recherche, "
            "filtres, œuvres enregistrées et artistes favoris."
        ),
        version="1.0.0",
    )
    app.state.store = store if store is not None else create_store(settings)

    # 🔹 Route de base pour tester rapidement
    @app.get("/")
    def health_check():
        return {"status": "ok", "works": len(app.state.store.works)}

    app.include_router(catalog_router)
    return app


# uvicorn portfolio.main:app
app = create_app()
