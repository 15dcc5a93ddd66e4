# solar_system/main.py
import logging
from pathlib import Path
from typing import Optional

import boto3
from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from .catalog import catalog_router
from .catalog.store import DynamoPlanetStore, InMemoryPlanetStore, PlanetStore
from .config import Settings, get_settings


logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
VIEWS_DIR = BASE_DIR / "views"
PUBLIC_DIR = BASE_DIR / "public"


def build_store(settings: Settings) -> PlanetStore:
    """Create the store selected by ``settings.store_backend``."""
    if settings.store_backend == "dynamodb":
        client = boto3.client(
            "dynamodb",
            region_name=settings.aws_region,
            endpoint_url=settings.dynamodb_endpoint_url,
        )
        return DynamoPlanetStore(client, settings.table_name)
    if settings.store_backend == "memory":
        return InMemoryPlanetStore.from_json(settings.planets_data_file)
    raise ValueError(f"Unknown store backend: {settings.store_backend!r}")


def create_app(
    store: Optional[PlanetStore] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="Solar System",
        description="Read-only catalogue of the planets of the solar system.",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.store = store if store is not None else build_store(settings)

    @app.get("/", include_in_schema=False)
    def home():
        return FileResponse(VIEWS_DIR / "index.html", media_type="text/html")

    app.include_router(catalog_router)

    # Public assets are served from the site root; mounted last so the
    # routes above win over files with the same path.
    app.mount("/", StaticFiles(directory=PUBLIC_DIR), name="public")
    return app


def run() -> None:
    import uvicorn

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Server running on port %s", settings.port)
    uvicorn.run(
        "solar_system.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
    )
