"""
Route definitions for the planet catalogue API.

Endpoints under /api:
- GET  /planets              : list every planet in the store (also /planets/)
- GET  /planets/{planet_id}  : get one planet by its numeric id

Handlers receive the store through the ``get_store`` dependency, which
reads the instance placed on ``app.state`` by ``create_app``.
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from .schemas import ErrorDetails, ErrorMessage, Planet
from .store import PlanetStore, StoreError


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["planets"])


def get_store(request: Request) -> PlanetStore:
    return request.app.state.store


@router.get(
    "/planets",
    response_model=List[Planet],
    responses={500: {"model": ErrorDetails}},
)
@router.get("/planets/", response_model=List[Planet], include_in_schema=False)
def list_planets(store: PlanetStore = Depends(get_store)):
    try:
        return store.list_all()
    except StoreError as e:
        logger.error("Error fetching planets: %s", e)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to fetch planets", "details": str(e)},
        )


@router.get(
    "/planets/{planet_id}",
    response_model=Planet,
    responses={404: {"model": ErrorMessage}, 500: {"model": ErrorDetails}},
)
def get_planet(planet_id: str, store: PlanetStore = Depends(get_store)):
    # Ids that don't coerce to an integer can't match a numeric key.
    try:
        key = int(planet_id)
    except ValueError:
        return JSONResponse(status_code=404, content={"error": "Planet not found"})

    try:
        planet = store.get_by_id(key)
    except StoreError as e:
        logger.error("Error fetching planet %s: %s", planet_id, e)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to fetch planet", "details": str(e)},
        )
    if planet is None:
        return JSONResponse(status_code=404, content={"error": "Planet not found"})
    return planet
