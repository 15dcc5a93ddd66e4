"""
Pydantic schema definitions for the catalog module.

The ``Planet`` model is the plain domain record handed to clients once the
store's typed-attribute encoding has been stripped. ``ErrorMessage`` and
``ErrorDetails`` describe the JSON bodies returned on 404 and 500
responses so that they show up in the generated OpenAPI document.
"""

from pydantic import BaseModel, Field


class Planet(BaseModel):
    """A single planet entry.

    ``velocity`` and ``distance`` are human-readable strings that already
    carry their units (for example ``"47.87 km/s"``); they are passed
    through untouched rather than parsed into numbers.
    """

    id: int
    name: str
    description: str
    image: str = Field(description="URL of the planet image")
    velocity: str
    distance: str


class ErrorMessage(BaseModel):
    error: str


class ErrorDetails(BaseModel):
    """Body of a 500 response; ``details`` carries the store's message."""

    error: str
    details: str
