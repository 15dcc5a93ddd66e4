"""Shared fixtures: seeded planet items, fake stores and a test client factory."""

from __future__ import annotations

import boto3
import pytest
from fastapi.testclient import TestClient

from solar_system.catalog.store import InMemoryPlanetStore, PlanetStore, StoreError
from solar_system.config import Settings
from solar_system.main import create_app


MERCURY = {
    "id": {"N": "1"},
    "name": {"S": "Mercury"},
    "description": {"S": "Mercury is the smallest planet in our solar system."},
    "image": {"S": "https://example.com/mercury.jpg"},
    "velocity": {"S": "47.87 km/s"},
    "distance": {"S": "57.91 million km"},
}

VENUS = {
    "id": {"N": "2"},
    "name": {"S": "Venus"},
    "description": {"S": "Venus is the second planet from the Sun."},
    "image": {"S": "https://example.com/venus.jpg"},
    "velocity": {"S": "35.02 km/s"},
    "distance": {"S": "108.2 million km"},
}


class FailingPlanetStore(PlanetStore):
    """Store whose every read fails, as if the table were unreachable."""

    def __init__(self, message: str = "Requested resource not found") -> None:
        self.message = message

    def list_all(self):
        raise StoreError(self.message)

    def get_by_id(self, planet_id):
        raise StoreError(self.message)


@pytest.fixture
def mercury():
    return dict(MERCURY)


@pytest.fixture
def venus():
    return dict(VENUS)


@pytest.fixture
def failing_store():
    return FailingPlanetStore()


@pytest.fixture
def make_client():
    def _make(store: PlanetStore) -> TestClient:
        return TestClient(create_app(store=store, settings=Settings()))

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client(InMemoryPlanetStore([MERCURY, VENUS]))


@pytest.fixture
def dynamodb_client():
    return boto3.client(
        "dynamodb",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
