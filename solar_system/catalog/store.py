"""
Data store adapters for the planet catalogue.

Planets live in a DynamoDB table where every attribute is encoded with an
explicit type tag, e.g. ``{"id": {"N": "1"}, "name": {"S": "Mercury"}}``.
The adapters in this module hide that encoding behind plain ``Planet``
instances:

* ``DynamoPlanetStore`` talks to DynamoDB through a boto3 low-level
  client. It is the store used in deployed environments.

* ``InMemoryPlanetStore`` keeps the same typed items in a list. It is
  handy for local development without AWS access and as the fake store
  in tests. Items are loaded from ``data/planets.json`` by default.

Both raise ``StoreError`` for anything that goes wrong while reading, so
route handlers only ever have one exception type to translate into a
500 response.
"""

from __future__ import annotations

import abc
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from .schemas import Planet


logger = logging.getLogger(__name__)

# Packaged seed data, in the same typed-attribute shape DynamoDB returns.
DATA_FILE = Path(__file__).resolve().parents[1] / "data" / "planets.json"

Item = Dict[str, Dict[str, str]]


class StoreError(Exception):
    """Raised when the backing store cannot be read or returns bad data."""


def _attr_value(item: Dict[str, Any], field: str) -> str:
    if not isinstance(item, dict):
        raise StoreError(
            f"Malformed planet record: expected a mapping, got {type(item).__name__}"
        )
    try:
        attr = item[field]
    except KeyError:
        raise StoreError(f"Malformed planet record: missing attribute '{field}'") from None
    if not isinstance(attr, dict):
        raise StoreError(f"Malformed planet record: attribute '{field}' is not typed")
    if "N" in attr:
        return attr["N"]
    if "S" in attr:
        return attr["S"]
    raise StoreError(
        f"Malformed planet record: unsupported type tag for '{field}': {sorted(attr)}"
    )


def planet_from_item(item: Dict[str, Any]) -> Planet:
    """Convert a DynamoDB item into a ``Planet``.

    Parameters
    ----------
    item : Dict[str, Any]
        A record as returned by ``Scan`` or ``GetItem``: a mapping of
        attribute names to single-key dicts whose key is the type tag
        (``"N"`` for numbers, ``"S"`` for strings).

    Returns
    -------
    Planet
        The planet with tags stripped, ``id`` coerced to ``int`` and every
        other field coerced to ``str``.

    Raises
    ------
    StoreError
        If an attribute is missing, carries an unknown tag, or the id is
        not an integer.
    """
    raw_id = _attr_value(item, "id")
    try:
        planet_id = int(raw_id)
    except (TypeError, ValueError):
        raise StoreError(f"Malformed planet record: id {raw_id!r} is not an integer") from None

    return Planet(
        id=planet_id,
        name=str(_attr_value(item, "name")),
        description=str(_attr_value(item, "description")),
        image=str(_attr_value(item, "image")),
        velocity=str(_attr_value(item, "velocity")),
        distance=str(_attr_value(item, "distance")),
    )


class PlanetStore(abc.ABC):
    """Read-only access to the planet catalogue."""

    @abc.abstractmethod
    def list_all(self) -> List[Planet]:
        """Return every planet, in the store's natural order."""

    @abc.abstractmethod
    def get_by_id(self, planet_id: int) -> Optional[Planet]:
        """Return the planet with ``planet_id`` or ``None`` if absent."""


class DynamoPlanetStore(PlanetStore):
    """Planet store backed by a DynamoDB table.

    The client is created by the caller (see ``build_store`` in
    ``solar_system.main``) so any configured client, including one wrapped
    in ``botocore.stub.Stubber``, can be passed in.
    """

    def __init__(self, client: Any, table_name: str) -> None:
        self.client = client
        self.table_name = table_name

    def list_all(self) -> List[Planet]:
        items: List[Item] = []
        params: Dict[str, Any] = {"TableName": self.table_name}
        try:
            while True:
                data = self.client.scan(**params)
                items.extend(data.get("Items") or [])
                last_key = data.get("LastEvaluatedKey")
                if not last_key:
                    break
                params["ExclusiveStartKey"] = last_key
        except (BotoCoreError, ClientError) as exc:
            logger.debug("Scan of table %s failed: %s", self.table_name, exc)
            raise StoreError(str(exc)) from exc
        return [planet_from_item(item) for item in items]

    def get_by_id(self, planet_id: int) -> Optional[Planet]:
        try:
            data = self.client.get_item(
                TableName=self.table_name,
                Key={"id": {"N": str(planet_id)}},
            )
        except (BotoCoreError, ClientError) as exc:
            logger.debug(
                "GetItem id=%s on table %s failed: %s", planet_id, self.table_name, exc
            )
            raise StoreError(str(exc)) from exc
        item = data.get("Item")
        if not item:
            return None
        return planet_from_item(item)


class InMemoryPlanetStore(PlanetStore):
    """Planet store over a list of typed items kept in memory."""

    def __init__(self, items: Iterable[Item] = ()) -> None:
        self.items: List[Item] = list(items)

    @classmethod
    def from_json(cls, path: Path = DATA_FILE) -> "InMemoryPlanetStore":
        """Load typed items from a JSON file holding a list of records.

        Parameters
        ----------
        path : Path
            JSON file containing a list of DynamoDB-shaped items.

        Returns
        -------
        InMemoryPlanetStore
            A store serving the loaded items.
        """
        try:
            with Path(path).open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as exc:
            raise StoreError(f"Cannot load planets from {path}: {exc}") from exc
        if not isinstance(raw, list):
            raise StoreError(f"Cannot load planets from {path}: expected a list of items")
        return cls(raw)

    def list_all(self) -> List[Planet]:
        return [planet_from_item(item) for item in self.items]

    def get_by_id(self, planet_id: int) -> Optional[Planet]:
        for item in self.items:
            planet = planet_from_item(item)
            if planet.id == planet_id:
                return planet
        return None
