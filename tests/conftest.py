from __future__ import annotations

import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, Iterator, List, Optional, Sequence

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from homegraph_bridge.domain.entities.device import (  # noqa: E402
    Device,
    DeviceInfo,
    DeviceTrait,
    DeviceType,
    NameInfo,
    TraitType,
)
from homegraph_bridge.domain.entities.health import (  # noqa: E402
    DependencyStatus,
    ServiceStatus,
)


@pytest.fixture()
def light_device() -> Device:
    return Device(
        id="light1",
        name=NameInfo(
            name="Kitchen light",
            default_names=["Ceiling light"],
            nicknames=["kitchen"],
        ),
        type=DeviceType.LIGHT,
        room_hint="Kitchen",
        traits=[
            DeviceTrait(
                trait=TraitType.ON_OFF,
                commands={
                    "action.devices.commands.OnOff": {"on": "home/light1/set"}
                },
                state={"on": "home/light1/state"},
            ),
            DeviceTrait(
                trait=TraitType.BRIGHTNESS,
                attributes={"brightnessRange": [0, 100]},
            ),
        ],
        device_info=DeviceInfo(manufacturer="Acme", model="L-100"),
    )


@pytest.fixture()
def switch_device() -> Device:
    return Device(
        id="switch1",
        name=NameInfo(name="Garden pump"),
        type=DeviceType.SWITCH,
        traits=[DeviceTrait(trait=TraitType.ON_OFF)],
        custom_data={"topic": "garden/pump"},
    )


class FakeDeviceStore:
    """In-memory device store recording every save."""

    def __init__(self, documents: Optional[List[Dict[str, Any]]] = None) -> None:
        self.documents: List[Dict[str, Any]] = list(documents or [])
        self.saves: List[List[Dict[str, Any]]] = []
        self.fail_on_save: Optional[Exception] = None
        self.fail_on_load: Optional[Exception] = None
        self.status = ServiceStatus.UP

    def load(self) -> List[Dict[str, Any]]:
        if self.fail_on_load is not None:
            raise self.fail_on_load
        return [dict(document) for document in self.documents]

    def save(self, documents: List[Dict[str, Any]]) -> None:
        if self.fail_on_save is not None:
            raise self.fail_on_save
        self.documents = [dict(document) for document in documents]
        self.saves.append(self.documents)

    def check(self) -> DependencyStatus:
        return DependencyStatus(
            name="device_store",
            status=self.status,
            details={"backend": "fake"},
        )


class FakeCursor:
    def __init__(self, documents: Sequence[Dict[str, Any]]):
        self._documents = list(documents)

    def sort(self, key: str, direction: int = 1) -> "FakeCursor":
        self._documents.sort(key=lambda doc: doc.get(key, 0), reverse=direction < 0)
        return self

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        return iter(self._documents)


class FakeCollection:
    def __init__(self) -> None:
        self.documents: Dict[str, Dict[str, Any]] = {}
        self.created_indexes: List[tuple[Any, ...]] = []
        self.bulk_writes: List[List[Any]] = []

    def find(
        self, query: Dict[str, Any], projection: Optional[Dict[str, Any]] = None
    ) -> FakeCursor:
        results = []
        for document in self.documents.values():
            if not self._matches(document, query):
                continue
            result = dict(document)
            if projection and projection.get("_id") is False:
                result.pop("_id", None)
            results.append(result)
        return FakeCursor(results)

    def bulk_write(self, requests: List[Any], ordered: bool = True) -> Any:
        self.bulk_writes.append(list(requests))
        for request in requests:
            document = dict(request._doc)
            document.setdefault("_id", f"oid-{document['id']}")
            self.documents[document["id"]] = document
        return SimpleNamespace(acknowledged=True)

    def delete_many(self, query: Dict[str, Any]) -> Any:
        excluded = query.get("id", {}).get("$nin", [])
        removed = [key for key in self.documents if key not in excluded]
        for key in removed:
            del self.documents[key]
        return SimpleNamespace(deleted_count=len(removed), acknowledged=True)

    def create_index(self, keys: Any, name: str | None = None, **kwargs: Any) -> Any:
        self.created_indexes.append((keys, name, kwargs))
        return name or keys

    @staticmethod
    def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
        for key, value in query.items():
            if document.get(key) != value:
                return False
        return True


class FakeMongoDatabase:
    """Stand-in for MongoDatabase used by the Mongo device store."""

    def __init__(self) -> None:
        self.collections: Dict[str, FakeCollection] = {}
        self.ping_error: Optional[Exception] = None
        self.indexed: List[str] = []
        self.closed = False

    def get_collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())

    def find_many(
        self,
        collection_name: str,
        query: Dict[str, Any],
        sort_by: str | None = None,
        sort_direction: int = 1,
    ) -> List[Dict[str, Any]]:
        cursor = self.get_collection(collection_name).find(query, {"_id": False})
        if sort_by:
            cursor.sort(sort_by, sort_direction)
        return list(cursor)

    def sync_collection(
        self, collection_name: str, documents: List[Dict[str, Any]], key: str = "id"
    ) -> None:
        collection = self.get_collection(collection_name)
        collection.documents = {document[key]: dict(document) for document in documents}

    def ping(self) -> None:
        if self.ping_error is not None:
            raise self.ping_error

    def create_indexes(self, collection_name: str) -> None:
        self.indexed.append(collection_name)

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def fake_device_store() -> FakeDeviceStore:
    return FakeDeviceStore()


@pytest.fixture()
def fake_mongo_database() -> FakeMongoDatabase:
    return FakeMongoDatabase()
