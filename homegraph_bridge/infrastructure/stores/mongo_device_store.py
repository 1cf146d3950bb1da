"""
MongoDB Device Store - Infrastructure Layer

Stores one document per device. A ``position`` field keeps the catalog
order since Mongo does not guarantee natural order.
"""

from time import perf_counter
from typing import List

from homegraph_bridge.domain.entities.health import DependencyStatus, ServiceStatus
from homegraph_bridge.domain.ports.device_store import DeviceDocument, IDeviceStore
from homegraph_bridge.infrastructure.database import MongoDatabase
from homegraph_bridge.shared import get_logger

logger = get_logger(__name__)


class MongoDeviceStore(IDeviceStore):
    """MongoDB implementation of the device store."""

    COLLECTION_NAME = "devices"

    def __init__(self, mongo_database: MongoDatabase, collection_name: str = ""):
        self.db = mongo_database
        self.collection_name = collection_name or self.COLLECTION_NAME

    def load(self) -> List[DeviceDocument]:
        documents = self.db.find_many(self.collection_name, {}, sort_by="position")
        for document in documents:
            document.pop("position", None)
        logger.info(
            "device_store.mongo.loaded",
            collection=self.collection_name,
            count=len(documents),
        )
        return documents

    def save(self, documents: List[DeviceDocument]) -> None:
        positioned = [
            {**document, "position": position}
            for position, document in enumerate(documents)
        ]
        self.db.sync_collection(self.collection_name, positioned, key="id")
        logger.info(
            "device_store.mongo.saved",
            collection=self.collection_name,
            count=len(positioned),
        )

    def create_indexes(self) -> None:
        self.db.create_indexes(self.collection_name)

    def check(self) -> DependencyStatus:
        start = perf_counter()
        details = {"backend": "mongo", "collection": self.collection_name}
        try:
            self.db.ping()
        except Exception as exc:
            return DependencyStatus(
                name="device_store",
                status=ServiceStatus.DOWN,
                message=f"MongoDB ping failed: {exc}",
                details=details,
            )
        return DependencyStatus(
            name="device_store",
            status=ServiceStatus.UP,
            message="MongoDB ping successful",
            latency_ms=(perf_counter() - start) * 1000,
            details=details,
        )
