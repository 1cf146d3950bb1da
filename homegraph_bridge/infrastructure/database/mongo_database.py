"""
MongoDB Database - Infrastructure Layer

Thin wrapper around a pymongo client used by the Mongo device store. The
methods are blocking; callers run them off the event loop.
"""

from typing import Any, Dict, List, Optional

import pymongo.errors
from pymongo import ASCENDING, MongoClient, ReplaceOne
from pymongo.collection import Collection
from pymongo.database import Database

from homegraph_bridge.shared import get_logger

logger = get_logger(__name__)


class MongoDatabase:
    """MongoDB database client."""

    def __init__(self, mongo_uri: str, db_name: str):
        """
        Initialize the MongoDB database client.

        Args:
            mongo_uri: MongoDB connection URI
            db_name: Name of the database to use
        """
        self.client: MongoClient = MongoClient(mongo_uri)
        self.db: Database = self.client[db_name]

    def get_collection(self, collection_name: str) -> Collection:
        return self.db[collection_name]

    def find_many(
        self,
        collection_name: str,
        query: Dict[str, Any],
        sort_by: Optional[str] = None,
        sort_direction: int = ASCENDING,
    ) -> List[Dict[str, Any]]:
        """
        Find documents in a collection, without the Mongo ``_id`` field.

        Args:
            collection_name: Name of the collection
            query: Query to match documents
            sort_by: Field to sort by
            sort_direction: 1 for ascending, -1 for descending

        Returns:
            List of documents
        """
        cursor = self.db[collection_name].find(query, {"_id": False})
        if sort_by:
            cursor = cursor.sort(sort_by, sort_direction)
        return list(cursor)

    def sync_collection(
        self, collection_name: str, documents: List[Dict[str, Any]], key: str = "id"
    ) -> None:
        """
        Make a collection hold exactly ``documents``.

        Documents are upserted by ``key`` and every document whose key is not
        in the new set is deleted afterwards, so readers never observe an
        empty collection while a catalog is being replaced.

        Raises:
            pymongo.errors.PyMongoError: If a write fails
        """
        collection = self.db[collection_name]
        keys = [document[key] for document in documents]

        if documents:
            result = collection.bulk_write(
                [
                    ReplaceOne({key: document[key]}, document, upsert=True)
                    for document in documents
                ],
                ordered=True,
            )
            if not result.acknowledged:
                raise pymongo.errors.OperationFailure(
                    f"Failed to write documents in {collection_name}"
                )

        collection.delete_many({key: {"$nin": keys}})

    def ping(self) -> None:
        """Raise if the server cannot be reached."""
        self.client.admin.command("ping")

    def close(self) -> None:
        """Close the database connection."""
        self.client.close()

    def create_indexes(self, collection_name: str) -> None:
        """Create the indexes used by the device catalog collection."""
        try:
            self.db[collection_name].create_index("id", name="id_idx", unique=True)
            self.db[collection_name].create_index("position", name="position_idx")
        except pymongo.errors.OperationFailure as e:
            logger.warning(
                "mongo.indexes.failed", collection=collection_name, error=str(e)
            )
