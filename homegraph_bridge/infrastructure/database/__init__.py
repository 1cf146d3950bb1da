"""
Database package - Infrastructure Layer

MongoDB client used when the device catalog is kept in a database instead
of a JSON file.
"""

from homegraph_bridge.infrastructure.database.mongo_database import MongoDatabase

__all__ = ["MongoDatabase"]
