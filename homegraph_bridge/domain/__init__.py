"""
Domain Layer Package

Core device catalog rules. Nothing in here depends on FastAPI, pymongo or
the file system.
"""

# Re-export submodules
from homegraph_bridge.domain import entities, ports, repositories, services

__all__ = ["entities", "repositories", "services", "ports"]
