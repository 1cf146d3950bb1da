"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer: the device stores, the device repository and the services
backing health and QUERY answers.
"""

from homegraph_bridge.infrastructure import repositories

__all__ = ["repositories"]
