"""
Main module - Composition Root

Loads the settings, builds the dependency container that ties the device
store, the repository and the intent handlers together, and creates the
FastAPI application serving the fulfillment and device edit endpoints.
"""

from .config import AppSettings, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppSettings",
    "get_settings",
    "AppContainer",
    "init_container",
    "get_container",
]
