"""
Application Layer Package

This package contains the application-specific use cases and the DTOs
they exchange with the presentation layer.
"""

# Re-export submodules
from homegraph_bridge.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
