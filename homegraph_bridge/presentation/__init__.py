"""
Presentation Layer Package

This package contains the HTTP surface of the bridge: the fulfillment
webhook, the device edit API and the health endpoint.
"""

from homegraph_bridge.presentation import controllers

__all__ = ["controllers"]
