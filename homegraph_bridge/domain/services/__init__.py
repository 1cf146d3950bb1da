"""
Domain Services Package

Stateless rules that operate on device entities: validation, the helpers
used to build devices from user input and the SYNC attribute merge.
"""

from .attribute_merge import (
    AttributeCollision,
    MergedAttributes,
    merge_trait_attributes,
)
from .device_builder import build_device_info, join_comma_list, parse_comma_list
from .device_validator import ensure_device_is_valid, validate_device

__all__ = [
    "AttributeCollision",
    "MergedAttributes",
    "merge_trait_attributes",
    "build_device_info",
    "join_comma_list",
    "parse_comma_list",
    "ensure_device_is_valid",
    "validate_device",
]
