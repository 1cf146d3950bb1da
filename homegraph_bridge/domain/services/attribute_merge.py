"""Merging of per-trait attribute declarations into one device attribute set."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from homegraph_bridge.domain.entities.device import DeviceTrait


@dataclass(slots=True)
class AttributeCollision:
    """An attribute declared with different values by several traits."""

    attribute: str
    traits: List[str] = field(default_factory=list)


@dataclass(slots=True)
class MergedAttributes:
    attributes: Dict[str, Any] = field(default_factory=dict)
    collisions: List[AttributeCollision] = field(default_factory=list)


def merge_trait_attributes(traits: Iterable[DeviceTrait]) -> MergedAttributes:
    """Concatenate trait attributes in declaration order.

    Traits without attributes are skipped. When two traits declare the same
    attribute the later trait wins. Redeclaring an attribute with an equal
    value is not a collision; a different value is reported in
    ``collisions`` so callers can warn or refuse.
    """

    merged: Dict[str, Any] = {}
    owners: Dict[str, str] = {}
    collisions: Dict[str, AttributeCollision] = {}

    for trait in traits:
        if trait.attributes is None:
            continue
        trait_name = getattr(trait.trait, "value", str(trait.trait))

        for key, value in trait.attributes.items():
            if key in merged and merged[key] != value:
                collision = collisions.setdefault(
                    key, AttributeCollision(attribute=key, traits=[owners[key]])
                )
                collision.traits.append(trait_name)
            merged[key] = value
            owners[key] = trait_name

    return MergedAttributes(attributes=merged, collisions=list(collisions.values()))
