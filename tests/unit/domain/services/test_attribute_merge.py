from __future__ import annotations

from homegraph_bridge.domain.entities.device import DeviceTrait, TraitType
from homegraph_bridge.domain.services.attribute_merge import merge_trait_attributes


def test_non_overlapping_attributes_are_unioned() -> None:
    merged = merge_trait_attributes(
        [
            DeviceTrait(trait=TraitType.BRIGHTNESS, attributes={"a": 1}),
            DeviceTrait(trait=TraitType.COLOR_SETTING, attributes={"b": 2}),
        ]
    )
    assert merged.attributes == {"a": 1, "b": 2}
    assert merged.collisions == []


def test_later_trait_wins_on_collision() -> None:
    merged = merge_trait_attributes(
        [
            DeviceTrait(trait=TraitType.BRIGHTNESS, attributes={"x": 1}),
            DeviceTrait(trait=TraitType.COLOR_SETTING, attributes={"x": 2}),
        ]
    )
    assert merged.attributes == {"x": 2}
    assert len(merged.collisions) == 1
    assert merged.collisions[0].attribute == "x"
    assert merged.collisions[0].traits == [
        TraitType.BRIGHTNESS.value,
        TraitType.COLOR_SETTING.value,
    ]


def test_equal_values_are_not_collisions() -> None:
    merged = merge_trait_attributes(
        [
            DeviceTrait(trait=TraitType.BRIGHTNESS, attributes={"x": 1}),
            DeviceTrait(trait=TraitType.COLOR_SETTING, attributes={"x": 1}),
        ]
    )
    assert merged.collisions == []


def test_traits_without_attributes_are_skipped() -> None:
    merged = merge_trait_attributes(
        [
            DeviceTrait(trait=TraitType.ON_OFF),
            DeviceTrait(trait=TraitType.BRIGHTNESS, attributes={}),
        ]
    )
    assert merged.attributes == {}
