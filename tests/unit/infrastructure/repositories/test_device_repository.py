from __future__ import annotations

import asyncio

import pytest

from homegraph_bridge.domain.entities.device import Device, NameInfo
from homegraph_bridge.domain.entities.errors import (
    DeviceConflictError,
    DeviceNotFoundError,
    DeviceStorageError,
    DeviceValidationError,
)
from homegraph_bridge.infrastructure.repositories.device_repository import (
    DeviceRepository,
)
from homegraph_bridge.infrastructure.stores.device_document import to_document
from tests.conftest import FakeDeviceStore


@pytest.fixture()
def repository(fake_device_store: FakeDeviceStore) -> DeviceRepository:
    return DeviceRepository(fake_device_store)


@pytest.mark.asyncio
async def test_add_then_contains(repository, light_device) -> None:
    assert await repository.contains("light1") is False

    await repository.add(light_device)

    assert await repository.contains("light1") is True
    assert await repository.count() == 1


@pytest.mark.asyncio
async def test_add_duplicate_id_is_rejected(repository, light_device) -> None:
    await repository.add(light_device)
    duplicate = Device(id="light1", name=NameInfo(name="Other"))

    with pytest.raises(DeviceConflictError):
        await repository.add(duplicate)

    assert (await repository.get("light1")).name.name == "Kitchen light"
    assert await repository.count() == 1


@pytest.mark.asyncio
async def test_get_returns_an_owned_copy(repository, light_device) -> None:
    await repository.add(light_device)

    checked_out = await repository.get("light1")
    checked_out.name.name = "Changed"
    checked_out.traits.clear()

    stored = await repository.get("light1")
    assert stored.name.name == "Kitchen light"
    assert len(stored.traits) == 2


@pytest.mark.asyncio
async def test_add_stores_a_copy(repository, light_device) -> None:
    await repository.add(light_device)
    light_device.name.name = "Mutated after add"

    assert (await repository.get("light1")).name.name == "Kitchen light"


@pytest.mark.asyncio
async def test_get_missing_device(repository) -> None:
    with pytest.raises(DeviceNotFoundError):
        await repository.get("nope")


@pytest.mark.asyncio
async def test_get_all_keeps_insertion_order(
    repository, light_device, switch_device
) -> None:
    await repository.add(switch_device)
    await repository.add(light_device)

    assert [device.id for device in await repository.get_all()] == [
        "switch1",
        "light1",
    ]


@pytest.mark.asyncio
async def test_update_commits_checked_out_copy(repository, light_device) -> None:
    await repository.add(light_device)
    device = await repository.get("light1")
    device.room_hint = "Living room"

    committed = await repository.update(device)

    assert committed.room_hint == "Living room"
    assert (await repository.get("light1")).room_hint == "Living room"


@pytest.mark.asyncio
async def test_update_validates_before_commit(repository, light_device) -> None:
    await repository.add(light_device)
    device = await repository.get("light1")
    device.name.name = ""

    with pytest.raises(DeviceValidationError) as exc:
        await repository.update(device)

    assert exc.value.errors == ["Device name is required."]
    assert (await repository.get("light1")).name.name == "Kitchen light"


@pytest.mark.asyncio
async def test_update_unknown_device(repository, light_device) -> None:
    with pytest.raises(DeviceNotFoundError):
        await repository.update(light_device)


@pytest.mark.asyncio
async def test_rename_keeps_catalog_position(
    repository, light_device, switch_device
) -> None:
    await repository.add(light_device)
    await repository.add(switch_device)
    device = await repository.get("light1")
    device.id = "light-kitchen"

    await repository.update(device, original_id="light1")

    assert await repository.contains("light1") is False
    assert [device.id for device in await repository.get_all()] == [
        "light-kitchen",
        "switch1",
    ]


@pytest.mark.asyncio
async def test_rename_onto_existing_id(repository, light_device, switch_device) -> None:
    await repository.add(light_device)
    await repository.add(switch_device)
    device = await repository.get("light1")
    device.id = "switch1"

    with pytest.raises(DeviceConflictError):
        await repository.update(device, original_id="light1")

    assert await repository.contains("light1") is True


@pytest.mark.asyncio
async def test_invalid_rename_onto_existing_id_reports_conflict_with_errors(
    repository, light_device, switch_device
) -> None:
    await repository.add(light_device)
    await repository.add(switch_device)
    device = await repository.get("light1")
    device.id = "switch1"
    device.name.name = ""

    with pytest.raises(DeviceValidationError) as exc:
        await repository.update(device, original_id="light1")

    assert exc.value.errors == [
        DeviceConflictError.MESSAGE,
        "Device name is required.",
    ]
    assert await repository.contains("light1") is True


@pytest.mark.asyncio
async def test_delete_then_contains_is_false(repository, light_device) -> None:
    await repository.add(light_device)

    await repository.delete("light1")

    assert await repository.contains("light1") is False
    with pytest.raises(DeviceNotFoundError):
        await repository.delete("light1")


@pytest.mark.asyncio
async def test_persist_then_load_round_trips(
    fake_device_store, light_device, switch_device
) -> None:
    repository = DeviceRepository(fake_device_store)
    await repository.add(light_device)
    await repository.add(switch_device)

    await repository.persist()
    reloaded = DeviceRepository(fake_device_store)
    await reloaded.load()

    assert await reloaded.get_all() == [light_device, switch_device]


@pytest.mark.asyncio
async def test_nothing_is_written_until_persist(
    repository, fake_device_store, light_device
) -> None:
    await repository.add(light_device)
    assert fake_device_store.saves == []

    await repository.persist()
    assert fake_device_store.saves == [[to_document(light_device)]]


@pytest.mark.asyncio
async def test_persist_failure_is_surfaced(
    repository, fake_device_store, light_device
) -> None:
    await repository.add(light_device)
    fake_device_store.fail_on_save = OSError("disk full")

    with pytest.raises(DeviceStorageError) as exc:
        await repository.persist()

    assert isinstance(exc.value.__cause__, OSError)
    assert exc.value.details == {"error": "disk full"}
    assert await repository.contains("light1") is True


@pytest.mark.asyncio
async def test_load_failure_is_surfaced(repository, fake_device_store) -> None:
    fake_device_store.fail_on_load = ValueError("bad json")

    with pytest.raises(DeviceStorageError):
        await repository.load()


@pytest.mark.asyncio
async def test_load_keeps_first_duplicate(fake_device_store, light_device) -> None:
    first = to_document(light_device)
    second = dict(first, roomHint="Garage")
    fake_device_store.documents = [first, second]
    repository = DeviceRepository(fake_device_store)

    await repository.load()

    assert await repository.count() == 1
    assert (await repository.get("light1")).room_hint == "Kitchen"


@pytest.mark.asyncio
async def test_edit_session_is_reentrant(repository, light_device) -> None:
    async with repository.edit_session():
        await repository.add(light_device)
        await repository.persist()

    assert await repository.contains("light1") is True


@pytest.mark.asyncio
async def test_edit_session_excludes_other_writers(
    repository, light_device, switch_device
) -> None:
    entered = asyncio.Event()
    release = asyncio.Event()
    order = []

    async def editor() -> None:
        async with repository.edit_session():
            entered.set()
            await release.wait()
            await repository.add(light_device)
            order.append("editor")

    async def other_writer() -> None:
        await entered.wait()
        await repository.add(switch_device)
        order.append("other")

    tasks = [asyncio.create_task(editor()), asyncio.create_task(other_writer())]
    await entered.wait()
    await asyncio.sleep(0)

    assert order == []
    assert await repository.get_all() == []

    release.set()
    await asyncio.gather(*tasks)

    assert order == ["editor", "other"]
