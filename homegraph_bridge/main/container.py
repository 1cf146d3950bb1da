"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any

from dependency_injector import containers, providers

from homegraph_bridge.application.use_cases.device_use_cases import (
    CreateDeviceUseCase,
    DeleteDeviceUseCase,
    GetDeviceByIdUseCase,
    GetDeviceFormUseCase,
    GetDevicesUseCase,
    UpdateDeviceUseCase,
)
from homegraph_bridge.application.use_cases.fulfillment_use_case import (
    FulfillmentUseCase,
)
from homegraph_bridge.application.use_cases.health_use_cases import (
    GetHealthStatusUseCase,
)
from homegraph_bridge.application.use_cases.intent_handlers import (
    DisconnectIntentHandler,
    QueryIntentHandler,
    SyncIntentHandler,
)
from homegraph_bridge.domain.entities.intents import IntentType
from homegraph_bridge.infrastructure.database import MongoDatabase
from homegraph_bridge.infrastructure.repositories import DeviceRepository
from homegraph_bridge.infrastructure.services import (
    HealthCheckService,
    InMemoryDeviceStateCache,
)
from homegraph_bridge.infrastructure.stores import (
    JsonFileDeviceStore,
    MongoDeviceStore,
)
from homegraph_bridge.shared import EnumStorageBackend, get_logger

from .config import AppSettings

logger = get_logger(__name__)


def _enum_value(value: Any) -> Any:
    return getattr(value, "value", value)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Infrastructure
    mongo_database = providers.Singleton(
        MongoDatabase,
        mongo_uri=config.storage.mongo_uri,
        db_name=config.storage.database_name,
    )

    device_store = providers.Selector(
        providers.Callable(_enum_value, config.storage.backend),
        file=providers.Singleton(
            JsonFileDeviceStore,
            path=config.storage.devices_file,
        ),
        mongo=providers.Singleton(
            MongoDeviceStore,
            mongo_database=mongo_database,
            collection_name=config.storage.collection_name,
        ),
    )

    device_repository = providers.Singleton(
        DeviceRepository,
        store=device_store,
        logger=providers.Callable(
            get_logger, "homegraph_bridge.infrastructure.repositories"
        ),
    )

    device_state_cache = providers.Singleton(InMemoryDeviceStateCache)

    health_check_service = providers.Singleton(
        HealthCheckService,
        device_store=device_store,
        device_repository=device_repository,
    )

    # Intent handlers
    sync_intent_handler = providers.Singleton(
        SyncIntentHandler,
        device_repository=device_repository,
        agent_user_id=config.google_home_graph.agent_user_id,
        strict_attribute_merge=config.google_home_graph.strict_attribute_merge,
        logger=providers.Callable(get_logger, "homegraph_bridge.sync"),
    )

    query_intent_handler = providers.Singleton(
        QueryIntentHandler,
        device_repository=device_repository,
        state_provider=device_state_cache,
    )

    disconnect_intent_handler = providers.Singleton(DisconnectIntentHandler)

    # EXECUTE has no handler; the dispatcher answers notSupported.
    intent_handlers = providers.Dict(
        {
            IntentType.SYNC.value: sync_intent_handler,
            IntentType.QUERY.value: query_intent_handler,
            IntentType.DISCONNECT.value: disconnect_intent_handler,
        }
    )

    # Application (use cases)
    fulfillment_use_case = providers.Factory(
        FulfillmentUseCase,
        handlers=intent_handlers,
    )

    get_devices_use_case = providers.Factory(
        GetDevicesUseCase,
        device_repository=device_repository,
    )

    get_device_by_id_use_case = providers.Factory(
        GetDeviceByIdUseCase,
        device_repository=device_repository,
    )

    get_device_form_use_case = providers.Factory(
        GetDeviceFormUseCase,
        device_repository=device_repository,
    )

    create_device_use_case = providers.Factory(
        CreateDeviceUseCase,
        device_repository=device_repository,
    )

    update_device_use_case = providers.Factory(
        UpdateDeviceUseCase,
        device_repository=device_repository,
        device_state=device_state_cache,
    )

    delete_device_use_case = providers.Factory(
        DeleteDeviceUseCase,
        device_repository=device_repository,
        device_state=device_state_cache,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


def _uses_mongo(container: AppContainer) -> bool:
    backend = _enum_value(container.config.storage.backend())
    return backend == EnumStorageBackend.MONGO.value


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for external resources.

    Loads the device catalog from the configured store on startup and
    closes the MongoDB client, when one is used, on shutdown.
    """
    container = get_container()
    uses_mongo = _uses_mongo(container)

    try:
        if uses_mongo:
            logger.info("container.mongo.create_indexes")
            await asyncio.to_thread(container.device_store().create_indexes)

        await container.device_repository().load()
        logger.info(
            "container.resources.initialized",
            device_count=await container.device_repository().count(),
        )
        yield container

    finally:
        if uses_mongo:
            logger.info("container.mongo.close")
            container.mongo_database().close()

        logger.info("container.resources.shutdown")
