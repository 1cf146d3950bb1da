from __future__ import annotations

from homegraph_bridge.main.config import AppSettings, get_settings
from homegraph_bridge.shared.consts import EnumEnvironment, EnumStorageBackend


def test_get_settings_loads_defaults(monkeypatch) -> None:
    monkeypatch.delenv("STORAGE__BACKEND", raising=False)
    monkeypatch.delenv("STORAGE_BACKEND", raising=False)
    settings = get_settings()
    assert settings.environment == EnumEnvironment.DEVELOPMENT
    assert settings.storage.backend is EnumStorageBackend.FILE
    assert settings.storage.devices_file == "googleDevices.json"
    assert settings.google_home_graph.strict_attribute_merge is False


def test_settings_respect_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("STORAGE_BACKEND", "mongo")
    monkeypatch.setenv("STORAGE_MONGO_URI", "mongodb://test")
    monkeypatch.setenv("GOOGLE_HOME_GRAPH_AGENT_USER_ID", "agent-1")
    monkeypatch.setenv("SERVICE_TITLE", "Testing")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = AppSettings()

    assert settings.storage.backend is EnumStorageBackend.MONGO
    assert settings.storage.mongo_uri == "mongodb://test"
    assert settings.google_home_graph.agent_user_id == "agent-1"
    assert settings.service.title == "Testing"
    assert settings.logging.level.value == "DEBUG"
