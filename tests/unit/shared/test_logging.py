from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field

from homegraph_bridge.shared.consts import EnumEnvironment, EnumLogLevel
from homegraph_bridge.shared.logging import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)


def test_configure_logging_mirrors_to_file(tmp_path) -> None:
    log_file = tmp_path / "homegraph.log"
    configure_logging(level="DEBUG", file_path=str(log_file))

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(handler, logging.FileHandler) for handler in root.handlers)

    get_logger("homegraph_bridge.test").info("devices.created", device_id="light1")
    for handler in root.handlers:
        handler.flush()

    assert "devices.created" in log_file.read_text(encoding="utf-8")


def test_chatty_libraries_stay_at_warning() -> None:
    configure_logging(level="DEBUG")

    assert logging.getLogger("pymongo").level == logging.WARNING
    assert logging.getLogger("uvicorn.access").level == logging.WARNING


def test_production_renders_json_lines(tmp_path) -> None:
    log_file = tmp_path / "homegraph.log"
    configure_logging(level="INFO", file_path=str(log_file), environment="production")

    get_logger("homegraph_bridge.test").info("sync.completed", device_count=2)
    for handler in logging.getLogger().handlers:
        handler.flush()

    events = [
        json.loads(line)
        for line in log_file.read_text(encoding="utf-8").splitlines()
        if line.startswith("{")
    ]
    synced = [event for event in events if event["event"] == "sync.completed"]
    assert synced[0]["device_count"] == 2
    assert synced[0]["level"] == "info"


@dataclass
class _LoggingSettings:
    level: EnumLogLevel = EnumLogLevel.WARNING
    format: str = "%(message)s"
    file_path: str | None = None


@dataclass
class _Settings:
    logging: _LoggingSettings = field(default_factory=_LoggingSettings)
    environment: EnumEnvironment = EnumEnvironment.PRODUCTION


def test_update_logging_from_settings_accepts_enums() -> None:
    update_logging_from_settings(
        _Settings(logging=_LoggingSettings(level=EnumLogLevel.ERROR))
    )

    assert logging.getLogger().level == logging.ERROR
