"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from homegraph_bridge.shared import EnumEnvironment, EnumLogLevel, EnumStorageBackend
from homegraph_bridge.shared.env import load_secret_file_variables  # noqa: F401


class ServiceSettings(BaseSettings):
    """HTTP service settings."""

    title: str = Field(default="Home Graph Bridge", description="Service title")
    description: str = Field(
        default="Smart-home fulfillment bridge between Google Home Graph "
        "and MQTT devices",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    host: str = Field(default="0.0.0.0", description="Host to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_", case_sensitive=False, extra="ignore"
    )


class StorageSettings(BaseSettings):
    """Device catalog storage settings."""

    backend: EnumStorageBackend = Field(
        default=EnumStorageBackend.FILE, description="Where the catalog is kept"
    )
    devices_file: str = Field(
        default="googleDevices.json", description="Catalog file for the file backend"
    )
    mongo_uri: str = Field(
        default="mongodb://localhost:27017/homegraph",
        description="MongoDB connection URI",
    )
    database_name: str = Field(
        default="homegraph", description="Name of the MongoDB database"
    )
    collection_name: str = Field(
        default="devices", description="Collection holding the device documents"
    )

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_", case_sensitive=False, extra="ignore"
    )


class GoogleHomeGraphSettings(BaseSettings):
    """Google Home Graph settings."""

    agent_user_id: str = Field(
        default="", description="Agent user id reported in SYNC responses"
    )
    strict_attribute_merge: bool = Field(
        default=False,
        description="Refuse SYNC when two traits of a device declare the same "
        "attribute with different values",
    )

    model_config = SettingsConfigDict(
        env_prefix="GOOGLE_HOME_GRAPH_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    service: ServiceSettings = Field(default_factory=ServiceSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    google_home_graph: GoogleHomeGraphSettings = Field(
        default_factory=GoogleHomeGraphSettings
    )
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings per environment.
    """
    return AppSettings()
