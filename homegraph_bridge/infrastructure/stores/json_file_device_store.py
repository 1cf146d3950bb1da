"""
JSON File Device Store - Infrastructure Layer

Keeps the device catalog in a single JSON file, an object keyed by device
id. Writes are atomic:

  1. the current file, if any, is copied to ``<file>.bak``;
  2. the new catalog is written to ``<file>.tmp``;
  3. ``os.replace`` moves the temporary file onto the target.

A missing file means an empty catalog. When only the backup exists (a
crash between steps), the backup is loaded instead.
"""

from __future__ import annotations

import json
import os
import shutil
from pathlib import Path
from typing import Any, Dict, List, Union

from homegraph_bridge.domain.entities.health import DependencyStatus, ServiceStatus
from homegraph_bridge.domain.ports.device_store import DeviceDocument, IDeviceStore
from homegraph_bridge.shared import get_logger

logger = get_logger(__name__)

_BACKUP_SUFFIX = ".bak"
_TMP_SUFFIX = ".tmp"


class JsonFileDeviceStore(IDeviceStore):
    """File-backed device store."""

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)
        self._backup_path = self._path.with_suffix(self._path.suffix + _BACKUP_SUFFIX)
        self._tmp_path = self._path.with_suffix(self._path.suffix + _TMP_SUFFIX)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def backup_path(self) -> Path:
        return self._backup_path

    def load(self) -> List[DeviceDocument]:
        """
        Read the catalog file.

        Returns:
            Device documents in file order

        Raises:
            OSError: If the file exists but cannot be read
            ValueError: If the content is not a JSON catalog
        """
        source = self._path
        if not source.is_file():
            if not self._backup_path.is_file():
                logger.info("device_store.file.missing", path=str(self._path))
                return []
            logger.warning(
                "device_store.file.using_backup",
                path=str(self._path),
                backup_path=str(self._backup_path),
            )
            source = self._backup_path

        with open(source, "r", encoding="utf-8") as fh:
            payload = json.load(fh)

        documents = self._documents_from_payload(payload, source)
        logger.info("device_store.file.loaded", path=str(source), count=len(documents))
        return documents

    def save(self, documents: List[DeviceDocument]) -> None:
        """
        Atomically replace the catalog file.

        Raises:
            OSError: If the file cannot be written
        """
        self._path.parent.mkdir(parents=True, exist_ok=True)

        if self._path.is_file():
            try:
                shutil.copy2(self._path, self._backup_path)
            except OSError as exc:
                logger.warning(
                    "device_store.file.backup_failed",
                    backup_path=str(self._backup_path),
                    error=str(exc),
                )

        payload: Dict[str, Any] = {document["id"]: document for document in documents}
        try:
            with open(self._tmp_path, "w", encoding="utf-8") as fh:
                json.dump(payload, fh, indent=2, ensure_ascii=False)
            os.replace(self._tmp_path, self._path)
        except OSError as exc:
            logger.error(
                "device_store.file.write_failed",
                path=str(self._path),
                error=str(exc),
            )
            raise

        logger.info("device_store.file.saved", path=str(self._path), count=len(payload))

    def check(self) -> DependencyStatus:
        name = "device_store"
        details = {"backend": "file", "path": str(self._path)}

        if self._path.is_file():
            if os.access(self._path, os.R_OK | os.W_OK):
                return DependencyStatus(
                    name=name,
                    status=ServiceStatus.UP,
                    message="Device catalog file is readable and writable",
                    details=details,
                )
            return DependencyStatus(
                name=name,
                status=ServiceStatus.DEGRADED,
                message="Device catalog file is not writable",
                details=details,
            )

        return DependencyStatus(
            name=name,
            status=ServiceStatus.UNKNOWN,
            message="Device catalog file has not been written yet",
            details=details,
        )

    @staticmethod
    def _documents_from_payload(payload: Any, source: Path) -> List[DeviceDocument]:
        # Older catalogs may be a plain list of devices.
        if isinstance(payload, list):
            return [dict(document) for document in payload]
        if not isinstance(payload, dict):
            raise ValueError(
                f"Expected a JSON object at top level in {source}, "
                f"got {type(payload).__name__}"
            )

        documents: List[DeviceDocument] = []
        for key, document in payload.items():
            entry = dict(document)
            entry.setdefault("id", key)
            documents.append(entry)
        return documents

    def __repr__(self) -> str:
        return f"JsonFileDeviceStore({str(self._path)!r})"
