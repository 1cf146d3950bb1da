"""Environment helpers for Docker-style ``*_FILE`` secrets."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)

_FILE_SUFFIX = "_FILE"


def load_secret_file_variables() -> List[str]:
    """
    Expose the content of ``KEY_FILE`` files as ``KEY`` variables.

    The agent user id and the Mongo URI are usually mounted as secrets, so
    ``GOOGLE_HOME_GRAPH__AGENT_USER_ID_FILE=/run/secrets/agent`` becomes
    ``GOOGLE_HOME_GRAPH__AGENT_USER_ID``. Variables that are already set win
    over the file. Unreadable files are logged and skipped.

    Returns:
        The names of the variables that were populated.
    """
    resolved: List[str] = []

    for key, file_path in list(os.environ.items()):
        if not key.endswith(_FILE_SUFFIX) or not file_path:
            continue
        target_key = key[: -len(_FILE_SUFFIX)]
        if os.environ.get(target_key):
            continue

        try:
            os.environ[target_key] = Path(file_path).read_text(encoding="utf-8").strip()
        except FileNotFoundError as exc:
            logger.warning(
                "env.secret_file.missing",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )
            continue
        except UnicodeDecodeError as exc:
            logger.warning(
                "env.secret_file.decode_failed",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )
            continue
        except OSError as exc:
            logger.warning(
                "env.secret_file.load_failed",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )
            continue

        resolved.append(target_key)

    return resolved


load_secret_file_variables()
