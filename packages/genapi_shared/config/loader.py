"""Settings loading with deterministic precedence.

The cascade is always:
1) CLI params
2) Environment variables
3) ~/.config/genapi/genapi.yaml (or an explicit ``config_path``)
4) Built-in defaults

Environment variable format:
- Prefix: ``GENAPI_``
- Nested keys: ``__`` separator
- Example: ``GENAPI_LOGGING__LEVEL=DEBUG`` -> ``logging.level = "DEBUG"``
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, Mapping

from .models import DEFAULT_CONFIG_PATH, GenapiSettings

_CONFIG_PATH_LOCK = threading.Lock()


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> GenapiSettings:
    """Resolve ``GenapiSettings`` from CLI params, env, YAML and defaults.

    A missing YAML file is ignored. Invalid values raise
    ``pydantic.ValidationError``.
    """
    resolved = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    with _CONFIG_PATH_LOCK:
        previous = GenapiSettings._config_path
        GenapiSettings._config_path = resolved
        try:
            return GenapiSettings(**dict(cli_params or {}))
        finally:
            GenapiSettings._config_path = previous
