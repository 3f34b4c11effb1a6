"""Shared CLI runtime primitives (logging, payload emission, proxy)."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel

_PROXY_ENV_KEYS = ("HTTP_PROXY", "HTTPS_PROXY", "http_proxy", "https_proxy")
_DEFAULT_LOG_FORMAT = "%(levelname)s %(name)s - %(message)s"


def configure_logging(level: str) -> None:
    """Configure root logging for CLI runs.

    Args:
        level (str): Log level name, case-insensitive.

    """
    logging.basicConfig(level=level.upper(), format=_DEFAULT_LOG_FORMAT)


def emit_payload(payload: dict[str, Any] | BaseModel | str, output: str) -> None:
    """Emit payload to stdout or to a file.

    Models are dumped with their wire field names (`_shards`, `_id`, ...).

    Args:
        payload (dict[str, Any] | BaseModel | str): Data payload to serialize.
        output (str): Output path or "-" for stdout.

    """
    if isinstance(payload, str):
        serialized = payload
    else:
        payload_dict = payload.model_dump(mode="json", by_alias=True) if isinstance(payload, BaseModel) else payload
        serialized = json.dumps(payload_dict, ensure_ascii=False, indent=2)

    if output == "-":
        print(serialized)
        return

    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if serialized.endswith("\n"):
        output_path.write_text(serialized, encoding="utf-8")
    else:
        output_path.write_text(serialized + "\n", encoding="utf-8")


def apply_proxy_environment(proxy_url: str | None) -> None:
    """Apply proxy url to standard proxy environment variables.

    Args:
        proxy_url (str | None): Proxy URL when provided.

    """
    if not proxy_url:
        return

    for key in _PROXY_ENV_KEYS:
        os.environ[key] = proxy_url


def load_json_argument(value: str) -> Any:
    """Parse a JSON CLI argument, reading it from a file when prefixed with `@`.

    Args:
        value (str): Inline JSON, or `@path/to/file.json`.

    Returns:
        Any: Decoded JSON value.

    Raises:
        ValueError: If the value is not valid JSON.

    """
    if value.startswith("@"):
        value = Path(value[1:]).expanduser().read_text(encoding="utf-8")
    return json.loads(value)
