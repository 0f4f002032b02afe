# src/color_palette_builder/utils/load_config.py

"""Read JSON object configs from the package's <data/> directory.

Parsed objects are cached per (path, mtime); an optional validator runs on
every call over a fresh copy, so a cached file still gets checked.

Used by utils.settings (palette_settings.json).
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any

__all__ = [
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

_ENV_VARS = ("PALETTE_DATA_DIR", "DATA_DIR")

Validator = Callable[[dict[str, Any]], dict[str, Any]]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """No data directory in the environment or above the package."""


class ConfigFileNotFound(FileNotFoundError):
    """The config file is missing, unreadable, or outside the data directory."""


class ConfigParseError(ValueError):
    """Invalid JSON, or the validator rejected the contents."""


class ConfigTypeError(TypeError):
    """The JSON document is not an object."""


# ── Cache ────────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_lock = threading.RLock()
_parsed: dict[tuple[Path, float], dict[str, Any]] = {}


def clear_config_cache() -> None:
    """Forget every parsed file (tests and hot reload)."""
    with _lock:
        _parsed.clear()
    log.debug("Config cache cleared")


# ── Data directory ───────────────────────────────────────────────────────────
def _env_data_dir() -> Path | None:
    for var in _ENV_VARS:
        value = os.environ.get(var)
        if value:
            return Path(value).expanduser().resolve()
    return None


def _package_data_dir() -> Path:
    here = Path(__file__).resolve()
    tried = [parent / "data" for parent in here.parents]
    for cand in tried:
        if cand.is_dir():
            return cand
    raise DataDirNotFound("No 'data' directory above " + str(here))


def _resolve_file(file: str | os.PathLike[str], base_dir: Path | None) -> Path:
    data_dir = Path(base_dir or _env_data_dir() or _package_data_dir()).resolve()
    name = os.fspath(file)
    if not name.endswith(".json"):
        name += ".json"
    path = (data_dir / name).resolve()
    if data_dir not in path.parents:
        raise ConfigFileNotFound(f"{path} is outside the data dir {data_dir}")
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


def _read_object(path: Path, encoding: str) -> dict[str, Any]:
    try:
        mtime = path.stat().st_mtime
        key = (path, mtime)
        with _lock:
            if key in _parsed:
                log.debug("Config cache hit: %s", path.name)
                return _parsed[key]
        data = json.loads(path.read_text(encoding=encoding))
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")
    with _lock:
        _parsed[key] = data
    log.debug("Config parsed and cached: %s", path.name)
    return data


def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Validator | None = None,
) -> dict[str, Any]:
    """
    Does: Load <data>/<file>.json as a dict, running `validator` over a copy.
    Returns: The validated (or plain) dict; never the cached object itself.
    Raises: DataDirNotFound, ConfigFileNotFound, ConfigParseError, ConfigTypeError.
    """
    path = _resolve_file(file, base_dir)
    data = dict(_read_object(path, encoding))
    if validator is None:
        return data
    try:
        return validator(data)
    except (TypeError, ValueError) as e:
        raise ConfigParseError(f"{path.name}: validator failed: {e}") from e


# ── Context manager to temporarily override the data directory ───────────────
class temp_data_dir:
    """Point PALETTE_DATA_DIR at `path` for the block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get("PALETTE_DATA_DIR")
        os.environ["PALETTE_DATA_DIR"] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop("PALETTE_DATA_DIR", None)
        else:
            os.environ["PALETTE_DATA_DIR"] = self._old
        clear_config_cache()
