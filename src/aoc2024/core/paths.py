"""Where runtime files live: the data directory (config, puzzle inputs) and bundled defaults."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

DATA_DIR_ENV = "AOC2024_DATA_DIR"
_HOME_DIRNAME = ".aoc2024"
_SYSTEM_DIR = Path(__file__).resolve().parents[1] / "system"


def get_data_dir() -> Path:
    """Return the runtime data directory.

    ``$AOC2024_DATA_DIR`` wins when set; a relative value is taken from the
    current working directory and an empty one means ``./.aoc2024``. Without
    the variable the directory is ``~/.aoc2024``.
    """
    override = os.getenv(DATA_DIR_ENV)
    if override is None:
        return (Path.home() / _HOME_DIRNAME).resolve()
    override = override.strip()
    base = Path(override).expanduser() if override else Path.cwd() / _HOME_DIRNAME
    return base.resolve()


def ensure_data_dir() -> Path:
    """Create the data directory if needed and return it."""
    data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def resolve_data_path(*relative: str, ensure_parent: bool = False) -> Path:
    full_path = ensure_data_dir().joinpath(*relative)
    if ensure_parent:
        full_path.parent.mkdir(parents=True, exist_ok=True)
    return full_path


def resolve_data_file(path: Union[str, Path], ensure_parent: bool = False) -> Path:
    """Resolve a configured path; relative ones land under the data directory."""
    candidate = Path(path).expanduser()
    if not candidate.is_absolute():
        return resolve_data_path(*candidate.parts, ensure_parent=ensure_parent)
    if ensure_parent:
        candidate.parent.mkdir(parents=True, exist_ok=True)
    return candidate


def default_config_path() -> Path:
    """Return ``<data_dir>/config/config.yaml`` without creating anything."""
    return get_data_dir() / "config" / "config.yaml"


def get_system_dir() -> Path:
    """Return the package's bundled ``system`` directory."""
    return _SYSTEM_DIR


def get_system_path(*relative: str) -> Path:
    return get_system_dir().joinpath(*relative)


__all__ = [
    "DATA_DIR_ENV",
    "get_data_dir",
    "ensure_data_dir",
    "resolve_data_path",
    "resolve_data_file",
    "default_config_path",
    "get_system_dir",
    "get_system_path",
]
