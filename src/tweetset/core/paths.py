"""Utilities for locating runtime data and built-in system assets."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Iterable

_ENV_VAR = "TWEETSET_DATA_DIR"
_DEFAULT_DIRNAME = ".tweetset"
_PACKAGE_ROOT = Path(__file__).resolve().parents[1]
_SYSTEM_DIR = _PACKAGE_ROOT / "system"


def _normalize_relative(parts: Iterable[str]) -> Path:
    """Normalize relative path components, stripping a leading data-dir prefix."""
    path = Path(*parts)
    if not path.parts:
        return Path()
    if path.parts[0] in {_DEFAULT_DIRNAME, "system"}:
        path = Path(*path.parts[1:]) if len(path.parts) > 1 else Path()
    return path


def get_data_dir() -> Path:
    """Return the configured runtime data directory.

    Honors the TWEETSET_DATA_DIR environment variable (relative values resolve
    against the working directory, blank values are ignored); otherwise
    defaults to ~/.tweetset on the current platform.
    """
    override = (os.getenv(_ENV_VAR) or "").strip()
    if override:
        return Path(override).expanduser().resolve()
    return (Path.home() / _DEFAULT_DIRNAME).resolve()


def ensure_data_dir() -> Path:
    """Ensure the data directory exists on disk and return it."""
    data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    _seed_from_system(data_dir)
    return data_dir


def resolve_data_path(*relative: str, ensure_parent: bool = False) -> Path:
    """Resolve a path underneath the runtime data directory."""
    data_dir = ensure_data_dir()
    full_path = data_dir / _normalize_relative(relative)
    if ensure_parent:
        full_path.parent.mkdir(parents=True, exist_ok=True)
    return full_path


def resolve_data_file(path: str, ensure_parent: bool = False) -> Path:
    """Resolve a configured file path against the data directory.

    Absolute paths are used as-is. Relative paths are interpreted relative to
    the runtime data dir.
    """
    candidate = Path(path).expanduser()
    if candidate.is_absolute():
        if ensure_parent:
            candidate.parent.mkdir(parents=True, exist_ok=True)
        return candidate
    return resolve_data_path(*candidate.parts, ensure_parent=ensure_parent)


def get_system_path(*relative: str) -> Path:
    """Return a path inside the package's bundled system directory."""
    return _SYSTEM_DIR.joinpath(*relative)


def _seed_from_system(target: Path) -> None:
    """Copy the bundled sample tweet dumps into *target* when missing."""
    if target.resolve() == _SYSTEM_DIR.resolve():
        return

    src = _SYSTEM_DIR / "tweets"
    dest = target / "tweets"
    if not src.exists() or dest.exists():
        return
    try:
        shutil.copytree(src, dest)
    except FileExistsError:
        pass


__all__ = [
    "get_data_dir",
    "ensure_data_dir",
    "resolve_data_path",
    "resolve_data_file",
    "get_system_path",
]
