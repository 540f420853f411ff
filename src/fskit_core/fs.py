"""
Module-level filesystem helpers.

Thin functions bound to a default LocalFS. Each plain function uses the
documented default mode; the ``*_with_mode`` variant takes an explicit one.

Example:

    from fskit_core import fs

    fs.ensure_dir("out/reports")
    fs.write_json("out/reports/summary.json", {"ok": True})
    summary = fs.read_json("out/reports/summary.json")
"""

from typing import Any, List, Optional, Type, TypeVar

from .adapters.local_fs import LocalFS
from .domain.errors import PathLike
from .domain.models import WriteOptions

T = TypeVar("T")

_default_fs = LocalFS()


# Existence & creation

def exists(path: PathLike) -> bool:
    """Check if a file or directory exists."""
    return _default_fs.exists(path)


def ensure_file(path: PathLike) -> None:
    """Create an empty file (mode 0o644) and its missing parents, unless one exists."""
    _default_fs.ensure_file(path)


def ensure_file_with_mode(path: PathLike, mode: int) -> None:
    """Create an empty file with mode and its missing parents, unless one exists."""
    _default_fs.ensure_file(path, mode)


def ensure_dir(path: PathLike) -> None:
    """Create a directory (mode 0o755) and its missing parents, unless one exists."""
    _default_fs.ensure_dir(path)


def ensure_dir_with_mode(path: PathLike, mode: int) -> None:
    """Create a directory with mode and its missing parents, unless one exists."""
    _default_fs.ensure_dir(path, mode)


# Listing

def read_dir(path: PathLike) -> List[str]:
    """Names of the entries in a directory. The order is not guaranteed."""
    return _default_fs.read_dir(path)


def read_dir_rec(path: PathLike) -> List[str]:
    """Paths of every file below a directory. The order is not guaranteed."""
    return _default_fs.read_dir_rec(path)


# Reads

def get_size(path: PathLike) -> int:
    return _default_fs.get_size(path)


def read_bytes(path: PathLike) -> bytes:
    return _default_fs.read_bytes(path)


def read_text(path: PathLike) -> str:
    return _default_fs.read_text(path)


def read_json(path: PathLike, model: Optional[Type[T]] = None) -> Any:
    """Read a JSON file, optionally decoding it into model."""
    return _default_fs.read_json(path, model)


# Writes

def write_bytes(path: PathLike, content: bytes) -> None:
    _default_fs.write_bytes(path, content)


def write_bytes_with_mode(path: PathLike, content: bytes, mode: int) -> None:
    _default_fs.write_bytes(path, content, WriteOptions(mode=mode))


def write_text(path: PathLike, content: str) -> None:
    _default_fs.write_text(path, content)


def write_text_with_mode(path: PathLike, content: str, mode: int) -> None:
    _default_fs.write_text(path, content, WriteOptions(mode=mode))


def write_json(path: PathLike, value: Any) -> None:
    """Write value as compact JSON."""
    _default_fs.write_json(path, value)


def write_json_with_mode(path: PathLike, value: Any, mode: int) -> None:
    """Write value as compact JSON, creating the file with mode."""
    _default_fs.write_json(path, value, WriteOptions(mode=mode))


__all__ = [
    "exists",
    "ensure_file",
    "ensure_file_with_mode",
    "ensure_dir",
    "ensure_dir_with_mode",
    "read_dir",
    "read_dir_rec",
    "get_size",
    "read_bytes",
    "read_text",
    "read_json",
    "write_bytes",
    "write_bytes_with_mode",
    "write_text",
    "write_text_with_mode",
    "write_json",
    "write_json_with_mode",
]
