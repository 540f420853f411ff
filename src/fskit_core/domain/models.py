"""
Configuration and option objects for FSKit.

These are pure data classes with no filesystem dependencies.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FSConfig:
    """Defaults applied when a call does not specify a mode."""
    file_mode: int = 0o644       # ensure_file
    dir_mode: int = 0o755        # ensure_dir
    ancestor_mode: int = 0o755   # Missing parents created by ensure_*
    write_mode: int = 0o666      # write_* without options (host default, before umask)
    encoding: str = "utf-8"
    text_errors: str = "surrogateescape"   # Raw text: any byte sequence round-trips


@dataclass(frozen=True)
class WriteOptions:
    """Per-call options for write operations."""
    mode: Optional[int] = None   # Applied when the file is created; None = FSConfig.write_mode
