"""
Enumerations for the FSKit domain.
"""

import stat
from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories surfaced by filesystem operations."""
    NOT_FOUND = "not_found"
    TYPE_MISMATCH = "type_mismatch"   # File where a directory was expected, or vice versa
    IO = "io"                         # Permission and other OS failures
    SERIALIZATION = "serialization"   # JSON encode/decode

    @classmethod
    def from_os_error(cls, exc: OSError) -> "ErrorKind":
        """Classify an OSError raised by the host filesystem."""
        if isinstance(exc, FileNotFoundError):
            return cls.NOT_FOUND
        if isinstance(exc, (NotADirectoryError, IsADirectoryError)):
            return cls.TYPE_MISMATCH
        return cls.IO


class NodeKind(str, Enum):
    """Kind of filesystem node at a path."""
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"     # Sockets, FIFOs, devices

    @classmethod
    def from_mode(cls, st_mode: int) -> "NodeKind":
        """Determine the node kind from a stat mode."""
        if stat.S_ISDIR(st_mode):
            return cls.DIRECTORY
        if stat.S_ISREG(st_mode):
            return cls.FILE
        return cls.OTHER
