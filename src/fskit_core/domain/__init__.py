"""
Domain types for FSKit.

Contains configuration, enums, and the exception hierarchy.
"""

from .models import (
    FSConfig,
    WriteOptions,
)
from .enums import (
    ErrorKind,
    NodeKind,
)
from .errors import (
    FSError,
    NotFoundError,
    TypeMismatchError,
    FileIOError,
    SerializationError,
)

__all__ = [
    # Models
    "FSConfig",
    "WriteOptions",
    # Enums
    "ErrorKind",
    "NodeKind",
    # Errors
    "FSError",
    "NotFoundError",
    "TypeMismatchError",
    "FileIOError",
    "SerializationError",
]
