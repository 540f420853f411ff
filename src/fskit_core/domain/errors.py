"""
Exception hierarchy for FSKit.

Every operation wraps the underlying OS or codec error in an FSError
subclass whose message names the failing operation, and chains the
original exception as ``__cause__``.
"""

import os
from typing import Optional, Union

from .enums import ErrorKind

PathLike = Union[str, "os.PathLike[str]"]


class FSError(Exception):
    """Base class for all FSKit failures."""

    kind: ErrorKind = ErrorKind.IO

    def __init__(self, op: str, message: str, path: Optional[PathLike] = None):
        """
        Args:
            op: Operation name, e.g. "ensure-file"
            message: What failed, including the cause
            path: Path the operation was acting on
        """
        self.op = op
        self.path = os.fspath(path) if path is not None else None
        super().__init__(f"{op} {message}")


class NotFoundError(FSError):
    """The path (or one of its ancestors) does not exist."""
    kind = ErrorKind.NOT_FOUND


class TypeMismatchError(FSError):
    """A file was found where a directory was expected, or vice versa."""
    kind = ErrorKind.TYPE_MISMATCH


class FileIOError(FSError):
    """Permission denied or any other OS-level failure."""
    kind = ErrorKind.IO


class SerializationError(FSError):
    """JSON content could not be encoded or decoded."""
    kind = ErrorKind.SERIALIZATION


_ERRORS_BY_KIND = {
    ErrorKind.NOT_FOUND: NotFoundError,
    ErrorKind.TYPE_MISMATCH: TypeMismatchError,
    ErrorKind.IO: FileIOError,
    ErrorKind.SERIALIZATION: SerializationError,
}


def from_os_error(op: str, action: str, exc: OSError,
                  path: Optional[PathLike] = None) -> FSError:
    """
    Build the FSError matching an OSError.

    Args:
        op: Operation name
        action: What the operation was doing, e.g. "create file"
        exc: The OS error to wrap
        path: Path the operation was acting on

    Returns:
        An FSError subclass instance; callers raise it ``from exc``.
    """
    error_cls = _ERRORS_BY_KIND[ErrorKind.from_os_error(exc)]
    return error_cls(op, f"failed to {action}: {exc}", path)


def rewrap(op: str, action: str, exc: FSError,
           path: Optional[PathLike] = None) -> FSError:
    """Re-label an FSError raised by a nested operation, keeping its kind."""
    return type(exc)(op, f"failed to {action}: {exc}", path)
