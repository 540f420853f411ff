"""
Filesystem port interface.

Defines the contract for filesystem access. Implementations hold no
filesystem state between calls: every method re-queries the host.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Type, TypeVar

from ..domain.errors import PathLike
from ..domain.models import WriteOptions

T = TypeVar("T")


class FSPort(ABC):
    """
    Abstract interface for filesystem operations.

    All failures are raised as FSError subclasses.
    """

    # -------------------------------------------------------------------------
    # Existence & creation
    # -------------------------------------------------------------------------

    @abstractmethod
    def exists(self, path: PathLike) -> bool:
        """Check if a file or directory exists at path."""
        pass

    @abstractmethod
    def ensure_file(self, path: PathLike, mode: Optional[int] = None) -> None:
        """
        Create an empty regular file if nothing exists at path.

        Args:
            path: File to ensure
            mode: Permission bits for a newly created file
        """
        pass

    @abstractmethod
    def ensure_dir(self, path: PathLike, mode: Optional[int] = None) -> None:
        """
        Create a directory, and any missing parents, if nothing exists at path.

        Args:
            path: Directory to ensure
            mode: Permission bits for the directory itself (not its parents)
        """
        pass

    # -------------------------------------------------------------------------
    # Listing
    # -------------------------------------------------------------------------

    @abstractmethod
    def read_dir(self, path: PathLike) -> List[str]:
        """Names of the immediate children of a directory, in no particular order."""
        pass

    @abstractmethod
    def read_dir_rec(self, path: PathLike) -> List[str]:
        """Paths of every file below a directory, in no particular order."""
        pass

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @abstractmethod
    def get_size(self, path: PathLike) -> int:
        """Size of a file in bytes, from its metadata."""
        pass

    @abstractmethod
    def read_bytes(self, path: PathLike) -> bytes:
        """Read file contents as bytes."""
        pass

    @abstractmethod
    def read_text(self, path: PathLike) -> str:
        """Read file contents as text."""
        pass

    @abstractmethod
    def read_json(self, path: PathLike, model: Optional[Type[T]] = None) -> Any:
        """
        Read and decode a JSON file.

        Args:
            path: File to read
            model: Optional type the decoded document must match

        Returns:
            The decoded value, or an instance of model
        """
        pass

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    @abstractmethod
    def write_bytes(self, path: PathLike, content: bytes,
                    options: Optional[WriteOptions] = None) -> None:
        """
        Create or truncate a file and write content to it.

        The parent directory must already exist.
        """
        pass

    @abstractmethod
    def write_text(self, path: PathLike, content: str,
                   options: Optional[WriteOptions] = None) -> None:
        """Create or truncate a file and write text to it."""
        pass

    @abstractmethod
    def write_json(self, path: PathLike, value: Any,
                   options: Optional[WriteOptions] = None) -> None:
        """Create or truncate a file and write value as compact JSON."""
        pass
