"""
Local Filesystem Adapter.

Direct, blocking pass-through to the host filesystem. Each call re-queries
the host; nothing is cached between calls and no locking is applied, so two
callers racing on the same path get whatever the filesystem itself allows.
"""

import dataclasses
import json
import logging
import os
import stat
import types
import typing
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from ..domain.enums import NodeKind
from ..domain.errors import (
    FileIOError,
    FSError,
    PathLike,
    SerializationError,
    TypeMismatchError,
    from_os_error,
    rewrap,
)
from ..domain.models import FSConfig, WriteOptions
from ..ports.fs_port import FSPort

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _parent(path: str) -> str:
    """Parent directory of path; "." for a bare name."""
    trimmed = path.rstrip(os.sep) or os.sep
    return os.path.dirname(trimmed) or "."


def _encode_default(value: Any) -> Any:
    """json.dumps hook: dataclass instances serialize in field order."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


_UNION_ORIGINS = tuple(o for o in (Union, getattr(types, "UnionType", None)) if o is not None)


def _type_name(model: Any) -> str:
    return getattr(model, "__name__", None) or repr(model)


def _decode(value: Any, model: Any) -> Any:
    """
    Fit a decoded JSON value to model.

    Dataclass fields and the element types of List/Dict/Tuple/Optional are
    decoded recursively. JSON keys with no matching dataclass field are
    ignored.

    Raises:
        TypeError: value does not have the shape model describes
    """
    if model is Any:
        return value

    origin = typing.get_origin(model)
    args = typing.get_args(model)

    if origin in _UNION_ORIGINS:
        if value is None and type(None) in args:
            return None
        for option in args:
            if option is type(None):
                continue
            try:
                return _decode(value, option)
            except TypeError:
                continue
        raise TypeError(f"cannot decode {type(value).__name__} into {_type_name(model)}")

    if origin is list:
        if not isinstance(value, list):
            raise TypeError(f"cannot decode {type(value).__name__} into list")
        return [_decode(item, args[0]) for item in value] if args else list(value)

    if origin is tuple:
        if not isinstance(value, list):
            raise TypeError(f"cannot decode {type(value).__name__} into tuple")
        if not args:
            return tuple(value)
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(_decode(item, args[0]) for item in value)
        if len(args) != len(value):
            raise TypeError(f"cannot decode {len(value)} items into a tuple of {len(args)}")
        return tuple(_decode(item, arg) for item, arg in zip(value, args))

    if origin is dict:
        if not isinstance(value, dict):
            raise TypeError(f"cannot decode {type(value).__name__} into dict")
        if not args:
            return dict(value)
        return {key: _decode(item, args[1]) for key, item in value.items()}

    if origin is not None:
        raise TypeError(f"unsupported model {_type_name(model)}")

    if dataclasses.is_dataclass(model) and isinstance(model, type):
        if not isinstance(value, dict):
            raise TypeError(f"cannot decode {type(value).__name__} into {model.__name__}")
        try:
            hints = typing.get_type_hints(model)
        except NameError:
            hints = {}
        kwargs: Dict[str, Any] = {}
        for f in dataclasses.fields(model):
            if f.init and f.name in value:
                kwargs[f.name] = _decode(value[f.name], hints.get(f.name, Any))
        return model(**kwargs)

    if model is float and isinstance(value, int) and not isinstance(value, bool):
        return float(value)

    if not isinstance(model, type):
        raise TypeError(f"unsupported model {_type_name(model)}")

    if isinstance(value, bool) and model is not bool and model is not object:
        raise TypeError(f"cannot decode bool into {model.__name__}")

    if isinstance(value, model):
        return value

    raise TypeError(f"cannot decode {type(value).__name__} into {model.__name__}")


class LocalFS(FSPort):
    """
    Host filesystem implementation.

    GUARANTEES:
    - Every failure is raised as an FSError subclass naming the operation
    - File handles never outlive the call that opened them
    - Missing parents are created only by ensure_file/ensure_dir, never by writes
    """

    def __init__(self, config: Optional[FSConfig] = None):
        """
        Initialize the adapter.

        Args:
            config: Default modes and text encoding. Uses FSConfig() if omitted.
        """
        self.config = config or FSConfig()

    def _stat(self, op: str, path: PathLike) -> Optional[os.stat_result]:
        """stat() that returns None when nothing exists at path."""
        try:
            return os.stat(path)
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise from_os_error(op, "check existence", exc, path) from exc

    # =========================================================================
    # Existence & creation
    # =========================================================================

    def exists(self, path: PathLike) -> bool:
        """
        Check if a file or directory exists.

        Only "not found" counts as absent; any other failure to check,
        including a file in place of an ancestor directory, is a FileIOError.
        """
        try:
            os.stat(path)
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise FileIOError("exists", f"failed to check if file exists: {exc}", path) from exc
        return True

    def ensure_file(self, path: PathLike, mode: Optional[int] = None) -> None:
        """Create an empty file, and its missing parents, unless one exists."""
        mode = self.config.file_mode if mode is None else mode
        path = os.fspath(path)

        info = self._stat("ensure-file", path)
        if info is not None:
            if NodeKind.from_mode(info.st_mode) is NodeKind.DIRECTORY:
                raise TypeMismatchError("ensure-file", f"failed: {path} is a directory", path)
            return

        try:
            self.ensure_dir(_parent(path), self.config.ancestor_mode)
        except FSError as exc:
            raise rewrap("ensure-file", "ensure directory", exc, path) from exc

        try:
            fd = os.open(path, os.O_CREAT | os.O_WRONLY, mode)
        except OSError as exc:
            raise from_os_error("ensure-file", "create file", exc, path) from exc
        os.close(fd)
        logger.debug("[LocalFS] Created file %s (mode %o)", path, mode)

    def ensure_dir(self, path: PathLike, mode: Optional[int] = None) -> None:
        """Create a directory, and its missing parents, unless one exists."""
        mode = self.config.dir_mode if mode is None else mode
        path = os.fspath(path)

        info = self._stat("ensure-dir", path)
        if info is not None:
            if NodeKind.from_mode(info.st_mode) is not NodeKind.DIRECTORY:
                raise TypeMismatchError("ensure-dir", f"failed: {path} is a file", path)
            return

        try:
            self.ensure_dir(_parent(path), self.config.ancestor_mode)
        except FSError as exc:
            raise rewrap("ensure-dir", "ensure parent directory", exc, path) from exc

        try:
            os.mkdir(path, mode)
        except OSError as exc:
            raise from_os_error("ensure-dir", "create directory", exc, path) from exc
        logger.debug("[LocalFS] Created directory %s (mode %o)", path, mode)

    # =========================================================================
    # Listing
    # =========================================================================

    def read_dir(self, path: PathLike) -> List[str]:
        """Names of the entries in a directory. The order is not guaranteed."""
        try:
            return os.listdir(path)
        except OSError as exc:
            raise from_os_error("read-dir", "open directory", exc, path) from exc

    def read_dir_rec(self, path: PathLike) -> List[str]:
        """
        Paths of every file below a directory. The order is not guaranteed.

        Returned paths are path joined with the components below it.
        Directories are not listed. Any error during the walk aborts it
        and nothing is returned.

        Symlinks are never followed: a symlink to a directory is reported
        as a file, like any other non-directory entry. An entry whose type
        cannot be determined while scanning is also reported as a file,
        since os.walk does not surface that error.
        """
        path = os.fspath(path)
        try:
            info = os.lstat(path)
        except OSError as exc:
            raise from_os_error("read-dir-rec", "walk directory", exc, path) from exc

        # A file root is the only entry of its own walk
        if not stat.S_ISDIR(info.st_mode):
            return [path]

        def _abort(exc: OSError) -> None:
            raise exc

        files = []
        try:
            for dirpath, dirnames, filenames in os.walk(path, onerror=_abort):
                files.extend(os.path.join(dirpath, name) for name in filenames)
                # os.walk lists symlinked directories as dirs but never enters them
                files.extend(
                    os.path.join(dirpath, name) for name in dirnames
                    if os.path.islink(os.path.join(dirpath, name))
                )
        except OSError as exc:
            raise from_os_error("read-dir-rec", "walk directory", exc, path) from exc

        return files

    # =========================================================================
    # Reads
    # =========================================================================

    def get_size(self, path: PathLike) -> int:
        """Size of a file in bytes, from its metadata."""
        try:
            return os.stat(path).st_size
        except OSError as exc:
            raise from_os_error("get-size", "get file stat", exc, path) from exc

    def read_bytes(self, path: PathLike) -> bytes:
        """
        Read file contents as bytes.

        The size is queried once, before reading. If the file grows while
        it is read only the queried size is returned; if it shrinks, the
        tail of the result is zero bytes. Concurrent writers are not
        guarded against.
        """
        try:
            handle = open(path, "rb")
        except OSError as exc:
            raise from_os_error("read-bytes", "open file", exc, path) from exc

        with handle:
            try:
                size = self.get_size(path)
            except FSError as exc:
                raise rewrap("read-bytes", "get file size", exc, path) from exc

            content = bytearray(size)
            view = memoryview(content)
            total = 0
            while total < size:
                try:
                    count = handle.readinto(view[total:])
                except OSError as exc:
                    raise from_os_error("read-bytes", "read file", exc, path) from exc
                if not count:
                    break  # End of file reached
                total += count

        return bytes(content)

    def read_text(self, path: PathLike) -> str:
        """Read file contents as text, without validating the encoding."""
        try:
            content = self.read_bytes(path)
        except FSError as exc:
            raise rewrap("read-text", "read file", exc, path) from exc

        return content.decode(self.config.encoding, self.config.text_errors)

    def read_json(self, path: PathLike, model: Optional[Type[T]] = None) -> Any:
        """
        Read a JSON file and decode it.

        Example:

            settings = fs.read_json("settings.json", Settings)

        Args:
            path: File to read
            model: If given, a dataclass built from the decoded object, or a
                   type the decoded value must be an instance of

        Returns:
            The decoded value, or an instance of model
        """
        try:
            content = self.read_bytes(path)
        except FSError as exc:
            raise rewrap("read-json", "read file", exc, path) from exc

        try:
            value = json.loads(content)
        except ValueError as exc:
            raise SerializationError("read-json", f"failed to unmarshal content: {exc}", path) from exc

        if model is None:
            return value
        return self._decode_into(value, model, path)

    def _decode_into(self, value: Any, model: Type[T], path: PathLike) -> T:
        """Fit a decoded JSON value to the requested model type."""
        try:
            return _decode(value, model)
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                "read-json", f"failed to unmarshal content into {_type_name(model)}: {exc}", path
            ) from exc

    # =========================================================================
    # Writes
    # =========================================================================

    def write_bytes(self, path: PathLike, content: bytes,
                    options: Optional[WriteOptions] = None) -> None:
        """
        Create or truncate a file and write content to it.

        options.mode is applied only when the file is created; missing
        parent directories are not created.
        """
        mode = self.config.write_mode
        if options is not None and options.mode is not None:
            mode = options.mode

        flags = os.O_WRONLY | os.O_CREAT | os.O_TRUNC | getattr(os, "O_BINARY", 0)
        try:
            fd = os.open(path, flags, mode)
        except OSError as exc:
            raise from_os_error("write-bytes", "create file", exc, path) from exc

        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(content)
        except OSError as exc:
            raise from_os_error("write-bytes", "write content to file", exc, path) from exc

    def write_text(self, path: PathLike, content: str,
                   options: Optional[WriteOptions] = None) -> None:
        """Create or truncate a file and write text to it."""
        data = content.encode(self.config.encoding, self.config.text_errors)
        try:
            self.write_bytes(path, data, options)
        except FSError as exc:
            raise rewrap("write-text", "write content to file", exc, path) from exc

    def write_json(self, path: PathLike, value: Any,
                   options: Optional[WriteOptions] = None) -> None:
        """Create or truncate a file and write value to it as compact JSON."""
        try:
            encoded = json.dumps(
                value,
                default=_encode_default,
                separators=(",", ":"),
                ensure_ascii=False,
                allow_nan=False,
            )
        except (TypeError, ValueError) as exc:
            raise SerializationError("write-json", f"failed to marshal content: {exc}", path) from exc

        try:
            self.write_bytes(path, encoded.encode("utf-8"), options)
        except FSError as exc:
            raise rewrap("write-json", "write file", exc, path) from exc
