"""
FSKit Core - Convenience wrappers around basic filesystem operations.

Ensures files and directories exist, reads and writes bytes, text and
JSON, and lists directory contents. Every call goes straight to the host
filesystem; nothing is cached between calls.
"""

__version__ = "0.1.0"

# Lazy imports to avoid loading everything at once
def __getattr__(name):
    if name == "LocalFS":
        from .adapters.local_fs import LocalFS
        return LocalFS
    elif name == "FSPort":
        from .ports.fs_port import FSPort
        return FSPort
    elif name in ("FSConfig", "WriteOptions"):
        from .domain import models
        return getattr(models, name)
    elif name in ("FSError", "NotFoundError", "TypeMismatchError",
                  "FileIOError", "SerializationError"):
        from .domain import errors
        return getattr(errors, name)
    elif name == "fs":
        # importlib, not "from . import fs": the fromlist check would re-enter here
        import importlib
        return importlib.import_module(".fs", __name__)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    "__version__",
    "LocalFS",
    "FSPort",
    "FSConfig",
    "WriteOptions",
    "FSError",
    "NotFoundError",
    "TypeMismatchError",
    "FileIOError",
    "SerializationError",
    "fs",
]
