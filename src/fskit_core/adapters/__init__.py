"""
Adapters for FSKit.

Implementations of the port interfaces.
"""

from .local_fs import LocalFS

__all__ = ["LocalFS"]
