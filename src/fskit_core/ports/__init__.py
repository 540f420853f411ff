"""
Ports (interfaces) for FSKit.

These define the contracts that adapters must implement.
This enables dependency injection and testing with mocks.
"""

from .fs_port import FSPort

__all__ = ["FSPort"]
