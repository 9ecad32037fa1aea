"""
Adapters layer - storage integrations.
"""

from .sqlite import SQLITE_TYPE_NAME, register_sqlite_adapters

__all__ = ["SQLITE_TYPE_NAME", "register_sqlite_adapters"]
