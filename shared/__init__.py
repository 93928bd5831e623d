"""
Shared Module
=============

Infrastructure used by the cryptogram tool: TOML configuration, Rich
console, structured logging and NumPy-backed statistics.
"""

from shared.config import ToolConfig

__all__ = ["ToolConfig"]
