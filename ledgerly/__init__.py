"""Mini README: Core package initializer for the Ledgerly finance widget.

This module exposes convenience imports so the interface and CLI can reach
logging helpers without knowing the exact module structure. It stays light
so importing the package never pulls in the web stack.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
