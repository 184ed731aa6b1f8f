"""Domain port definitions for adapters."""

from __future__ import annotations

from .grid import GridAddressResolver

__all__ = ["GridAddressResolver"]
