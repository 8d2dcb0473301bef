"""Data structures for dataview construction."""

from __future__ import annotations

from .dataview import CellKey, Dataview
from .ordered import OrderedSet
from .row import Row

__all__ = ["CellKey", "Dataview", "OrderedSet", "Row"]
