"""Row helper for batching cells before they are added to a builder."""

from __future__ import annotations


class Row:
    """A row identifier plus an ordered list of ``(column, value)`` cells.

    Rows have no constraints of their own: the name may be empty and the same
    column may be added more than once. Everything is converted with ``str``
    on the way in::

        row = Row(101).add_cell("name", "nginx").add_cell("cpu", 1.2)
    """

    __slots__ = ("_name", "_cells")

    def __init__(self, name: object) -> None:
        self._name = str(name)
        self._cells: list[tuple[str, str]] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def cells(self) -> tuple[tuple[str, str], ...]:
        return tuple(self._cells)

    def add_cell(self, column: object, value: object) -> "Row":
        """Append a cell, preserving insertion order. Returns ``self``."""
        self._cells.append((str(column), str(value)))
        return self

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"Row(name={self._name!r}, cells={self._cells!r})"


__all__ = ["Row"]
