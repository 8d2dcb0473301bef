"""Incremental construction of :class:`~geneos_toolkit.models.Dataview`."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import cmp_to_key
from typing import Any

from geneos_toolkit.exceptions import BuilderConsumedError, MissingRowHeader, MissingValue
from geneos_toolkit.models import CellKey, Dataview, OrderedSet, Row


class DataviewBuilder:
    """Accumulate a row header, headlines and cell values, then ``build()``.

    Every mutating method updates the builder in place and returns it, so
    calls can be chained or issued one at a time in a loop::

        builder = DataviewBuilder().set_row_header("pid")
        for proc in processes:
            builder.add_row(Row(proc.pid).add_cell("name", proc.name))
        view = builder.build()

    Rows and columns are ordered by first appearance across all inserted
    values; writing the same ``(row, column)`` again replaces the value but
    keeps its position. A builder can be built exactly once.
    """

    __slots__ = ("_row_header", "_headlines", "_values", "_columns", "_rows", "_consumed")

    def __init__(self) -> None:
        self._row_header: str | None = None
        # dicts keep first-insertion order and overwrite in place
        self._headlines: dict[str, str] = {}
        self._values: dict[CellKey, str] = {}
        self._columns: OrderedSet[str] = OrderedSet()
        self._rows: OrderedSet[str] = OrderedSet()
        self._consumed = False

    def _ensure_open(self) -> None:
        if self._consumed:
            raise BuilderConsumedError()

    # ------------------------------------------------------------------
    # Header / headlines
    # ------------------------------------------------------------------

    def set_row_header(self, row_header: object) -> "DataviewBuilder":
        """Set the mandatory row header label. The last call wins."""
        self._ensure_open()
        self._row_header = str(row_header)
        return self

    def add_headline(self, key: object, value: object) -> "DataviewBuilder":
        """Add or replace a headline. Order is fixed by the first insert of ``key``."""
        self._ensure_open()
        self._headlines[str(key)] = str(value)
        return self

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    def add_value(self, row: object, column: object, value: object) -> "DataviewBuilder":
        """Set the cell at ``row``/``column``, recording first-seen order."""
        self._ensure_open()
        row_name, column_name = str(row), str(column)
        self._columns.add(column_name)
        self._rows.add(row_name)
        self._values[(row_name, column_name)] = str(value)
        return self

    def add_row(self, row: Row) -> "DataviewBuilder":
        """Add every cell of ``row`` in the row's own order.

        A row without cells registers nothing and does not appear in the output.
        """
        self._ensure_open()
        for column, value in row.cells:
            self.add_value(row.name, column, value)
        return self

    def add_rows(self, rows: Iterable[Row]) -> "DataviewBuilder":
        self._ensure_open()
        for row in rows:
            self.add_row(row)
        return self

    # ------------------------------------------------------------------
    # Row ordering (opt-in; default is insertion order)
    # ------------------------------------------------------------------

    def sort_rows(self) -> "DataviewBuilder":
        """Sort rows ascending by name."""
        self._ensure_open()
        self._rows.sort()
        return self

    def sort_rows_by(self, key: Callable[[str], Any]) -> "DataviewBuilder":
        """Sort rows ascending by ``key(row_name)``; ties keep insertion order."""
        self._ensure_open()
        self._rows.sort(key=key)
        return self

    def sort_rows_with(self, compare: Callable[[str, str], int]) -> "DataviewBuilder":
        """Sort rows with a three-way comparator; ties keep insertion order.

        ``compare(a, b)`` returns a negative number when ``a`` sorts first,
        zero when they are equal and a positive number otherwise.
        """
        self._ensure_open()
        self._rows.sort(key=cmp_to_key(compare))
        return self

    # ------------------------------------------------------------------
    # Finalization
    # ------------------------------------------------------------------

    def build(self) -> Dataview:
        """Validate and freeze the accumulated state.

        Raises:
            MissingRowHeader: ``set_row_header`` was never called.
            MissingValue: no cell value was added; headlines alone are not enough.
            BuilderConsumedError: ``build`` was already called on this builder.

        The builder is consumed whether or not validation succeeds.
        """
        self._ensure_open()
        self._consumed = True

        if self._row_header is None:
            raise MissingRowHeader()
        if not self._values:
            raise MissingValue()

        return Dataview(
            row_header=self._row_header,
            headlines=self._headlines,
            headline_order=tuple(self._headlines),
            values=self._values,
            column_order=self._columns.to_tuple(),
            row_order=self._rows.to_tuple(),
        )

    @property
    def consumed(self) -> bool:
        return self._consumed

    def __repr__(self) -> str:
        state = "consumed" if self._consumed else "open"
        return (
            f"DataviewBuilder({state}, row_header={self._row_header!r}, "
            f"headlines={len(self._headlines)}, rows={len(self._rows)}, columns={len(self._columns)})"
        )


__all__ = ["DataviewBuilder"]
