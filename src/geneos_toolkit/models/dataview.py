"""The finalized, immutable dataview."""

from __future__ import annotations

from collections.abc import Collection, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from geneos_toolkit.exceptions import DataviewError, MissingValue

if TYPE_CHECKING:
    from geneos_toolkit.builder import DataviewBuilder

CellKey = tuple[str, str]


def _is_exact_order(order: tuple[str, ...], names: Collection[str]) -> bool:
    return len(order) == len(names) and set(order) == set(names)


@dataclass(frozen=True, slots=True)
class Dataview:
    """A Geneos dataview: row header, headlines and a sparse row x column grid.

    Instances are normally produced by :meth:`DataviewBuilder.build` and never
    change afterwards, so they can be shared freely between threads. Direct
    construction is validated the same way: at least one value, and
    ``headline_order``, ``row_order`` and ``column_order`` each naming every
    headline, row and column exactly once. Rendering with
    ``str(view)`` gives the toolkit text format::

        cpu,percentUtilisation,percentIdle
        <!>numOnlineCpus,2
        Average_cpu,3.75 %,96.25 %
        cpu_0,3.25 %,96.75 %

    Rows and columns appear in the order they were first added (unless the
    rows were explicitly sorted on the builder); headlines appear in the order
    they were first added.
    """

    row_header: str
    headlines: Mapping[str, str] = field(default_factory=dict)
    headline_order: tuple[str, ...] = ()
    values: Mapping[CellKey, str] = field(default_factory=dict, repr=False)
    column_order: tuple[str, ...] = ()
    row_order: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "headlines", MappingProxyType(dict(self.headlines)))
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))
        object.__setattr__(self, "headline_order", tuple(self.headline_order))
        object.__setattr__(self, "column_order", tuple(self.column_order))
        object.__setattr__(self, "row_order", tuple(self.row_order))
        self._validate()

    def _validate(self) -> None:
        if not self.values:
            raise MissingValue()
        if not _is_exact_order(self.headline_order, self.headlines):
            raise DataviewError("headline_order must list every headline exactly once")
        if not _is_exact_order(self.row_order, {row for row, _ in self.values}):
            raise DataviewError("row_order must list every row in values exactly once")
        if not _is_exact_order(self.column_order, {column for _, column in self.values}):
            raise DataviewError("column_order must list every column in values exactly once")

    @staticmethod
    def builder() -> "DataviewBuilder":
        """Start a new :class:`DataviewBuilder`."""
        from geneos_toolkit.builder import DataviewBuilder

        return DataviewBuilder()

    # ------------------------------------------------------------------
    # Lookups (unknown keys return None)
    # ------------------------------------------------------------------

    def headline(self, name: str) -> str | None:
        return self.headlines.get(name)

    def value(self, row: str, column: str) -> str | None:
        return self.values.get((row, column))

    def as_rows(self) -> Iterator[tuple[str, dict[str, str]]]:
        """Yield ``(row, {column: value})`` in display order, omitting empty cells."""
        for row in self.row_order:
            cells = {
                column: self.values[(row, column)]
                for column in self.column_order
                if (row, column) in self.values
            }
            yield row, cells

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_text(self) -> str:
        from geneos_toolkit.rendering import render

        return render(self)

    def __str__(self) -> str:
        return self.to_text()

    def __len__(self) -> int:
        return len(self.row_order)

    def __iter__(self) -> Iterator[str]:
        return iter(self.row_order)

    __hash__ = None  # type: ignore[assignment]


__all__ = ["CellKey", "Dataview"]
