"""Render a dataview into the Geneos Toolkit text format.

Layout::

    row_header,column1,column2
    <!>headline1,value1
    row1,value1,value2
    row2,,value2

Missing cells are written as empty fields, so every data line carries one
field per column. Commas inside any text are written as ``\\,``; nothing else
is escaped. The last data line has no trailing newline.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geneos_toolkit.models import CellKey, Dataview

HEADLINE_PREFIX = "<!>"
FIELD_SEPARATOR = ","
LINE_TERMINATOR = "\n"


def escape_commas(text: str) -> str:
    return text.replace(",", "\\,")


def _header_line(row_header: str, columns: Sequence[str]) -> str:
    fields = [escape_commas(row_header), *(escape_commas(column) for column in columns)]
    return FIELD_SEPARATOR.join(fields)


def _headline_lines(order: Sequence[str], headlines: Mapping[str, str]) -> Iterator[str]:
    for name in order:
        yield f"{HEADLINE_PREFIX}{escape_commas(name)}{FIELD_SEPARATOR}{escape_commas(headlines[name])}"


def _data_lines(
    rows: Sequence[str],
    columns: Sequence[str],
    values: Mapping["CellKey", str],
) -> Iterator[str]:
    for row in rows:
        fields = [escape_commas(row)]
        for column in columns:
            value = values.get((row, column))
            fields.append("" if value is None else escape_commas(value))
        yield FIELD_SEPARATOR.join(fields)


def render(dataview: "Dataview") -> str:
    """Return the toolkit text for ``dataview``. Pure and idempotent."""
    parts = [_header_line(dataview.row_header, dataview.column_order) + LINE_TERMINATOR]
    parts.extend(
        line + LINE_TERMINATOR
        for line in _headline_lines(dataview.headline_order, dataview.headlines)
    )
    parts.append(
        LINE_TERMINATOR.join(_data_lines(dataview.row_order, dataview.column_order, dataview.values))
    )
    return "".join(parts)


__all__ = ["escape_commas", "render"]
