from __future__ import annotations

import pytest

from geneos_toolkit import Dataview, DataviewBuilder, MissingRowHeader, MissingValue, Row
from geneos_toolkit.exceptions import BuilderConsumedError, DataviewError


def _basic() -> Dataview:
    return (
        DataviewBuilder()
        .set_row_header("ID")
        .add_headline("AverageAge", "30")
        .add_value("1", "Name", "Alice")
        .add_value("1", "Age", "30")
        .build()
    )


def test_single_row_accessors() -> None:
    view = _basic()

    assert view.row_header == "ID"
    assert view.headline("AverageAge") == "30"
    assert view.value("1", "Name") == "Alice"
    assert view.value("1", "Age") == "30"
    assert view.row_order == ("1",)
    assert view.column_order == ("Name", "Age")


def test_missing_row_header_fails_regardless_of_values() -> None:
    builder = DataviewBuilder().add_value("row1", "col1", "value1").add_value("row2", "col2", "value2")

    with pytest.raises(MissingRowHeader) as excinfo:
        builder.build()

    assert str(excinfo.value) == "The Dataview must have a row header"
    assert isinstance(excinfo.value, DataviewError)


def test_missing_values_fails() -> None:
    with pytest.raises(MissingValue) as excinfo:
        DataviewBuilder().set_row_header("header").build()

    assert str(excinfo.value) == "The Dataview must have at least one value"


def test_headlines_alone_are_not_values() -> None:
    builder = DataviewBuilder().set_row_header("header").add_headline("headline1", "value1")

    with pytest.raises(MissingValue):
        builder.build()


def test_row_header_checked_before_values() -> None:
    with pytest.raises(MissingRowHeader):
        DataviewBuilder().build()


def test_empty_row_header_is_valid() -> None:
    view = DataviewBuilder().set_row_header("").add_value("r", "c", "v").build()

    assert view.row_header == ""


def test_set_row_header_last_write_wins() -> None:
    view = DataviewBuilder().set_row_header("first").set_row_header("second").add_value("r", "c", "v").build()

    assert view.row_header == "second"


def test_order_is_first_seen_regardless_of_cell_order() -> None:
    view = (
        DataviewBuilder()
        .set_row_header("id")
        .add_value("r1", "c1", "a")
        .add_value("r2", "c2", "b")
        .add_value("r1", "c3", "c")
        .add_value("r2", "c1", "d")
        .add_value("r1", "c2", "e")
        .build()
    )

    assert view.column_order == ("c1", "c2", "c3")
    assert view.row_order == ("r1", "r2")


def test_overwrite_keeps_position() -> None:
    view = (
        DataviewBuilder()
        .set_row_header("id")
        .add_value("r", "c", "v1")
        .add_value("r", "other", "x")
        .add_value("r", "c", "v2")
        .build()
    )

    assert view.value("r", "c") == "v2"
    assert view.column_order.index("c") == 0
    assert view.column_order == ("c", "other")


def test_headline_overwrite_keeps_position() -> None:
    view = (
        DataviewBuilder()
        .set_row_header("id")
        .add_headline("Baz", "Foo")
        .add_headline("AlertDetails", "this is red alert")
        .add_headline("Baz", 42)
        .add_value("r", "c", "v")
        .build()
    )

    assert view.headline_order == ("Baz", "AlertDetails")
    assert view.headline("Baz") == "42"


def test_values_are_converted_to_text() -> None:
    view = DataviewBuilder().set_row_header("pid").add_value(101, "cpu", 1.5).add_headline("count", 3).build()

    assert view.value("101", "cpu") == "1.5"
    assert view.headline("count") == "3"


def test_add_row_applies_cells_in_order() -> None:
    row1 = Row("process1").add_cell("Status", "Running").add_cell("CPU", "2.5%")
    row2 = Row("process2").add_cell("Status", "Stopped").add_cell("CPU", "0.0%")

    view = Dataview.builder().set_row_header("Process").add_row(row1).add_row(row2).build()

    assert view.row_order == ("process1", "process2")
    assert view.column_order == ("Status", "CPU")
    assert view.value("process2", "CPU") == "0.0%"


def test_add_row_duplicate_column_last_value_wins() -> None:
    row = Row("r").add_cell("a", "1").add_cell("b", "2").add_cell("a", "3")

    view = DataviewBuilder().set_row_header("id").add_row(row).build()

    assert view.value("r", "a") == "3"
    assert view.column_order == ("a", "b")


def test_add_empty_row_registers_nothing() -> None:
    view = (
        DataviewBuilder()
        .set_row_header("id")
        .add_row(Row("ghost"))
        .add_value("real", "c", "v")
        .build()
    )

    assert view.row_order == ("real",)


def test_only_empty_rows_is_missing_value() -> None:
    with pytest.raises(MissingValue):
        DataviewBuilder().set_row_header("id").add_row(Row("ghost")).build()


def test_add_rows_accepts_iterable() -> None:
    rows = (Row(name).add_cell("v", "1") for name in ("x", "y"))

    view = DataviewBuilder().set_row_header("id").add_rows(rows).build()

    assert view.row_order == ("x", "y")


def _unsorted() -> DataviewBuilder:
    return (
        Dataview.builder()
        .set_row_header("id")
        .add_value("b", "col", "1")
        .add_value("a", "col", "1")
        .add_value("c", "col", "1")
    )


def test_default_row_order_is_insertion_order() -> None:
    assert _unsorted().build().row_order == ("b", "a", "c")


def test_sort_rows_ascending() -> None:
    assert _unsorted().sort_rows().build().row_order == ("a", "b", "c")


def test_sort_rows_by_length_is_stable() -> None:
    view = (
        Dataview.builder()
        .set_row_header("id")
        .add_row(Row("long").add_cell("v", "1"))
        .add_row(Row("mid").add_cell("v", "1"))
        .add_row(Row("s").add_cell("v", "1"))
        .add_row(Row("two").add_cell("v", "1"))
        .add_row(Row("abc").add_cell("v", "1"))
        .sort_rows_by(len)
        .build()
    )

    assert view.row_order == ("s", "mid", "two", "abc", "long")


def test_sort_rows_with_reverse_comparator() -> None:
    view = (
        Dataview.builder()
        .set_row_header("id")
        .add_row(Row("alpha").add_cell("v", "1"))
        .add_row(Row("beta").add_cell("v", "1"))
        .add_row(Row("gamma").add_cell("v", "1"))
        .sort_rows_with(lambda a, b: (a < b) - (a > b))
        .build()
    )

    assert view.row_order == ("gamma", "beta", "alpha")


def test_sort_rows_with_ties_keep_insertion_order() -> None:
    view = _unsorted().sort_rows_with(lambda a, b: 0).build()

    assert view.row_order == ("b", "a", "c")


def test_sorting_does_not_touch_columns_or_values() -> None:
    view = (
        DataviewBuilder()
        .set_row_header("id")
        .add_value("b", "z", "1")
        .add_value("a", "y", "2")
        .sort_rows()
        .build()
    )

    assert view.column_order == ("z", "y")
    assert view.value("b", "z") == "1"
    assert view.value("a", "y") == "2"


def test_rows_added_after_sort_are_appended() -> None:
    view = _unsorted().sort_rows().add_value("0", "col", "1").build()

    assert view.row_order == ("a", "b", "c", "0")


def test_builder_is_consumed_after_success() -> None:
    builder = DataviewBuilder().set_row_header("id").add_value("r", "c", "v")
    builder.build()

    assert builder.consumed
    with pytest.raises(BuilderConsumedError):
        builder.add_value("r2", "c", "v")
    with pytest.raises(BuilderConsumedError):
        builder.build()


def test_builder_is_consumed_after_failure() -> None:
    builder = DataviewBuilder().add_value("r", "c", "v")

    with pytest.raises(MissingRowHeader):
        builder.build()
    with pytest.raises(BuilderConsumedError):
        builder.set_row_header("id")


def test_dataview_is_not_affected_by_later_builder_state() -> None:
    builder = DataviewBuilder().set_row_header("id").add_value("r", "c", "v")
    view = builder.build()

    with pytest.raises(BuilderConsumedError):
        builder.add_value("r", "c", "changed")

    assert view.value("r", "c") == "v"
