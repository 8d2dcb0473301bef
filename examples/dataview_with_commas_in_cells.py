"""Commas inside cell values are escaped as ``\\,`` in the output."""

from geneos_toolkit import Dataview


def main() -> None:
    dataview = (
        Dataview.builder()
        .set_row_header("Name")
        .add_headline("Example", "Dataview with Commas")
        .add_value("Alice", "Age", "30")
        .add_value("Alice", "Location", "Los Angeles, CA")
        .add_value("Bob", "Age", "25")
        .add_value("Bob", "Location", "New York, NY")
        .add_value("Charlie", "Age", "35")
        .add_value("Charlie", "Location", "San Francisco, CA")
        .build()
    )
    print(dataview)


if __name__ == "__main__":
    main()
