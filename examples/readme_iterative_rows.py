"""Rows arrive in arbitrary order and are sorted descending by name."""

from geneos_toolkit import Dataview, Row, print_result_and_exit

HOSTS = ["beta", "alpha", "gamma"]


def _descending(a: str, b: str) -> int:
    return (a < b) - (a > b)


def main() -> None:
    builder = Dataview.builder().set_row_header("host").add_headline("source", "inventory")

    for name in HOSTS:
        builder.add_row(Row(name).add_cell("status", "up").add_cell("cpu", "n/a"))

    print_result_and_exit(builder.sort_rows_with(_descending))


if __name__ == "__main__":
    main()
