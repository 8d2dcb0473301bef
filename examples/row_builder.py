from geneos_toolkit import Dataview, Row, print_result_and_exit


def main() -> None:
    row1 = Row("server-01").add_cell("cpu", "45%").add_cell("memory", "2GB").add_cell("status", "active")
    row2 = Row("server-02").add_cell("cpu", "12%").add_cell("memory", "8GB").add_cell("status", "idle")

    view = (
        Dataview.builder()
        .set_row_header("hostname")
        .add_headline("region", "us-east-1")
        .add_row(row1)
        .add_row(row2)
        .build()
    )
    print_result_and_exit(view)


if __name__ == "__main__":
    main()
