"""Headlines are written in the order they were first added."""

from geneos_toolkit import Dataview, print_result_and_exit


def main() -> None:
    builder = (
        Dataview.builder()
        .set_row_header("Process")
        .add_headline("TotalProcesses", 50)
        .add_headline("TotalCache", 300)
        .add_headline("TotalMemory", 1000)
        .add_value("Process 1", "Status", "OK")
    )
    print_result_and_exit(builder)


if __name__ == "__main__":
    main()
