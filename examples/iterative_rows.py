"""Build a dataview from a collection, one row per item."""

from dataclasses import dataclass

from geneos_toolkit import Dataview, Row, print_result_and_exit


@dataclass
class Process:
    id: int
    name: str
    cpu: float
    mem: int


PROCESSES = [
    Process(id=101, name="nginx", cpu=1.2, mem=1024),
    Process(id=102, name="postgres", cpu=4.5, mem=4096),
    Process(id=103, name="redis", cpu=0.8, mem=512),
]


def main() -> None:
    builder = Dataview.builder().set_row_header("pid").add_headline("source", "system_monitor")

    for proc in PROCESSES:
        builder.add_row(
            Row(proc.id)
            .add_cell("name", proc.name)
            .add_cell("cpu", f"{proc.cpu:.1f}%")
            .add_cell("memory", f"{proc.mem}MB")
        )

    print_result_and_exit(builder)


if __name__ == "__main__":
    main()
