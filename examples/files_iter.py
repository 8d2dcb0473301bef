"""List files in a directory, one row per entry."""

import sys
import tempfile
from pathlib import Path

from geneos_toolkit import Dataview, DataviewBuilder, Row, print_result_and_exit


def _kind(path: Path) -> str:
    if path.is_dir():
        return "dir"
    if path.is_file():
        return "file"
    return "other"


def build_listing(directory: Path) -> DataviewBuilder:
    builder = Dataview.builder().set_row_header("file").add_headline("example", "files_iter")

    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        builder.add_row(
            Row(entry.name)
            .add_cell("kind", _kind(entry))
            .add_cell("size_bytes", entry.stat().st_size)
        )

    return builder


def main() -> None:
    if len(sys.argv) > 1:
        print_result_and_exit(build_listing(Path(sys.argv[1])))

    # Deterministic demo directory
    with tempfile.TemporaryDirectory() as temp:
        root = Path(temp)
        (root / "alpha.txt").write_bytes(b"a")
        (root / "beta.log").write_bytes(b"bb")
        (root / "gamma.bin").write_bytes(b"ccc")
        dataview = build_listing(root).build()

    print_result_and_exit(dataview)


if __name__ == "__main__":
    main()
