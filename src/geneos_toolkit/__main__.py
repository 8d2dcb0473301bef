"""Module entrypoint for `python -m geneos_toolkit`."""

from geneos_toolkit.cli.app import main


if __name__ == "__main__":  # pragma: no cover - exercised via CLI tests
    main()
