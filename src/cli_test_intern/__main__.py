"""Module entry point for `python -m cli_test_intern`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
