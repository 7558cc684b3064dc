"""Module entry point for `python -m fixed_length_reader`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
