"""Allow ``python -m walker`` to behave like the CLI entry point."""

from walker.cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
