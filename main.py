"""Command-line entry point: `python main.py A.ss01/E.ss01`."""

from vnglyph.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
