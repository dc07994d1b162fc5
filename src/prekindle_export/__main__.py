# src/prekindle_export/__main__.py
"""
Module launcher so `python -m prekindle_export ...` behaves like the CLI.
Examples:
  python -m prekindle_export
  python -m prekindle_export --output events.csv
"""
from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
