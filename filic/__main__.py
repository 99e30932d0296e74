"""Module entrypoint for ``python -m filic``.

All argument parsing and dispatch happen in ``filic.cli``.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
