"""Application entry points."""

from __future__ import annotations

import sys

from chessgate.settings import AppSettings, configure_logging


def main() -> None:
    """Launch the Chessgate window."""
    from chessgate.ui.bootstrap import run_application

    settings = AppSettings()
    configure_logging(settings)
    sys.exit(run_application(settings=settings))


def console_main() -> None:
    """Play in the terminal."""
    from chessgate.console import run_console

    configure_logging(AppSettings())
    sys.exit(run_console())


if __name__ == "__main__":
    main()
