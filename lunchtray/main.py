"""Entry point for the lunch-tray Textual app."""

from __future__ import annotations

import logging
from pathlib import Path

from lunchtray.config import DEBUG_LOG_PATH, LOG_LEVEL
from lunchtray.lunch_tray_app import LunchTrayApp

logger = logging.getLogger(__name__)


def configure_logging(log_path: str = DEBUG_LOG_PATH, level: str = LOG_LEVEL) -> None:
    """Send log records to the debug log file; the terminal belongs to the TUI.

    An unknown level name falls back to INFO instead of stopping startup.
    """
    path = Path(log_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    requested = getattr(logging, level.upper(), None)
    resolved = requested if isinstance(requested, int) else logging.INFO
    logging.basicConfig(
        filename=path,
        level=resolved,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        force=True,
    )
    if not isinstance(requested, int):
        logger.warning("unknown log level %r, using INFO", level)


def main() -> None:
    """Run the Textual application."""
    configure_logging()
    LunchTrayApp().run()


if __name__ == "__main__":
    main()
