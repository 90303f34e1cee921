"""
Logging setup for the application.

``setup_logging`` attaches a single console handler to the root logger.
Handlers installed by others (test runners, hosting servers) are left
alone. Once ours is attached, calling it again is a no-op, so both
``create_app`` and the CLI can call it without stacking handlers.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
HANDLER_NAME = "clientele"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once at the given level name."""
    root = logging.getLogger()
    if any(h.get_name() == HANDLER_NAME for h in root.handlers):
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
