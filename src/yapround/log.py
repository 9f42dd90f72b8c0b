"""Logging helpers.

Library modules log through ``logging.getLogger(__name__)`` and never
install handlers.  Scripts can call ``setup_default_logging()`` to get
a minimal console configuration.
"""

from __future__ import annotations

import logging


def setup_default_logging(level: int | str = "INFO") -> None:
    """Apply ``logging.basicConfig`` once, unless the root logger
    already has handlers."""
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging"]
