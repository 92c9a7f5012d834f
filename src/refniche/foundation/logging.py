from __future__ import annotations

import logging
from typing import TextIO

LOGGER_NAME = "refniche"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_refniche_logging(
    *,
    level: int = logging.INFO,
    stream: TextIO | None = None,
    force: bool = False,
) -> logging.Handler | None:
    """
    Send refniche records (degenerate intercepts, non-finite ideal points and
    distances) to a console stream.

    Library modules only create loggers; nothing is emitted until an
    application opts in here or configures logging itself. Without
    ``force`` an existing root or "refniche" handler wins and nothing is
    attached. A handler installed by an earlier call is reused and only its
    level changes.

    Returns:
        The refniche stream handler, or None when existing configuration was
        left alone.
    """
    pkg_logger = logging.getLogger(LOGGER_NAME)
    own = [h for h in pkg_logger.handlers if getattr(h, "_refniche_console", False)]
    if own:
        pkg_logger.setLevel(level)
        return own[0]
    if not force and (logging.getLogger().handlers or pkg_logger.handlers):
        return None

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._refniche_console = True  # type: ignore[attr-defined]
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    pkg_logger.propagate = False
    return handler


__all__ = ["LOGGER_NAME", "configure_refniche_logging"]
