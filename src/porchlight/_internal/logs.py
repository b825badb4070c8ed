"""Console logging for the ``porchlight`` logger tree.

Library modules only call ``logging.getLogger("porchlight.*")``; the CLI
calls :func:`setup_logging` once so the startup line reaches stdout.
"""

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s  %(message)s"


def setup_logging(level: str = "info") -> logging.Logger:
    """Attach a single stdout handler to the ``porchlight`` logger.

    Safe to call more than once: the level is updated and the handler
    is not duplicated.
    """
    logger = logging.getLogger("porchlight")
    logger.setLevel(level.upper())

    if not any(getattr(h, "_porchlight", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._porchlight = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
