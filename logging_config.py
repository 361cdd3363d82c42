"""Logging configuration.

Installs a single stdout handler on the root logger with a
``timestamp | level | logger | message`` format.
"""

import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger; safe to call once per application."""
    log_level = getattr(logging, str(level).upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers.clear()
    root.addHandler(handler)

    # werkzeug logs every request at INFO
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
