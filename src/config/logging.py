"""Logging setup for the application process."""

import logging


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging format and level."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
