"""Logging setup shared by the API process and Celery workers."""

import logging

from sneakervault.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger once for the process."""
    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(level=level_name, format=LOG_FORMAT)
    logging.getLogger("sneakervault").setLevel(level_name)
    # httpx logs every request at INFO, which drowns out our own messages
    logging.getLogger("httpx").setLevel(logging.WARNING)
