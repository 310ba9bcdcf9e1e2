import logging

from geomarker.core.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    level = getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # pymongo is chatty at DEBUG (heartbeats, topology events)
    logging.getLogger("pymongo").setLevel(max(level, logging.INFO))
