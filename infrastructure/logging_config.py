"""Logging setup for the hotel_reservation logger hierarchy"""
import logging

LOGGER_NAME = "hotel_reservation"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stream handler once and set the level"""
    logger = logging.getLogger(LOGGER_NAME)
    if not any(getattr(h, "_hotel_reservation", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._hotel_reservation = True
        logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger
