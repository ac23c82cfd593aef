"""
Logging configuration.
"""
import logging
import sys

_handler = None


def setup_logging(level="WARNING"):
    """Send log records to stderr so they stay apart from the rule listing on stdout."""
    global _handler
    log_level = getattr(logging, str(level).upper(), logging.WARNING)

    logger = logging.getLogger()
    logger.setLevel(log_level)

    # Replace our handler when called again
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setLevel(log_level)
    _handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(_handler)
    # requests/urllib3 are noisy at DEBUG
    logging.getLogger("urllib3").setLevel(max(log_level, logging.INFO))
