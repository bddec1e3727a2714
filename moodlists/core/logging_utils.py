import logging

# Project logger, tuned through logging_config
LOGGER_NAME = "moodlists"
logger = logging.getLogger(LOGGER_NAME)


def log_step(message: str) -> None:
    """
    Work about to start (token refresh, catalog call, store mutation).
    """
    logger.info("→ %s", message)


def log_info(message: str) -> None:
    logger.info("%s", message)


def log_success(message: str) -> None:
    logger.info("✅ %s", message)


def log_warning(message: str) -> None:
    """
    Non-fatal problem; the request carries on.
    """
    logger.warning("⚠️ %s", message)


def log_error(message: str) -> None:
    """
    Failure that is about to be raised to the caller.
    """
    logger.error("❌ %s", message)
