import logging
import sys
from typing import Optional, Union

from moodlists.config import LOG_LEVEL

from .logging_utils import LOGGER_NAME

_HANDLER_NAME = "moodlists-stdout"


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Attach a stdout handler to the project logger and set its level.

    `level` accepts a logging constant or a name such as "DEBUG"; it defaults
    to MOODLISTS_LOG_LEVEL. Only the `moodlists` logger is touched, so
    uvicorn's own handlers stay as they are. Calling it again only changes
    the level.
    """
    resolved = level if level is not None else LOG_LEVEL
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolved)

    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-7s %(name)s | %(message)s")
        )
        logger.addHandler(handler)
        # Our handler prints these records; stop them reaching root as well.
        logger.propagate = False

    return logger
