"""
Logging setup.

Modules log through ``logging.getLogger(__name__)``; entry points call
``configure_logging`` once to attach a handler to the root logger.
"""

import logging
from typing import Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Union[str, int] = logging.INFO) -> None:
    """
    Configure root logging with a single timestamped stream handler.

    Safe to call more than once: the level is updated but no second
    handler is added.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    root.setLevel(level)
