"""Logging setup."""

import logging
import sys

from corkboard.config import Config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(config: Config, console: bool = True) -> None:
    """Configure the root logger from config.

    Logs go to config.log_file when set, else to stderr. With console=False
    and no log file nothing is configured, which keeps a full-screen UI clean.
    """
    if config.log_file:
        logging.basicConfig(format=LOG_FORMAT, filename=config.log_file, level=config.level, force=True)
    elif console:
        logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr, level=config.level, force=True)
    else:
        logging.getLogger("corkboard").addHandler(logging.NullHandler())
