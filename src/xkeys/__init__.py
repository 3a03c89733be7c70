"""
BIP32 / BIP49 / BIP84 extended key serialization
"""
__version__ = "0.1.0"

import logging
from typing import Optional

import xkeys.config

logging.TRACE = logging.DEBUG - 1
logging.addLevelName(logging.TRACE, "TRACE")


class Logger(logging.getLoggerClass()):
    def trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(logging.TRACE):
            self._log(logging.TRACE, msg, args, **kwargs)


logging.setLoggerClass(Logger)


def init_logging(log_level: Optional[str] = None):
    """
    Initialize logging with a StreamHandler set to log_level
    Args:
        log_level: Optional[str], log level, defaults to config.log_level
    """
    if log_level is None:
        log_level = xkeys.config.config.log_level
    log = logging.getLogger(__name__)
    log.setLevel(logging.TRACE)  # set package logger to lowest level
    formatter = logging.Formatter("[%(asctime)s] %(levelname)s [%(name)s] %(message)s")
    sh = logging.StreamHandler()
    sh.setFormatter(formatter)
    sh.setLevel(getattr(logging, log_level.upper()))
    log.addHandler(sh)
    return log
