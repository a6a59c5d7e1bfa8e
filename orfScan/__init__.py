""" orfScan: streaming six-frame ORF scanner and translator """
import logging
import sys


__version__ = '0.3.0'

LOGGER_NAME = 'orfScan'
LOG_FORMAT = '[ %(asctime)s ] [ %(levelname)s ] %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logger() -> logging.Logger:
    """ Get the package logger. A stderr handler is attached on first use. """
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
        if logger.level == logging.NOTSET:
            logger.setLevel(logging.INFO)
    return logger

def set_logger_level(level) -> logging.Logger:
    """ Set the level of the package logger. Accepts names such as 'DEBUG'
    or numeric levels. """
    if isinstance(level, str):
        if level.isdigit():
            level = int(level)
        else:
            level = level.upper()
            if not isinstance(logging.getLevelName(level), int):
                raise ValueError(f"Unknown debug level: {level}")
    logger = get_logger()
    logger.setLevel(level)
    return logger
