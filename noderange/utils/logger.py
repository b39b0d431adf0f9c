import logging

import noderange.utils.flags


class LogFormatter(logging.Formatter):
    grey = "\x1b[38;20m"
    white = "\x1b[37;0m"
    yellow = "\x1b[33;20m"
    red = "\x1b[31;20m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"
    datefmt = "%Y-%m-%d %H:%M:%S"
    format = "%(asctime)s - %(levelname)s - %(message)s (%(filename)s:%(lineno)d)"

    FORMATS = {
        logging.DEBUG: grey + format + reset,
        logging.INFO: white + format + reset,
        logging.WARNING: yellow + format + reset,
        logging.ERROR: red + format + reset,
        logging.CRITICAL: bold_red + format + reset,
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno)
        formatter = logging.Formatter(log_fmt, datefmt=self.datefmt)
        return formatter.format(record)


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        # Logs share stderr with error messages; stdout carries only results.
        handler = logging.StreamHandler()
        handler.setFormatter(LogFormatter())
        logger.addHandler(handler)
    logger.setLevel(noderange.utils.flags.get_log_level())
    logger.propagate = False
    return logger


def set_level(level: str | int):
    LOGGER.setLevel(level.upper() if isinstance(level, str) else level)


LOGGER = get_logger("noderange")
