"""Console logging for silicon-tvl."""

import logging
import sys

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Chatty third-party loggers: held at WARNING for DEBUG runs, opened up for TRACE
NOISY_LOGGERS = ("web3", "urllib3")


class ColoredFormatter(logging.Formatter):
    """Paints the level name with an ANSI color per level."""

    LEVEL_COLORS = {
        "TRACE": "\033[90m",
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"
    BOLD = "\033[1m"

    def format(self, record: logging.LogRecord) -> str:
        original = record.levelname
        color = self.LEVEL_COLORS.get(original)
        if color:
            record.levelname = f"{color}{self.BOLD}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def resolve_level(log_level: str) -> int:
    """Numeric level for a name such as "debug" or "trace"; unknown names map to INFO."""
    name = log_level.upper()
    if name == "TRACE":
        return TRACE
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(log_level: str = "INFO") -> None:
    """Route all logging to stdout with colored levels at ``log_level``."""
    name = log_level.upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ColoredFormatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logging.basicConfig(level=resolve_level(name), handlers=[handler], force=True)

    if name in ("DEBUG", "TRACE"):
        noisy_level = logging.WARNING if name == "DEBUG" else TRACE
        for logger_name in NOISY_LOGGERS:
            logging.getLogger(logger_name).setLevel(noisy_level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
