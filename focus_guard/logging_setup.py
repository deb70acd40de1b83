"""Log file setup shared by the dispatcher and the monitor process."""

import logging
from pathlib import Path
from typing import Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Package logger; modules log through children of it
LOGGER_NAME = "focus_guard"


class AppendFileHandler(logging.Handler):
    """
    A logging handler that opens the log file, appends one line and closes it
    again for every record.

    Two processes (the dispatcher and the launchd-supervised monitor) write the
    same file without coordination, so no handle is kept between records.
    """

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        """
        Initialize the handler.

        Args:
            path: The log file to append to
            encoding: Text encoding of the log file
        """
        super().__init__()
        self.path = Path(path)
        self.encoding = encoding

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = self.format(record)
            with open(self.path, "a", encoding=self.encoding) as f:
                f.write(line + "\n")
        except Exception:
            self.handleError(record)


def setup_logging(log_file: Union[str, Path], level: int = logging.INFO) -> logging.Logger:
    """
    Configure the focus guard logger to write to a single append-only file.
    Re-running it replaces the previous handlers instead of duplicating them.

    Args:
        log_file: Path of the shared log file (its directory is created)
        level: Minimum level written to the file

    Returns:
        The configured package logger
    """
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = AppendFileHandler(path)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    return logger
