from __future__ import annotations
import logging
import traceback
import zlib

from .config import log_level_from_env
from .testing import is_testing
from ..utils import formatting


class Loggers:
    """
    Implements a loggers manager for intervalmap.
    """

    __slots__ = (
        "_loggers",
        "default_level",
        "handler",
    )

    IN_SCOPE = ("intervalmap",)

    def __init__(self, default_level: int | None = None):
        self.default_level = log_level_from_env() if default_level is None else default_level
        self._loggers = {}
        self.load_all_loggers()

        self.handler = logging.StreamHandler()
        self.handler.setFormatter(CuteFormatter(formatting.ansi_color_enabled))

        if not is_testing and len(logging.root.handlers) == 0:
            self.enable_root_logger()
            logging.root.setLevel(self.default_level)

    def load_all_loggers(self):
        """
        Collect every registered logger of the package.

        Each logger becomes available as an attribute of this instance, with '.' replaced by '_'.
        """
        for name, logger in logging.Logger.manager.loggerDict.items():
            if any(name.startswith(x + ".") or name == x for x in self.IN_SCOPE):
                self._loggers[name] = logger

    def __getattr__(self, k):
        real_k = k.replace("_", ".")
        if real_k in self._loggers:
            return self._loggers[real_k]
        # module names may contain underscores themselves
        for name, logger in self._loggers.items():
            if name.replace(".", "_") == k:
                return logger
        raise AttributeError(k)

    def __dir__(self):
        return list(super().__dir__()) + [name.replace(".", "_") for name in self._loggers]

    def enable_root_logger(self):
        """
        Enable the default stream handler on the root logger.
        """
        logging.root.addHandler(self.handler)

    def disable_root_logger(self):
        """
        Disable the default stream handler on the root logger.
        """
        logging.root.removeHandler(self.handler)

    def setall(self, level):
        for name in self._loggers:
            logging.getLogger(name).setLevel(level)


class CuteFormatter(logging.Formatter):
    """
    A log formatter that can print log messages with colors.
    """

    __slots__ = ("_should_color",)

    LEVEL_COLORS = (
        (logging.CRITICAL, "bright_red"),
        (logging.ERROR, "red"),
        (logging.WARNING, "yellow"),
        (logging.INFO, "blue"),
    )
    NAME_COLORS = ("green", "magenta", "cyan", "blue", "yellow", "red")

    def __init__(self, should_color: bool):
        super().__init__()
        self._should_color: bool = should_color

    def format(self, record: logging.LogRecord):
        name: str = record.name
        level: str = record.levelname
        message: str = record.getMessage()
        # pad before coloring, escape sequences do not take up any room on screen
        name = name.ljust(14)
        level = level.ljust(8)
        if self._should_color:
            for levelno, level_color in self.LEVEL_COLORS:
                if record.levelno >= levelno:
                    level = formatting.ansi_color(level, level_color)
                    break
            name_color = self.NAME_COLORS[zlib.adler32(record.name.encode()) % len(self.NAME_COLORS)]
            name = formatting.ansi_color(name, name_color)
            message = formatting.ansi_color(message, name_color)
        body: str = f"{level} | {self.formatTime(record, self.datefmt) : <23} | {name} | {message}"
        if record.exc_info:
            body += "\n" + "".join(traceback.format_exception(*record.exc_info))[:-1]
        return body
