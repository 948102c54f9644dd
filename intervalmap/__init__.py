# pylint: disable=wrong-import-position
from __future__ import annotations

__version__ = "1.0.0"

from .utils.formatting import setup_terminal

setup_terminal()
del setup_terminal

# let's set up some bootstrap logging
import logging

logging.getLogger("intervalmap").addHandler(logging.NullHandler())
from .misc.loggers import Loggers

loggers = Loggers()
del Loggers
del logging

from .interval_map import IntervalMap
from .errors import (
    IntervalMapError,
    IntervalMapValueError,
    IntervalMapSliceError,
    IntervalMapCLIError,
)
from .utils.formatting import map_snippet, data_slice, value_slice

# now that everything is imported, pick up the loggers of all modules
loggers.load_all_loggers()


__all__ = (
    "IntervalMap",
    "IntervalMapCLIError",
    "IntervalMapError",
    "IntervalMapSliceError",
    "IntervalMapValueError",
    "data_slice",
    "loggers",
    "map_snippet",
    "value_slice",
)
