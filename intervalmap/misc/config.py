from __future__ import annotations
import logging
import os
from collections.abc import Mapping


l = logging.getLogger(name=__name__)

### Logging options

# name of the environment variable holding the default log level of the package loggers
LOG_LEVEL_ENV = "INTERVALMAP_LOG_LEVEL"

# log level used when the environment does not specify one
DEFAULT_LOG_LEVEL = logging.WARNING


def log_level_from_env(environ: Mapping[str, str] | None = None) -> int:
    """
    Read the default log level from the environment.

    :param environ: The environment to read from. Defaults to os.environ.
    :return:        A logging level. Both level names ("DEBUG") and numbers ("10") are accepted.
    """
    if environ is None:
        environ = os.environ

    raw = environ.get(LOG_LEVEL_ENV)
    if not raw:
        return DEFAULT_LOG_LEVEL

    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if isinstance(level, int):
        return level

    l.warning(
        "Unknown log level %r in %s, falling back to %s.", raw, LOG_LEVEL_ENV, logging.getLevelName(DEFAULT_LOG_LEVEL)
    )
    return DEFAULT_LOG_LEVEL
