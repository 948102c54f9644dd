from __future__ import annotations

import logging
import sys
import unittest

import intervalmap
from intervalmap.misc.loggers import CuteFormatter, Loggers


class TestLoggers(unittest.TestCase):
    # pylint: disable=no-self-use

    def test_package_loggers_are_collected(self):
        assert intervalmap.loggers.intervalmap is logging.getLogger("intervalmap")
        assert intervalmap.loggers.intervalmap_interval_map is logging.getLogger("intervalmap.interval_map")
        assert "intervalmap_interval_map" in dir(intervalmap.loggers)
        with self.assertRaises(AttributeError):
            _ = intervalmap.loggers.claripy

    def test_setall(self):
        mgr = Loggers(default_level=logging.ERROR)
        logger = logging.getLogger("intervalmap.interval_map")
        old_level = logger.level
        try:
            mgr.setall(logging.DEBUG)
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(old_level)

    def test_root_handler(self):
        mgr = Loggers(default_level=logging.ERROR)
        assert mgr.default_level == logging.ERROR
        mgr.enable_root_logger()
        try:
            assert mgr.handler in logging.root.handlers
        finally:
            mgr.disable_root_logger()
        assert mgr.handler not in logging.root.handlers


class TestCuteFormatter(unittest.TestCase):
    # pylint: disable=no-self-use

    def _record(self, level=logging.WARNING):
        return logging.LogRecord("intervalmap.test", level, __file__, 1, "hello %s", ("world",), None)

    def test_plain(self):
        body = CuteFormatter(False).format(self._record())
        assert body.startswith("WARNING  | ")
        assert body.endswith(" | intervalmap.test | hello world")
        assert "\u001b[" not in body

    def test_colored(self):
        body = CuteFormatter(True).format(self._record(logging.ERROR))
        assert body.startswith("\u001b[31mERROR   \u001b[0m | ")
        assert "hello world" in body

    def test_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord("intervalmap", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())
        body = CuteFormatter(False).format(record)
        assert "ValueError: boom" in body


if __name__ == "__main__":
    unittest.main()
