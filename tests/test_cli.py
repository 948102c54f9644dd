#!/usr/bin/env python3
# pylint: disable=missing-class-docstring,no-self-use
from __future__ import annotations

import io
import unittest
from unittest import mock

from intervalmap.__main__ import main, parse_assignment, parse_window
from intervalmap.errors import IntervalMapCLIError


def run_cli(*args):
    with mock.patch("sys.stdout", new=io.StringIO()) as fake_out:
        assert main(list(args)) == 0
        return fake_out.getvalue()


class TestCommandLineInterface(unittest.TestCase):
    def test_snippet_only(self):
        assert run_cli("2:5:B", "5:8:C") == "[2, B][5, C][8, A]\n"
        assert run_cli() == "\n"

    def test_window(self):
        assert run_cli("2:5:B", "5:8:C", "4:6:D", "--window", "0:9") == "[2, B][4, D][6, C][8, A]\nAABBDDCCA\n"
        assert run_cli("--base", "x", "--window=-2:2", "--", "-1:1:y") == "[-1, y][1, x]\nxyyx\n"

    def test_data_window(self):
        assert run_cli("1:2:B", "--window", "0:3", "--data") == "[1, B][2, A]\n0 -> A\n1 -> B\n2 -> A\n"

    def test_malformed_assignment(self):
        with mock.patch("sys.stderr", new=io.StringIO()) as fake_err, self.assertRaises(SystemExit) as cm:
            main(["2:5"])
        assert cm.exception.code == 2
        assert "Malformed assignment" in fake_err.getvalue()

    def test_parsers(self):
        assert parse_assignment("-3:10:hello") == (-3, 10, "hello")
        assert parse_window("0:4") == range(0, 4)
        with self.assertRaises(IntervalMapCLIError):
            parse_assignment("a:b:c")
        with self.assertRaises(IntervalMapCLIError):
            parse_window("0:")


if __name__ == "__main__":
    unittest.main()
