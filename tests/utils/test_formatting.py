from __future__ import annotations

import unittest

from intervalmap import IntervalMap
from intervalmap.utils import formatting
from intervalmap.utils.formatting import map_snippet, data_slice, value_slice


class TestFormatting(unittest.TestCase):
    """
    Test the diagnostic renderings of interval maps.
    """

    # pylint: disable=no-self-use

    def test_map_snippet(self):
        imap = IntervalMap("A")
        assert map_snippet(imap) == ""

        imap.assign(1, 3, "B")
        imap.assign(3, 4, "C")
        assert map_snippet(imap) == "[1, B][3, C][4, A]"

    def test_data_slice(self):
        imap = IntervalMap("A")
        imap.assign(1, 3, "B")

        assert data_slice(imap, range(0, 4)) == "0 -> A\n1 -> B\n2 -> B\n3 -> A\n"
        assert data_slice(imap, range(0)) == ""

    def test_value_slice(self):
        imap = IntervalMap(0)
        imap.assign(-1, 2, 7)

        assert value_slice(imap, range(-3, 4)) == "0077700"
        assert value_slice(imap, [5, 0, -1]) == "077"

    def test_ansi_color(self):
        assert formatting.ansi_color("x", None) == "x"
        assert formatting.ansi_color("x", "red") == "\u001b[31mx\u001b[0m"


if __name__ == "__main__":
    unittest.main()
