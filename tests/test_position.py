"""Test Position advancing, display, and offset lookup."""

import pytest

from scrawlc.tokens import Position


class TestDefault:
    def test_all_zero(self):
        pos = Position()
        assert (pos.index, pos.line, pos.column) == (0, 0, 0)

    def test_display_is_one_based(self):
        assert str(Position()) == "1:1"

    def test_explicit_fields(self):
        pos = Position(1, 2, 3)
        assert pos.index == 1
        assert pos.line == 2
        assert pos.column == 3
        assert str(pos) == "3:4"


class TestAdvance:
    def test_ordinary_characters(self):
        pos = Position().advance("c").advance("h")
        assert pos.index == 2
        assert pos.line == 0
        assert pos.column == 2

    def test_line_feed(self):
        pos = Position().advance("c").advance("h").advance("\n")
        assert pos.index == 3
        assert pos.line == 1
        assert pos.column == 0
        assert str(pos) == "2:1"

    def test_carriage_return_is_a_column(self):
        pos = Position().advance("\r")
        assert pos.line == 0
        assert pos.column == 1

    def test_returns_new_value(self):
        pos = Position()
        pos.advance("a")
        assert pos == Position()

    def test_immutable(self):
        with pytest.raises(AttributeError):
            Position().index = 4  # type: ignore[misc]


class TestLocate:
    def test_start(self):
        assert Position.locate("abc", 0) == Position()

    def test_same_line(self):
        assert Position.locate("abc", 2) == Position(2, 0, 2)

    def test_after_newline(self):
        assert Position.locate("ab\ncd", 3) == Position(3, 1, 0)

    def test_end_of_text(self):
        assert Position.locate("ab\ncd", 5) == Position(5, 1, 2)

    def test_past_end_raises(self):
        with pytest.raises(ValueError):
            Position.locate("abc", 4)

    def test_negative_raises(self):
        with pytest.raises(ValueError):
            Position.locate("abc", -1)
