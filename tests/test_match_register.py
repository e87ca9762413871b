"""Tests for match register queries."""

from __future__ import annotations

import pytest

from strscanner import Scanner, UnknownGroupError

TIMESTAMP = "Timestamp: Fri Dec 12 1975 14:39"
POSITIONAL = r"(\w+) (\w+) (\d+) "
NAMED = r"(?P<date>(?P<day>\w+) (?P<month>\w+) (?P<year>\d+)) "


@pytest.fixture
def timestamp() -> Scanner:
    s = Scanner(TIMESTAMP)
    s.scan("Timestamp: ")
    return s


class TestGroupAt:
    """Single group lookup by index or name."""

    def test_positional(self, timestamp: Scanner) -> None:
        timestamp.scan(POSITIONAL)
        assert timestamp.group_at(0) == "Fri Dec 12 "
        assert timestamp.group_at(1) == "Fri"
        assert timestamp.group_at(3) == "12"
        assert timestamp.group_at(-1) == "12"
        assert timestamp.group_at(-3) == "Fri"
        assert timestamp.group_at(-4) == "Fri Dec 12 "

    def test_named(self, timestamp: Scanner) -> None:
        timestamp.scan(NAMED)
        assert timestamp.group_at("date") == "Fri Dec 12"
        assert timestamp.group_at("day") == "Fri"
        assert timestamp.group_at(-1) == "12"

    def test_named_capture_on_bare_text(self) -> None:
        s = Scanner("Fri Dec 12 ")
        assert s.scan(NAMED) == "Fri Dec 12 "
        assert s.group_at("date") == "Fri Dec 12"
        assert s.group_at("day") == "Fri"
        assert s.group_at(-1) == "12"

    def test_nothing_registered(self) -> None:
        s = Scanner(TIMESTAMP)
        assert s.group_at(0) is None
        assert s.group_at("date") is None

    def test_non_participating_group_is_none(self) -> None:
        s = Scanner("ac")
        assert s.scan("a(b)?c") == "ac"
        assert s.group_at(1) is None
        assert s.captures() == [None]

    @pytest.mark.parametrize("key", [4, -5, 100])
    def test_unknown_index(self, timestamp: Scanner, key: int) -> None:
        timestamp.scan(POSITIONAL)
        with pytest.raises(UnknownGroupError):
            timestamp.group_at(key)

    def test_unknown_name(self, timestamp: Scanner) -> None:
        timestamp.scan(NAMED)
        with pytest.raises(UnknownGroupError) as exc_info:
            timestamp.group_at("hour")
        assert exc_info.value.key == "hour"

    def test_unknown_group_is_lookup_error(self, timestamp: Scanner) -> None:
        timestamp.scan(POSITIONAL)
        with pytest.raises(LookupError):
            timestamp.group_at(9)


class TestGroupsAt:
    """Batch group lookup."""

    def test_positional(self, timestamp: Scanner) -> None:
        timestamp.scan(POSITIONAL)
        assert timestamp.groups_at(0, -1, 2) == ["Fri Dec 12 ", "12", "Dec"]

    def test_named(self, timestamp: Scanner) -> None:
        timestamp.scan(NAMED)
        assert timestamp.groups_at("date", "day", "year", "month") == [
            "Fri Dec 12",
            "Fri",
            "12",
            "Dec",
        ]

    def test_mixed_keys(self, timestamp: Scanner) -> None:
        timestamp.scan(NAMED)
        assert timestamp.groups_at("month", 2) == ["Dec", "Fri"]

    def test_none_as_a_whole_after_failure(self, timestamp: Scanner) -> None:
        timestamp.scan(POSITIONAL)
        assert timestamp.scan(POSITIONAL) is None
        assert timestamp.groups_at(0, -1, 2) is None
        assert timestamp.groups_at("date") is None

    def test_no_keys(self, timestamp: Scanner) -> None:
        timestamp.scan(POSITIONAL)
        assert timestamp.groups_at() == []


class TestCaptures:
    """All positional and named groups at once."""

    def test_captures(self, timestamp: Scanner) -> None:
        timestamp.scan(r"((\w+) (\w+) (\d+)) ")
        assert timestamp.captures() == ["Fri Dec 12", "Fri", "Dec", "12"]
        timestamp.scan(POSITIONAL)
        assert timestamp.captures() is None

    def test_captures_without_groups(self) -> None:
        s = Scanner("abc")
        s.scan("abc")
        assert s.captures() == []
        assert s.named_captures() == {}

    def test_named_captures(self, timestamp: Scanner) -> None:
        timestamp.scan(NAMED)
        assert timestamp.named_captures() == {
            "date": "Fri Dec 12",
            "day": "Fri",
            "month": "Dec",
            "year": "12",
        }
        timestamp.scan(POSITIONAL)
        assert timestamp.named_captures() is None

    def test_named_captures_is_a_copy(self, timestamp: Scanner) -> None:
        timestamp.scan(NAMED)
        captures = timestamp.named_captures()
        assert captures is not None
        captures["day"] = "Mon"
        assert timestamp.group_at("day") == "Fri"


class TestPreAndPostMatch:
    """Text before and after the registered match."""

    def test_pre_and_post_match(self) -> None:
        s = Scanner("a b c d e")
        s.scan(r"\w")
        assert s.pre_match() == ""
        assert s.post_match() == " b c d e"
        s.skip(r"\s")
        assert s.pre_match() == "a"
        assert s.post_match() == "b c d e"
        s.scan("b")
        assert s.pre_match() == "a "
        assert s.post_match() == " c d e"
        s.scan_until("c")
        assert s.pre_match() == "a b "
        assert s.post_match() == " d e"
        assert s.read() == " "
        assert s.pre_match() is None
        assert s.post_match() is None
        s.scan("never match")
        assert s.pre_match() is None
        assert s.post_match() is None

    def test_check_registers_without_moving(self) -> None:
        s = Scanner("a b")
        s.check(r"\w")
        assert s.pre_match() == ""
        assert s.post_match() == " b"
        assert s.position == 0

    def test_reset_and_terminate_clear(self) -> None:
        s = Scanner("a b")
        s.scan("a")
        s.reset()
        assert s.post_match() is None
        s.scan("a")
        s.terminate()
        assert s.pre_match() is None
