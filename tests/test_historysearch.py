import re

from termcore.historysearch import HistorySearch, SearchMatch, find_line_number


class FakeSource:
    def __init__(self, lines):
        self._lines = list(lines)

    def line_count(self):
        return len(self._lines)

    def lines(self, start_line, end_line):
        return self._lines[start_line : end_line + 1]


def matched_text(lines, match):
    assert match.start_line == match.end_line
    return lines[match.start_line][match.start_column : match.end_column + 1]


def test_find_line_number():
    positions = [0, 6, 12, 20]
    assert find_line_number(positions, 0) == 0
    assert find_line_number(positions, 5) == 0
    assert find_line_number(positions, 6) == 1
    assert find_line_number(positions, 13) == 2


def test_find_line_number_single_line():
    assert find_line_number([0], 42) == 0


def test_forward_search_finds_word():
    lines = ["alpha", "beta gamma", "delta"]
    match = HistorySearch(FakeSource(lines), "gamma").search()
    assert match is not None
    assert match.start_line == 1
    assert matched_text(lines, match) == "gamma"


def test_forward_search_skips_before_start():
    lines = ["foo x", "foo y"]
    match = HistorySearch(FakeSource(lines), "foo", True, 1, 0).search()
    assert match is not None
    assert match.start_line == 1
    assert matched_text(lines, match) == "foo"


def test_forward_search_wraps_around():
    lines = ["alpha", "beta", "delta"]
    match = HistorySearch(FakeSource(lines), "alpha", True, 0, 1).search()
    assert match is not None
    assert match.start_line == 0
    assert matched_text(lines, match) == "alpha"


def test_backward_search_finds_previous():
    lines = ["foo x", "foo y", "bar"]
    match = HistorySearch(FakeSource(lines), "foo", False, 0, 1).search()
    assert match is not None
    assert match.start_line == 0
    assert matched_text(lines, match) == "foo"


def test_backward_search_wraps_to_end():
    lines = ["start", "middle", "target end"]
    match = HistorySearch(FakeSource(lines), "target", False, 0, 0).search()
    assert match is not None
    assert match.start_line == 2
    assert matched_text(lines, match) == "target"


def test_no_match_returns_none():
    assert HistorySearch(FakeSource(["abc", "def"]), "xyz").search() is None


def test_empty_pattern_returns_none():
    assert HistorySearch(FakeSource(["abc"]), "").search() is None


def test_compiled_pattern_and_match_across_lines():
    lines = ["one two", "three"]
    pattern = re.compile(r"two\nthr")
    match = HistorySearch(FakeSource(lines), pattern).search()
    assert match is not None
    assert (match.start_line, match.end_line) == (0, 1)
    assert lines[0][match.start_column :] == "two"
    assert lines[1][: match.end_column + 1] == "thr"


def test_match_is_dataclass_value():
    lines = ["xx ab"]
    match = HistorySearch(FakeSource(lines), "ab").search()
    assert match == SearchMatch(3, 0, 4, 0)


def test_search_on_empty_source():
    assert HistorySearch(FakeSource([]), "a").search() is None