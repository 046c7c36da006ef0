import re

import pytest

from termcore.filter import Filter, HotSpot, HotSpotType, RegExpFilter, RegExpHotSpot

TEXT = "hello world\nfoo bar\n"
POSITIONS = [0, TEXT.index("\n") + 1]


def _filter(pattern, text=TEXT, positions=POSITIONS):
    flt = RegExpFilter(pattern)
    flt.set_buffer(text, positions)
    flt.process()
    return flt


def _offset(spot, positions=POSITIONS):
    return positions[spot.start_line] + spot.start_column


def test_hot_spot_and_filter_are_abstract():
    with pytest.raises(TypeError):
        HotSpot(0, 0, 0, 0)
    with pytest.raises(TypeError):
        Filter()


def test_regexp_hot_spot_defaults():
    spot = RegExpHotSpot(1, 2, 3, 4)
    assert spot.type is HotSpotType.MARKER
    assert spot.actions() == []
    assert spot.tooltip() == ""
    assert (spot.start_line, spot.start_column, spot.end_line, spot.end_column) == (1, 2, 3, 4)


def test_matches_become_hot_spots_at_their_positions():
    flt = _filter("o+")
    spots = flt.hot_spots()
    assert len(spots) == TEXT.count("o") - 1  # "oo" in "foo" is one match
    for spot in spots:
        found = spot.captured_texts[0]
        assert TEXT[_offset(spot) : _offset(spot) + len(found)] == found


def test_match_on_second_line_starts_there():
    flt = _filter("bar")
    (spot,) = flt.hot_spots()
    assert spot.start_line == 1
    assert spot.captured_texts == ["bar"]
    assert TEXT[_offset(spot) :].startswith("bar")


def test_captured_texts_fill_unmatched_groups_with_empty_strings():
    flt = _filter(r"(a)|(b)", "b", [0])
    (spot,) = flt.hot_spots()
    assert spot.captured_texts == ["b", "", "b"]


def test_pattern_matching_empty_string_finds_nothing():
    assert _filter("a*").hot_spots() == []


def test_zero_length_match_stops_after_first():
    assert len(_filter(r"\b").hot_spots()) == 1


def test_accepts_compiled_pattern():
    flt = _filter(re.compile("WORLD", re.IGNORECASE))
    assert [s.captured_texts[0] for s in flt.hot_spots()] == ["world"]


def test_process_without_buffer_raises():
    with pytest.raises(ValueError):
        RegExpFilter("x").process()


def test_line_column_uses_display_width():
    flt = RegExpFilter("x")
    flt.set_buffer("日本x", [0])
    assert flt.line_column(2) == (0, 4)


def test_line_column_at_line_start():
    flt = RegExpFilter("x")
    flt.set_buffer(TEXT, POSITIONS)
    assert flt.line_column(POSITIONS[1]) == (1, 0)


def test_hot_spot_at_respects_columns():
    flt = RegExpFilter("x")
    spot = RegExpHotSpot(0, 2, 0, 5)
    flt.add_hot_spot(spot)
    assert flt.hot_spot_at(0, 3) is spot
    assert flt.hot_spot_at(0, 2) is spot
    assert flt.hot_spot_at(0, 5) is spot
    assert flt.hot_spot_at(0, 1) is None
    assert flt.hot_spot_at(0, 6) is None
    assert flt.hot_spot_at(1, 3) is None


def test_multi_line_hot_spot_covers_middle_lines():
    flt = RegExpFilter("x")
    spot = RegExpHotSpot(0, 5, 2, 1)
    flt.add_hot_spot(spot)
    assert flt.hot_spot_at(1, 0) is spot
    assert flt.hot_spot_at(2, 0) is spot
    assert flt.hot_spot_at(2, 4) is None
    assert flt.hot_spots_at_line(1) == [spot]


def test_latest_overlapping_hot_spot_wins():
    flt = RegExpFilter("x")
    first = RegExpHotSpot(0, 0, 0, 9)
    second = RegExpHotSpot(0, 3, 0, 6)
    flt.add_hot_spot(first)
    flt.add_hot_spot(second)
    assert flt.hot_spot_at(0, 4) is second
    assert flt.hot_spot_at(0, 8) is first
    assert flt.hot_spots_at_line(0) == [second, first]
    assert flt.hot_spots() == [first, second]


def test_reset_forgets_hot_spots():
    flt = _filter("o")
    assert flt.hot_spots()
    flt.reset()
    assert flt.hot_spots() == []
    assert flt.hot_spot_at(0, 4) is None


def test_new_hot_spot_builds_marker():
    spot = RegExpFilter("x").new_hot_spot(1, 2, 1, 3)
    assert isinstance(spot, RegExpHotSpot)
    assert spot.type is HotSpotType.MARKER
    assert spot.captured_texts == []