import pytest

from termcore.extchars import ExtendedCharTable, extended_char_hash


def test_hash_of_empty_sequence_is_zero():
    assert extended_char_hash([]) == 0


def test_hash_of_single_point_is_the_point():
    assert extended_char_hash([0x301]) == 0x301


def test_hash_stays_within_16_bits():
    key = extended_char_hash([0xFFFF] * 50)
    assert 0 <= key <= 0xFFFF


def test_hash_rejects_out_of_range_point():
    with pytest.raises(ValueError):
        extended_char_hash([0x10000])


def test_create_uses_hash_as_key_without_collision():
    table = ExtendedCharTable()
    points = [ord("e"), 0x301]
    assert table.create_extended_char(points) == extended_char_hash(points)


def test_round_trip_lookup():
    table = ExtendedCharTable()
    points = [ord("a"), 0x300, 0x308]
    key = table.create_extended_char(points)
    assert table.lookup_extended_char(key) == tuple(points)


def test_same_sequence_gives_same_key_once():
    table = ExtendedCharTable()
    first = table.create_extended_char([ord("o"), 0x303])
    second = table.create_extended_char([ord("o"), 0x303])
    assert first == second
    assert len(table) == 1


def test_collision_probes_next_key():
    table = ExtendedCharTable()
    a = [0, 31]
    b = [1, 0]
    assert extended_char_hash(a) == extended_char_hash(b)
    key_a = table.create_extended_char(a)
    key_b = table.create_extended_char(b)
    assert key_b == (key_a + 1) & 0xFFFF
    assert table.lookup_extended_char(key_a) == tuple(a)
    assert table.lookup_extended_char(key_b) == tuple(b)
    assert table.create_extended_char(b) == key_b


def test_lookup_unknown_key_is_empty():
    assert ExtendedCharTable().lookup_extended_char(1234) == ()


def test_matches():
    table = ExtendedCharTable()
    key = table.create_extended_char([ord("u"), 0x308])
    assert table.matches(key, [ord("u"), 0x308])
    assert not table.matches(key, [ord("u")])
    assert not table.matches(key + 1, [ord("u"), 0x308])


def test_create_rejects_bad_point():
    with pytest.raises(ValueError):
        ExtendedCharTable().create_extended_char([-1])