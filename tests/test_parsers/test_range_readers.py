import pytest

from declargs.exceptions import InvalidReaderError
from declargs.parser import (
    ArgReader,
    AssociativeArgRangeReader,
    RangeDomain,
    SequenceArgRangeReader,
)


def test_fill_between_values():
    reader = SequenceArgRangeReader(RangeDomain.integers(1, 10))
    assert reader("2..8.10") == [2, 3, 4, 5, 6, 7, 8, 10]


def test_trailing_open_range_stops_before_maximum():
    reader = SequenceArgRangeReader(RangeDomain.integers(1, 5))
    assert reader("3.") == [3, 4]


def test_leading_open_range_seeds_minimum():
    reader = SequenceArgRangeReader(RangeDomain.integers(0, 10))
    assert reader(".4") == [0, 1, 2, 3, 4]


@pytest.mark.parametrize("text, expected", [("5.", [5]), ("7.", [7])])
def test_exhausted_trailing_range_is_a_no_op(text, expected):
    reader = SequenceArgRangeReader(RangeDomain.integers(1, 5))
    assert reader(text) == expected


def test_lone_marker_covers_whole_domain():
    reader = SequenceArgRangeReader(RangeDomain.integers(1, 4))
    assert reader(".") == [1, 2, 3]


def test_empty_text_is_empty_collection():
    assert SequenceArgRangeReader(RangeDomain.integers(1, 4))("") == []
    assert AssociativeArgRangeReader(RangeDomain.integers(1, 4))("") == set()


def test_plain_values_without_ranges():
    reader = SequenceArgRangeReader(RangeDomain.integers(1, 100))
    assert reader("9.3.27") == [9, 3, 27]


def test_multiple_ranges():
    reader = SequenceArgRangeReader(RangeDomain.integers(1, 10))
    assert reader("1..3.6..8") == [1, 2, 3, 6, 7, 8]


def test_custom_delimiter():
    reader = SequenceArgRangeReader(RangeDomain.integers(0, 10), delimiter=",")
    assert reader("1,,4") == [1, 2, 3, 4]


def test_malformed_segment_fails_whole_read():
    reader = SequenceArgRangeReader(RangeDomain.integers(1, 10))
    with pytest.raises(ValueError):
        reader("2..x.10")


def test_set_range_coalesces_overlaps():
    reader = AssociativeArgRangeReader(RangeDomain.integers(1, 10))
    assert reader("1..5.3..6") == {1, 2, 3, 4, 5, 6}


def test_set_range_fills_from_last_inserted_value():
    reader = AssociativeArgRangeReader(RangeDomain.integers(1, 10))
    assert reader("5.1..3") == {1, 2, 3, 5}


def test_set_trailing_and_leading_ranges():
    assert AssociativeArgRangeReader(RangeDomain.integers(1, 10))("8.") == {8, 9}
    assert AssociativeArgRangeReader(RangeDomain.integers(2, 10))(".4") == {2, 3, 4}


def test_set_malformed_segment_fails_whole_read():
    with pytest.raises(ValueError):
        AssociativeArgRangeReader(RangeDomain.integers(1, 10))("1..3.?")


def test_custom_successor():
    letters = RangeDomain(
        ArgReader(str), "a", "z", successor=lambda letter: chr(ord(letter) + 1)
    )
    assert SequenceArgRangeReader(letters)("a..e") == ["a", "b", "c", "d", "e"]
    assert SequenceArgRangeReader(letters)("x.") == ["x", "y"]


def test_float_domain_steps_by_one():
    reader = SequenceArgRangeReader(RangeDomain(ArgReader(float), 0.0, 4.0), ",")
    assert reader("0.5,,3.5") == [0.5, 1.5, 2.5, 3.5]


def test_domain_rejects_inverted_bounds():
    with pytest.raises(InvalidReaderError):
        RangeDomain.integers(10, 1)


def test_domain_rejects_incomparable_bounds():
    with pytest.raises(InvalidReaderError):
        RangeDomain(ArgReader(int), 1, "z")


def test_range_reader_requires_domain():
    with pytest.raises(InvalidReaderError):
        SequenceArgRangeReader(ArgReader(int))


@pytest.mark.parametrize("text", ["0,,inf", "-inf,,2", "1,,9", "nan,,2", "1,,nan"])
def test_float_fill_outside_domain_fails(text):
    reader = SequenceArgRangeReader(RangeDomain(ArgReader(float), 0.0, 4.0), ",")
    with pytest.raises(ValueError):
        reader(text)


@pytest.mark.parametrize("text", ["1..500", "0..3", "0."])
def test_integer_fill_outside_domain_fails(text):
    with pytest.raises(ValueError):
        SequenceArgRangeReader(RangeDomain.integers(1, 10))(text)
    with pytest.raises(ValueError):
        AssociativeArgRangeReader(RangeDomain.integers(1, 10))(text)


def test_out_of_domain_values_without_fill_are_kept():
    reader = SequenceArgRangeReader(RangeDomain.integers(1, 10))
    assert reader("0.42") == [0, 42]


def test_successor_that_does_not_advance_fails():
    stuck = RangeDomain(ArgReader(int), 0, 10, successor=lambda value: value)
    with pytest.raises(ValueError):
        SequenceArgRangeReader(stuck)("1..5")
    with pytest.raises(ValueError):
        AssociativeArgRangeReader(stuck)("3.")
