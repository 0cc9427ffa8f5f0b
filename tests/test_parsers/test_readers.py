from datetime import datetime
from enum import Enum

import pytest

from declargs.exceptions import InvalidReaderError
from declargs.parser import (
    ArgReader,
    ArgWriter,
    AssociativeArgReader,
    AssociativeArgWriter,
    ReaderProtocol,
    SequenceArgReader,
    SequenceArgWriter,
    WriterProtocol,
)


class Mode(Enum):
    FAST = "fast"
    SLOW = "slow"


def test_arg_reader_strips_whitespace():
    assert ArgReader(int)(" 42\n") == 42
    assert ArgReader()("  hello  ") == "hello"


def test_arg_reader_accepts_typing_forms():
    assert ArgReader(int | str)("abc") == "abc"
    assert ArgReader(Mode)("slow") is Mode.SLOW


def test_arg_reader_rejects_non_callable_type():
    with pytest.raises(InvalidReaderError):
        ArgReader("int")


def test_arg_reader_raises_value_error():
    with pytest.raises(ValueError):
        ArgReader(int)("twelve")


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, "true"),
        (False, "false"),
        (12, "12"),
        (1.5, "1.5"),
        ("text", "text"),
        (Mode.FAST, "fast"),
        (datetime(2024, 1, 2, 3, 4, 5), "2024-01-02T03:04:05"),
    ],
)
def test_arg_writer(value, expected):
    assert ArgWriter()(value) == expected


def test_readers_satisfy_protocols():
    assert isinstance(ArgReader(int), ReaderProtocol)
    assert isinstance(SequenceArgReader(), ReaderProtocol)
    assert isinstance(ArgWriter(), WriterProtocol)
    assert isinstance(SequenceArgWriter(), WriterProtocol)


def test_sequence_reader_keeps_order():
    assert SequenceArgReader(ArgReader(int))("3.1.2.1") == [3, 1, 2, 1]


def test_sequence_reader_skips_empty_segments():
    assert SequenceArgReader(ArgReader(int))("3..1.") == [3, 1]
    assert SequenceArgReader(ArgReader(int))("") == []


def test_sequence_reader_custom_delimiter():
    reader = SequenceArgReader(ArgReader(float), delimiter=",")
    assert reader("1.5,2.5") == [1.5, 2.5]


def test_sequence_reader_fails_whole_read():
    with pytest.raises(ValueError) as excinfo:
        SequenceArgReader(ArgReader(int))("1.2.x.4")
    assert "'x'" in str(excinfo.value)


def test_associative_reader_coalesces_duplicates():
    assert AssociativeArgReader(ArgReader(int))("3.1.3.2") == {1, 2, 3}


def test_associative_reader_fails_whole_read():
    with pytest.raises(ValueError):
        AssociativeArgReader(ArgReader(int))("1.two")


def test_reader_rejects_empty_delimiter():
    with pytest.raises(InvalidReaderError):
        SequenceArgReader(ArgReader(int), delimiter="")


def test_sequence_writer():
    assert SequenceArgWriter()([1, 2, 3]) == "1.2.3"
    assert SequenceArgWriter(delimiter=",")(["a", "b"]) == "a,b"
    assert SequenceArgWriter()([]) == ""


def test_associative_writer_sorts():
    assert AssociativeArgWriter()({3, 1, 2}) == "1.2.3"


def test_writer_rejects_non_callable():
    with pytest.raises(InvalidReaderError):
        SequenceArgWriter(writer=42)
