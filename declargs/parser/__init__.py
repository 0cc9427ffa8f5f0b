"""
declargs — declarative command-line arguments

Licensed under the MIT License. See LICENSE file for details.
"""

from .args import Args, ParseResult, debug, read, read_file, read_stream, usage
from .argument import Arg, FileArg, FlagArg, RangeArg, ValueArg
from .readers import (
    ArgReader,
    ArgWriter,
    AssociativeArgRangeReader,
    AssociativeArgReader,
    AssociativeArgWriter,
    RangeDomain,
    ReaderProtocol,
    SequenceArgRangeReader,
    SequenceArgReader,
    SequenceArgWriter,
    WriterProtocol,
)
from .registry import ArgRegistry, Heading, get_registry, heading

__all__ = [
    "Arg",
    "ArgReader",
    "ArgRegistry",
    "ArgWriter",
    "Args",
    "AssociativeArgRangeReader",
    "AssociativeArgReader",
    "AssociativeArgWriter",
    "FileArg",
    "FlagArg",
    "Heading",
    "ParseResult",
    "RangeArg",
    "RangeDomain",
    "ReaderProtocol",
    "SequenceArgRangeReader",
    "SequenceArgReader",
    "SequenceArgWriter",
    "ValueArg",
    "WriterProtocol",
    "debug",
    "get_registry",
    "heading",
    "read",
    "read_file",
    "read_stream",
    "usage",
]
