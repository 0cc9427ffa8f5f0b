"""
declargs — declarative command-line arguments

Licensed under the MIT License. See LICENSE file for details.
"""

from .parser import (
    Arg,
    ArgReader,
    ArgRegistry,
    Args,
    ArgWriter,
    AssociativeArgRangeReader,
    AssociativeArgReader,
    AssociativeArgWriter,
    FileArg,
    FlagArg,
    ParseResult,
    RangeArg,
    RangeDomain,
    SequenceArgRangeReader,
    SequenceArgReader,
    SequenceArgWriter,
    ValueArg,
    get_registry,
    heading,
)

__version__ = "0.1.0"

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
    "ParseResult",
    "RangeArg",
    "RangeDomain",
    "SequenceArgRangeReader",
    "SequenceArgReader",
    "SequenceArgWriter",
    "ValueArg",
    "get_registry",
    "heading",
]
