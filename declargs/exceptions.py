# declargs — declarative command-line arguments — MIT Licensed
"""
Defines the custom exception classes used by declargs.

Parse-time problems (a malformed value, an unreadable file) are never raised:
they are recorded on the offending argument and surfaced through `ParseResult`.
Registration-time problems (duplicate or reserved aliases) terminate the process.
The exceptions below cover misuse of the library itself.

Exception Hierarchy:
- DeclargsError
    ├── InvalidReaderError
    ├── ArgumentScriptError
    └── ArgumentConfigError
"""


class DeclargsError(Exception):
    """Base exception for declargs."""


class InvalidReaderError(DeclargsError):
    """Exception raised when a reader, writer or range domain is not usable."""


class ArgumentScriptError(DeclargsError):
    """Exception raised when an argument script cannot be read."""


class ArgumentConfigError(DeclargsError):
    """Exception raised when an argument declaration file is invalid."""
