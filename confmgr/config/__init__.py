"""Configuration management module.

This package provides config file parsing, the option registry and typed
value conversion. The main ConfigMgr class is re-exported here.
"""

from .convert import OptionType, string_to, to_string
from .core import ConfigMgr
from .errors import ConfigError, EmptyFileError, FileOpenError, LineReadError, ParseResult
from .parser import parse_file, parse_lines

__all__ = [
    "ConfigMgr",
    "OptionType",
    "string_to",
    "to_string",
    "ConfigError",
    "FileOpenError",
    "LineReadError",
    "EmptyFileError",
    "ParseResult",
    "parse_file",
    "parse_lines",
]
