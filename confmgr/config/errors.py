"""Error values produced while parsing config files."""

from dataclasses import dataclass, field
from typing import Optional


class ConfigError(Exception):
    """Base class for errors that make a config file unusable."""

    pass


class FileOpenError(ConfigError):
    """The config file could not be opened."""

    def __init__(self, path: str):
        super().__init__(f"Config::LoadFile: Failed open file '{path}'")
        self.path = path


class LineReadError(ConfigError):
    """A line could not be read (I/O or decoding failure, not end of file)."""

    def __init__(self, path: str, line_number: int):
        super().__init__(f"Config::LoadFile: Failure to read line number {line_number} in file '{path}'")
        self.path = path
        self.line_number = line_number


class EmptyFileError(ConfigError):
    """The config file holds no valid `key = value` entry."""

    def __init__(self, path: str):
        super().__init__(f"Config::LoadFile: Empty file '{path}'")
        self.path = path


@dataclass
class ParseResult:
    """Outcome of parsing one config file.

    Exactly one of `options` (non-empty) or `error` is meaningful: when
    `error` is set, `options` is empty and must not be merged.
    """

    path: str
    options: dict[str, str] = field(default_factory=dict)
    error: Optional[ConfigError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
