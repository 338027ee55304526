"""Line parser for `key = value` config files.

Grammar per line, after trimming surrounding whitespace:

- empty, `# comment` or `[Section]`: ignored
- `key = value  # trailing comment`: one option; every `"` in the value is
  removed, so `Name = "My Server"` yields `My Server`

Parsing never raises. Problems that make the whole file unusable come back
as `ParseResult.error`; malformed lines and duplicate keys are logged and
skipped.
"""

import inspect
import logging
from typing import Iterable, Optional

from ..constants import LOGGER_NAME
from .errors import EmptyFileError, FileOpenError, LineReadError, ParseResult


def _log_error(logger: logging.Logger, message: str):
    caller = ""
    current_frame = inspect.currentframe()
    if current_frame and current_frame.f_back:
        caller = current_frame.f_back.f_code.co_name
    logger.error(message, extra={"log_type": "error", "caller_info": f"[{caller}]"})


def is_ignored(line: str) -> bool:
    """True for trimmed lines that carry no option: blank, comment or section header."""
    return not line or line[0] in "#["


def parse_line(line: str) -> Optional[tuple[str, str]]:
    """Splits one trimmed, non-ignored line into a (key, value) pair.

    Returns:
        The trimmed key and de-quoted value, or None for a malformed line.
    """
    found = line.find("#")
    if found != -1:
        line = line[:found]

    equal_pos = line.find("=")
    if equal_pos == -1 or equal_pos == len(line) - 1:
        return None

    key = line[:equal_pos].strip()
    value = line[equal_pos + 1 :].strip().replace('"', "")
    return key, value


def parse_lines(lines: Iterable[str], source: str, logger: Optional[logging.Logger] = None) -> ParseResult:
    """Parses already opened lines into a file-local option mapping.

    Args:
        lines: Iterable of text lines (a file object works).
        source: Name used in diagnostics and errors, usually the file path.
        logger: Where to send per-line diagnostics. Defaults to the 'config' logger.

    Returns:
        A ParseResult holding the options, or a LineReadError / EmptyFileError.
    """
    logger = logger or logging.getLogger(LOGGER_NAME)
    options: dict[str, str] = {}
    line_number = 0
    iterator = iter(lines)

    while True:
        line_number += 1
        try:
            line = next(iterator)
        except StopIteration:
            break
        except (OSError, UnicodeDecodeError):
            return ParseResult(source, error=LineReadError(source, line_number))

        line = line.strip()
        if is_ignored(line):
            continue

        entry = parse_line(line)
        if entry is None:
            _log_error(logger, f"> Config::LoadFile: Failure to read line number {line_number} in file '{source}'. Skip this line")
            continue

        key, value = entry

        # First occurrence wins within one file
        if key in options:
            _log_error(logger, f"> Config::LoadFile: Duplicate key name '{key}' in config file '{source}'")
            continue

        options[key] = value

    if not options:
        return ParseResult(source, error=EmptyFileError(source))

    return ParseResult(source, options=options)


def parse_file(path: str, logger: Optional[logging.Logger] = None) -> ParseResult:
    """Opens and parses one config file.

    Args:
        path: Path to the config file.
        logger: Where to send per-line diagnostics. Defaults to the 'config' logger.

    Returns:
        A ParseResult; its error is a FileOpenError if the file cannot be opened.
    """
    try:
        f = open(path, "r", encoding="utf-8")
    except OSError:
        return ParseResult(path, error=FileOpenError(path))

    with f:
        return parse_lines(f, path, logger)
