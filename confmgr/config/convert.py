"""Locale-free conversion of raw option text to typed values."""

import math
import re
from enum import Enum
from typing import Any, Optional


class OptionType(Enum):
    """Closed set of types an option can be read as."""

    STRING = "string"
    INT8 = "int8"
    UINT8 = "uint8"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    FLOAT = "float"
    BOOL = "bool"

    @classmethod
    def for_default(cls, default: Any) -> "OptionType":
        """Infers the option type from a default value.

        bool is checked before int since bool subclasses int.

        Raises:
            TypeError: If the default is not a str, bool, int or float.
        """
        if isinstance(default, bool):
            return cls.BOOL
        if isinstance(default, int):
            return cls.INT64
        if isinstance(default, float):
            return cls.FLOAT
        if isinstance(default, str):
            return cls.STRING
        raise TypeError(f"Unsupported option default type: {type(default).__name__}")


# (min, max) per integer type
INTEGER_RANGES = {
    OptionType.INT8: (-(2**7), 2**7 - 1),
    OptionType.UINT8: (0, 2**8 - 1),
    OptionType.INT16: (-(2**15), 2**15 - 1),
    OptionType.UINT16: (0, 2**16 - 1),
    OptionType.INT32: (-(2**31), 2**31 - 1),
    OptionType.UINT32: (0, 2**32 - 1),
    OptionType.INT64: (-(2**63), 2**63 - 1),
    OptionType.UINT64: (0, 2**64 - 1),
}

TRUE_STRINGS = {"1", "true", "yes", "y", "on"}
FALSE_STRINGS = {"0", "false", "no", "n", "off"}

FLOAT32_MAX = 3.4028234663852886e38

_SIGNED_INT_RE = re.compile(r"-?[0-9]+")
_UNSIGNED_INT_RE = re.compile(r"[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def string_to_int(text: str, option_type: OptionType) -> Optional[int]:
    """Parses a base-10 integer that must fit the range of option_type."""
    low, high = INTEGER_RANGES[option_type]
    pattern = _UNSIGNED_INT_RE if low == 0 else _SIGNED_INT_RE
    if not pattern.fullmatch(text):
        return None
    value = int(text)
    if value < low or value > high:
        return None
    return value


def string_to_float(text: str) -> Optional[float]:
    """Parses a decimal float within single-precision range; 'nan', 'inf' and '1_0' are rejected."""
    if not _FLOAT_RE.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value) or abs(value) > FLOAT32_MAX:
        return None
    return value


def string_to_bool(text: str) -> Optional[bool]:
    """Parses 1/true/yes/y/on and 0/false/no/n/off, case-insensitively."""
    lowered = text.lower()
    if lowered in TRUE_STRINGS:
        return True
    if lowered in FALSE_STRINGS:
        return False
    return None


def string_to(text: str, option_type: OptionType) -> Optional[Any]:
    """Converts raw option text to option_type.

    Args:
        text: The raw option value.
        option_type: Target type.

    Returns:
        The converted value, or None if the text does not represent one.
    """
    if option_type is OptionType.STRING:
        return text
    if option_type is OptionType.BOOL:
        return string_to_bool(text)
    if option_type is OptionType.FLOAT:
        return string_to_float(text)
    return string_to_int(text, option_type)


def to_string(value: Any) -> str:
    """Formats a value the way it would be written in a config file."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)
