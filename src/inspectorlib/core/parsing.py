"""
Literal Parsing

Converts raw text typed into a field into a strongly typed value.

Supported families:
- FLOAT: float and numpy floating types (decimal / exponent literals)
- SIGNED / UNSIGNED: int and numpy integer types (base-10, range checked)
- BOOLEAN: bool and numpy.bool_ (edited with a toggle, never parsed)
- STRING: str (any text is accepted unchanged)
"""

from __future__ import annotations

import re
from enum import Enum, auto
from typing import Any

import numpy as np


_FLOAT_LITERAL = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")
_INTEGER_LITERAL = re.compile(r"^[+-]?[0-9]+$")

# Plain Python ints are edited as 64-bit signed values
_PYTHON_INT_INFO = np.iinfo(np.int64)


class ParseError(ValueError):
    """Raised when text is not a valid literal of the requested type."""


class UnsupportedTypeError(TypeError):
    """Raised when a type has no literal family."""


class ValueFamily(Enum):
    """Parsing rule applied to a value type."""

    FLOAT = auto()
    SIGNED = auto()
    UNSIGNED = auto()
    BOOLEAN = auto()
    STRING = auto()


def value_family(value_type: type) -> ValueFamily:
    """
    Get the parsing family for a value type.

    Args:
        value_type: Python or numpy scalar type

    Returns:
        ValueFamily for the type

    Raises:
        UnsupportedTypeError: If the type is not a supported scalar
    """
    if not isinstance(value_type, type):
        raise UnsupportedTypeError(f"{value_type!r} is not a type")

    # bool subclasses int, check it first
    if issubclass(value_type, (bool, np.bool_)):
        return ValueFamily.BOOLEAN
    if issubclass(value_type, (float, np.floating)):
        return ValueFamily.FLOAT
    if issubclass(value_type, np.unsignedinteger):
        return ValueFamily.UNSIGNED
    if issubclass(value_type, (int, np.signedinteger)):
        return ValueFamily.SIGNED
    if issubclass(value_type, str):
        return ValueFamily.STRING
    raise UnsupportedTypeError(f"No literal family for type '{value_type.__name__}'")


def parse_literal(text: str, value_type: type) -> Any:
    """
    Parse text into a value of the given type.

    Args:
        text: Raw text from a text field
        value_type: Target type

    Returns:
        Instance of value_type

    Raises:
        ParseError: If the text is not a valid literal for the type
        UnsupportedTypeError: If the type has no literal family
    """
    family = value_family(value_type)

    if family is ValueFamily.STRING:
        return value_type(text)
    if family is ValueFamily.BOOLEAN:
        return _parse_boolean(text, value_type)
    if family is ValueFamily.FLOAT:
        return _parse_float(text, value_type)
    return _parse_integer(text, value_type)


def _parse_float(text: str, value_type: type) -> Any:
    stripped = text.strip()
    if not _FLOAT_LITERAL.match(stripped):
        raise ParseError(f"'{text}' is not a decimal literal")

    with np.errstate(over="ignore"):
        value = value_type(float(stripped))
    if not np.isfinite(value):
        raise ParseError(f"'{text}' is out of range for {value_type.__name__}")
    return value


def _parse_integer(text: str, value_type: type) -> Any:
    stripped = text.strip()
    if not _INTEGER_LITERAL.match(stripped):
        raise ParseError(f"'{text}' is not an integer literal")

    number = int(stripped)
    info = np.iinfo(value_type) if issubclass(value_type, np.integer) else _PYTHON_INT_INFO
    if not info.min <= number <= info.max:
        raise ParseError(f"{number} is out of range for {value_type.__name__}")
    return value_type(number)


def _parse_boolean(text: str, value_type: type) -> Any:
    lowered = text.strip().lower()
    if lowered in ("true", "1"):
        return value_type(True)
    if lowered in ("false", "0"):
        return value_type(False)
    raise ParseError(f"'{text}' is not a boolean literal")


def format_literal(value: Any) -> str:
    """Canonical text form of a scalar value."""
    return str(value)


def zero_value(value_type: type) -> Any:
    """
    Get the zero/default value of a type.

    Returns None when the type cannot be constructed without arguments.
    """
    try:
        return value_type()
    except (TypeError, ValueError):
        return None
