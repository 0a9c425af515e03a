# Clags Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value conversion for Clags argument parsing.

Every token the parser binds passes through `convert_value`, which dispatches on
the declared `ValueKind` and either returns the typed value or raises an
`ArgumentParseError` subclass describing why the token was rejected. Converters
never touch parser state; the caller decides where the result is stored.

Functions:
- coerce_bool: Accept exactly `true` / `false`.
- coerce_integer: Parse a base-10 integer and check it fits the kind's range.
- coerce_double: Parse a decimal floating point literal and check it is finite.
- coerce_custom: Run a caller-supplied converter.
- convert_value: Dispatch on `ValueKind`.
"""
import math
import re
import sys
from typing import Any, Callable

from clags.exceptions import (
    ArgumentSpecError,
    ConversionFailure,
    CustomValidationError,
    InvalidValueError,
)
from clags.parser.value_kind import ValueKind

Converter = Callable[[str, str], Any]

_INTEGER_PATTERN = re.compile(r"\s*[+-]?\d+")
_DOUBLE_PATTERN = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_MAX_DOUBLE = f"{sys.float_info.max:g}"


def coerce_bool(identity: str, token: str) -> bool:
    """
    Convert `true` or `false` to a boolean.

    Matching is case-sensitive and no other spelling is accepted.

    Raises:
        InvalidValueError: If the token is any other string.
    """
    if token == "true":
        return True
    if token == "false":
        return False
    raise InvalidValueError(
        identity,
        token,
        f"Argument '{identity}': invalid boolean '{token}', expected 'true' or 'false'!",
    )


def coerce_integer(identity: str, token: str, kind: ValueKind) -> int:
    """
    Convert a base-10 integer token and check it fits `kind`.

    Leading whitespace and a sign are accepted. Anything after the digits,
    including whitespace, makes the token malformed.

    Raises:
        InvalidValueError: If the token is malformed or out of range.
    """
    minimum, maximum = kind.range
    if not _INTEGER_PATTERN.fullmatch(token):
        raise InvalidValueError(
            identity,
            token,
            f"Argument '{identity}': '{token}' is not a valid {kind} value!",
        )
    value = int(token)
    if not minimum <= value <= maximum:
        raise InvalidValueError(
            identity,
            token,
            f"Argument '{identity}': {value} is out of range for {kind} "
            f"(valid range is {minimum} to {maximum})!",
            reason=ConversionFailure.OUT_OF_RANGE,
        )
    return value


def coerce_double(identity: str, token: str) -> float:
    """
    Convert a decimal floating point token.

    `inf` and `nan` spellings are not accepted, and a literal whose magnitude
    exceeds the largest finite double is out of range.

    Raises:
        InvalidValueError: If the token is malformed or out of range.
    """
    if not _DOUBLE_PATTERN.fullmatch(token):
        raise InvalidValueError(
            identity,
            token,
            f"Argument '{identity}': '{token}' is not a valid double value!",
        )
    value = float(token)
    if math.isinf(value):
        raise InvalidValueError(
            identity,
            token,
            f"Argument '{identity}': '{token}' is out of range for double "
            f"(valid range is -{_MAX_DOUBLE} to {_MAX_DOUBLE})!",
            reason=ConversionFailure.OUT_OF_RANGE,
        )
    return value


def coerce_custom(identity: str, token: str, converter: Converter) -> Any:
    """
    Run a caller-supplied converter.

    The converter signals rejection by raising `ValueError`; its message becomes
    the detail of the resulting `CustomValidationError`.
    """
    try:
        return converter(identity, token)
    except ValueError as error:
        raise CustomValidationError(identity, token, str(error)) from error


def convert_value(
    identity: str,
    token: str,
    kind: ValueKind = ValueKind.STRING,
    converter: Converter | None = None,
) -> Any:
    """
    Convert `token` to the value `kind` describes.

    Args:
        identity (str): Name or flag spelling of the argument, used in diagnostics.
        token (str): The raw command-line token.
        kind (ValueKind): The declared value kind.
        converter (Converter | None): Required when `kind` is `ValueKind.CUSTOM`.

    Returns:
        Any: The converted value.

    Raises:
        InvalidValueError: If a built-in conversion rejects the token.
        CustomValidationError: If the custom converter rejects the token.
    """
    if kind is ValueKind.STRING:
        return token
    if kind is ValueKind.BOOL:
        return coerce_bool(identity, token)
    if kind.is_integer:
        return coerce_integer(identity, token, kind)
    if kind is ValueKind.DOUBLE:
        return coerce_double(identity, token)
    if kind is ValueKind.CUSTOM:
        if converter is None:
            raise ArgumentSpecError(
                f"Argument '{identity}' has kind 'custom' but no converter"
            )
        return coerce_custom(identity, token, converter)
    assert False, f"Unhandled value kind: {kind}"
