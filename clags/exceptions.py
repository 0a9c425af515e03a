# Clags Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Clags.

Two families exist. `ArgumentSpecError` signals a programming error in a
declared specification and is raised eagerly while the specification is built.
`ArgumentParseError` and its subclasses describe why a concrete argument vector
was rejected; `parse()` catches them and reports the message on stderr.

Exception Hierarchy:
- ClagsError
    ├── ArgumentSpecError
    └── ArgumentParseError
        ├── MissingValueError
        ├── EmptyAssignmentError
        ├── InvalidValueError
        ├── CustomValidationError
        ├── UnknownOptionError
        ├── UnexpectedPositionalError
        └── MissingPositionalError
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Classification of a parse failure."""

    MISSING_VALUE = "missing_value"
    EMPTY_ASSIGNMENT = "empty_assignment"
    INVALID_VALUE = "invalid_value"
    CUSTOM_VALIDATION = "custom_validation"
    UNKNOWN_OPTION = "unknown_option"
    UNEXPECTED_POSITIONAL = "unexpected_positional"
    MISSING_POSITIONAL = "missing_positional"

    def __str__(self) -> str:
        return self.value


class ConversionFailure(Enum):
    """Why a typed conversion was rejected."""

    MALFORMED = "malformed"
    OUT_OF_RANGE = "out_of_range"

    def __str__(self) -> str:
        return self.value


class ClagsError(Exception):
    """Base exception for Clags."""


class ArgumentSpecError(ClagsError):
    """Exception raised when an argument specification is invalid."""


class ArgumentParseError(ClagsError):
    """Exception raised when an argument vector does not match its specification."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingValueError(ArgumentParseError):
    """A valued flag was the last token and had no value after it."""

    kind = ErrorKind.MISSING_VALUE

    def __init__(self, flag: str) -> None:
        super().__init__(f"Optional flag {flag} requires argument!")
        self.flag = flag


class EmptyAssignmentError(ArgumentParseError):
    """A `--flag=` assignment had nothing after the `=`."""

    kind = ErrorKind.EMPTY_ASSIGNMENT

    def __init__(self, flag: str) -> None:
        super().__init__(f"Optional flag {flag} was assigned an empty value!")
        self.flag = flag


class InvalidValueError(ArgumentParseError):
    """A token could not be converted to the declared value kind."""

    kind = ErrorKind.INVALID_VALUE

    def __init__(
        self,
        identity: str,
        token: str,
        message: str,
        reason: ConversionFailure = ConversionFailure.MALFORMED,
    ) -> None:
        super().__init__(message)
        self.identity = identity
        self.token = token
        self.reason = reason


class CustomValidationError(ArgumentParseError):
    """A custom converter rejected a token."""

    kind = ErrorKind.CUSTOM_VALIDATION

    def __init__(self, identity: str, token: str, detail: str = "") -> None:
        message = f"Argument '{identity}': '{token}' does not match custom criteria!"
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)
        self.identity = identity
        self.token = token
        self.detail = detail


class UnknownOptionError(ArgumentParseError):
    """A token with the option prefix matched no declared flag or switch."""

    kind = ErrorKind.UNKNOWN_OPTION

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown option: '{token}'!")
        self.token = token


class UnexpectedPositionalError(ArgumentParseError):
    """More positional tokens were supplied than declared."""

    kind = ErrorKind.UNEXPECTED_POSITIONAL

    def __init__(self, token: str, expected: int, seen: int) -> None:
        super().__init__(
            f"Unknown additional argument: '{token}' "
            f"(expected {expected} positional argument{'s' if expected != 1 else ''}, "
            f"got {seen})!"
        )
        self.token = token
        self.expected = expected
        self.seen = seen


class MissingPositionalError(ArgumentParseError):
    """Input ended before every positional argument was bound."""

    kind = ErrorKind.MISSING_POSITIONAL

    def __init__(self, missing: list[str]) -> None:
        names = " ".join(f"<{name}>" for name in missing)
        super().__init__(f"Missing required arguments: {names}!")
        self.missing = missing
