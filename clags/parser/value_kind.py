# Clags Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ValueKind`, the enum naming every scalar type a Clags argument can be
converted to.

Supports alias coercion for shorthand or config-friendly values, and knows the
inclusive range of each fixed-width integer kind.

Example:
    ValueKind("int8")   → ValueKind.INT8
    ValueKind("raw")    → ValueKind.STRING (via alias)
    ValueKind("float")  → ValueKind.DOUBLE (via alias)
"""
from __future__ import annotations

from enum import Enum


class ValueKind(Enum):
    """
    The conversion applied to a raw token before it is stored.

    Members:
        STRING: Store the token verbatim (default).
        BOOL: Accept exactly `true` or `false`.
        INT8: Signed 8-bit integer.
        UINT8: Unsigned 8-bit integer.
        INT32: Signed 32-bit integer.
        UINT32: Unsigned 32-bit integer.
        DOUBLE: Finite double precision float.
        CUSTOM: Delegate to a caller-supplied converter.

    Aliases:
        - "none", "raw", "str" → "string"
        - "float" → "double"
        - "boolean" → "bool"
    """

    STRING = "string"
    BOOL = "bool"
    INT8 = "int8"
    UINT8 = "uint8"
    INT32 = "int32"
    UINT32 = "uint32"
    DOUBLE = "double"
    CUSTOM = "custom"

    @classmethod
    def choices(cls) -> list[ValueKind]:
        """Return a list of all value kinds."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "none": "string",
            "raw": "string",
            "str": "string",
            "float": "double",
            "boolean": "bool",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ValueKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def is_integer(self) -> bool:
        return self in _INTEGER_RANGES

    @property
    def is_typed(self) -> bool:
        """True for every kind that does more than pass the token through."""
        return self is not ValueKind.STRING

    @property
    def range(self) -> tuple[int, int]:
        """Inclusive `(minimum, maximum)` of an integer kind."""
        try:
            return _INTEGER_RANGES[self]
        except KeyError:
            raise ValueError(f"{self} is not an integer kind") from None

    def __str__(self) -> str:
        """Return the string representation of the value kind."""
        return self.value


_INTEGER_RANGES: dict[ValueKind, tuple[int, int]] = {
    ValueKind.INT8: (-(2**7), 2**7 - 1),
    ValueKind.UINT8: (0, 2**8 - 1),
    ValueKind.INT32: (-(2**31), 2**31 - 1),
    ValueKind.UINT32: (0, 2**32 - 1),
}
