# Clags Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the specification entries a Clags program declares its command line with.

A specification is an ordered sequence of three entry types:

- `Positional`: identified by its position among the non-flag tokens. A
  repeating positional collects every remaining positional token into a
  `ValueList`.
- `Option`: a valued flag (`-o FILE`, `--output FILE`, `--output=FILE`).
- `Switch`: a boolean flag that takes no value. A switch marked
  `exit_on_match` stops parsing as soon as it is seen (`--help`, `--version`).

Entries are immutable. They are normally built with the helper functions
`positional()`, `positional_list()`, `option()`, `switch()` and `help_switch()`,
which validate each entry on its own; cross-entry checks (duplicate spellings,
repeating positional placement) happen in `classify()`.

Example:
    specification = [
        positional("input", "the input file"),
        positional_list("algorithms", "algorithms to run", converter=algorithm),
        option("-o", "--output", "the output file", field_name="FILE"),
        switch("-w", None, "print warnings"),
        help_switch(),
    ]
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from clags.exceptions import ArgumentSpecError
from clags.parser.converters import Converter
from clags.parser.value_kind import ValueKind
from clags.parser.value_list import ValueList

OPTION_PREFIX = "-"
ASSIGNMENT_SEPARATOR = "="


@dataclass(frozen=True)
class Argument:
    """Common fields of every specification entry.

    Attributes:
        dest (str): Key the bound value is stored under in the `ParseResult`.
        description (str): Help text shown by the usage renderer.
    """

    dest: str
    description: str = ""

    @property
    def identity(self) -> str:
        """Name used for this entry in diagnostics."""
        return self.dest


@dataclass(frozen=True)
class Positional(Argument):
    """
    A positional argument.

    Attributes:
        name (str): Display name, also used in diagnostics.
        kind (ValueKind): Conversion applied to the token.
        converter (Converter | None): Custom converter when `kind` is CUSTOM.
        repeating (bool): Collect every remaining positional token into a list.
        default (Any): Value reported when the positional is never bound.
        values (ValueList | None): Caller-owned list for a repeating positional.
    """

    name: str = ""
    kind: ValueKind = ValueKind.STRING
    converter: Converter | None = field(default=None, compare=False)
    repeating: bool = False
    default: Any = None
    values: ValueList | None = field(default=None, compare=False)

    @property
    def identity(self) -> str:
        return self.name

    def get_usage_text(self, list_marker: str = "...") -> str:
        """Return the synopsis form, e.g. `<input>` or `<files...>`."""
        if self.repeating:
            return f"<{self.name}{list_marker}>"
        return f"<{self.name}>"


@dataclass(frozen=True)
class FlagArgument(Argument):
    """An entry matched by a short and/or long spelling."""

    short: str | None = None
    long: str | None = None

    @property
    def flags(self) -> tuple[str, ...]:
        return tuple(flag for flag in (self.short, self.long) if flag)

    @property
    def identity(self) -> str:
        return self.long or self.short or self.dest

    def matches(self, token: str) -> bool:
        return token in self.flags

    def get_flag_text(self) -> str:
        """Return the spellings joined for display, e.g. `-o, --output`."""
        return ", ".join(self.flags)


@dataclass(frozen=True)
class Option(FlagArgument):
    """
    A valued flag that consumes one following token or an inline `=` value.

    Attributes:
        field_name (str): Placeholder shown in usage, e.g. `FILE`.
        kind (ValueKind): Conversion applied to the value.
        converter (Converter | None): Custom converter when `kind` is CUSTOM.
        default (Any): Value reported when the flag is absent.
    """

    field_name: str = "VALUE"
    kind: ValueKind = ValueKind.STRING
    converter: Converter | None = field(default=None, compare=False)
    default: Any = None

    def split_assignment(self, token: str) -> str | None:
        """Return the text after `--long=` if `token` is an inline assignment."""
        if not self.long:
            return None
        prefix = f"{self.long}{ASSIGNMENT_SEPARATOR}"
        if token.startswith(prefix):
            return token[len(prefix) :]
        return None

    def get_flag_text(self) -> str:
        return f"{super().get_flag_text()} <{self.field_name}>"


@dataclass(frozen=True)
class Switch(FlagArgument):
    """
    A boolean flag.

    Attributes:
        exit_on_match (bool): Stop parsing and report success once matched.
    """

    exit_on_match: bool = False


def _validate_flags(short: str | None, long: str | None) -> None:
    if not short and not long:
        raise ArgumentSpecError("A flag argument needs a short or a long spelling")
    if short is not None:
        if not isinstance(short, str):
            raise ArgumentSpecError(f"Flag '{short}' must be a string")
        if (
            len(short) != 2
            or not short.startswith(OPTION_PREFIX)
            or short[1] == OPTION_PREFIX
        ):
            raise ArgumentSpecError(
                f"Short flag '{short}' must be '-' followed by a single character"
            )
    if long is not None:
        if not isinstance(long, str):
            raise ArgumentSpecError(f"Flag '{long}' must be a string")
        if not long.startswith(OPTION_PREFIX * 2) or len(long) < 3:
            raise ArgumentSpecError(
                f"Long flag '{long}' must start with '--' and be at least 3 characters long"
            )
        if ASSIGNMENT_SEPARATOR in long:
            raise ArgumentSpecError(
                f"Long flag '{long}' must not contain '{ASSIGNMENT_SEPARATOR}'"
            )


def _validate_dest(dest: str) -> str:
    if not dest.replace("_", "").isalnum():
        raise ArgumentSpecError(
            f"dest '{dest}' must be a valid identifier "
            "(letters, digits, and underscores only)"
        )
    if dest[0].isdigit():
        raise ArgumentSpecError(f"dest '{dest}' must not start with a digit")
    return dest


def _get_dest_from_flags(short: str | None, long: str | None, dest: str | None) -> str:
    """Derive a destination key from the spellings unless one was given."""
    if dest:
        return _validate_dest(dest)
    flag = long or short
    assert flag is not None, "flag should not be None"
    return _validate_dest(flag.lstrip(OPTION_PREFIX).replace("-", "_").lower())


def _resolve_kind(
    identity: str, kind: ValueKind | str | None, converter: Converter | None
) -> ValueKind:
    if kind is None:
        kind = ValueKind.CUSTOM if converter is not None else ValueKind.STRING
    elif not isinstance(kind, ValueKind):
        try:
            kind = ValueKind(kind)
        except ValueError as error:
            raise ArgumentSpecError(f"Argument '{identity}': {error}") from error
    if kind is ValueKind.CUSTOM and converter is None:
        raise ArgumentSpecError(
            f"Argument '{identity}' has kind 'custom' but no converter was given"
        )
    if kind is not ValueKind.CUSTOM and converter is not None:
        raise ArgumentSpecError(
            f"Argument '{identity}' has a converter but kind '{kind}'; "
            "use kind 'custom' or leave kind unset"
        )
    if converter is not None and not callable(converter):
        raise ArgumentSpecError(f"Converter for '{identity}' must be callable")
    return kind


def _validate_name(name: str) -> None:
    if not isinstance(name, str) or not name:
        raise ArgumentSpecError("Positional arguments need a non-empty name")
    if name.startswith(OPTION_PREFIX):
        raise ArgumentSpecError(
            f"Positional name '{name}' must not start with '{OPTION_PREFIX}'"
        )


def positional(
    name: str,
    description: str = "",
    kind: ValueKind | str | None = None,
    converter: Converter | None = None,
    *,
    dest: str | None = None,
    default: Any = None,
) -> Positional:
    """
    Declare a positional argument bound to exactly one token.

    Args:
        name (str): Display name, e.g. `input_file`.
        description (str): Help text.
        kind (ValueKind | str | None): Value kind; defaults to STRING, or CUSTOM
            when a converter is given.
        converter (Converter | None): Custom converter `(identity, token) -> value`.
        dest (str | None): Result key; defaults to `name`.
        default (Any): Value reported if the positional is never bound.
    """
    _validate_name(name)
    return Positional(
        dest=_validate_dest(dest or name.replace("-", "_")),
        description=description,
        name=name,
        kind=_resolve_kind(name, kind, converter),
        converter=converter,
        default=default,
    )


def positional_list(
    name: str,
    description: str = "",
    kind: ValueKind | str | None = None,
    converter: Converter | None = None,
    *,
    dest: str | None = None,
    values: ValueList | None = None,
) -> Positional:
    """
    Declare a repeating positional that collects every remaining positional token.

    Args:
        values (ValueList | None): Caller-owned list to append to. When omitted
            each parse creates a fresh `ValueList`.

    See `positional()` for the remaining arguments.
    """
    _validate_name(name)
    if values is not None and not isinstance(values, ValueList):
        raise ArgumentSpecError(f"values for '{name}' must be a ValueList")
    return Positional(
        dest=_validate_dest(dest or name.replace("-", "_")),
        description=description,
        name=name,
        kind=_resolve_kind(name, kind, converter),
        converter=converter,
        repeating=True,
        values=values,
    )


def option(
    short: str | None = None,
    long: str | None = None,
    description: str = "",
    *,
    field_name: str = "VALUE",
    kind: ValueKind | str | None = None,
    converter: Converter | None = None,
    dest: str | None = None,
    default: Any = None,
) -> Option:
    """
    Declare a valued flag.

    Args:
        short (str | None): Short spelling, e.g. `-o`.
        long (str | None): Long spelling, e.g. `--output`. Enables `--output=FILE`.
        description (str): Help text.
        field_name (str): Placeholder shown in usage.
        kind (ValueKind | str | None): Value kind.
        converter (Converter | None): Custom converter.
        dest (str | None): Result key; derived from the long (else short) spelling.
        default (Any): Value reported when the flag is absent.
    """
    _validate_flags(short, long)
    if not field_name:
        raise ArgumentSpecError("field_name must not be empty")
    dest = _get_dest_from_flags(short, long, dest)
    return Option(
        dest=dest,
        description=description,
        short=short,
        long=long,
        field_name=field_name,
        kind=_resolve_kind(long or short or dest, kind, converter),
        converter=converter,
        default=default,
    )


def switch(
    short: str | None = None,
    long: str | None = None,
    description: str = "",
    *,
    exit_on_match: bool = False,
    dest: str | None = None,
) -> Switch:
    """
    Declare a boolean switch.

    Args:
        short (str | None): Short spelling, e.g. `-w`.
        long (str | None): Long spelling, e.g. `--warnings`.
        description (str): Help text.
        exit_on_match (bool): Stop parsing with success as soon as it is matched.
        dest (str | None): Result key; derived from the long (else short) spelling.
    """
    _validate_flags(short, long)
    if not isinstance(exit_on_match, bool):
        raise ArgumentSpecError(
            f"exit_on_match must be a boolean, got {type(exit_on_match).__name__}"
        )
    return Switch(
        dest=_get_dest_from_flags(short, long, dest),
        description=description,
        short=short,
        long=long,
        exit_on_match=exit_on_match,
    )


def help_switch(
    dest: str = "help", description: str = "Show this help message and exit."
) -> Switch:
    """Declare the conventional `-h` / `--help` exit-on-match switch."""
    return switch("-h", "--help", description, exit_on_match=True, dest=dest)
