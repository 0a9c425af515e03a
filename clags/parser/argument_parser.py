# Clags Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements the Clags parsing algorithm and `ArgumentParser`, a small
builder that keeps a specification and parses against it.

Tokens are processed left to right. For each token the parser tries, in order:

1. Options, in declared order. An exact spelling match consumes the next token
   as the value; `--long=value` supplies the value inline.
2. Switches, in declared order. A match stores `True`; a switch marked
   `exit_on_match` ends parsing immediately with success, skipping the check
   for missing positionals.
3. Any other token starting with `-` is an unknown option.
4. Otherwise the token binds to the next positional. A repeating positional
   keeps collecting tokens until input ends.

Flags are always tried before positionals, so a positional value that is
spelled like a declared flag cannot be supplied. Parsing stops at the first
failure and values bound before it are kept.

Public Interface:
- `parse(process_args, specification)`: Parse `sys.argv`-style input, print
  diagnostics to stderr, return a `ParseResult` that is falsy on failure.
- `parse_or_raise(process_args, specification)`: Same, but raise
  `ArgumentParseError` instead of printing.
- `ArgumentParser`: Declarative builder over the same functions.

Example Usage:
    specification = [
        positional("input", "the input file"),
        option("-o", "--output", "the output file", field_name="FILE"),
        help_switch(),
    ]
    result = parse(sys.argv, specification)
    if not result:
        print_usage(sys.argv[0], specification)
        sys.exit(1)
    if result.help_requested:
        print_usage(sys.argv[0], specification)
        sys.exit(0)
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Iterable, Sequence

from rich.console import Console

from clags.config import UsageConfig
from clags.console import console as default_console
from clags.console import error_console as default_error_console
from clags.exceptions import (
    ArgumentParseError,
    ArgumentSpecError,
    EmptyAssignmentError,
    MissingPositionalError,
    MissingValueError,
    UnexpectedPositionalError,
    UnknownOptionError,
)
from clags.logger import logger
from clags.parser.argument import (
    OPTION_PREFIX,
    Argument,
    Option,
    Positional,
    Switch,
    help_switch,
    option,
    positional,
    positional_list,
    switch,
)
from clags.parser.classify import ClassifiedSpec, classify
from clags.parser.converters import Converter, convert_value
from clags.parser.result import ParseResult
from clags.parser.usage import print_usage, render_usage
from clags.parser.value_kind import ValueKind
from clags.parser.value_list import ValueList
from clags.signals import ExitSignal


def _handle_option(
    token: str, tokens: list[str], i: int, spec: ClassifiedSpec, result: ParseResult
) -> int | None:
    """Bind `token` to an option and return the next index, or None if no option matches."""
    for argument in spec.options:
        if argument.matches(token):
            if i + 1 >= len(tokens):
                raise MissingValueError(token)
            value = convert_value(token, tokens[i + 1], argument.kind, argument.converter)
            result.bind(argument, value)
            logger.debug("Option %s bound to %r", token, value)
            return i + 2
        inline = argument.split_assignment(token)
        if inline is not None:
            assert argument.long is not None, "inline assignment needs a long flag"
            if not inline:
                raise EmptyAssignmentError(argument.long)
            value = convert_value(argument.long, inline, argument.kind, argument.converter)
            result.bind(argument, value)
            logger.debug("Option %s assigned inline to %r", argument.long, value)
            return i + 1
    return None


def _handle_switch(
    token: str, i: int, spec: ClassifiedSpec, result: ParseResult
) -> int | None:
    """Set a matching switch and return the next index, or None if no switch matches."""
    for argument in spec.switches:
        if argument.matches(token):
            result.bind(argument, True)
            logger.debug("Switch %s set", token)
            if argument.exit_on_match:
                raise ExitSignal(argument.dest)
            return i + 1
    return None


def _handle_positional(
    token: str, position: int, spec: ClassifiedSpec, result: ParseResult
) -> int:
    """Bind `token` to the positional at `position` and return the next position."""
    if position >= len(spec.positionals):
        raise UnexpectedPositionalError(
            token, expected=len(spec.positionals), seen=position + 1
        )
    argument = spec.positionals[position]
    if argument.repeating:
        values = result.list_for(argument)
        value = values.append_token(
            argument.name, token, argument.kind, argument.converter
        )
        logger.debug("Positional <%s> appended %r", argument.name, value)
        return position
    value = convert_value(argument.name, token, argument.kind, argument.converter)
    result.bind(argument, value)
    logger.debug("Positional <%s> bound to %r", argument.name, value)
    return position + 1


def _check_missing(position: int, spec: ClassifiedSpec) -> None:
    missing = [
        argument.name
        for argument in spec.positionals[position:]
        if not argument.repeating
    ]
    if missing:
        raise MissingPositionalError(missing)


def _consume_tokens(tokens: list[str], spec: ClassifiedSpec, result: ParseResult) -> None:
    i = 0
    position = 0
    while i < len(tokens):
        token = tokens[i]
        next_i = _handle_option(token, tokens, i, spec, result)
        if next_i is None:
            next_i = _handle_switch(token, i, spec, result)
        if next_i is None:
            if token.startswith(OPTION_PREFIX):
                raise UnknownOptionError(token)
            position = _handle_positional(token, position, spec, result)
            next_i = i + 1
        i = next_i
    _check_missing(position, spec)


def _run(process_args: Sequence[str], spec: ClassifiedSpec) -> ParseResult:
    result = ParseResult(spec)
    tokens = list(process_args[1:])
    logger.debug("Parsing %d token(s) against %d argument(s)", len(tokens), len(spec))
    try:
        _consume_tokens(tokens, spec, result)
    except ExitSignal as signal:
        logger.debug("Exit switch '%s' matched, parsing stopped", signal.dest)
        result.exit_switch = signal.dest
    except ArgumentParseError as error:
        logger.debug("Parsing failed (%s): %s", error.kind, error.message)
        result.error = error
        return result
    result.ok = True
    return result


def parse(
    process_args: Sequence[str],
    specification: Iterable[Argument],
    *,
    error_console: Console | None = None,
) -> ParseResult:
    """
    Parse a `sys.argv`-style list against `specification`.

    `process_args[0]` is the program name and is skipped. On failure the
    diagnostic is printed to stderr as `[ERROR] <message>`.

    Args:
        process_args (Sequence[str]): Program name followed by its arguments.
        specification (Iterable[Argument]): The declared arguments.
        error_console (Console | None): Console to print diagnostics to.

    Returns:
        ParseResult: Bound values; falsy if parsing failed.

    Raises:
        ArgumentSpecError: If the specification itself is invalid.
    """
    result = _run(process_args, classify(specification))
    if result.error is not None:
        (error_console or default_error_console).print(
            f"[ERROR] {result.error.message}", markup=False, emoji=False, style="red"
        )
    return result


def parse_or_raise(
    process_args: Sequence[str], specification: Iterable[Argument]
) -> ParseResult:
    """
    Parse like `parse()` but raise instead of printing.

    Raises:
        ArgumentParseError: The first failure encountered.
        ArgumentSpecError: If the specification itself is invalid.
    """
    result = _run(process_args, classify(specification))
    if result.error is not None:
        raise result.error
    return result


class ArgumentParser:
    """
    Declarative argument parser for Clags programs.

    Collects specification entries through `add_*` methods, validating each
    against those already registered, and parses argument lists against them.

    Features:
    - Positional, repeating positional, valued flag and switch arguments.
    - Typed conversion with range checks and custom converters.
    - `--long=value` inline assignment.
    - Automatic `-h` / `--help` exit switch.
    - Usage rendering with Rich.
    """

    def __init__(
        self,
        program: str | None = None,
        add_help: bool = True,
        config: UsageConfig | None = None,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        """Initialize the ArgumentParser."""
        self.program: str | None = program
        self.config: UsageConfig = config or UsageConfig()
        self.console: Console = console or default_console
        self.error_console: Console = error_console or default_error_console
        self._arguments: list[Argument] = []
        if add_help:
            self.add_argument(help_switch())

    @property
    def specification(self) -> tuple[Argument, ...]:
        return tuple(self._arguments)

    @property
    def program_name(self) -> str:
        if self.program:
            return self.program
        return Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "program"

    def add_argument(self, argument: Argument) -> Argument:
        """
        Register a prebuilt specification entry.

        Raises:
            ArgumentSpecError: If the entry clashes with a registered one.
        """
        if not isinstance(argument, Argument):
            raise ArgumentSpecError(
                f"Expected a specification entry, got {type(argument).__name__}"
            )
        classify([*self._arguments, argument])
        self._arguments.append(argument)
        return argument

    def add_positional(
        self,
        name: str,
        description: str = "",
        kind: ValueKind | str | None = None,
        converter: Converter | None = None,
        *,
        dest: str | None = None,
        default: Any = None,
    ) -> Positional:
        """Register a positional argument. See `positional()`."""
        argument = positional(
            name, description, kind, converter, dest=dest, default=default
        )
        self.add_argument(argument)
        return argument

    def add_positional_list(
        self,
        name: str,
        description: str = "",
        kind: ValueKind | str | None = None,
        converter: Converter | None = None,
        *,
        dest: str | None = None,
        values: ValueList | None = None,
    ) -> Positional:
        """Register a repeating positional argument. See `positional_list()`."""
        argument = positional_list(
            name, description, kind, converter, dest=dest, values=values
        )
        self.add_argument(argument)
        return argument

    def add_option(
        self,
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
        """Register a valued flag. See `option()`."""
        argument = option(
            short,
            long,
            description,
            field_name=field_name,
            kind=kind,
            converter=converter,
            dest=dest,
            default=default,
        )
        self.add_argument(argument)
        return argument

    def add_switch(
        self,
        short: str | None = None,
        long: str | None = None,
        description: str = "",
        *,
        exit_on_match: bool = False,
        dest: str | None = None,
    ) -> Switch:
        """Register a boolean switch. See `switch()`."""
        argument = switch(
            short, long, description, exit_on_match=exit_on_match, dest=dest
        )
        self.add_argument(argument)
        return argument

    def get_argument(self, dest: str) -> Argument | None:
        """Return the registered entry with the given dest, if any."""
        return next((arg for arg in self._arguments if arg.dest == dest), None)

    def parse_args(self, args: list[str] | None = None) -> ParseResult:
        """
        Parse `args` (defaults to `sys.argv[1:]`), printing diagnostics on failure.

        Args:
            args (list[str] | None): Arguments without the program name.

        Returns:
            ParseResult: Bound values; falsy if parsing failed.
        """
        if args is None:
            args = sys.argv[1:]
        return parse(
            [self.program_name, *args],
            self._arguments,
            error_console=self.error_console,
        )

    def parse_args_or_raise(self, args: list[str] | None = None) -> ParseResult:
        """Parse `args` like `parse_args()` but raise `ArgumentParseError` on failure."""
        if args is None:
            args = sys.argv[1:]
        return parse_or_raise([self.program_name, *args], self._arguments)

    def render_usage(self) -> str:
        """Return the usage text for this parser."""
        return render_usage(self.program_name, self._arguments, config=self.config)

    def print_usage(self) -> None:
        """Print the usage text for this parser to its console."""
        print_usage(
            self.program_name, self._arguments, config=self.config, console=self.console
        )

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        spec = classify(self._arguments)
        return (
            f"ArgumentParser(args={len(spec)}, positional={len(spec.positionals)}, "
            f"options={len(spec.options)}, switches={len(spec.switches)})"
        )

    def __repr__(self) -> str:
        return str(self)
