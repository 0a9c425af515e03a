# Clags Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Partitions a specification into its positional, option and switch buckets.

Both the parser and the usage renderer start by calling `classify()`. The
result is a throwaway view: it keeps references to the caller's entries, keeps
each bucket in declaration order, and drops or duplicates nothing.
`classify()` also rejects specifications that cannot be parsed unambiguously.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from clags.exceptions import ArgumentSpecError
from clags.parser.argument import Argument, FlagArgument, Option, Positional, Switch


@dataclass(frozen=True)
class ClassifiedSpec:
    """A specification split by entry type, each bucket in declared order."""

    positionals: tuple[Positional, ...] = ()
    options: tuple[Option, ...] = ()
    switches: tuple[Switch, ...] = ()

    def __len__(self) -> int:
        return len(self.positionals) + len(self.options) + len(self.switches)

    @property
    def flag_arguments(self) -> tuple[FlagArgument, ...]:
        return self.options + self.switches


def _check_duplicates(
    positionals: list[Positional], flag_arguments: list[FlagArgument]
) -> None:
    """Reject any dest, positional name or flag spelling claimed by two entries."""
    owners: dict[str, tuple[int, Argument]] = {}
    for index, argument in enumerate([*positionals, *flag_arguments]):
        if isinstance(argument, Positional):
            keys = (argument.dest, argument.name)
        else:
            keys = (argument.dest, *argument.flags)
        for key in dict.fromkeys(keys):
            if key in owners and owners[key][0] != index:
                owner = owners[key][1]
                if key.startswith("-"):
                    raise ArgumentSpecError(
                        f"Flag '{key}' is already used by argument '{owner.dest}'"
                    )
                raise ArgumentSpecError(
                    f"Name '{key}' is already used by argument '{owner.dest}'.\n"
                    "Define a unique 'dest' for each argument."
                )
            owners[key] = (index, argument)


def _check_repeating(positionals: list[Positional]) -> None:
    for index, argument in enumerate(positionals):
        if argument.repeating and index != len(positionals) - 1:
            raise ArgumentSpecError(
                f"Repeating positional '{argument.name}' must be the last positional"
            )


def classify(
    specification: Iterable[Argument], validate: bool = True
) -> ClassifiedSpec:
    """
    Split `specification` into positionals, options and switches.

    Args:
        specification (Iterable[Argument]): Entries in declaration order.
        validate (bool): Run the cross-entry checks. The usage renderer passes
            False so any specification can be displayed.

    Returns:
        ClassifiedSpec: The three order-preserving buckets.

    Raises:
        ArgumentSpecError: If an entry has an unknown type, a spelling, name or
            dest is declared twice, or a repeating positional is not last
            (the latter two only when `validate` is True).
    """
    positionals: list[Positional] = []
    options: list[Option] = []
    switches: list[Switch] = []
    for argument in specification:
        if isinstance(argument, Positional):
            positionals.append(argument)
        elif isinstance(argument, Option):
            options.append(argument)
        elif isinstance(argument, Switch):
            switches.append(argument)
        else:
            raise ArgumentSpecError(
                f"Unsupported specification entry: {type(argument).__name__}"
            )

    if validate:
        _check_duplicates(positionals, [*options, *switches])
        _check_repeating(positionals)
    return ClassifiedSpec(tuple(positionals), tuple(options), tuple(switches))
