# Clags Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParseResult`, the lookup structure `parse()` returns.

Every entry in the specification owns one slot, keyed by its `dest`. Slots are
filled with defaults before parsing starts and overwritten as tokens are
bound. A slot can be read by its `dest`, by a positional's name, or by any
spelling of a flag:

    result = parse(sys.argv, specification)
    result["output"] == result["-o"] == result["--output"]

A failed parse keeps every value bound before the failure.

Bound values are also readable as attributes (`result.output`), but only for
dests that do not collide with a `ParseResult` attribute or Mapping method
(`ok`, `error`, `exit_switch`, `help_requested`, `keys`, `values`, `items`,
`get`, ...). `result["values"]` always returns the bound value.
"""
from __future__ import annotations

from typing import Any, Iterator, Mapping

from clags.exceptions import ArgumentParseError
from clags.parser.argument import Argument, Positional
from clags.parser.classify import ClassifiedSpec
from clags.parser.value_list import ValueList


class ParseResult(Mapping[str, Any]):
    """
    Values bound by one parse, plus its outcome.

    Attributes:
        ok (bool): True if parsing succeeded.
        error (ArgumentParseError | None): Why parsing failed.
        exit_switch (str | None): Dest of the exit-on-match switch that ended parsing.
    """

    def __init__(self, spec: ClassifiedSpec) -> None:
        self.ok: bool = False
        self.error: ArgumentParseError | None = None
        self.exit_switch: str | None = None
        self._values: dict[str, Any] = {}
        self._aliases: dict[str, str] = {}
        for argument in spec.positionals:
            self._register(argument, argument.name)
            if argument.repeating:
                values = argument.values if argument.values is not None else ValueList()
                if values.kind is None:
                    values.kind = argument.kind
                self._values[argument.dest] = values
            else:
                self._values[argument.dest] = argument.default
        for argument in spec.options:
            self._register(argument, *argument.flags)
            self._values[argument.dest] = argument.default
        for argument in spec.switches:
            self._register(argument, *argument.flags)
            self._values[argument.dest] = False

    def _register(self, argument: Argument, *aliases: str) -> None:
        for alias in aliases:
            self._aliases[alias] = argument.dest

    def bind(self, argument: Argument, value: Any) -> None:
        """Store `value` in the slot of `argument`."""
        self._values[argument.dest] = value

    def list_for(self, argument: Positional) -> ValueList:
        """Return the `ValueList` bound to a repeating positional."""
        values = self._values[argument.dest]
        assert isinstance(values, ValueList), "repeating slot should hold a ValueList"
        return values

    @property
    def help_requested(self) -> bool:
        return self.exit_switch is not None

    def as_dict(self) -> dict[str, Any]:
        """Return the bound values with lists flattened to plain Python lists."""
        return {
            dest: value.items if isinstance(value, ValueList) else value
            for dest, value in self._values.items()
        }

    def _resolve(self, key: str) -> str:
        if key in self._values:
            return key
        try:
            return self._aliases[key]
        except KeyError:
            raise KeyError(key) from None

    def __getitem__(self, key: str) -> Any:
        return self._values[self._resolve(key)]

    def __contains__(self, key: object) -> bool:
        return key in self._values or key in self._aliases

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} has no argument {name!r}"
            ) from None

    def __bool__(self) -> bool:
        return self.ok

    def __repr__(self) -> str:
        return f"ParseResult(ok={self.ok}, values={self.as_dict()!r})"
