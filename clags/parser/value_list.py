# Clags Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ValueList`, the growable typed sequence bound to a repeating positional.

A `ValueList` starts empty with zero capacity. The first append reserves room
for `INITIAL_CAPACITY` items and the capacity doubles whenever it is exhausted.
Tokens are converted straight into the next free slot; a failed conversion
leaves the list exactly as it was before the call, while items appended by
earlier calls are kept.

The list is owned by whoever created it. The parser only appends; callers
read the items after parsing and call `release()` when they are done.
`MemoryError` raised while growing is not caught anywhere in Clags.
"""
from __future__ import annotations

from typing import Any, Iterator, Sequence, overload

from clags.logger import logger
from clags.parser.converters import Converter, convert_value
from clags.parser.value_kind import ValueKind

INITIAL_CAPACITY = 8


class ValueList(Sequence[Any]):
    """
    Typed list of converted tokens.

    Attributes:
        kind (ValueKind | None): Kind of the stored items, fixed by the first append.
        count (int): Number of stored items.
        capacity (int): Number of items that fit before the next growth.
    """

    def __init__(self, kind: ValueKind | None = None) -> None:
        self.kind: ValueKind | None = kind
        self._items: list[Any] = []
        self._capacity: int = 0

    @property
    def count(self) -> int:
        return len(self._items)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def items(self) -> list[Any]:
        """Return a copy of the stored items."""
        return list(self._items)

    def _reserve(self) -> None:
        if self.count < self._capacity:
            return
        new_capacity = self._capacity * 2 if self._capacity else INITIAL_CAPACITY
        logger.debug("ValueList growing from %d to %d", self._capacity, new_capacity)
        self._capacity = new_capacity

    def append(self, value: Any) -> None:
        """Store an already converted value."""
        self._reserve()
        self._items.append(value)

    def append_token(
        self,
        identity: str,
        token: str,
        kind: ValueKind = ValueKind.STRING,
        converter: Converter | None = None,
    ) -> Any:
        """
        Convert `token` and append the result.

        Args:
            identity (str): Argument name used in diagnostics.
            token (str): The raw command-line token.
            kind (ValueKind): Kind the token is converted to.
            converter (Converter | None): Custom converter for `ValueKind.CUSTOM`.

        Returns:
            Any: The converted value that was appended.

        Raises:
            ArgumentParseError: If conversion fails. Nothing is appended.
        """
        if self.kind is None:
            self.kind = kind
        self._reserve()
        value = convert_value(identity, token, kind, converter)
        self._items.append(value)
        return value

    def release(self) -> None:
        """Drop every item and return to the zero-capacity state."""
        self._items.clear()
        self._capacity = 0

    @overload
    def __getitem__(self, index: int) -> Any: ...

    @overload
    def __getitem__(self, index: slice) -> list[Any]: ...

    def __getitem__(self, index: int | slice) -> Any:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ValueList):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"ValueList(kind={self.kind}, count={self.count}, "
            f"capacity={self.capacity}, items={self._items!r})"
        )
