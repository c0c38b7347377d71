"""A value that holds exactly one of a fixed set of types."""

from __future__ import annotations

from typing import Any, Optional, Sequence

_EMPTY = object()


class Variant:
    """Tagged union over a fixed tuple of allowed types.

    The stored type must match one of the allowed types exactly.
    Two variants compare equal when they hold the same type.
    """

    def __init__(self, types: Sequence[type], value: Any = _EMPTY) -> None:
        self._types: tuple[type, ...] = tuple(types)
        self._kind: Optional[type] = None
        self._value: Any = None
        if value is not _EMPTY:
            self.set(value)

    @property
    def types(self) -> tuple[type, ...]:
        """The allowed types, in declaration order."""
        return self._types

    @property
    def kind(self) -> Optional[type]:
        """The type currently held, or None when empty."""
        return self._kind

    def set(self, value: Any) -> None:
        """Store value; its type must be one of the allowed types."""
        kind = type(value)
        if kind not in self._types:
            raise TypeError(f"{kind.__name__} is not one of the variant's types")
        self._kind = kind
        self._value = value

    def get(self, kind: type) -> Any:
        """Return the stored value if it is of the given type."""
        if not self.is_same(kind):
            current = "empty" if self._kind is None else self._kind.__name__
            raise TypeError(f"{kind.__name__} is not defined. current type is {current}")
        return self._value

    def is_same(self, kind: type) -> bool:
        """Return True if the held type is exactly kind."""
        return self._kind is not None and self._kind is kind

    def is_empty(self) -> bool:
        """Return True if nothing has been stored."""
        return self._kind is None

    def index_of(self, kind: type) -> int:
        """Position of kind among the allowed types; their count if absent."""
        try:
            return self._types.index(kind)
        except ValueError:
            return len(self._types)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Variant):
            return NotImplemented
        return self._kind is other._kind

    def __hash__(self) -> int:
        return hash(self._kind)

    def __repr__(self) -> str:
        if self._kind is None:
            return f"{type(self).__name__}(empty)"
        return f"{type(self).__name__}({self._value!r})"