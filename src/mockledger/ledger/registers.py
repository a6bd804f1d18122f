from __future__ import annotations

from typing import Dict, Generic, Optional, Type, TypeVar

T = TypeVar("T")


class CallRegister:
    """Counts how often each fingerprint has been seen. Counts only grow."""

    def __init__(self) -> None:
        self._counts: Dict[str, int] = {}

    def increase(self, key: str) -> None:
        self._counts[key] = self._counts.get(key, 0) + 1

    def get_count(self, key: str) -> int:
        return self._counts.get(key, 0)

    def to_obj(self) -> dict[str, int]:
        return dict(sorted(self._counts.items()))


class BehaviorRegister(Generic[T]):
    """Keeps the last recorded behavior per fingerprint.

    ``value_type`` bounds what may be recorded; anything else is ignored.
    """

    def __init__(self, value_type: Type[T]):
        self.value_type = value_type
        self._values: Dict[str, T] = {}

    def accepts(self, value: object) -> bool:
        return isinstance(value, self.value_type)

    def record(self, value: T, key: str) -> None:
        if not self.accepts(value):
            return
        self._values[key] = value

    def fetch_value(self, key: str) -> Optional[T]:
        return self._values.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def keys(self) -> tuple[str, ...]:
        return tuple(sorted(self._values))
