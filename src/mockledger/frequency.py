from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

FrequencyKind = Literal["at_least", "at_most", "more_than", "less_than", "exactly"]

_DESCRIPTIONS: dict[str, str] = {
    "at_least": "at least",
    "at_most": "at most",
    "more_than": "more than",
    "less_than": "less than",
    "exactly": "exactly",
}


@dataclass(frozen=True)
class Frequency:
    """A comparison policy over an observed call count.

    Build instances with the module-level helpers, e.g. ``at_least(4)``.
    """

    kind: FrequencyKind
    times: int

    def __post_init__(self) -> None:
        if self.kind not in _DESCRIPTIONS:
            raise ValueError(f"unknown frequency kind: {self.kind!r}")
        if isinstance(self.times, bool) or not isinstance(self.times, int):
            raise ValueError("times must be an int")
        if self.times < 0:
            raise ValueError("times must be >= 0")

    @property
    def description(self) -> str:
        return f"{_DESCRIPTIONS[self.kind]} {self.times}"

    def __str__(self) -> str:
        return self.description

    def validate(self, value: int) -> bool:
        if self.kind == "at_least":
            return value >= self.times
        if self.kind == "at_most":
            return value <= self.times
        if self.kind == "more_than":
            return value > self.times
        if self.kind == "less_than":
            return value < self.times
        return value == self.times


def at_least(times: int) -> Frequency:
    """Satisfied by ``times`` calls or more."""
    return Frequency("at_least", times)


def at_most(times: int) -> Frequency:
    """Satisfied by ``times`` calls or fewer."""
    return Frequency("at_most", times)


def more_than(times: int) -> Frequency:
    """Satisfied by strictly more than ``times`` calls."""
    return Frequency("more_than", times)


def less_than(times: int) -> Frequency:
    """Satisfied by strictly fewer than ``times`` calls."""
    return Frequency("less_than", times)


def exactly(times: int) -> Frequency:
    return Frequency("exactly", times)


def never() -> Frequency:
    return Frequency("exactly", 0)
