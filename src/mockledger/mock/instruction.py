from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Union

from mockledger.frequency import Frequency


@dataclass(frozen=True)
class CallSite:
    filename: str
    lineno: int

    @classmethod
    def capture(cls, depth: int = 1) -> "CallSite":
        """Location of the frame ``depth`` levels above the caller."""
        frame = sys._getframe(depth + 1)
        return cls(filename=frame.f_code.co_filename, lineno=frame.f_lineno)

    def __str__(self) -> str:
        return f"{self.filename}:{self.lineno}"


@dataclass(frozen=True)
class Count:
    pass


@dataclass(frozen=True)
class Verify:
    frequency: Frequency
    location: CallSite


@dataclass(frozen=True)
class Return:
    value: Any


@dataclass(frozen=True)
class Raise:
    error: BaseException


Instruction = Union[Count, Verify, Return, Raise]

COUNT = Count()
