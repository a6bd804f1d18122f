from .instruction import COUNT, CallSite, Count, Instruction, Raise, Return, Verify
from .engine import MockEngine
from .base import Mock, engine_of

__all__ = [
    "COUNT",
    "CallSite",
    "Count",
    "Instruction",
    "Mock",
    "MockEngine",
    "Raise",
    "Return",
    "Verify",
    "engine_of",
]
