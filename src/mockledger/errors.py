from __future__ import annotations

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from mockledger.mock.instruction import CallSite


class MockLedgerError(RuntimeError):
    pass


class VerificationError(MockLedgerError, AssertionError):
    """Raised when an observed call count does not satisfy a frequency."""

    def __init__(self, message: str, location: Optional["CallSite"] = None):
        self.location = location
        if location is not None:
            message = f"{location.filename}:{location.lineno}: {message}"
        super().__init__(message)
