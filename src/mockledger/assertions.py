from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Tuple, TYPE_CHECKING

from mockledger.errors import VerificationError

if TYPE_CHECKING:
    from mockledger.mock.instruction import CallSite


class Asserter(Protocol):
    def __call__(self, condition: bool, message: str, location: Optional["CallSite"]) -> None: ...


class RaisingAsserter:
    """Fails the current test by raising ``VerificationError``."""

    def __call__(self, condition: bool, message: str, location: Optional["CallSite"]) -> None:
        if not condition:
            raise VerificationError(message, location)


@dataclass
class CollectingAsserter:
    """Records failures instead of raising; call ``raise_if_failed`` at the end."""

    failures: List[Tuple[str, Optional["CallSite"]]] = field(default_factory=list)

    def __call__(self, condition: bool, message: str, location: Optional["CallSite"]) -> None:
        if not condition:
            self.failures.append((message, location))

    def raise_if_failed(self) -> None:
        if not self.failures:
            return
        if len(self.failures) == 1:
            message, location = self.failures[0]
            raise VerificationError(message, location)
        lines = [
            f"{loc.filename}:{loc.lineno}: {msg}" if loc is not None else msg
            for msg, loc in self.failures
        ]
        raise VerificationError(f"{len(lines)} verifications failed:\n" + "\n".join(lines))

    def reset(self) -> None:
        self.failures.clear()
