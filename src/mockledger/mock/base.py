from __future__ import annotations

from typing import Any, Optional

from mockledger.config import MockConfig
from mockledger.errors import MockLedgerError

from .engine import ExpectedType, MockEngine


class Mock:
    """Base class for hand-written test doubles.

    Each method of a subclass reports itself through one of the ``called*``
    helpers, passing its own name and every argument it received::

        class ClockMock(Mock):
            def now(self, tz):
                return self.called_returning("now", tz, default=0.0, expect=float)

    Which helper to use depends on the shape of the method: whether it returns
    a value and whether it may raise.
    """

    def __init__(self, *, config: Optional[MockConfig] = None):
        self._mock_engine = MockEngine(config)

    def called(self, signature: str, *args: Any) -> None:
        engine_of(self).notify(signature, args)

    def called_returning(
        self,
        signature: str,
        *args: Any,
        default: Any = None,
        expect: Optional[ExpectedType] = None,
    ) -> Any:
        return engine_of(self).notify_returning(signature, args, default=default, expect=expect)

    def called_raising(self, signature: str, *args: Any) -> None:
        engine_of(self).notify_raising(signature, args)

    def called_raising_returning(
        self,
        signature: str,
        *args: Any,
        default: Any = None,
        expect: Optional[ExpectedType] = None,
    ) -> Any:
        return engine_of(self).notify_raising_returning(signature, args, default=default, expect=expect)


def engine_of(mock: Mock) -> MockEngine:
    if not isinstance(mock, Mock):
        raise TypeError(f"expected a Mock, got {type(mock).__name__}")
    try:
        return mock.__dict__["_mock_engine"]
    except KeyError:
        raise MockLedgerError(f"{type(mock).__name__}.__init__ did not call Mock.__init__") from None
