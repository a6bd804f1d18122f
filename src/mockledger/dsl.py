"""Directives that reinterpret the next call on a mock.

Each function installs a pending instruction and hands the mock back, so the
target method is invoked right away on the returned object::

    verify(repo, exactly(1)).save(user)
    stub_return(clock, 12.5).now("UTC")
    stub_raise(client, TimeoutError()).fetch("/health")
"""

from __future__ import annotations

from typing import Any, Optional, TypeVar

from mockledger.frequency import Frequency
from mockledger.mock.base import Mock, engine_of
from mockledger.mock.instruction import CallSite, Raise, Return, Verify

M = TypeVar("M", bound=Mock)

_UNSET: Any = object()


def verify(mock: M, times: Frequency, location: Optional[CallSite] = None) -> M:
    """Assert that the next call on ``mock`` has been made ``times`` before.

    The call itself is not counted. A failure is reported at the line that
    called ``verify`` unless ``location`` is given.
    """
    if not isinstance(times, Frequency):
        raise TypeError("times must be a Frequency")
    engine = engine_of(mock)
    engine.force(Verify(times, location or CallSite.capture()))
    return mock


def stub_return(mock: M, value: Any) -> M:
    engine_of(mock).force(Return(value))
    return mock


def stub_raise(mock: M, error: BaseException) -> M:
    if not isinstance(error, BaseException):
        raise TypeError("error must be an exception instance")
    engine_of(mock).force(Raise(error))
    return mock


def when(mock: M, *, then_return: Any = _UNSET, then_raise: Optional[BaseException] = None) -> M:
    if (then_return is _UNSET) == (then_raise is None):
        raise TypeError("when() takes exactly one of then_return or then_raise")
    if then_raise is not None:
        return stub_raise(mock, then_raise)
    return stub_return(mock, then_return)
