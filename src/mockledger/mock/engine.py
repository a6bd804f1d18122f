from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, Tuple, Type, Union

from mockledger.config import DEFAULT_CONFIG, MockConfig
from mockledger.fingerprint.engine import FingerprintEngine
from mockledger.ledger.library import Library, RegisterID

from .instruction import COUNT, Count, Instruction, Raise, Return, Verify

LOG = logging.getLogger("mockledger.mock.engine")

ExpectedType = Union[Type[Any], Tuple[Type[Any], ...]]


class MockEngine:
    """Per-mock controller holding the ledger and the pending instruction.

    The pending instruction describes what happens to the next notified call.
    It is consumed by that call and falls back to ``Count`` whatever the
    outcome, so a verify or stub directive applies to exactly one call.
    """

    def __init__(self, config: Optional[MockConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self.library = Library()
        self.fingerprints = FingerprintEngine(algorithm=self.config.hash_algorithm)
        self._instruction: Instruction = COUNT

    @property
    def pending(self) -> Instruction:
        return self._instruction

    def force(self, instruction: Instruction) -> None:
        if not isinstance(instruction, (Count, Verify, Return, Raise)):
            raise TypeError(f"not an instruction: {instruction!r}")
        if not isinstance(self._instruction, Count):
            LOG.debug("overwriting pending %r with %r", self._instruction, instruction)
        self._instruction = instruction

    def call_count(self, signature: str, arguments: Sequence[Any] = ()) -> int:
        fid = self.fingerprints.fingerprint(signature, arguments)
        return self.library.get_count(fid, RegisterID.CALLS)

    def _verify(self, instruction: Verify, fid: str) -> None:
        count = self.library.get_count(fid, RegisterID.CALLS)
        frequency = instruction.frequency
        ok = frequency.validate(count)
        LOG.debug("verify %s: %d calls, expected %s -> %s", fid, count, frequency, ok)
        if not ok:
            LOG.debug("ledger at failed verify: %s", self.library.snapshot())
        self.config.asserter(ok, f"{count} is not {frequency.description}", instruction.location)

    def _dispatch(self, signature: str, arguments: Sequence[Any]) -> Tuple[str, bool]:
        fid = self.fingerprints.fingerprint(signature, arguments)
        instruction = self._instruction
        LOG.debug("dispatch %s on %s (%s)", type(instruction).__name__, signature, fid)
        try:
            if isinstance(instruction, Verify):
                self._verify(instruction, fid)
            elif isinstance(instruction, Return):
                self.library.set_value(instruction.value, fid, RegisterID.RETURNS)
            elif isinstance(instruction, Raise):
                self.library.set_value(instruction.error, fid, RegisterID.RAISES)
            else:
                self.library.increase(fid, RegisterID.CALLS)
        finally:
            self._instruction = COUNT
        return fid, isinstance(instruction, Count)

    def _stubbed_return(self, fid: str, default: Any, expect: Optional[ExpectedType]) -> Any:
        if not self.library.has_value(fid, RegisterID.RETURNS):
            return default
        value = self.library.get_value(fid, RegisterID.RETURNS)
        if expect is not None and not isinstance(value, expect):
            LOG.debug("stubbed value %r for %s is not %r, using default", value, fid, expect)
            return default
        return value

    def _raise_stubbed(self, fid: str) -> None:
        error = self.library.get_value(fid, RegisterID.RAISES)
        if error is not None:
            # the same instance is raised on every matching call; drop the
            # frames collected by the previous raise
            raise error.with_traceback(None)

    def notify(self, signature: str, arguments: Sequence[Any] = ()) -> None:
        self._dispatch(signature, arguments)

    def notify_returning(
        self,
        signature: str,
        arguments: Sequence[Any] = (),
        *,
        default: Any = None,
        expect: Optional[ExpectedType] = None,
    ) -> Any:
        fid, counted = self._dispatch(signature, arguments)
        if not counted:
            return default
        return self._stubbed_return(fid, default, expect)

    def notify_raising(self, signature: str, arguments: Sequence[Any] = ()) -> None:
        fid, counted = self._dispatch(signature, arguments)
        if counted:
            self._raise_stubbed(fid)

    def notify_raising_returning(
        self,
        signature: str,
        arguments: Sequence[Any] = (),
        *,
        default: Any = None,
        expect: Optional[ExpectedType] = None,
    ) -> Any:
        fid, counted = self._dispatch(signature, arguments)
        if not counted:
            return default
        self._raise_stubbed(fid)
        return self._stubbed_return(fid, default, expect)
