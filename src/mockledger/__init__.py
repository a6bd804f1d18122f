from .assertions import Asserter, CollectingAsserter, RaisingAsserter
from .common.describe import Kind, register_kind, unregister_kind
from .config import MockConfig
from .dsl import stub_raise, stub_return, verify, when
from .errors import MockLedgerError, VerificationError
from .fingerprint import FingerprintEngine
from .frequency import Frequency, at_least, at_most, exactly, less_than, more_than, never
from .ledger import Library, RegisterID
from .mock import CallSite, Mock, MockEngine

__all__ = [
    "Asserter",
    "CallSite",
    "CollectingAsserter",
    "FingerprintEngine",
    "Frequency",
    "Kind",
    "Library",
    "Mock",
    "MockConfig",
    "MockEngine",
    "MockLedgerError",
    "RaisingAsserter",
    "RegisterID",
    "VerificationError",
    "at_least",
    "at_most",
    "exactly",
    "less_than",
    "more_than",
    "never",
    "register_kind",
    "stub_raise",
    "stub_return",
    "unregister_kind",
    "verify",
    "when",
]
