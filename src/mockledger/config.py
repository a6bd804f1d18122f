from __future__ import annotations

from dataclasses import dataclass, field

from mockledger.assertions import Asserter, RaisingAsserter
from mockledger.common.hashing import DEFAULT_ALGORITHM, check_algorithm


@dataclass(frozen=True)
class MockConfig:
    hash_algorithm: str = DEFAULT_ALGORITHM
    asserter: Asserter = field(default_factory=RaisingAsserter)

    def __post_init__(self) -> None:
        check_algorithm(self.hash_algorithm)
        if not callable(self.asserter):
            raise ValueError("asserter must be callable")


DEFAULT_CONFIG = MockConfig()
