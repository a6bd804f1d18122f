from __future__ import annotations

import logging
from typing import Any, Dict, Sequence

from mockledger.common.describe import TERMINATOR, describe_value
from mockledger.common.hashing import DEFAULT_ALGORITHM, check_algorithm, digest_prefixed

LOG = logging.getLogger("mockledger.fingerprint.engine")


class FingerprintEngine:
    """Turns a (signature, arguments) pair into a stable string key.

    The signature and the description of every argument are concatenated and
    compacted through a hash, so equal calls map to byte-identical keys.
    """

    def __init__(self, *, algorithm: str = DEFAULT_ALGORITHM):
        self.algorithm = check_algorithm(algorithm)
        self._retained: Dict[int, Any] = {}

    def _retain(self, obj: Any) -> None:
        self._retained.setdefault(id(obj), obj)

    def describe(self, signature: str, arguments: Sequence[Any]) -> str:
        parts = [repr(signature), TERMINATOR]
        parts.extend(describe_value(arg, retain=self._retain) for arg in arguments)
        return "".join(parts)

    def fingerprint(self, signature: str, arguments: Sequence[Any]) -> str:
        raw = self.describe(signature, arguments)
        fid = digest_prefixed(raw.encode("utf-8", "surrogatepass"), self.algorithm)
        LOG.debug("fingerprint %s%r -> %s", signature, tuple(arguments), fid)
        return fid

    @property
    def retained_count(self) -> int:
        return len(self._retained)
