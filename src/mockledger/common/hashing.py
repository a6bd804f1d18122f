from __future__ import annotations

import hashlib
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

DEFAULT_ALGORITHM = "sha1"


def check_algorithm(algorithm: str) -> str:
    try:
        hashlib.new(algorithm)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"unsupported hash algorithm: {algorithm!r}") from exc
    return algorithm


def digest_hex(data: BytesLike, algorithm: str = DEFAULT_ALGORITHM) -> str:
    h = hashlib.new(algorithm, bytes(data))
    if h.name.startswith("shake_"):
        return h.hexdigest(32)  # type: ignore[call-arg]
    return h.hexdigest()


def digest_prefixed(data: BytesLike, algorithm: str = DEFAULT_ALGORITHM) -> str:
    return algorithm + ":" + digest_hex(data, algorithm)
