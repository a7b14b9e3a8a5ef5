from collections.abc import Callable

import pytest

from hashkit import hash_functions
from hashkit.hash_function import HashFunction


@pytest.fixture
def sha256() -> HashFunction:
    return hash_functions.sha256()


@pytest.fixture
def hash_repeated(sha256: HashFunction) -> Callable[[int, int], str]:
    """Hash `length` copies of a byte, fed 64 bytes at a time."""

    def _hash(byte: int, length: int) -> str:
        buf = bytes([byte]) * 64
        hasher = sha256.init()
        for _ in range(length // len(buf)):
            hasher.update(buf)
        hasher.update(buf, 0, length % len(buf))
        return hasher.digest().hex()

    return _hash
