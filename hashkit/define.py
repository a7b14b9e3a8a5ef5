import os
from typing import Literal

type HasherState = Literal["fresh", "accumulating", "finalized"]

ENCODING = "utf-8"

WORD_SIZE = 32
WORD_MASK = 0xFFFFFFFF
LENGTH_MASK = 0xFFFFFFFFFFFFFFFF

DEFAULT_READ_CHUNK_SIZE = 4096
READ_CHUNK_SIZE_ENV = "HASHKIT_READ_CHUNK_SIZE"


class HasherFinalizedError(RuntimeError):
    """Raised when a hasher is used after `digest()` was called."""


def read_chunk_size() -> int:
    """Get the file read size, in bytes.

    Returns:
        The value of `HASHKIT_READ_CHUNK_SIZE` if set, `DEFAULT_READ_CHUNK_SIZE` otherwise.
    """
    value = os.getenv(READ_CHUNK_SIZE_ENV)
    if value is None:
        return DEFAULT_READ_CHUNK_SIZE

    try:
        size = int(value)
    except ValueError as e:
        raise ValueError(f"{READ_CHUNK_SIZE_ENV} must be an integer, got '{value}'") from e

    if size <= 0:
        raise ValueError(f"{READ_CHUNK_SIZE_ENV} must be greater than 0, got {size}")

    return size
