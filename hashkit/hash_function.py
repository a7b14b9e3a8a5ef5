from collections.abc import Buffer, Callable
from dataclasses import dataclass
from pathlib import Path

from hashkit.block_handler import check_range
from hashkit.digest import Digest
from hashkit.hash_handler import Hasher


@dataclass(frozen=True, slots=True, eq=False)
class HashFunction:
    """A deterministic mapping from messages to fixed-length digests.

    Stateless: every `init()` builds an independent `Hasher`, so one instance can
    be shared freely, including across threads.
    """

    name: str
    """Hash function identifier, e.g. `SHA-256`"""

    digest_length: int
    """Length of the output digests, in bytes"""

    factory: Callable[[], Hasher]
    """Creates hashers in their initial state"""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Hash function name must not be empty")
        if self.digest_length <= 0:
            raise ValueError(
                f"Digest length must be greater than 0, got {self.digest_length}"
            )
        if not callable(self.factory):
            raise TypeError(f"Hasher factory must be callable, got {type(self.factory)}")

    def init(self) -> Hasher:
        """Create a hasher in its initial state, for incremental hashing."""
        return self.factory()

    def hash(self, data: Buffer, offset: int = 0, length: int | None = None) -> Digest:
        """Hash a message, or a sub-range of it. The input is not modified.

        Args:
            data: Bytes-like object containing the message.
            offset: Index of the first byte of the message.
            length: Number of bytes in the message, `None` to read until the end.

        Returns:
            The digest of the message, `digest_length` bytes long.
        """
        view = check_range(data, offset, length)
        return self.init().update(view).digest()

    def hash_file(self, filepath: str | Path, chunk_size: int | None = None) -> Digest:
        return self.init().update_file(filepath, chunk_size).digest()

    def __str__(self) -> str:
        return self.name
