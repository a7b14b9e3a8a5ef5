import base64
import hmac
from collections.abc import Buffer
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hashkit.hash_function import HashFunction


@dataclass(frozen=True, slots=True)
class Digest:
    """Immutable digest bytes, tagged with the hash function which created them.

    Equality and hashing only consider the bytes, the algorithm is not compared.
    """

    algorithm: "HashFunction" = field(compare=False)
    """Hash function which created this digest"""

    value: bytes
    """Digest bytes"""

    def __post_init__(self) -> None:
        if self.algorithm is None:
            raise TypeError("algorithm must not be None")
        if self.value is None:
            raise TypeError("data must be a bytes-like object, not None")

        # always keep a private immutable copy, whatever buffer was passed in
        object.__setattr__(self, "value", bytes(memoryview(self.value)))

    @classmethod
    def of(cls, algorithm: "HashFunction", data: Buffer) -> "Digest":
        """Tag a copy of `data` with the hash function which output it."""
        return cls(algorithm, data)  # type: ignore

    def hex(self) -> str:
        return self.value.hex()

    def base64(self) -> str:
        return base64.b64encode(self.value).decode("ascii")

    def verify_message(self, data: Buffer) -> bool:
        """Check whether `algorithm` hashes `data` to this digest.

        Args:
            data: The message to verify.

        Returns:
            `True` if the message matches, `False` otherwise.
        """
        other = self.algorithm.hash(data)
        return hmac.compare_digest(self.value, other.value)

    def __str__(self) -> str:
        return self.hex()

    def __bytes__(self) -> bytes:
        return self.value

    def bytes(self) -> bytes:
        # immutable, callers cannot alter the digest through it
        return self.value
