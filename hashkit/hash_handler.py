from abc import ABCMeta, abstractmethod
from collections.abc import Buffer
from pathlib import Path
from typing import TYPE_CHECKING, Self

from loguru import logger

from hashkit.define import HasherFinalizedError, HasherState, read_chunk_size
from hashkit.digest import Digest

if TYPE_CHECKING:
    from hashkit.hash_function import HashFunction


class Hasher(metaclass=ABCMeta):
    """Mutable intermediate state of a hash algorithm.

    Create instances with `HashFunction.init()`. After any number of `update()`
    calls, `digest()` returns the same digest as `algorithm.hash(message)`, where
    `message` is the concatenation of the `update()` inputs in order.

    A hasher is single-use: once `digest()` was called, every further call raises
    `HasherFinalizedError`.
    """

    @property
    @abstractmethod
    def algorithm(self) -> "HashFunction":
        """The hash function implemented by this hasher"""
        raise NotImplementedError()

    @abstractmethod
    def update(self, data: Buffer, offset: int = 0, length: int | None = None) -> Self:
        """Append bytes to the message. The input is not modified.

        Args:
            data: Bytes-like object containing the data.
            offset: Index of the first byte to append.
            length: Number of bytes to append, `None` to read until the end.

        Returns:
            This hasher, for chaining.
        """
        raise NotImplementedError()

    @abstractmethod
    def digest(self) -> Digest:
        """Finish the computation and return the digest of the message."""
        raise NotImplementedError()

    def update_file(self, filepath: str | Path, chunk_size: int | None = None) -> Self:
        """Append the content of a file to the message.

        Args:
            filepath: The file to read.
            chunk_size: Read size in bytes, defaults to `read_chunk_size()`.

        Returns:
            This hasher, for chaining.
        """
        if chunk_size is None:
            chunk_size = read_chunk_size()
        if chunk_size <= 0:
            raise ValueError(f"Chunk size must be greater than 0, got {chunk_size}")

        logger.debug(f"Hashing file '{filepath}' with {self.algorithm.name}")
        with open(filepath, "rb") as f:
            for byte_block in iter(lambda: f.read(chunk_size), b""):
                self.update(byte_block)

        return self


class HashEngine(metaclass=ABCMeta):
    @abstractmethod
    def update(self, data: Buffer, offset: int = 0, length: int | None = None) -> None:
        raise NotImplementedError()

    @abstractmethod
    def finalize(self) -> bytes:
        """Pad the message, process the remaining blocks and return the raw digest.

        Must be called at most once.
        """
        raise NotImplementedError()


class EngineHasher(Hasher):
    """Hasher driving a `HashEngine` through the fresh/accumulating/finalized lifecycle."""

    _engine: HashEngine
    _state: HasherState

    def __init__(self, engine: HashEngine) -> None:
        self._engine = engine
        self._state = "fresh"

    @property
    def state(self) -> HasherState:
        return self._state

    def update(self, data: Buffer, offset: int = 0, length: int | None = None) -> Self:
        self.__check_not_finalized("update")
        self._engine.update(data, offset, length)
        self._state = "accumulating"
        return self

    def update_file(self, filepath: str | Path, chunk_size: int | None = None) -> Self:
        self.__check_not_finalized("update_file")
        return super().update_file(filepath, chunk_size)

    def digest(self) -> Digest:
        self.__check_not_finalized("digest")
        self._state = "finalized"
        raw = self._engine.finalize()
        logger.debug(f"{self.algorithm.name} hasher finalized: {raw.hex()}")
        return Digest.of(self.algorithm, raw)

    def __check_not_finalized(self, operation: str) -> None:
        match self._state:
            case "fresh" | "accumulating":
                return
            case "finalized":
                msg = f"Cannot {operation}, {self.algorithm.name} hasher already finalized"
                logger.error(msg)
                raise HasherFinalizedError(msg)
            case _:
                msg = f"Unknown hasher state {self._state}"
                logger.critical(msg)
                raise ValueError(msg)
