from abc import ABCMeta, abstractmethod
from pathlib import Path
from typing import Any

import msgpack
from loguru import logger

from hashkit import hash_functions
from hashkit.digest import Digest


class DigestStore(metaclass=ABCMeta):
    @abstractmethod
    def load(self) -> dict[str, Digest]:
        """Load the stored digests.

        Returns:
            Digests by key, empty if nothing was saved yet.
        """
        raise NotImplementedError()

    @abstractmethod
    def save(self, digests: dict[str, Digest]) -> None:
        raise NotImplementedError()


class MsgpackDigestStore(DigestStore):
    """Digests saved as a msgpack map of `{key: {"algorithm": name, "value": bytes}}`"""

    __file_path: Path

    def __init__(self, file_path: str | Path) -> None:
        self.__file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self.__file_path

    def load(self) -> dict[str, Digest]:
        if not self.__file_path.exists():
            logger.info(f"Digest file '{self.__file_path}' not found, starting empty")
            return {}

        with open(self.__file_path, "rb") as f:
            data: dict[str, Any] = msgpack.load(f)

        if not isinstance(data, dict):
            raise ValueError(
                f"Malformed digest file '{self.__file_path}': expected a map, got {type(data)}"
            )

        digests = {key: self.__decode(key, record) for key, record in data.items()}
        logger.info(f"Loaded {len(digests)} digests from '{self.__file_path}'")
        return digests

    def save(self, digests: dict[str, Digest]) -> None:
        data = {key: self.__encode(digest) for key, digest in digests.items()}

        with open(self.__file_path, "wb") as f:
            msgpack.dump(data, f)

        logger.info(f"Saved {len(digests)} digests to '{self.__file_path}'")

    def __encode(self, digest: Digest) -> dict[str, Any]:
        return {"algorithm": digest.algorithm.name, "value": digest.value}

    def __decode(self, key: str, record: dict[str, Any]) -> Digest:
        try:
            algorithm = hash_functions.get(record["algorithm"])
            value = record["value"]
        except (KeyError, TypeError, AttributeError) as e:
            raise ValueError(f"Malformed digest record '{key}': {record!r}") from e

        if not isinstance(value, bytes):
            raise ValueError(f"Malformed digest record '{key}': value is {type(value)}")

        if len(value) != algorithm.digest_length:
            raise ValueError(
                f"Digest '{key}' has {len(value)} bytes, {algorithm.name} expects {algorithm.digest_length}"
            )

        return Digest.of(algorithm, value)
