import threading
from pathlib import Path
from unittest.mock import Mock

import pytest

from hashkit import hash_functions
from hashkit.hash_function import HashFunction
from hashkit.sha256 import Sha256Hasher


@pytest.fixture
def sha256() -> HashFunction:
    return hash_functions.sha256()


class TestHashFunctionConstruction:
    """Test HashFunction() validation."""

    def test_fields(self) -> None:
        factory = Mock()
        function = HashFunction("TEST", 16, factory)

        assert function.name == "TEST"
        assert function.digest_length == 16
        assert str(function) == "TEST"

    @pytest.mark.parametrize("digest_length", [0, -1])
    def test_non_positive_length(self, digest_length: int) -> None:
        with pytest.raises(ValueError):
            HashFunction("TEST", digest_length, Mock())

    def test_empty_name(self) -> None:
        with pytest.raises(ValueError):
            HashFunction("", 16, Mock())

    def test_factory_not_callable(self) -> None:
        with pytest.raises(TypeError):
            HashFunction("TEST", 16, None)  # type: ignore

    def test_init_uses_factory(self) -> None:
        factory = Mock()
        function = HashFunction("TEST", 16, factory)

        assert function.init() is factory.return_value
        assert function.init() is factory.return_value
        assert factory.call_count == 2

    def test_identity_equality(self) -> None:
        factory = Mock()
        assert HashFunction("TEST", 16, factory) != HashFunction("TEST", 16, factory)


class TestHashFunctionHash:
    """Test HashFunction.hash() and HashFunction.init()."""

    def test_metadata(self, sha256: HashFunction) -> None:
        assert sha256.name == "SHA-256"
        assert sha256.digest_length == 32

    def test_hash(self, sha256: HashFunction) -> None:
        data = bytearray(b"Hello, world!")
        before = bytes(data)
        digest = sha256.hash(data)

        assert digest.algorithm is sha256
        assert len(digest.bytes()) == sha256.digest_length
        assert data == before  # input not modified
        assert digest == sha256.hash(data)  # consistent

    def test_hash_range(self, sha256: HashFunction) -> None:
        data = b"Hello, world!"
        digest = sha256.hash(data, 4, 4)

        assert digest == sha256.hash(data, 4, 4)
        assert digest == sha256.hash(data[4:8])
        assert sha256.hash(data, 7) == sha256.hash(data[7:])

    @pytest.mark.parametrize("offset, length", [(-1, 1), (0, 14), (13, 1), (2, -1)])
    def test_hash_out_of_range(self, sha256: HashFunction, offset: int, length: int) -> None:
        with pytest.raises(ValueError):
            sha256.hash(b"Hello, world!", offset, length)

    def test_hash_none(self, sha256: HashFunction) -> None:
        with pytest.raises(TypeError):
            sha256.hash(None)  # type: ignore

    def test_later_hashes_unaffected(self, sha256: HashFunction) -> None:
        sha256.hash(b"abc")
        assert (
            sha256.hash(b"bcd").hex()
            == "a6b0f90d2ac2b8d1f250c687301aef132049e9016df936680e81fa7bc7d81d70"
        )

    def test_init(self, sha256: HashFunction) -> None:
        hasher = sha256.init()

        assert isinstance(hasher, Sha256Hasher)
        assert hasher.algorithm is sha256
        assert sha256.init() is not hasher

    def test_concurrent_hash(self, sha256: HashFunction) -> None:
        messages = [bytes([i]) * (i * 37) for i in range(16)]
        expected = [sha256.hash(m) for m in messages]
        results: list = [None] * len(messages)

        def worker(index: int) -> None:
            for _ in range(5):
                results[index] = sha256.hash(messages[index])

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(len(messages))]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results == expected


class TestHashFunctionHashFile:
    """Test HashFunction.hash_file()."""

    def test_hash_file(self, sha256: HashFunction, tmp_path: Path) -> None:
        filepath = tmp_path / "message.txt"
        filepath.write_bytes(b"Hello, world!")

        digest = sha256.hash_file(filepath)
        assert digest.hex() == "315f5bdb76d078c43b8ac0064e4a0164612b1fce77c869345bfc94c75894edd3"
        assert sha256.hash_file(str(filepath), 2) == digest

    def test_empty_file(self, sha256: HashFunction, tmp_path: Path) -> None:
        filepath = tmp_path / "empty"
        filepath.touch()

        assert sha256.hash_file(filepath) == sha256.hash(b"")
