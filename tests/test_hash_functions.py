import pytest

from hashkit import hash_functions
from hashkit.sha256 import SHA256, Sha256Hasher


class TestRegistry:
    """Test the built-in hash function registry."""

    def test_sha256(self) -> None:
        function = hash_functions.sha256()

        assert function is SHA256
        assert function is hash_functions.sha256()
        assert function.name == "SHA-256"
        assert 8 * function.digest_length == 256
        assert isinstance(function.init(), Sha256Hasher)

    @pytest.mark.parametrize("name", ["SHA-256", "sha-256", "sha256", "SHA_256"])
    def test_get(self, name: str) -> None:
        assert hash_functions.get(name) is hash_functions.sha256()

    def test_get_unknown(self) -> None:
        with pytest.raises(ValueError, match="md5"):
            hash_functions.get("md5")

    def test_names(self) -> None:
        assert hash_functions.names() == ["SHA-256"]

    def test_doc_usage_example(self) -> None:
        digest = hash_functions.sha256().hash(b"Hello, world!")

        assert digest.hex() == "315f5bdb76d078c43b8ac0064e4a0164612b1fce77c869345bfc94c75894edd3"
        assert digest.verify_message(b"Hello, world!")
        assert not digest.verify_message(b"another message")
