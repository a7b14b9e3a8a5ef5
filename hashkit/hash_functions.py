"""Standard hash functions.

Basic usage:

    digest = hash_functions.sha256().hash(b"Hello, world!")
    digest.hex()  # 315f5bdb76d078c43b8ac0064e4a0164612b1fce77c869345bfc94c75894edd3
    digest.verify_message(b"Hello, world!")  # True
"""

from hashkit.hash_function import HashFunction
from hashkit.sha256 import SHA256

_REGISTRY: dict[str, HashFunction] = {}


def sha256() -> HashFunction:
    """SHA-256 from FIPS 180-4. Digest size: 256 bits."""
    return SHA256


def get(name: str) -> HashFunction:
    """Look up a hash function by name.

    Args:
        name: Hash function name, case and `-`/`_` insensitive (`SHA-256`, `sha256`).

    Returns:
        The registered hash function.
    """
    try:
        return _REGISTRY[_normalize(name)]
    except KeyError:
        raise ValueError(
            f"Unknown hash function '{name}', available: {', '.join(names())}"
        ) from None


def names() -> list[str]:
    return [function.name for function in _REGISTRY.values()]


def _register(function: HashFunction) -> None:
    _REGISTRY[_normalize(function.name)] = function


def _normalize(name: str) -> str:
    return name.lower().replace("-", "").replace("_", "")


_register(SHA256)
