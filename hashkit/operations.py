"""Bitwise operations on 32-bit words used by the SHA-2 family."""

from hashkit.define import WORD_MASK, WORD_SIZE


def rotr(x: int, n: int) -> int:
    """Rotate right (circular right shift).

    Args:
        x: 32-bit word.
        n: Shift amount, 0 <= n < 32.

    Returns:
        32-bit word.
    """
    return ((x >> n) | (x << (WORD_SIZE - n))) & WORD_MASK


def shr(x: int, n: int) -> int:
    """Logical right shift, zero-filled."""
    return (x & WORD_MASK) >> n


def choose(x: int, y: int, z: int) -> int:
    # each bit of x picks the bit of y (1) or z (0)
    return ((x & y) ^ (~x & z)) & WORD_MASK


def majority(x: int, y: int, z: int) -> int:
    return (x & y) ^ (x & z) ^ (y & z)


def parity(x: int, y: int, z: int) -> int:
    return x ^ y ^ z


def big_sigma_0(x: int) -> int:
    return rotr(x, 2) ^ rotr(x, 13) ^ rotr(x, 22)


def big_sigma_1(x: int) -> int:
    return rotr(x, 6) ^ rotr(x, 11) ^ rotr(x, 25)


def sigma_0(x: int) -> int:
    return rotr(x, 7) ^ rotr(x, 18) ^ shr(x, 3)


def sigma_1(x: int) -> int:
    return rotr(x, 17) ^ rotr(x, 19) ^ shr(x, 10)
