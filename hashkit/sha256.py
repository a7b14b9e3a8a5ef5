"""SHA-256, as defined in FIPS 180-4, Secure Hash Standard (SHS)."""

import struct
from collections.abc import Buffer

from hashkit.block_handler import BlockAccumulator
from hashkit.define import LENGTH_MASK, WORD_MASK
from hashkit.hash_function import HashFunction
from hashkit.hash_handler import EngineHasher, HashEngine
from hashkit.operations import big_sigma_0, big_sigma_1, choose, majority, sigma_0, sigma_1

BLOCK_SIZE = 64
DIGEST_LENGTH = 32

WORDS_PER_BLOCK = 16
LENGTH_SIZE = 8
"""Bytes used to encode the message bit length at the end of the last block"""

# First 32 bits of the fractional parts of the square roots of the first 8 primes
INITIAL_STATE = (
    0x6a09e667, 0xbb67ae85, 0x3c6ef372, 0xa54ff53a,
    0x510e527f, 0x9b05688c, 0x1f83d9ab, 0x5be0cd19,
)  # fmt: skip

# First 32 bits of the fractional parts of the cube roots of the first 64 primes
K = (
    0x428a2f98, 0x71374491, 0xb5c0fbcf, 0xe9b5dba5, 0x3956c25b, 0x59f111f1, 0x923f82a4, 0xab1c5ed5,
    0xd807aa98, 0x12835b01, 0x243185be, 0x550c7dc3, 0x72be5d74, 0x80deb1fe, 0x9bdc06a7, 0xc19bf174,
    0xe49b69c1, 0xefbe4786, 0x0fc19dc6, 0x240ca1cc, 0x2de92c6f, 0x4a7484aa, 0x5cb0a9dc, 0x76f988da,
    0x983e5152, 0xa831c66d, 0xb00327c8, 0xbf597fc7, 0xc6e00bf3, 0xd5a79147, 0x06ca6351, 0x14292967,
    0x27b70a85, 0x2e1b2138, 0x4d2c6dfc, 0x53380d13, 0x650a7354, 0x766a0abb, 0x81c2c92e, 0x92722c85,
    0xa2bfe8a1, 0xa81a664b, 0xc24b8b70, 0xc76c51a3, 0xd192e819, 0xd6990624, 0xf40e3585, 0x106aa070,
    0x19a4c116, 0x1e376c08, 0x2748774c, 0x34b0bcb5, 0x391c0cb3, 0x4ed8aa4a, 0x5b9cca4f, 0x682e6ff3,
    0x748f82ee, 0x78a5636f, 0x84c87814, 0x8cc70208, 0x90befffa, 0xa4506ceb, 0xbef9a3f7, 0xc67178f2,
)  # fmt: skip

_BLOCK_WORDS = struct.Struct(f">{WORDS_PER_BLOCK}I")
_STATE_WORDS = struct.Struct(f">{len(INITIAL_STATE)}I")
_BIT_LENGTH = struct.Struct(">Q")


class Sha256Engine(HashEngine):
    """SHA-256 compression and padding on top of a `BlockAccumulator`.

    The state and schedule lists belong to this engine only and are rewritten in
    place for every block.
    """

    _state: list[int]
    _schedule: list[int]
    _accumulator: BlockAccumulator

    def __init__(self) -> None:
        self._state = list(INITIAL_STATE)
        self._schedule = [0] * len(K)
        self._accumulator = BlockAccumulator(BLOCK_SIZE, self.process_block)

    @property
    def state(self) -> tuple[int, ...]:
        return tuple(self._state)

    @property
    def blocks_processed(self) -> int:
        return self._accumulator.blocks_processed

    def update(self, data: Buffer, offset: int = 0, length: int | None = None) -> None:
        self._accumulator.append(data, offset, length)

    def process_block(self, block: bytearray) -> None:
        w = self._schedule
        w[:WORDS_PER_BLOCK] = _BLOCK_WORDS.unpack(block)
        for t in range(WORDS_PER_BLOCK, len(w)):
            w[t] = (sigma_1(w[t - 2]) + w[t - 7] + sigma_0(w[t - 15]) + w[t - 16]) & WORD_MASK

        state = self._state
        a, b, c, d, e, f, g, h = state
        for k_t, w_t in zip(K, w):
            t1 = h + big_sigma_1(e) + choose(e, f, g) + k_t + w_t
            t2 = big_sigma_0(a) + majority(a, b, c)
            h = g
            g = f
            f = e
            e = (d + t1) & WORD_MASK
            d = c
            c = b
            b = a
            a = (t1 + t2) & WORD_MASK

        for i, x in enumerate((a, b, c, d, e, f, g, h)):
            state[i] = (state[i] + x) & WORD_MASK

    def finalize(self) -> bytes:
        acc = self._accumulator
        bit_length = (8 * (acc.blocks_processed * BLOCK_SIZE + acc.position)) & LENGTH_MASK

        acc.put(b"\x80")
        if acc.remaining < LENGTH_SIZE:
            # no room for the length, it goes in an extra block
            acc.fill_zero_to(BLOCK_SIZE)
            acc.flush()

        acc.fill_zero_to(BLOCK_SIZE - LENGTH_SIZE)
        acc.put(_BIT_LENGTH.pack(bit_length))
        acc.flush()

        return _STATE_WORDS.pack(*self._state)


class Sha256Hasher(EngineHasher):
    def __init__(self) -> None:
        super().__init__(Sha256Engine())

    @property
    def algorithm(self) -> HashFunction:
        return SHA256

    def __repr__(self) -> str:
        engine: Sha256Engine = self._engine  # type: ignore
        state = ", ".join(f"{x:08x}" for x in engine.state)
        return f"Sha256Hasher(state=[{state}], blocks_processed={engine.blocks_processed}, {self.state})"


SHA256 = HashFunction("SHA-256", DIGEST_LENGTH, Sha256Hasher)
