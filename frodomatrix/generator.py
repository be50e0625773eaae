from __future__ import annotations

"""Seed expansion of the public matrix A over Z_q.

Two strategies share one contract (:class:`MatrixGenerator`):

- :class:`HashExpansionGenerator` squeezes one row at a time from SHAKE128
  over ``LE16(i) || seed``.
- :class:`CipherExpansionGenerator` keys AES-128 with the seed and encrypts the
  counter blocks ``LE16(i) || LE16(j) || 0^96``, yielding 8 columns per block.

Generators keep only their immutable parameters. Each row acquires its own
primitive instance, so rows can run concurrently and repeated calls never see
each other's state.
"""

import concurrent.futures as _fut
from typing import Callable, List, Optional, Protocol, Union

from .codec import counter_block, parse_u16le, u16le
from .constants import (
    AES_KEY_SIZE,
    STRATEGY_AES128,
    STRATEGY_SHAKE128,
    STRATEGIES,
    WORD_SIZE,
    WORDS_PER_BLOCK,
)
from .errors import InvalidParameter, InvalidSeedLength
from .params import MatrixParams
from .primitives import aes128_ecb_encrypt, shake128


Matrix = List[List[int]]
SeedLike = Union[bytes, bytearray, memoryview]


class MatrixGenerator(Protocol):
    params: MatrixParams
    strategy: str
    seed_length: Optional[int]

    def gen_row(self, seed: SeedLike, i: int) -> List[int]:
        ...

    def gen_matrix(self, seed: SeedLike, *, workers: Optional[int] = None) -> Matrix:
        ...


def _as_seed(seed: SeedLike) -> bytes:
    if not isinstance(seed, (bytes, bytearray, memoryview)):
        raise TypeError(f"seed must be bytes-like, got {type(seed).__name__}")
    return bytes(seed)


def _check_row_index(params: MatrixParams, i: int) -> None:
    if isinstance(i, bool) or not isinstance(i, int):
        raise TypeError(f"row index must be an integer, got {i!r}")
    if not 0 <= i < params.n:
        raise IndexError(f"row index {i} out of range for n={params.n}")


def _assemble(row_fn: Callable[[int], List[int]], n: int, workers: Optional[int]) -> Matrix:
    """Compute rows ``0..n-1`` in order, optionally on a thread pool.

    Each row is produced by exactly one task. The first failing row propagates
    its exception and no matrix is returned.
    """
    if workers is None or workers == 1:
        return [row_fn(i) for i in range(n)]
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    with _fut.ThreadPoolExecutor(max_workers=min(workers, n)) as ex:
        return list(ex.map(row_fn, range(n)))


class HashExpansionGenerator:
    """Row-wise expansion with SHAKE128.

    Row ``i`` is ``SHAKE128(LE16(i) || seed, 16n bits)`` read as ``n``
    little-endian u16 words reduced modulo ``q``. The seed may have any length
    unless ``seed_length`` pins it.
    """

    strategy = STRATEGY_SHAKE128

    def __init__(self, n: int, q: int, *, seed_length: Optional[int] = None):
        self.params = MatrixParams(n, q)
        if seed_length is not None and (
            isinstance(seed_length, bool) or not isinstance(seed_length, int) or seed_length < 0
        ):
            raise InvalidParameter(f"seed_length must be a non-negative integer, got {seed_length!r}")
        self.seed_length = seed_length

    def __repr__(self) -> str:
        return f"HashExpansionGenerator(n={self.params.n}, q={self.params.q}, seed_length={self.seed_length})"

    def _check_seed(self, seed: SeedLike) -> bytes:
        seed = _as_seed(seed)
        if self.seed_length is not None and len(seed) != self.seed_length:
            raise InvalidSeedLength(f"{self.strategy} seed must be {self.seed_length} bytes, got {len(seed)}")
        return seed

    def _row(self, seed: bytes, i: int) -> List[int]:
        stream = shake128(u16le(i) + seed, WORD_SIZE * self.params.n)
        return parse_u16le(stream, self.params.q)

    def gen_row(self, seed: SeedLike, i: int) -> List[int]:
        seed = self._check_seed(seed)
        _check_row_index(self.params, i)
        return self._row(seed, i)

    def gen_matrix(self, seed: SeedLike, *, workers: Optional[int] = None) -> Matrix:
        seed = self._check_seed(seed)
        return _assemble(lambda i: self._row(seed, i), self.params.n, workers)


class CipherExpansionGenerator:
    """Block-wise expansion with AES-128 keyed by the seed.

    Requires ``n`` to be a multiple of 8: each 16-byte ciphertext block fills
    8 consecutive columns and there is no rule for a trailing partial block.
    """

    strategy = STRATEGY_AES128
    seed_length = AES_KEY_SIZE

    def __init__(self, n: int, q: int):
        self.params = MatrixParams(n, q)
        if self.params.n % WORDS_PER_BLOCK:
            raise InvalidParameter(f"{self.strategy} requires n to be a multiple of {WORDS_PER_BLOCK}, got {n}")

    def __repr__(self) -> str:
        return f"CipherExpansionGenerator(n={self.params.n}, q={self.params.q})"

    def _check_seed(self, seed: SeedLike) -> bytes:
        seed = _as_seed(seed)
        if len(seed) != self.seed_length:
            raise InvalidSeedLength(f"{self.strategy} seed must be {self.seed_length} bytes, got {len(seed)}")
        return seed

    def _row(self, key: bytes, i: int) -> List[int]:
        # Blocks for j = 0, 8, ..., n-8 in column order
        blocks = b"".join(counter_block(i, j) for j in range(0, self.params.n, WORDS_PER_BLOCK))
        return parse_u16le(aes128_ecb_encrypt(key, blocks), self.params.q)

    def gen_row(self, seed: SeedLike, i: int) -> List[int]:
        key = self._check_seed(seed)
        _check_row_index(self.params, i)
        return self._row(key, i)

    def gen_matrix(self, seed: SeedLike, *, workers: Optional[int] = None) -> Matrix:
        key = self._check_seed(seed)
        return _assemble(lambda i: self._row(key, i), self.params.n, workers)


def new(n: int, q: int, strategy: str, *, seed_length: Optional[int] = None) -> MatrixGenerator:
    """Construct the generator for ``strategy`` (``"shake128"`` or ``"aes128"``).

    Raises:
        InvalidParameter: unknown strategy, ``n``/``q`` outside the supported
            domain, or a ``seed_length`` the strategy cannot honour.
    """
    name = strategy.strip().lower() if isinstance(strategy, str) else None
    if name == STRATEGY_SHAKE128:
        return HashExpansionGenerator(n, q, seed_length=seed_length)
    if name == STRATEGY_AES128:
        if seed_length is not None and seed_length != AES_KEY_SIZE:
            raise InvalidParameter(f"{STRATEGY_AES128} seeds are always {AES_KEY_SIZE} bytes, got seed_length={seed_length}")
        return CipherExpansionGenerator(n, q)
    raise InvalidParameter(f"unknown strategy {strategy!r} (expected one of: {', '.join(STRATEGIES)})")
