from __future__ import annotations

import hashlib
import struct
from typing import List, Sequence

from .constants import BLOCK_PADDING, MAX_COUNTER, WORD_SIZE


# Row/column counters: u16 little-endian, independent of host byte order
_U16_STRUCT = struct.Struct("<H")
# AES plaintext block prefix: row u16 | column u16 (then 12 zero bytes)
_BLOCK_PREFIX_STRUCT = struct.Struct("<HH")


def u16le(value: int) -> bytes:
    if not 0 <= value <= MAX_COUNTER:
        raise ValueError(f"counter out of 16-bit range: {value}")
    return _U16_STRUCT.pack(value)


def counter_block(i: int, j: int) -> bytes:
    """Build the 16-byte AES input ``i || j || 0^96`` with little-endian counters."""
    if not (0 <= i <= MAX_COUNTER and 0 <= j <= MAX_COUNTER):
        raise ValueError(f"block counters out of 16-bit range: ({i}, {j})")
    return _BLOCK_PREFIX_STRUCT.pack(i, j) + BLOCK_PADDING


def parse_u16le(buf: bytes, q: int) -> List[int]:
    """Decode ``buf`` as little-endian u16 words, each reduced modulo ``q``."""
    if len(buf) % WORD_SIZE:
        raise ValueError(f"buffer length must be even, got {len(buf)}")
    count = len(buf) // WORD_SIZE
    return [w % q for w in struct.unpack(f"<{count}H", buf)]


def pack_matrix(matrix: Sequence[Sequence[int]]) -> bytes:
    # Row-major LE u16; entries are already < q <= 2^16
    return b"".join(struct.pack(f"<{len(row)}H", *row) for row in matrix)


def matrix_digest(matrix: Sequence[Sequence[int]]) -> str:
    return hashlib.sha256(pack_matrix(matrix)).hexdigest()
