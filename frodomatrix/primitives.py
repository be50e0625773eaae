from __future__ import annotations

"""Scoped access to the SHAKE128 and AES-128 primitives from PyCryptodomex.

Every helper here builds a fresh primitive object for the duration of a single
call and lets it go on return, so no hash state or key schedule is shared
between rows, calls or threads. Errors raised by the backend are re-raised as
:class:`PrimitiveFailure` with the original exception chained.
"""

from Cryptodome.Cipher import AES
from Cryptodome.Hash import SHAKE128

from .constants import AES_BLOCK_SIZE, AES_KEY_SIZE
from .errors import PrimitiveFailure


def shake128(data: bytes, length: int) -> bytes:
    """Absorb ``data`` into a new SHAKE128 instance and squeeze ``length`` bytes."""
    try:
        xof = SHAKE128.new(data)
        return xof.read(length)
    except (TypeError, ValueError) as exc:
        raise PrimitiveFailure(f"SHAKE128 failed: {exc}") from exc


def aes128_ecb_encrypt(key: bytes, blocks: bytes) -> bytes:
    """Encrypt whole 16-byte ``blocks`` under ``key`` with AES-128-ECB, no padding.

    ECB encrypts each block independently, so the output is the concatenation
    of the single-block encryptions of the input blocks.
    """
    if len(key) != AES_KEY_SIZE:
        raise PrimitiveFailure(f"AES-128 expects a {AES_KEY_SIZE}-byte key, got {len(key)}")
    if not blocks or len(blocks) % AES_BLOCK_SIZE:
        raise PrimitiveFailure(f"AES-128-ECB input must be whole {AES_BLOCK_SIZE}-byte blocks")
    try:
        cipher = AES.new(key, AES.MODE_ECB)
        return cipher.encrypt(blocks)
    except (TypeError, ValueError) as exc:
        raise PrimitiveFailure(f"AES-128 encryption failed: {exc}") from exc


__all__ = [
    "shake128",
    "aes128_ecb_encrypt",
]
