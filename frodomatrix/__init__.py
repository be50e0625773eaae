"""
frodomatrix: public-matrix expansion for FrodoKEM-style lattice KEMs.

Features:

- Deterministic n×n matrix over Z_q expanded from a short public seed.
- Two interchangeable strategies behind one contract: SHAKE128 (row-wise)
  and AES-128 (8 columns per 128-bit counter block), both via PyCryptodomex.
- Explicit little-endian counters and words, independent of the host.
- Optional thread-pool row generation; every row owns its primitive instance.
- FrodoKEM-640/976/1344 dimension presets and a small CLI for fingerprints.

Typical use from a KEM layer:

    gen = frodomatrix.new(640, 1 << 15, "aes128")
    A = gen.gen_matrix(seed_a)
"""

from .errors import GenerationError, InvalidParameter, InvalidSeedLength, PrimitiveFailure
from .generator import (
    CipherExpansionGenerator,
    HashExpansionGenerator,
    Matrix,
    MatrixGenerator,
    new,
)
from .params import PARAMETER_SETS, MatrixParams, ParameterSet, get_parameter_set

__version__ = "0.1"

__all__ = [
    "new",
    "MatrixGenerator",
    "HashExpansionGenerator",
    "CipherExpansionGenerator",
    "Matrix",
    "MatrixParams",
    "ParameterSet",
    "PARAMETER_SETS",
    "get_parameter_set",
    "GenerationError",
    "InvalidParameter",
    "InvalidSeedLength",
    "PrimitiveFailure",
]
