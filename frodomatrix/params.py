from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from .constants import MAX_DIMENSION, MAX_MODULUS, MIN_MODULUS, SEED_A_SIZE
from .errors import InvalidParameter


@dataclass(frozen=True)
class MatrixParams:
    """Dimension ``n`` and power-of-two modulus ``q`` of a generated matrix."""

    n: int
    q: int

    def __post_init__(self) -> None:
        if isinstance(self.n, bool) or not isinstance(self.n, int):
            raise InvalidParameter(f"n must be an integer, got {self.n!r}")
        if isinstance(self.q, bool) or not isinstance(self.q, int):
            raise InvalidParameter(f"q must be an integer, got {self.q!r}")
        if not 0 < self.n <= MAX_DIMENSION:
            raise InvalidParameter(f"n must be in 1..{MAX_DIMENSION}, got {self.n}")
        if not MIN_MODULUS <= self.q <= MAX_MODULUS or self.q & (self.q - 1):
            raise InvalidParameter(f"q must be a power of two in {MIN_MODULUS}..{MAX_MODULUS}, got {self.q}")


@dataclass(frozen=True)
class ParameterSet:
    name: str
    n: int
    q: int
    seed_length: int = SEED_A_SIZE

    @property
    def params(self) -> MatrixParams:
        return MatrixParams(self.n, self.q)

    def generator(self, strategy: str):
        """Build a generator for this preset; ``strategy`` is chosen by the caller."""
        from .generator import new

        return new(self.n, self.q, strategy, seed_length=self.seed_length)


FRODOKEM_640 = ParameterSet("FrodoKEM-640", n=640, q=1 << 15)
FRODOKEM_976 = ParameterSet("FrodoKEM-976", n=976, q=1 << 16)
FRODOKEM_1344 = ParameterSet("FrodoKEM-1344", n=1344, q=1 << 16)

PARAMETER_SETS: Dict[str, ParameterSet] = {
    ps.name.lower(): ps for ps in (FRODOKEM_640, FRODOKEM_976, FRODOKEM_1344)
}


def get_parameter_set(name: str) -> ParameterSet:
    ps: Optional[ParameterSet] = PARAMETER_SETS.get(name.strip().lower())
    if ps is None:
        known = ", ".join(p.name for p in PARAMETER_SETS.values())
        raise InvalidParameter(f"unknown parameter set {name!r} (known: {known})")
    return ps
