from __future__ import annotations

import sys
import argparse
import json as _json

from typing import List, Optional

from frodomatrix.codec import matrix_digest, pack_matrix
from frodomatrix.constants import STRATEGIES
from frodomatrix.errors import GenerationError
from frodomatrix.generator import MatrixGenerator, new
from frodomatrix.params import PARAMETER_SETS, get_parameter_set


def _parse_seed(seed_hex: str) -> bytes:
    try:
        return bytes.fromhex(seed_hex.strip())
    except ValueError:
        raise ValueError(f"seed is not valid hex: {seed_hex!r}") from None


def _build_generator(strategy: str, *, params: Optional[str], n: Optional[int], q: Optional[int]) -> MatrixGenerator:
    """Resolve either a named preset or explicit ``n``/``q`` into a generator.

    Args:
        strategy: Expansion strategy name.
        params: Preset name (e.g. ``FrodoKEM-640``); mutually exclusive with n/q.
        n: Matrix dimension.
        q: Modulus (power of two).

    Raises:
        ValueError: If neither or both forms are given.
    """
    if params is not None:
        if n is not None or q is not None:
            raise ValueError("use either --params or --n/--q, not both")
        return get_parameter_set(params).generator(strategy)
    if n is None or q is None:
        raise ValueError("either --params or both --n and --q are required")
    return new(n, q, strategy)


def cmd_gen(
    seed_hex: str,
    strategy: str,
    *,
    params: Optional[str] = None,
    n: Optional[int] = None,
    q: Optional[int] = None,
    fmt: str = "json",
    jobs: int = 1,
) -> bool:
    """Generate a matrix and print it.

    Args:
        seed_hex: Seed as a hex string.
        strategy: ``shake128`` or ``aes128``.
        params: Optional preset name.
        n: Matrix dimension when no preset is given.
        q: Modulus when no preset is given.
        fmt: ``json`` (full matrix), ``hex`` (one packed row per line) or
            ``digest`` (SHA-256 of the packed matrix).
        jobs: Row worker threads.

    Returns:
        True on success.
    """
    gen = _build_generator(strategy, params=params, n=n, q=q)
    matrix = gen.gen_matrix(_parse_seed(seed_hex), workers=jobs)
    if fmt == "json":
        print(_json.dumps({"n": gen.params.n, "q": gen.params.q, "strategy": gen.strategy, "matrix": matrix}))
    elif fmt == "hex":
        for row in matrix:
            print(pack_matrix([row]).hex())
    elif fmt == "digest":
        print(matrix_digest(matrix))
    else:
        raise ValueError(f"unknown output format: {fmt}")
    return True


def cmd_params(*, as_json: bool = False) -> bool:
    sets = list(PARAMETER_SETS.values())
    if as_json:
        print(_json.dumps([{"name": ps.name, "n": ps.n, "q": ps.q, "seed_length": ps.seed_length} for ps in sets]))
    else:
        for ps in sets:
            print(f"{ps.name:14s} n={ps.n:<5d} q={ps.q:<6d} seed={ps.seed_length}B")
    return True


def main(argv: List[str] | None = None):
    ap = argparse.ArgumentParser(
        prog="frodomatrix",
        description="Deterministic public-matrix expansion (SHAKE128 / AES-128)",
        epilog="Counters and matrix words are always little-endian u16.",
    )
    sub = ap.add_subparsers(dest="cmd", required=True)

    ap_gen = sub.add_parser("gen", help="Expand a seed into a matrix")
    ap_gen.add_argument("--seed", required=True, help="Seed as hex")
    ap_gen.add_argument("--strategy", required=True, type=str.lower, choices=STRATEGIES, help="Expansion strategy")
    ap_gen.add_argument("--params", help="Parameter preset name (e.g. FrodoKEM-640)")
    ap_gen.add_argument("--n", type=int, help="Matrix dimension")
    ap_gen.add_argument("--q", type=int, help="Modulus (power of two, at most 65536)")
    ap_gen.add_argument("--format", dest="fmt", choices=("json", "hex", "digest"), default="json", help="Output format (default json)")
    ap_gen.add_argument("--jobs", "-j", type=int, default=1, help="Row worker threads (default 1)")

    ap_params = sub.add_parser("params", help="List parameter presets")
    ap_params.add_argument("--json", action="store_true", help="Emit JSON")

    args = ap.parse_args(argv)
    try:
        if args.cmd == "gen":
            cmd_gen(args.seed, args.strategy, params=args.params, n=args.n, q=args.q, fmt=args.fmt, jobs=args.jobs)
        elif args.cmd == "params":
            cmd_params(as_json=args.json)
        else:
            raise RuntimeError("Unknown command")
    except GenerationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    except (ValueError, TypeError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
