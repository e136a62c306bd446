# settings_generator.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from random import Random, SystemRandom
from typing import List

from errors import BadConfig, EnigmaError
from permutation import plugboard_cycles
from suites import SUITES, load_suite
from utilities import MachineSpec, load_config

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(alpha: str, k: int, rng: Random | SystemRandom) -> List[str]:
    """Return *k* disjoint plug pairs."""
    max_possible = len(alpha) // 2
    k = min(k, max_possible)
    pool = list(alpha)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def _pick(pool: List[str], k: int, what: str, rng: Random | SystemRandom) -> List[str]:
    if len(pool) < k:
        raise BadConfig(f"Need {k} {what}, catalog has {len(pool)}")
    return rng.sample(pool, k)


def random_setting(spec: MachineSpec, rng: Random | SystemRandom, pairs: int = 0) -> str:
    """Return a settings line that `Machine.insert_rotors`/`set_rotors` accept."""
    n_fixed = spec.num_rotors - spec.num_pawls - 1
    reflectors = [r.name for r in spec.rotors if r.reflecting()]
    fixed = [r.name for r in spec.rotors if not r.reflecting() and not r.rotates()]
    moving = [r.name for r in spec.rotors if r.rotates()]

    names = (
        _pick(reflectors, 1, "reflectors", rng)
        + _pick(fixed, n_fixed, "fixed rotors", rng)
        + _pick(moving, spec.num_pawls, "moving rotors", rng)
    )
    symbols = spec.alphabet.symbols
    positions = "".join(rng.choice(symbols) for _ in range(spec.num_rotors - 1))
    plugs = plugboard_cycles(choose_pairs(symbols, pairs, rng), spec.alphabet)

    return " ".join(part for part in ["*", *names, positions, plugs] if part)


def parse_cli() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate a random settings line")
    p.add_argument("config", nargs="?", help="Machine configuration file")
    p.add_argument("-s", "--suite", choices=sorted(SUITES), help="Use a built-in wheel suite")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument("--pairs", type=int, default=10, help="Plugboard pairs (default: 10)")
    p.add_argument(
        "--outfile",
        type=Path,
        help="Append the line to this file instead of printing it",
    )
    args = p.parse_args()
    if (args.config is None) == (args.suite is None):
        p.error("give exactly one of CONFIG or --suite")
    return args


# ── main ─────────────────────────────────────────────────────────


def main() -> None:
    args = parse_cli()
    try:
        spec = load_suite(args.suite) if args.suite else load_config(args.config)
        line = random_setting(spec, build_rng(args.seed), args.pairs)
    except EnigmaError as exc:
        sys.exit(f"Error: {exc}")

    if args.outfile:
        with args.outfile.open("a", encoding="utf-8") as f:
            f.write(line + "\n")
        print(f"✅  Appended to {args.outfile}")
    else:
        print(line)


if __name__ == "__main__":
    main()
