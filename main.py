# main.py
from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from debug import COMPONENTS, Debug
from errors import BadConfig, EnigmaError
from suites import SUITES, load_suite
from utilities import (
    MachineSpec,
    apply_setting,
    group_blocks,
    load_config,
    parse_setting_line,
    preprocess_message,
)

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────


debug = Debug()


@dataclass(slots=True)
class Config:
    """Runtime switches for message processing."""

    block: int = 5                  # display block size
    upcase: bool = True             # fold message lines to upper case


# ────────────────────────────────────────────────────────────────────────
#  1. MachineContext – wraps a Machine & its settings lines
# ────────────────────────────────────────────────────────────────────────


class MachineContext:
    """A thin wrapper so we do not pass the catalog, machine and switches around."""

    def __init__(self, spec: MachineSpec, cfg: Config) -> None:
        self.spec = spec
        self.cfg = cfg
        self.machine = spec.build()
        self.configured = False

    def setup(self, line: str) -> None:
        """Apply a settings line ("* B I II III AAA (AB)")."""
        if self.cfg.upcase:
            line = line.upper()
        setting = parse_setting_line(line, self.machine.num_rotors())
        apply_setting(self.machine, setting)
        self.configured = True

    def convert_line(self, line: str) -> str:
        if not self.configured:
            raise BadConfig("no settings line before the first message")
        clean = preprocess_message(line, self.cfg.upcase)
        return group_blocks(self.machine.convert_message(clean), self.cfg.block)


def process(ctx: MachineContext, lines: Iterable[str], out: TextIO) -> None:
    """Run every line of LINES through CTX, writing results to OUT."""
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line.lstrip().startswith("*"):
            ctx.setup(line.strip())
            debug.log("cli", f"settings -> {ctx.machine.positions()}")
        elif not line.strip():
            out.write("\n")
        else:
            out.write(ctx.convert_line(line) + "\n")


# ────────────────────────────────────────────────────────────────────────
#  2. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with a rotor machine")
    p.add_argument("files", nargs="*", metavar="FILE", help="CONFIG [INPUT [OUTPUT]]; with --suite only INPUT [OUTPUT]. Input defaults to stdin, output to stdout.")
    p.add_argument("-s", "--suite", choices=sorted(SUITES), help="Use a built-in wheel suite instead of a configuration file.")
    p.add_argument("--block", type=int, default=5, help="Output group size. Default: 5")
    p.add_argument("--no-upcase", dest="upcase", action="store_false", help="Keep message case as typed (for alphabets with lower-case symbols).")
    p.add_argument("--debug", action="append", default=[], choices=COMPONENTS, metavar="COMPONENT", help=f"Log one component; repeatable. One of: {', '.join(COMPONENTS)}")
    p.add_argument("--log-to", metavar="FILE", help="Also write debug messages to FILE.")
    args = p.parse_args(argv)

    limit = 2 if args.suite else 3
    if not args.suite and not args.files:
        p.error("a configuration file or --suite is required")
    if len(args.files) > limit:
        p.error(f"at most {limit} file arguments allowed")
    if args.block < 1:
        p.error("--block must be positive")
    return args


def _open_input(name: str | None) -> TextIO:
    if name is None:
        return sys.stdin
    try:
        return open(name, encoding="utf-8")
    except OSError:
        raise BadConfig(f"could not open {name}") from None


def _open_output(name: str | None) -> TextIO:
    if name is None:
        return sys.stdout
    try:
        return open(name, "w", encoding="utf-8")
    except OSError:
        raise BadConfig(f"could not open {name}") from None


# ────────────────────────────────────────────────────────────────────────
#  3. Main entry point
# ────────────────────────────────────────────────────────────────────────


def run(args: argparse.Namespace) -> None:
    if args.debug:
        debug.enable(*args.debug)
    if args.log_to:
        debug.log_to(args.log_to)

    files = list(args.files)
    spec = load_suite(args.suite) if args.suite else load_config(Path(files.pop(0)))
    in_name = files[0] if files else None
    out_name = files[1] if len(files) > 1 else None

    ctx = MachineContext(spec, Config(block=args.block, upcase=args.upcase))
    src = _open_input(in_name)
    try:
        dst = _open_output(out_name)
        try:
            process(ctx, src, dst)
        finally:
            if dst is not sys.stdout:
                dst.close()
    finally:
        if src is not sys.stdin:
            src.close()


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    try:
        run(args)
    except EnigmaError as exc:
        sys.exit(f"Error: {exc}")


if __name__ == "__main__":
    main()
