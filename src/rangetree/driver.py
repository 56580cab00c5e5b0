"""Batch driver that feeds assign/query commands into a summing RangeTree

Input is a stream of whitespace separated tokens:

    n k
    A l r x    (set every value in [l, r] to x, 1-indexed)
    Q l r      (write the sum of [l, r], 1-indexed)
    ...

The tree starts as n zeros, and one output line is written per Q command.
"""

from __future__ import annotations
from collections.abc import Iterable, Iterator
import argparse
import logging
import sys
from typing import Optional, TextIO

from .driver_options import DriverOptions
from .rangetree import RangeTree

log = logging.getLogger(__name__)


class CommandError(ValueError):
    """The command stream could not be parsed"""


def tokenize(lines: Iterable[str]) -> Iterator[str]:
    """Split the lines of a text stream into whitespace separated tokens"""
    for line in lines:
        yield from line.split()


class _TokenReader:
    def __init__(self, tokens: Iterable[str]):
        self._tokens: Iterator[str] = iter(tokens)
        self.position: int = 0

    def next_token(self, what: str) -> str:
        try:
            tok = next(self._tokens)
        except StopIteration:
            raise CommandError(
                f"Unexpected end of input at token {self.position}, expected {what}"
            ) from None
        self.position += 1
        return tok

    def next_int(self, what: str) -> int:
        tok = self.next_token(what)
        try:
            return int(tok)
        except ValueError:
            raise CommandError(
                f"Expected an integer {what} at token {self.position}, got {tok!r}"
            ) from None


def run_commands(
    tokens: Iterable[str], out: TextIO, verbose: bool = False
) -> RangeTree[int]:
    """Execute a command stream, writing one line per query to out

    Args:
        tokens: The whitespace separated tokens of the input
        out: Where query results are written
        verbose: Log the rendered tree after every assignment

    Returns:
        RangeTree: The tree in its final state

    Raises:
        CommandError: If the stream is malformed
    """
    reader = _TokenReader(tokens)
    n = reader.next_int("domain size")
    k = reader.next_int("command count")
    if n < 0 or k < 0:
        raise CommandError(f"Domain size and command count must be >= 0, got {n} {k}")

    tree: RangeTree[int] = RangeTree.summing([0] * n)
    for _ in range(k):
        cmd = reader.next_token("command")
        if cmd == "A":
            l = reader.next_int("left bound")
            r = reader.next_int("right bound")
            x = reader.next_int("value")
            tree.assign(l - 1, r, x)
            if verbose:
                log.debug("A %d %d %d\n%s", l, r, x, tree.render_debug_tree())
        elif cmd == "Q":
            l = reader.next_int("left bound")
            r = reader.next_int("right bound")
            out.write(f"{tree.query(l - 1, r)}\n")
        else:
            raise CommandError(
                f"Unknown command {cmd!r} at token {reader.position}, expected 'A' or 'Q'"
            )
    return tree


def run(options: DriverOptions) -> RangeTree[int]:
    """Run the driver with the input and output paths from options.

    A path of "-" means stdin or stdout.
    """
    inpath = options["input"]
    outpath = options["output"]
    verbose = options["verbose"]

    if inpath == "-":
        tokens = list(tokenize(sys.stdin))
    else:
        with open(inpath, "r") as f:
            tokens = list(tokenize(f))

    if outpath == "-":
        return run_commands(tokens, sys.stdout, verbose)
    with open(outpath, "w") as f:
        return run_commands(tokens, f, verbose)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rangetree",
        description="Run a batch of range assignments and sum queries",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=DriverOptions()["input"],
        help="command file, or - for stdin (default: %(default)s)",
    )
    parser.add_argument(
        "output",
        nargs="?",
        default=DriverOptions()["output"],
        help="result file, or - for stdout (default: %(default)s)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log the tree after every assignment",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    options = DriverOptions(
        {"input": args.input, "output": args.output, "verbose": args.verbose}
    )
    try:
        run(options)
    except CommandError as e:
        log.error("%s", e)
        return 1
    return 0
