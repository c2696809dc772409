"""
minqueue Command-Line Interface (CLI)

Small driver around IndexedMinHeap with subcommands:
- demo: the fruit walkthrough (keys are string lengths)
- drain: queue words by length and print them in pop order
- benchmark: time add / pop_min / remove and write a CSV

Usage examples:
    python -m minqueue.cli demo
    python -m minqueue.cli drain kiwi apple fig
    python -m minqueue.cli benchmark --path results.csv --base-input 100
"""

import argparse
import logging
import sys

from . import config
from .benchmark import run_benchmarks
from .datastructures import IndexedMinHeap

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def cmd_demo(args):
    """Walk through add / pop_min / remove on a few fruit names."""
    queue = IndexedMinHeap(len)

    for fruit in ("pineapple", "coco", "mango", "banana"):
        queue.add(fruit)
        print(f"add {fruit!r} (key {queue.key_of(fruit):g})")

    print(f"pop_min -> {queue.pop_min()!r}")
    print(f"remove 'coco' -> {queue.remove('coco')}")
    print(f"remove 'banana' -> {queue.remove('banana')}")
    print(f"size -> {queue.size()}")
    print(f"pop_min -> {queue.pop_min()!r}")

    queue.add("fig")
    print(f"add 'fig' (key {queue.key_of('fig'):g})")
    print(f"pop_min -> {queue.pop_min()!r}")
    print(f"pop_min -> {queue.pop_min()!r}")
    print(f"pop_min -> {queue.pop_min()!r}")


def cmd_drain(args):
    """Print words ordered by length (duplicates collapse to one entry)."""
    queue = IndexedMinHeap(len, args.words)
    if not queue:
        print("Queue is empty.")
        return
    rank = 1
    while queue:
        word = queue.peek_min()
        key = queue.key_of(word)
        queue.remove(word)
        print(f"  {rank}. {word} | key={key:g}")
        rank += 1


def cmd_benchmark(args):
    """Time the queue operations and save the results as CSV."""
    rows = run_benchmarks(args.path, base_input=args.base_input, steps=args.steps, iterations=args.iterations)
    print(f"\nBenchmark completed. {rows} rows saved to {args.path}")


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m minqueue.cli", description="Mutable minimum-value queue CLI")
    p.add_argument("--log-level", default=config.LOG_LEVEL, type=str.upper,
                   choices=config.LOG_LEVELS)
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("demo", help="Run the fruit walkthrough")
    s.set_defaults(func=cmd_demo)

    s = sub.add_parser("drain", help="Print words in order of length")
    s.add_argument("words", nargs="*")
    s.set_defaults(func=cmd_drain)

    s = sub.add_parser("benchmark", help="Benchmark queue operations into a CSV file")
    s.add_argument("--path", required=True)
    s.add_argument("--base-input", type=int, default=100)
    s.add_argument("--steps", type=int, default=8)
    s.add_argument("--iterations", type=int, default=5)
    s.set_defaults(func=cmd_benchmark)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m minqueue.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    logger.debug("running %s", args.cmd)
    args.func(args)


if __name__ == "__main__":
    main()
