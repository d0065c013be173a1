"""
Command-line interface for the password engine.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .charset import enabled_classes
from .config import (
    DEFAULT_CONFIG,
    DEFAULT_OPTIONS,
    PRESETS,
    GenerationOptions,
    preset_options,
)
from .random_source import SOURCE_NAMES, make_index_source
from .session import Generated, new_session, regenerate

EXIT_OK = 0
EXIT_GENERATION_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pwengine",
        description="Generate random passwords and rate their strength.",
    )
    parser.add_argument(
        "-l", "--length", type=int, default=None,
        help=f"password length (default {DEFAULT_OPTIONS.length}, "
             f"allowed {DEFAULT_CONFIG.min_length}-{DEFAULT_CONFIG.max_length})",
    )
    parser.add_argument(
        "-p", "--preset", choices=sorted(PRESETS),
        help="start from a preset; other flags override it",
    )
    parser.add_argument("--no-uppercase", action="store_true", help="exclude A-Z")
    parser.add_argument("--no-lowercase", action="store_true", help="exclude a-z")
    parser.add_argument("--no-numbers", action="store_true", help="exclude 0-9")
    parser.add_argument("--no-symbols", action="store_true", help="exclude symbols")
    parser.add_argument(
        "-n", "--count", type=int, default=1,
        help="how many passwords to generate (default 1)",
    )
    parser.add_argument(
        "-s", "--source", choices=SOURCE_NAMES, default=DEFAULT_CONFIG.random_source,
        help="randomness source (default %(default)s)",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="seed for the 'pseudo' source",
    )
    parser.add_argument(
        "--show-history", action="store_true",
        help="print the session history after generating",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def options_from_args(args: argparse.Namespace) -> GenerationOptions:
    options = preset_options(args.preset) if args.preset else DEFAULT_OPTIONS
    if args.length is not None:
        options = options.replace(length=args.length)
    if args.no_uppercase:
        options = options.replace(include_uppercase=False)
    if args.no_lowercase:
        options = options.replace(include_lowercase=False)
    if args.no_numbers:
        options = options.replace(include_numbers=False)
    if args.no_symbols:
        options = options.replace(include_symbols=False)
    return options


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point for `pwengine`, `python -m pwengine` and `run_pwengine.py`.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.count < 1:
        parser.error("--count must be at least 1")
    if args.seed is not None and args.source != "pseudo":
        parser.error("--seed only applies to --source pseudo")

    options = options_from_args(args)
    try:
        source = make_index_source(args.source, DEFAULT_CONFIG, seed=args.seed)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_GENERATION_FAILED

    logging.getLogger(__name__).debug(
        "Options: length=%d classes=%s source=%s",
        options.length,
        ",".join(enabled_classes(options)) or "none",
        args.source,
    )

    state = new_session(options)
    print("\n[Password Engine]")
    for _ in range(args.count):
        state, outcome = regenerate(state, source)
        if not isinstance(outcome, Generated):
            print(f"error: {outcome.message}", file=sys.stderr)
            return EXIT_GENERATION_FAILED
        print(f"Generated password: {outcome.password}")
        print(
            f"  strength: {outcome.strength}  "
            f"entropy: {outcome.entropy_bits:.1f} bits"
        )

    if args.show_history:
        print("\nHistory (most recent first):")
        for i, password in enumerate(state.history, start=1):
            print(f"  {i}. {password}")
    print()

    return EXIT_OK
