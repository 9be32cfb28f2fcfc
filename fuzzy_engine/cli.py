from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .commands import compare as cmd_compare
from .commands import match as cmd_match
from .commands import normalize as cmd_normalize
from .commands import phonetic as cmd_phonetic
from .commands import similarity as cmd_similarity
from .config import load_settings
from .core import FuzzyAlgorithm, warm_up

LOG_FORMAT = "%(levelname).1s | %(name)s | %(message)s"

C_RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",  # Cyan
    logging.INFO: "\033[37m",  # Light gray
    logging.WARNING: "\033[33m",  # Yellow
    logging.ERROR: "\033[31m",  # Red
    logging.CRITICAL: "\033[35m",  # Magenta
}


class ColorFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if not color:
            return message
        return f"{color}{message}{C_RESET}"


def configure_logging(level_name: str) -> None:
    log_level = getattr(logging, level_name.upper(), logging.WARNING)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level)

    handler = logging.StreamHandler(sys.stderr)
    if sys.stderr.isatty():
        handler.setFormatter(ColorFormatter(LOG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)


def _algorithm(value: str) -> FuzzyAlgorithm:
    try:
        return FuzzyAlgorithm.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Approximate string matching")
    parser.add_argument("--config", type=Path, help="Path to fuzzy-engine.yaml")
    parser.add_argument("--log-level", default="WARNING", help="Python logging level")

    subparsers = parser.add_subparsers(dest="command", required=True)
    algorithm_help = "Algorithm name (e.g. jaro-winkler, levenshtein, dice, auto)"

    compare_parser = subparsers.add_parser(
        "compare", help="Compare two strings with every algorithm"
    )
    compare_parser.add_argument("a")
    compare_parser.add_argument("b")
    compare_parser.add_argument("--algorithm", type=_algorithm, help=algorithm_help)
    compare_parser.add_argument(
        "--raw", action="store_true", help="Compare without normalizing first"
    )
    compare_parser.add_argument(
        "--json", action="store_true", help="Emit machine-readable JSON to stdout"
    )

    similarity_parser = subparsers.add_parser(
        "similarity", help="Print a single similarity score"
    )
    similarity_parser.add_argument("a")
    similarity_parser.add_argument("b")
    similarity_parser.add_argument("--algorithm", type=_algorithm, help=algorithm_help)
    similarity_parser.add_argument(
        "--raw", action="store_true", help="Compare without normalizing first"
    )

    match_parser = subparsers.add_parser(
        "match", help="Rank candidates against a query"
    )
    match_parser.add_argument("query")
    match_parser.add_argument("candidates", nargs="*", help="Candidate strings")
    match_parser.add_argument(
        "--candidates-file",
        type=Path,
        help="Read candidates from this file, one per line",
    )
    match_parser.add_argument("--limit", type=int, default=None, help="Maximum results")
    match_parser.add_argument(
        "--min-similarity", type=float, default=None, help="Minimum score to keep"
    )
    match_parser.add_argument("--algorithm", type=_algorithm, help=algorithm_help)
    match_parser.add_argument(
        "--workers", type=int, default=None, help="Score candidates on this many threads"
    )
    match_parser.add_argument(
        "--json", action="store_true", help="Emit machine-readable JSON to stdout"
    )

    phonetic_parser = subparsers.add_parser(
        "phonetic", help="Show Soundex and Metaphone codes"
    )
    phonetic_parser.add_argument("words", nargs="+")

    normalize_parser = subparsers.add_parser(
        "normalize", help="Normalize text as it would be before comparison"
    )
    normalize_parser.add_argument("text")
    normalize_parser.add_argument(
        "--preset",
        choices=["default", "aggressive", "minimal"],
        default=None,
        help="Normalization preset (defaults to the configured one)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    settings = load_settings(args.config)
    warm_up()

    match args.command:
        case "compare":
            cmd_compare.run(
                settings,
                args.a,
                args.b,
                algorithm=args.algorithm,
                normalize=False if args.raw else None,
                json_output=args.json,
            )
        case "similarity":
            cmd_similarity.run(
                settings,
                args.a,
                args.b,
                algorithm=args.algorithm,
                normalize=False if args.raw else None,
            )
        case "match":
            candidates = list(args.candidates)
            if args.candidates_file:
                candidates.extend(cmd_match.read_candidates(args.candidates_file))
            cmd_match.run(
                settings,
                args.query,
                candidates,
                limit=args.limit,
                min_similarity=args.min_similarity,
                algorithm=args.algorithm,
                workers=args.workers,
                json_output=args.json,
            )
        case "phonetic":
            cmd_phonetic.run(args.words)
        case "normalize":
            cmd_normalize.run(settings, args.text, preset=args.preset)
        case _:
            parser.error("Unknown command")


if __name__ == "__main__":
    main()
