"""Command-line interface for the word network solver."""

import argparse
import logging
import sys

from word_network.dictionary.types import (
    DEFAULT_WORD_LIST_PATH,
    DEFAULT_WORD_LIST_URL,
    SourceKind,
    WordSource,
)
from word_network.graph.types import DEFAULT_ALPHABET
from word_network.solver.solve import main_solve
from word_network.solver.types import (
    DEFAULT_PROGRESS_EVERY,
    DEFAULT_START_WORD,
    DEFAULT_WORKERS,
)

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="word-network",
        description="Count the words reachable from a start word by single-letter edits.",
    )

    parser.add_argument(
        "--start-word",
        default=DEFAULT_START_WORD,
        help=f"Word whose network is measured (default: {DEFAULT_START_WORD})",
    )

    parser.add_argument(
        "--workers",
        type=int,
        default=DEFAULT_WORKERS,
        help=f"Number of parallel workers (default: {DEFAULT_WORKERS})",
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--word-list",
        default=DEFAULT_WORD_LIST_PATH,
        help=f"Path to a newline-delimited word list (default: {DEFAULT_WORD_LIST_PATH})",
    )
    source.add_argument(
        "--url",
        nargs="?",
        const=DEFAULT_WORD_LIST_URL,
        default=None,
        help="Download the word list instead (default URL: the causes puzzle list)",
    )

    parser.add_argument(
        "--alphabet",
        default=DEFAULT_ALPHABET,
        help="Letters used for insertions and substitutions (default: a-z)",
    )

    parser.add_argument(
        "--progress-every",
        type=int,
        default=DEFAULT_PROGRESS_EVERY,
        help=f"Log progress every N words found, 0 to disable (default: {DEFAULT_PROGRESS_EVERY})",
    )

    parser.add_argument(
        "--expected",
        type=int,
        default=None,
        help="Known network size to check the result against",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging based on --log-level
    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    if args.workers < 1:
        parser.error(f"--workers must be at least 1, got {args.workers}")
    if not args.alphabet:
        parser.error("--alphabet must not be empty")

    if args.url is not None:
        source = WordSource(SourceKind.URL, args.url)
    else:
        source = WordSource(SourceKind.FILE, args.word_list)

    count = main_solve(
        source,
        start_word=args.start_word,
        workers=args.workers,
        alphabet=args.alphabet,
        progress_every=args.progress_every,
    )

    if args.expected is not None:
        matches = count == args.expected
        logger.info("Checking result against expected count (%d): %s", args.expected, matches)
        if not matches:
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
