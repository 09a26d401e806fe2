# line_filter/config.py
from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple

from .errors import ArgumentParseError

__version__ = "1.0.0"

DEFAULT_OUTPUT = "./result/"


@dataclass(frozen=True)
class Config:
    output_path: Path
    prefix: str = ""
    append: bool = False
    short_stats: bool = False
    full_stats: bool = False
    input_files: Tuple[Path, ...] = ()

    verbose: bool = False
    log_file: Optional[Path] = None


class _RaisingParser(argparse.ArgumentParser):
    """argparse печатает ошибку и делает sys.exit(2); нам нужно исключение."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise ArgumentParseError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _RaisingParser(
        prog="filter-content",
        description=(
            "Split lines of text files into integers, floats and strings, "
            "writing each category to its own file."
        ),
    )
    parser.add_argument(
        "input_files",
        nargs="*",
        help="Input text files, processed in the given order.",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT,
        help="Directory for result files (created if missing).",
    )
    parser.add_argument(
        "-p",
        "--prefix",
        default="",
        help="Prefix for result file names, e.g. 'sample-' -> sample-integers.txt.",
    )
    parser.add_argument(
        "-a",
        "--append",
        action="store_true",
        help="Append to existing result files instead of overwriting them.",
    )
    parser.add_argument(
        "-s",
        "--short",
        action="store_true",
        help="Print short statistics (counts only).",
    )
    parser.add_argument(
        "-f",
        "--full",
        action="store_true",
        help="Print full statistics (counts, float min/max/sum/average, string lengths).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress (INFO level) to stderr.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write the log to this file.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> Config:
    """
    Разбирает аргументы командной строки в Config.

    Существование входных файлов здесь не проверяется: это дело драйвера.
    Raises ArgumentParseError on a malformed command line.
    """
    args = build_parser().parse_intermixed_args(argv)
    return Config(
        output_path=Path(args.output),
        prefix=args.prefix,
        append=args.append,
        short_stats=args.short,
        full_stats=args.full,
        input_files=tuple(Path(p) for p in args.input_files),
        verbose=args.verbose,
        log_file=Path(args.log_file) if args.log_file else None,
    )
