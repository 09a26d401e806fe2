from __future__ import annotations

import sys
import time
from typing import Optional, Sequence

from line_filter.config import Config, parse_args
from line_filter.driver import run
from line_filter.errors import ArgumentParseError
from line_filter.logging_setup import setup_logger
from line_filter.stats import Stats


def print_reports(config: Config, stats: Stats) -> None:
    """Print the requested statistics to stdout: short first, then full."""
    if config.short_stats:
        print(stats.short_report())
    if config.full_stats:
        print(stats.full_report())


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        config = parse_args(argv)
    except ArgumentParseError as e:
        print(f"Failed to parse command line arguments: {e}", file=sys.stderr)
        return 2

    logger = setup_logger(verbose=config.verbose, log_file=config.log_file)

    logger.info(f"Output: {config.output_path.resolve()}")
    logger.info(
        f"Prefix: {config.prefix!r}, append={config.append}, "
        f"short={config.short_stats}, full={config.full_stats}"
    )
    logger.info(f"Discovered {len(config.input_files)} input files.")

    start_time = time.time()

    use_tqdm = sys.stderr.isatty() and len(config.input_files) > 1
    if use_tqdm:
        logger.info(f"Progress: using tqdm over {len(config.input_files)} files")

    stats = run(config, log=logger, progress=use_tqdm)

    wall_time = time.time() - start_time
    stats.log_summary(logger)
    logger.info(f"Wall time (s):        {wall_time:.2f}")

    print_reports(config, stats)
    return 0


if __name__ == "__main__":
    sys.exit(main())
