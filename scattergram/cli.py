"""
Command-Line Interface for the scattergram statistics system.

    python -m scattergram --key <token>

The token can also come from the KEY environment variable or a .env file in
the working directory.
"""

import argparse
import os
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from .config import KEY_ENV_VAR, MAX_CONCURRENT_FETCHES
from .data import TransportExecutor, connect, create_http_session
from .errors import ScattergramError
from .logging_config import setup_logging
from .reporter import ScattergramReporter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="naviance-scattergram",
        description="Acceptance statistics for every school on your college list, "
                    "overall and for applicants with a profile like yours.",
    )
    parser.add_argument(
        "-k", "--key",
        default=os.environ.get(KEY_ENV_VAR),
        help="student API bearer token (default: $KEY)",
    )
    parser.add_argument(
        "--concurrency",
        type=int,
        default=MAX_CONCURRENT_FETCHES,
        help=f"schools fetched at the same time (default: {MAX_CONCURRENT_FETCHES})",
    )
    parser.add_argument(
        "--require-profile",
        action="store_true",
        help="treat a missing SAT score or GPA as an error instead of skipping boxed figures",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="DEBUG, INFO, WARNING or ERROR (default: $SCATTERGRAM_LOG_LEVEL or WARNING)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run a full report.

    Returns the process exit status: 0 when the run completed (even if some
    schools were skipped or failed), 1 when nothing could be processed.
    """
    load_dotenv()
    args = build_parser().parse_args(argv)
    logger = setup_logging("scattergram", args.log_level)

    if args.concurrency < 1:
        logger.error("--concurrency must be at least 1")
        return 1

    try:
        http = create_http_session(pool_size=args.concurrency)
        session = connect(args.key, executor=TransportExecutor(http))
        reporter = ScattergramReporter(
            session,
            max_workers=args.concurrency,
            require_profile=args.require_profile,
        )
        reporter.run()
    except ScattergramError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
