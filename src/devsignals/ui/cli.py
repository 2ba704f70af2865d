from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from devsignals.app import update_issues, validate_signals
from devsignals.config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Keep developer-signal tracking issues in sync with web-features"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    update = subparsers.add_parser(
        "update-issues",
        help="Create and update one tracking issue per eligible feature",
    )
    update.add_argument(
        "--dry-run",
        action="store_true",
        help="Log intended creations and updates without touching GitHub or the manifest",
    )

    subparsers.add_parser(
        "validate-signals",
        help="Check that the signals file only references known features and canonical URLs",
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        if parsed_args.command == "update-issues":
            result = update_issues(dry_run=parsed_args.dry_run)
            log.info(
                "Issue update finished: %s manifest entries, %s intents",
                len(result.manifest),
                len(result.intents),
            )
        elif parsed_args.command == "validate-signals":
            signals = validate_signals()
            log.info("Signals file is valid (%s features)", len(signals))
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during %s", parsed_args.command)
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
