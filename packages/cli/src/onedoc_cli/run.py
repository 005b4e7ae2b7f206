"""
OneDoc console

Usage:
    onedoc run
    onedoc run --data-dir ./records -v
"""

import sys
import logging
import argparse
from pathlib import Path

from onedoc_core import Session, Settings, Storage, StorageError, UI

from dotenv import load_dotenv

load_dotenv()


def configure_logging(level: str):
    """Send log lines to stderr so they never mix with the console on stdout"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run_session(data_dir: str = None, verbose: bool = False) -> int:
    """Load the records and run one interactive session"""
    settings = Settings.from_env()
    if data_dir:
        settings.data_dir = Path(data_dir)
    if verbose:
        settings.log_level = "DEBUG"

    configure_logging(settings.log_level)
    ui = UI()

    try:
        session = Session.from_storage(Storage(settings.data_dir), ui)
    except StorageError as e:
        print(f"  Could not load records: {e}", file=sys.stderr)
        return 1

    session.run()
    return 0


def main():
    """Main entry point for onedoc CLI"""
    parser = argparse.ArgumentParser(
        prog="onedoc",
        description="OneDoc - Console for patient, visit and prescription records"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Run command
    run_parser = subparsers.add_parser("run", help="Start an interactive session")
    run_parser.add_argument("--data-dir", type=str, help="Directory for the JSON data files (default: $ONEDOC_DATA_DIR or ./data)")
    run_parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")

    args = parser.parse_args()

    if args.command == "run":
        sys.exit(run_session(
            data_dir=args.data_dir,
            verbose=args.verbose,
        ))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
