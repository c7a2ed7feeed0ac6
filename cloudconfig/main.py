"""Command line entry point for meta config setup."""
import argparse
import sys
from enum import IntEnum

from cloudconfig.core.config import Settings, get_settings
from cloudconfig.core.exceptions import CloudConfigError, CurrentUserError
from cloudconfig.core.logging import get_logger, setup_logging
from cloudconfig.storage.local import LocalMetaConfigStore
from cloudconfig.wizard.builder import generate

logger = get_logger(__name__)


class ExitCode(IntEnum):
    """Process exit codes."""

    OK = 0
    UNKNOWN = 1
    CURRENT_USER_NOT_FOUND = 2


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="cloudconfig",
        description="Configure where cloudconfig stores its config.",
    )
    parser.add_argument(
        "-setup",
        action="store_true",
        help="Use this flag to perform initial setup",
    )
    return parser


def run_setup(settings: Settings) -> int:
    """Run the interactive session on stdin/stdout and save the result."""
    store = LocalMetaConfigStore(settings.meta_config_path)
    if store.exists():
        logger.warning("Existing meta config will be overwritten", path=store.location)

    try:
        record = generate(
            sys.stdin,
            sys.stdout,
            settings,
            with_encryption=settings.collect_encryption,
        )
        store.save(record)
    except CloudConfigError as e:
        print(e, file=sys.stderr)
        return ExitCode.UNKNOWN

    print(record.to_json(indent=2))
    return ExitCode.OK


def run(argv: list[str] | None = None) -> int:
    """Parse arguments and run; returns the exit code."""
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except CurrentUserError as e:
        print(e, file=sys.stderr)
        return ExitCode.CURRENT_USER_NOT_FOUND

    setup_logging(settings)

    if not args.setup:
        return ExitCode.OK
    return run_setup(settings)


def main() -> None:
    """Console script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
