"""Main entry point: load names and phrases, find misspelled names, print them."""
from __future__ import annotations

import argparse
import logging
import sys

from namefix.config import settings
from namefix.loader import LoadError, load_inputs
from namefix.logging_config import setup_logging
from namefix.matching import find_matches
from namefix.report import format_report

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=settings.app_name,
        description="Find words in phrases that look like misspelled reference names.",
    )
    parser.add_argument("--names", default=settings.inputs.names_path, help="File with one name per line")
    parser.add_argument("--phrases", default=settings.inputs.phrases_path, help="File with one phrase per line")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level)

    logger.info(f"Starting {settings.app_name} v{settings.version}")
    try:
        inputs = load_inputs(args.names, args.phrases)
    except LoadError as e:
        logger.error(f"Aborting: {e}")
        return 1

    matches = find_matches(inputs.names, inputs.phrases)
    print(format_report(inputs.phrase_lines, inputs.name_lines, matches))
    return 0


if __name__ == "__main__":
    sys.exit(main())
