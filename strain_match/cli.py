from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .app import StrainMatchApp
from .commands import doctor as cmd_doctor
from .commands.output import outcome_to_record, render
from .config import load_settings
from .core.matching import ConfigurationError, EmptyQueryError

LOG_FORMAT = "%(levelname).1s | %(name)s | %(message)s"

C_RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",  # Cyan
    logging.INFO: "\033[37m",  # Light gray
    logging.WARNING: "\033[33m",  # Yellow
    logging.ERROR: "\033[31m",  # Red
    logging.CRITICAL: "\033[35m",  # Magenta
}

logger = logging.getLogger(__name__)


class ColorFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if not color:
            return message
        return f"{color}{message}{C_RESET}"


def configure_logging(level_name: str) -> None:
    log_level = getattr(logging, level_name.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level)
    handler = logging.StreamHandler()
    if handler.stream.isatty():
        handler.setFormatter(ColorFormatter(LOG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check a strain name against known strains and aliases"
    )
    parser.add_argument("--config", type=Path, help="Path to strain-match.yaml")
    parser.add_argument("--log-level", default="INFO", help="Python logging level")

    subparsers = parser.add_subparsers(dest="command", required=True)
    classify_parser = subparsers.add_parser(
        "classify", help="Classify a name as existing, alias, new alias, ambiguous or new"
    )
    classify_parser.add_argument("label", help="Strain name to check")
    classify_parser.add_argument(
        "confidence",
        type=float,
        nargs="?",
        default=None,
        help="Minimum similarity (0-1) to accept a new alias (default from config, 0.75)",
    )
    classify_parser.add_argument(
        "max_length_diff",
        type=float,
        nargs="?",
        default=None,
        help="Maximum relative length difference (0-1) for a candidate (default from config, 0.25)",
    )
    classify_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit machine-readable JSON to stdout",
    )
    subparsers.add_parser("doctor", help="Check configuration and seed data")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        settings = load_settings(args.config)
    except (ConfigurationError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        return 2

    if args.command == "doctor":
        report = cmd_doctor.run(settings)
        for line in report.checks:
            print(line)
        return 0 if report.ok else 1

    try:
        app = StrainMatchApp.create(settings)
        outcome = app.classify(args.label, args.confidence, args.max_length_diff)
    except (ConfigurationError, OSError) as exc:
        logger.error("%s", exc)
        return 2
    except EmptyQueryError as exc:
        logger.error("%s", exc)
        return 1

    if args.json:
        print(json.dumps(outcome_to_record(args.label, outcome)))
    else:
        print(render(args.label, outcome))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
