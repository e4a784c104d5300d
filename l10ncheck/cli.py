"""CLI entrypoint for l10ncheck."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from .checker import UsageChecker
from .config import CheckConfig, load_config, normalise_extensions, unique
from .errors import L10nCheckError
from .logging import configure_logging, get_logger
from .reporter import FORMATS


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="l10ncheck",
        description=(
            "Report Fluent message IDs that are never referenced in the source tree."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )
    parser.add_argument(
        "--config",
        help="Path to a .l10ncheck.yml file; its directory becomes the project root.",
    )
    parser.add_argument(
        "--catalog",
        help="Catalog path relative to the project root.",
    )
    parser.add_argument(
        "--search-root",
        dest="search_roots",
        action="append",
        metavar="DIR",
        help="Directory to scan, relative to the project root. Repeatable.",
    )
    parser.add_argument(
        "--extension",
        dest="extensions",
        action="append",
        metavar="EXT",
        help="File extension to scan (e.g. .js). Repeatable.",
    )
    parser.add_argument(
        "--format",
        choices=FORMATS,
        default="text",
        help="Report format (default: text).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        metavar="PATH",
        help="Also write debug-level logs to PATH.",
    )
    return parser


def _apply_overrides(config: CheckConfig, args: argparse.Namespace) -> CheckConfig:
    changes: dict[str, object] = {}
    if args.catalog:
        changes["catalog"] = args.catalog
    if args.search_roots:
        changes["search_roots"] = unique(args.search_roots)
    if args.extensions:
        changes["extensions"] = normalise_extensions(args.extensions)
    return replace(config, **changes) if changes else config


def main(argv: list[str] | None = None) -> int:
    """Run a full scan and print the report; returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    except OSError as exc:
        parser.exit(2, f"l10ncheck failed: cannot open log file: {exc}\n")
    logger = get_logger("cli")

    try:
        config = load_config(Path(args.config) if args.config else Path(args.path))
        config = _apply_overrides(config, args)
        logger.debug("Using project root %s", config.root)
        checker = UsageChecker(config)
        report = checker.run()
    except L10nCheckError as exc:
        parser.exit(2, f"l10ncheck failed: {exc}\nRun with --verbose for more details.\n")

    sys.stdout.write(checker.reporter.render(report, args.format))
    return report.exit_code


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
