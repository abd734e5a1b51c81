"""Command-line entrypoint for checking Node engine compatibility.

Exit status is 0 when every dependency accepts the project's minimum Node
version (or warn-only mode is on), 1 when violations are found and 2 when
inputs or configuration cannot be read.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from .config import ConfigError, load_settings
from .core import check_repository
from .parsers.semver import InvalidRangeError, InvalidVersionError
from .report import aggregate
from .summary import render_summary, render_text
from .validators.manifests import ManifestError

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="npm-engines-check",
        description="Check that a project's minimum Node version is accepted by its dependencies.",
    )
    parser.add_argument("--root", type=Path, default=Path("."), help="Project or repository root")
    parser.add_argument(
        "--recursive",
        action="store_true",
        help="Check every package.json below the root (node_modules excluded)",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to a JSON settings file")
    parser.add_argument(
        "--warn-only", action="store_true", help="Report violations without failing"
    )
    parser.add_argument(
        "--no-dev", action="store_true", help="Skip packages only installed for development"
    )
    parser.add_argument("--json", action="store_true", help="Print the JSON report to stdout")
    parser.add_argument("--report", type=Path, default=None, help="Write the JSON report here")
    parser.add_argument(
        "--summary",
        type=Path,
        default=None,
        help="Append a Markdown summary here (defaults to $GITHUB_STEP_SUMMARY)",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log output")
    return parser.parse_args(argv)


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.verbose)

    try:
        settings = load_settings(args.root, args.config)
        settings = settings.with_overrides(
            warn_only=True if args.warn_only else None,
            include_dev=False if args.no_dev else None,
        )
        results = check_repository(args.root, settings, recursive=args.recursive)
    except (ConfigError, ManifestError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except (InvalidRangeError, InvalidVersionError) as exc:
        print(f"ERROR: Invalid Node version range in package.json: {exc}", file=sys.stderr)
        return EXIT_ERROR

    report = aggregate(results)

    if args.json:
        print(json.dumps(report, indent=2))
    else:
        for result in results:
            if len(results) > 1:
                print(f"== {result.path}")
            sys.stdout.write(render_text(result))

    if args.report:
        args.report.write_text(json.dumps(report, indent=2) + "\n", encoding="utf-8")

    summary_path = args.summary or os.getenv("GITHUB_STEP_SUMMARY")
    if summary_path:
        with Path(summary_path).open("a", encoding="utf-8") as handle:
            handle.write(render_summary(report))

    if report["hasFindings"] and not settings.warn_only:
        return EXIT_VIOLATIONS
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
