#!/usr/bin/env python3
"""Local CLI entrypoint to run the engine check outside of GitHub Actions.

Usage:
  python scripts/scan.py --root . [--recursive] [--warn-only] [--json]

This calls the same main used by the installed ``npm-engines-check`` script.
"""

from __future__ import annotations

from npm_engines.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
