#!/usr/bin/env python3
"""
Push the SonarQube quality gate of a project to Slack.

Configuration comes from SSP_* environment variables (or a .env file).
Build parameters given with --param override environment variables when
resolving ${VAR} tokens in the job and branch names.

Usage:
    SSP_HOOK=https://hooks.slack.com/services/... \\
    SSP_SONAR_URL=https://sonar.example.com \\
    SSP_JOB_NAME=my-project SSP_BRANCH_NAME='${GIT_BRANCH}' \\
    sonarpush --param GIT_BRANCH=develop
"""

import argparse
import logging
import os
import sys
from typing import Sequence

from sonarpush import __version__
from sonarpush.channels.dispatcher import run_notification_cycle
from sonarpush.config import ConfigError, load_settings

EXIT_OK = 0
EXIT_CYCLE_FAILED = 1
EXIT_CONFIG_ERROR = 2


def _parse_param(value: str) -> tuple[str, str]:
    key, sep, val = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got '{value}'")
    return key, val


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sonarpush",
        description="Notify a Slack channel of a SonarQube quality gate result.",
    )
    parser.add_argument(
        "--param",
        dest="params",
        action="append",
        type=_parse_param,
        default=[],
        metavar="KEY=VALUE",
        help="Build parameter, may be repeated.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"FATAL: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    ok = run_notification_cycle(settings, dict(os.environ), dict(args.params))
    return EXIT_OK if ok else EXIT_CYCLE_FAILED


if __name__ == "__main__":
    sys.exit(main())
