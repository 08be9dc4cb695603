"""Race entry point — reads the game protocol on stdin, writes commands on stdout.

Diagnostics go to stderr; stdout carries commands only.

Usage:
    uv run python scripts/race.py --variant discovery
    uv run python scripts/race.py --variant fixed --trace --log-level DEBUG
    uv run python scripts/race.py --variant fixed --label-pods
    uv run python scripts/race.py --variant fixed < recorded_match.txt
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from podracer.runtime.config import ControllerSettings  # noqa: E402
from podracer.runtime.controller import DiscoveryController  # noqa: E402
from podracer.runtime.loop import run_discovery, run_fixed  # noqa: E402
from podracer.runtime.trace import LoggingTraceSink  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Pod racer steering controller")
    ap.add_argument(
        "--variant",
        choices=("discovery", "fixed"),
        default="fixed",
        help="discovery: learn checkpoints on the fly; fixed: course given at start-up",
    )
    ap.add_argument("--log-level", default="WARNING", help="Logging level for stderr output")
    ap.add_argument("--trace", action="store_true", help="Log every decision at DEBUG level")
    ap.add_argument(
        "--label-pods",
        action="store_true",
        help="fixed variant: append the pod index to each command line",
    )
    args = ap.parse_args()

    logging.basicConfig(
        stream=sys.stderr,
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = ControllerSettings.from_env()
    sink = LoggingTraceSink() if args.trace else None

    if args.variant == "discovery":
        run_discovery(sys.stdin, sys.stdout, DiscoveryController(settings, sink))
    else:
        run_fixed(sys.stdin, sys.stdout, settings, sink, label_pods=args.label_pods)


if __name__ == "__main__":
    main()
