from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .loader import DEFAULT_TASK_FILE
from .runner import run_task_file
from ..cli import _ArgumentParser, setup_logging
from ..errors import InlineAssetsError
from ..version import tool_version

PROG = "inline-assets-tasks"


def _build_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(
        prog=PROG,
        description="Run inline-assets targets declared in a YAML task file",
    )
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument(
        "-f", "--file",
        default=DEFAULT_TASK_FILE,
        help=f"task file (default: {DEFAULT_TASK_FILE})",
    )
    p.add_argument("targets", nargs="*", metavar="TARGET", help="targets to run (default: all)")
    return p


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    # «File ... created.» печатается всегда, подробности шагов — по опции verbose
    setup_logging(True)
    try:
        run_task_file(Path(ns.file), ns.targets)
    except InlineAssetsError as e:
        sys.stderr.write(f"{PROG}: ERROR: {str(e).rstrip()}\n")
        return 1
    except OSError as e:
        sys.stderr.write(f"{PROG}: ERROR: {e}\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
