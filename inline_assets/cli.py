from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

from .engine import process_asset, read_source
from .errors import InlineAssetsError
from .reporting import LogReporter
from .types import InlineOptions
from .version import tool_version

PROG = "inline-assets"

_LOG_ROOT = "inline_assets"


class _ArgumentParser(argparse.ArgumentParser):
    # ошибки аргументов — код 1, как и прочие ошибки CLI
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: ERROR: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(
        prog=PROG,
        description="Inline external assets of HTML/CSS files",
        add_help=True,
    )
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("-v", "--verbose", action="store_true", help="Print verbose processing information.")
    p.add_argument("--htmlmin", action="store_true", help="Minify processed HTML content (with htmlmin).")
    p.add_argument("--cssmin", action="store_true", help="Minify processed CSS content (with rcssmin).")
    p.add_argument("--jsmin", action="store_true", help="Minify processed JavaScript content (with rjsmin).")
    p.add_argument(
        "--pattern",
        default=".+",
        metavar="PATTERNS",
        help="Comma-separated list of positive/negative (\"!\"-prefixed) filename regex patterns.",
    )
    p.add_argument(
        "--purge",
        action="store_true",
        help="Purge HTML/CSS/JavaScript references of files excluded by pattern.",
    )
    p.add_argument("source", help="source file (HTML, CSS, JavaScript or any other asset)")
    p.add_argument(
        "destination",
        nargs="?",
        help="destination file or directory (default: standard output)",
    )
    return p


def setup_logging(verbose: bool) -> None:
    """Один stderr-хендлер на пространство имён inline_assets."""
    log = logging.getLogger(_LOG_ROOT)
    log.setLevel(logging.INFO if verbose else logging.WARNING)
    for h in list(log.handlers):
        if getattr(h, "_inline_assets_cli", False):
            log.removeHandler(h)
    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(logging.Formatter("++ %(message)s"))
    h._inline_assets_cli = True  # type: ignore[attr-defined]
    log.addHandler(h)


def _opts(ns: argparse.Namespace) -> InlineOptions:
    return InlineOptions.from_dict({
        "htmlmin": ns.htmlmin,
        "cssmin": ns.cssmin,
        "jsmin": ns.jsmin,
        "pattern": ns.pattern,
        "purge": ns.purge,
        "verbose": LogReporter() if ns.verbose else None,
    })


def _dest_path(destination: Optional[str], src: Path) -> Optional[Path]:
    if destination is None:
        return None
    dst = Path(destination).resolve()
    if dst.is_dir():
        dst = dst / src.name
    return dst


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    setup_logging(ns.verbose)
    log = logging.getLogger(_LOG_ROOT)

    try:
        options = _opts(ns)
        src = Path(ns.source).resolve()
        dst = _dest_path(ns.destination, src)
        content = read_source(src)
        result = process_asset(dst, src, content, options)

        if ns.verbose:
            log.info("input:  %8d bytes", len(content))
            log.info("output: %8d bytes", len(result))

        data = result.encode("utf-8") if isinstance(result, str) else result
        if dst is None:
            sys.stdout.buffer.write(data)
            sys.stdout.buffer.flush()
        else:
            dst.parent.mkdir(parents=True, exist_ok=True)
            dst.write_bytes(data)

    except InlineAssetsError as e:
        sys.stderr.write(f"{PROG}: ERROR: {str(e).rstrip()}\n")
        return 1
    except OSError as e:
        sys.stderr.write(f"{PROG}: ERROR: {e}\n")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
