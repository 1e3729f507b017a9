"""Command-line interface for lencheck."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from report.scan import scan_path
from report.write import write_findings_jsonl, write_report
from rules.config import ConfigError, load_config

EXIT_CLEAN = 0
EXIT_FINDINGS = 1


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_FINDINGS, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="lencheck",
        description=(
            "Flag strncmp calls whose length argument matches no "
            "string-literal argument."
        ),
    )
    parser.add_argument("path", help="Source file or directory to scan")
    parser.add_argument(
        "--config",
        default=None,
        help="Config file (default: lencheck.toml in the scanned directory)",
    )
    parser.add_argument(
        "--json-out",
        default=None,
        help="Also write findings as JSON lines to this file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every scanned file and analyzed call",
    )
    return parser


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(verbose=args.verbose)

    target = Path(args.path).expanduser()
    if not target.exists():
        sys.stderr.write(f"No such file or directory {target}, exiting ...\n")
        return EXIT_FINDINGS

    config_path = Path(args.config).expanduser() if args.config else None
    try:
        config = load_config(target, config_path)
    except ConfigError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return EXIT_FINDINGS

    summary = scan_path(target, config)
    write_report(summary, sys.stdout)

    if args.json_out:
        write_findings_jsonl(Path(args.json_out).expanduser(), summary.findings)

    if summary.clean:
        return EXIT_CLEAN
    return EXIT_FINDINGS


if __name__ == "__main__":
    raise SystemExit(main())
