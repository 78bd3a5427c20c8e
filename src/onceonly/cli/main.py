"""CLI entrypoint exposing the once-only core for diagnostics and scripting."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from onceonly import __version__
from onceonly.config import OnceOnlySettings, build_backend_config, load_config
from onceonly.constants.branding import (
    CLI_DESCRIPTION,
    CLI_PROG,
    ERROR_PREFIX,
    EXIT_CONFIG_ERROR,
    EXIT_FATAL,
    EXIT_OK,
    EXIT_OUTPUTS_DIVERGED,
)
from onceonly.exceptions import ConfigError, OnceOnlyError
from onceonly.invocation import check_outputs_still_valid, fingerprint_invocation
from onceonly.manifest import format_record, write_manifest


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog=CLI_PROG, description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding once-only.yaml")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")
    subparsers = parser.add_subparsers(dest="command", required=True)

    fingerprint = subparsers.add_parser("fingerprint", help="Fingerprint the files named in a command line")
    fingerprint.add_argument("--write", action="store_true", help="Write the input-only manifest to the cache dir")
    fingerprint.add_argument("args", nargs=argparse.REMAINDER, help="Raw command arguments")

    check = subparsers.add_parser("check-outputs", help="Verify recorded outputs of a manifest")
    check.add_argument("manifest", type=Path, help="Manifest file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(message)s")

    try:
        settings = load_config(args.root, args.config)
        if args.command == "fingerprint":
            return _handle_fingerprint(args, settings)
        if args.command == "check-outputs":
            return _handle_check_outputs(args, settings)
    except ConfigError as exc:
        _print_error(str(exc), EXIT_CONFIG_ERROR)
        return EXIT_CONFIG_ERROR
    except OnceOnlyError as exc:
        _print_error(str(exc), EXIT_FATAL)
        return EXIT_FATAL

    parser.error(f"Unsupported command: {args.command}")
    return EXIT_FATAL


def _handle_fingerprint(args: argparse.Namespace, settings: OnceOnlySettings) -> int:
    raw_args = args.args[1:] if args.args[:1] == ["--"] else args.args
    invocation = fingerprint_invocation(raw_args, settings)
    for record in invocation.inputs:
        print(format_record(record))
    print(invocation.manifest_path)
    if args.write:
        write_manifest(invocation.manifest_path, invocation.inputs)
    return EXIT_OK


def _handle_check_outputs(args: argparse.Namespace, settings: OnceOnlySettings) -> int:
    divergent = check_outputs_still_valid(args.manifest, build_backend_config(settings))
    if divergent is None:
        return EXIT_OK
    print(divergent)
    return EXIT_OUTPUTS_DIVERGED


def _print_error(message: str, status: int) -> None:
    print(f"{ERROR_PREFIX} {message} (once-only returned error {status})", file=sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())
