"""Command-line interface for the manifest parser.

This module provides the CLI entry point for parsing an addon manifest and
printing it as JSON.
"""

import argparse
import json
import logging
import sys

from .core.errors import ManifestSourceError
from .core.types import ManifestRecord
from .core.validator import validate_manifest_with_error_details
from .registry import SourceRegistry

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_MANIFEST_ERRORS = 2


def parse_manifest(path: str, full_validate: bool = False) -> ManifestRecord:
    """Parse a manifest from a file path, or stdin when path is '-'.

    Args:
        path: Manifest file path or '-'
        full_validate: Enable full validation

    Returns:
        The parsed ManifestRecord

    Raises:
        ManifestSourceError: If the file cannot be opened
    """
    if path == "-":
        pipeline = SourceRegistry.create_pipeline(
            "text", text=sys.stdin, name="<stdin>", full_validate=full_validate
        )
    else:
        pipeline = SourceRegistry.create_pipeline(
            "file", path=path, full_validate=full_validate
        )

    print(f"Parsing manifest: {pipeline.source.describe()}", file=sys.stderr)
    return pipeline.run()


def report_diagnostics(record: ManifestRecord) -> None:
    """Print one line per error and warning to stderr."""
    for issue in record.errors:
        print(f"Error: {issue.message}", file=sys.stderr)
    for issue in record.warnings:
        print(f"Warning: {issue.message}", file=sys.stderr)
    print(
        f"Found {len(record.errors)} errors, {len(record.warnings)} warnings",
        file=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eso-manifest",
        description="Parse and validate an ESO addon manifest (.txt) file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Basic usage
  eso-manifest --path AddOns/MyAddon/MyAddon.txt

  # Full validation, fail when the manifest has errors
  eso-manifest --path AddOns/MyAddon/MyAddon.txt --full-validate --strict

  # Read from stdin
  cat MyAddon.txt | eso-manifest --path -
        """,
    )

    parser.add_argument(
        "--path", required=True, help="Manifest file to parse, or '-' to read stdin"
    )

    parser.add_argument(
        "--full-validate",
        action="store_true",
        help="Check line lengths, required directives and minimum APIVersion",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help=f"Exit with status {EXIT_MANIFEST_ERRORS} if the manifest has errors",
    )

    parser.add_argument(
        "--no-schema-check",
        action="store_true",
        help="Skip validating the JSON output against the bundled schema",
    )

    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the eso-manifest command."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        record = parse_manifest(args.path, full_validate=args.full_validate)
    except ManifestSourceError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_FAILURE)

    report_diagnostics(record)
    manifest = record.to_dict()

    if not args.no_schema_check:
        print("Validating output against schema...", file=sys.stderr)
        is_valid, error_msg = validate_manifest_with_error_details(manifest)

        if not is_valid:
            print("Error: Manifest schema validation failed:", file=sys.stderr)
            print(error_msg, file=sys.stderr)
            sys.exit(EXIT_FAILURE)

        print("Validation successful!", file=sys.stderr)

    json.dump(manifest, sys.stdout, indent=2)
    print()  # Add newline at end

    if args.strict and record.errors:
        sys.exit(EXIT_MANIFEST_ERRORS)


if __name__ == "__main__":
    main()
