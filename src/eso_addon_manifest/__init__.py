"""ESO Addon Manifest - parser and validator.

This package parses Elder Scrolls Online addon manifest (.txt) files into
structured records and validates them against the rules described on the
ESOUI wiki.
"""

# Core library interface
from .accumulator import ManifestAccumulator, process_line
from .pipeline import ManifestPipeline, parse_file, parse_lines, parse_text
from .registry import SourceRegistry
from .sources import FileLineSource, LineSource, TextLineSource

# Core utilities
from .core import DependencyEntry, ManifestDict, ManifestIssue, ManifestRecord
from .core import ManifestSourceError, validate_manifest, validate_manifest_with_error_details
from .core import validate_record
from .parsing import DirectiveRegistry, LineType, classify_line, parse_dependencies

# CLI interface
from .cli import main

__version__ = "0.1.0"

__all__ = [
    # Primary library interface
    "ManifestPipeline",
    "ManifestAccumulator",
    "SourceRegistry",
    "LineSource",
    "FileLineSource",
    "TextLineSource",
    "parse_file",
    "parse_lines",
    "parse_text",
    "process_line",
    # Core utilities
    "DependencyEntry",
    "ManifestDict",
    "ManifestIssue",
    "ManifestRecord",
    "ManifestSourceError",
    "validate_manifest",
    "validate_manifest_with_error_details",
    "validate_record",
    # Grammar
    "DirectiveRegistry",
    "LineType",
    "classify_line",
    "parse_dependencies",
    # CLI
    "main",
]
