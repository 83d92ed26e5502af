"""Core types, diagnostics and validation.

This package contains the manifest record types, the diagnostic taxonomy,
validation thresholds and the validators shared by the parser, the
pipeline and the CLI.
"""

from .errors import ManifestIssue, ManifestSourceError
from .types import DependencyEntry, ManifestDict, ManifestRecord
from .validator import validate_manifest, validate_manifest_with_error_details, validate_record

__all__ = [
    "DependencyEntry",
    "ManifestDict",
    "ManifestIssue",
    "ManifestRecord",
    "ManifestSourceError",
    "validate_manifest",
    "validate_manifest_with_error_details",
    "validate_record",
]
