"""Validation for parsed addon manifests.

Two layers live here:

* ``validate_record`` is the post-pass ruleset run once after all lines
  have been consumed (required directives, minimum APIVersion).
* ``validate_manifest`` checks the serialized form of a record against the
  JSON Schema bundled with the package before it is handed to other tools.
"""

import json
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import ValidationError

from .errors import ApiMinimumVersion, ManifestIssue, MissingDirective
from .limits import MIN_API_VERSION
from .types import ManifestDict, ManifestRecord

# eso_addon_manifest/core/validator.py -> eso_addon_manifest/schemas/
SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "addon_manifest.schema.json"


def validate_record(record: ManifestRecord) -> list[ManifestIssue]:
    """Run the required-field and minimum-version checks.

    Every check runs regardless of the outcome of the others. The record is
    not modified; the caller decides where the issues go.

    Args:
        record: Fully parsed manifest record

    Returns:
        List of errors in check order, empty if the record passes
    """
    issues: list[ManifestIssue] = []

    if not record.title.strip():
        issues.append(MissingDirective("Title"))

    if not record.author.strip():
        issues.append(MissingDirective("Author"))

    if record.api_version < MIN_API_VERSION:
        issues.append(ApiMinimumVersion(record.api_version))

    return issues


def load_schema() -> dict[str, Any]:
    """Read ``addon_manifest.schema.json`` from the installed package.

    The schema describes ``ManifestRecord.to_dict()`` output: record fields,
    dependency entries and the ``{"kind", "message"}`` diagnostic objects.

    Raises:
        FileNotFoundError: If the package was installed without its schema
        json.JSONDecodeError: If the bundled schema is corrupt
    """
    if not SCHEMA_PATH.exists():
        raise FileNotFoundError(f"Addon manifest schema not found: {SCHEMA_PATH}")

    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)  # type: ignore[no-any-return]


def validate_manifest(manifest: ManifestDict) -> None:
    """Check a serialized record against the addon manifest schema.

    Catches records built or edited by hand, e.g. an empty dependency title
    or an API version outside the unsigned 32-bit range. Diagnostics already
    in ``errors`` do not make a record schema-invalid.

    Raises:
        ValidationError: For the first schema violation found
    """
    jsonschema.validate(instance=manifest, schema=load_schema())


def validate_manifest_with_error_details(manifest: ManifestDict) -> tuple[bool, str | None]:
    """Schema-check a serialized record for display by the CLI.

    Returns:
        ``(True, None)`` when the record conforms, otherwise ``False`` and a
        message naming the offending field path, e.g.
        ``"Validation error at depends_on -> 0 -> title: ..."``
    """
    try:
        validate_manifest(manifest)
    except ValidationError as e:
        field_path = " -> ".join(str(p) for p in e.path) or "root"
        error_msg = f"Validation error at {field_path}: {e.message}"
        if e.instance is not None:
            error_msg += f"\nInvalid value: {e.instance!r}"
        return False, error_msg
    except (FileNotFoundError, json.JSONDecodeError) as e:
        return False, f"Schema error: {e}"

    return True, None
