"""Tests for record validation, schema validation and record types."""

from eso_addon_manifest.core.errors import (
    ApiMinimumVersion,
    InvalidValue,
    ManifestIssue,
    MissingDirective,
    UnmappedDirective,
)
from eso_addon_manifest.core.types import DependencyEntry, ManifestRecord
from eso_addon_manifest.core.validator import (
    load_schema,
    validate_manifest_with_error_details,
    validate_record,
)


def complete_record() -> ManifestRecord:
    return ManifestRecord(
        title="MyAddon",
        author="me",
        api_version=101041,
        api_version_2=101042,
        addon_version=7,
        version="1.2.3",
        depends_on=[DependencyEntry(title="LibAddonMenu-2.0", version=32)],
        optional_depends_on=[DependencyEntry(title="LibDebugLogger")],
        is_library=False,
    )


class TestValidateRecord:
    """Test the end-of-stream ruleset."""

    def test_empty_record(self) -> None:
        """Test that all three checks run on an empty record."""
        issues = validate_record(ManifestRecord.empty())

        assert issues == [
            MissingDirective("Title"),
            MissingDirective("Author"),
            ApiMinimumVersion(0),
        ]

    def test_complete_record_passes(self) -> None:
        assert validate_record(complete_record()) == []

    def test_minimum_version_boundary(self) -> None:
        record = complete_record()
        record.api_version = 100003
        assert validate_record(record) == []

        record.api_version = 100002
        assert validate_record(record) == [ApiMinimumVersion(100002)]

    def test_blank_author(self) -> None:
        record = complete_record()
        record.author = " \t "

        assert validate_record(record) == [MissingDirective("Author")]

    def test_does_not_modify_record(self) -> None:
        record = ManifestRecord.empty()
        validate_record(record)

        assert record == ManifestRecord.empty()


class TestSameContent:
    """Test the diagnostics-blind comparison."""

    def test_ignores_errors_and_warnings(self) -> None:
        first = complete_record()
        second = complete_record()
        second.errors.append(InvalidValue("AddOnVersion", "x"))
        second.warnings.append(UnmappedDirective("Credits", "someone"))

        assert first.same_content(second)
        assert first != second

    def test_detects_content_difference(self) -> None:
        first = complete_record()
        second = complete_record()
        second.optional_depends_on.append(DependencyEntry(title="LibOther"))

        assert not first.same_content(second)

    def test_dependency_version_matters(self) -> None:
        assert DependencyEntry(title="", version=1) != DependencyEntry(title="", version=None)

    def test_empty_is_zero_valued(self) -> None:
        record = ManifestRecord.empty()

        assert record.title == ""
        assert record.author == ""
        assert record.api_version == 0
        assert record.api_version_2 is None
        assert record.depends_on == []
        assert record.errors == []

    def test_empty_records_do_not_share_lists(self) -> None:
        first = ManifestRecord.empty()
        second = ManifestRecord.empty()
        first.depends_on.append(DependencyEntry(title="LibA"))

        assert second.depends_on == []


class TestSchemaValidation:
    """Test JSON Schema validation of serialized records."""

    def test_serialized_record(self) -> None:
        manifest = complete_record().to_dict()

        assert manifest["depends_on"] == [{"title": "LibAddonMenu-2.0", "version": 32}]
        assert manifest["optional_depends_on"] == [{"title": "LibDebugLogger", "version": None}]

    def test_valid_manifest_passes(self) -> None:
        is_valid, error_msg = validate_manifest_with_error_details(complete_record().to_dict())

        assert is_valid is True
        assert error_msg is None

    def test_diagnostics_are_serialized(self) -> None:
        record = ManifestRecord.empty()
        record.errors.append(MissingDirective("Title"))
        record.warnings.append(UnmappedDirective("Credits", "someone"))

        manifest = record.to_dict()

        assert manifest["errors"] == [
            {"kind": "MissingDirective", "message": "missing required directive: Title"}
        ]
        assert manifest["warnings"][0]["kind"] == "UnmappedDirective"
        assert validate_manifest_with_error_details(manifest) == (True, None)

    def test_invalid_manifest_reports_path(self) -> None:
        manifest = complete_record().to_dict()
        manifest["api_version"] = "101041"  # type: ignore[typeddict-item]

        is_valid, error_msg = validate_manifest_with_error_details(manifest)

        assert is_valid is False
        assert error_msg is not None
        assert "api_version" in error_msg

    def test_empty_dependency_title_rejected(self) -> None:
        manifest = complete_record().to_dict()
        manifest["depends_on"].append({"title": "", "version": None})

        is_valid, error_msg = validate_manifest_with_error_details(manifest)

        assert is_valid is False
        assert error_msg is not None
        assert "depends_on" in error_msg

    def test_schema_lists_every_issue_kind(self) -> None:
        """Test that the bundled schema accepts every diagnostic kind."""
        schema = load_schema()
        kinds = schema["$defs"]["issue"]["properties"]["kind"]["enum"]

        assert set(kinds) == {cls.kind for cls in ManifestIssue.__subclasses__()}

    def test_api_version_above_u32_rejected(self) -> None:
        manifest = complete_record().to_dict()
        manifest["api_version_2"] = 4294967296

        is_valid, error_msg = validate_manifest_with_error_details(manifest)

        assert is_valid is False
        assert error_msg is not None
        assert error_msg.startswith("Validation error at api_version_2:")
