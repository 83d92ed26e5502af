"""Type definitions for parsed addon manifests.

``ManifestRecord`` and ``DependencyEntry`` are the in-memory result of a
parse. ``ManifestDict`` and ``DependencyDict`` are TypedDicts that mirror the
JSON schema in ``schemas/addon_manifest.schema.json``.
"""

from dataclasses import dataclass, field
from typing import TypedDict

from .errors import ManifestIssue


class DependencyDict(TypedDict):
    """Serialized dependency entry."""

    title: str
    version: int | None


class IssueDict(TypedDict):
    """Serialized diagnostic."""

    kind: str
    message: str


class ManifestDict(TypedDict):
    """JSON-compatible form of a parsed manifest."""

    title: str
    author: str
    api_version: int
    api_version_2: int | None
    addon_version: int | None
    version: str | None
    depends_on: list[DependencyDict]
    optional_depends_on: list[DependencyDict]
    is_library: bool | None
    errors: list[IssueDict]
    warnings: list[IssueDict]


@dataclass
class DependencyEntry:
    """A required or optional addon/library.

    Attributes:
        title: Addon or library name (never empty)
        version: Version constraint, ``None`` accepts any version
    """

    title: str
    version: int | None = None

    def to_dict(self) -> DependencyDict:
        return {"title": self.title, "version": self.version}


# Fields compared by ManifestRecord.same_content (everything but diagnostics)
CONTENT_FIELDS = (
    "title",
    "author",
    "api_version",
    "api_version_2",
    "addon_version",
    "version",
    "depends_on",
    "optional_depends_on",
    "is_library",
)


@dataclass
class ManifestRecord:
    """Parsed manifest data plus the diagnostics gathered while parsing.

    Scalar fields are overwritten by later directives, dependency lists grow
    with every ``DependsOn``/``OptionalDependsOn`` line, and ``errors`` /
    ``warnings`` are only ever appended to.

    Use ``ManifestRecord.empty()`` to start a parse. ``==`` compares every
    field including diagnostics; use ``same_content`` to compare only the
    manifest data.
    """

    title: str = ""
    author: str = ""
    api_version: int = 0
    api_version_2: int | None = None
    addon_version: int | None = None
    version: str | None = None
    depends_on: list[DependencyEntry] = field(default_factory=list)
    optional_depends_on: list[DependencyEntry] = field(default_factory=list)
    is_library: bool | None = None
    errors: list[ManifestIssue] = field(default_factory=list)
    warnings: list[ManifestIssue] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "ManifestRecord":
        """Return a record with every field at its zero value."""
        return cls(
            title="",
            author="",
            api_version=0,
            api_version_2=None,
            addon_version=None,
            version=None,
            depends_on=[],
            optional_depends_on=[],
            is_library=None,
            errors=[],
            warnings=[],
        )

    def same_content(self, other: "ManifestRecord") -> bool:
        """Compare manifest data with another record, ignoring diagnostics.

        Args:
            other: Record to compare against

        Returns:
            True if every content field matches; ``errors`` and ``warnings``
            are not considered.
        """
        return all(getattr(self, name) == getattr(other, name) for name in CONTENT_FIELDS)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> ManifestDict:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "title": self.title,
            "author": self.author,
            "api_version": self.api_version,
            "api_version_2": self.api_version_2,
            "addon_version": self.addon_version,
            "version": self.version,
            "depends_on": [entry.to_dict() for entry in self.depends_on],
            "optional_depends_on": [entry.to_dict() for entry in self.optional_depends_on],
            "is_library": self.is_library,
            "errors": [issue.to_dict() for issue in self.errors],  # type: ignore[misc]
            "warnings": [issue.to_dict() for issue in self.warnings],  # type: ignore[misc]
        }
