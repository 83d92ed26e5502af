"""Diagnostics recorded while parsing and validating a manifest.

Every problem the parser finds is stored as data on the returned record
instead of being raised. Each kind is a small frozen dataclass deriving from
``ManifestIssue`` so callers can match on the type and compare instances in
tests.
"""

from dataclasses import dataclass
from typing import ClassVar


class ManifestSourceError(Exception):
    """Raised when a line source cannot be opened at all."""


@dataclass(frozen=True)
class ManifestIssue:
    """Base class for all manifest diagnostics.

    Attributes:
        kind: Stable tag naming the diagnostic (e.g. ``"TitleLength"``)
    """

    kind: ClassVar[str] = "Unknown"

    @property
    def message(self) -> str:
        return "unknown manifest error"

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind, "message": self.message}


@dataclass(frozen=True)
class MissingDirective(ManifestIssue):
    name: str

    kind: ClassVar[str] = "MissingDirective"

    @property
    def message(self) -> str:
        return f"missing required directive: {self.name}"


@dataclass(frozen=True)
class InvalidDirective(ManifestIssue):
    line: str

    kind: ClassVar[str] = "InvalidDirective"

    @property
    def message(self) -> str:
        return f"invalid directive: {self.line}"


@dataclass(frozen=True)
class UnknownDirective(ManifestIssue):
    """Reserved; no rule currently produces it."""

    name: str

    kind: ClassVar[str] = "UnknownDirective"

    @property
    def message(self) -> str:
        return f"unknown directive: {self.name}"


@dataclass(frozen=True)
class UnmappedDirective(ManifestIssue):
    """A well-formed directive the parser does not map (e.g. ``Credits``)."""

    name: str
    value: str = ""

    kind: ClassVar[str] = "UnmappedDirective"

    @property
    def message(self) -> str:
        return f"unmapped directive: {self.name}"


@dataclass(frozen=True)
class Encoding(ManifestIssue):
    kind: ClassVar[str] = "Encoding"

    @property
    def message(self) -> str:
        return "manifest file must be UTF-8 without BOM"


@dataclass(frozen=True)
class LineLength(ManifestIssue):
    length: int

    kind: ClassVar[str] = "LineLength"

    @property
    def message(self) -> str:
        return (
            "directive lines beyond 301 bytes will have ignored data, "
            f"line length: {self.length}"
        )


@dataclass(frozen=True)
class CommentLength(ManifestIssue):
    length: int

    kind: ClassVar[str] = "CommentLength"

    @property
    def message(self) -> str:
        return f"comment lines are restricted to 1024 character, line length: {self.length}"


@dataclass(frozen=True)
class TitleLength(ManifestIssue):
    length: int

    kind: ClassVar[str] = "TitleLength"

    @property
    def message(self) -> str:
        return f"Title length limited to 64 characters, current length: {self.length}"


@dataclass(frozen=True)
class ApiMinimumVersion(ManifestIssue):
    version: int

    kind: ClassVar[str] = "ApiMinimumVersion"

    @property
    def message(self) -> str:
        return f"APIVersion must be at least 100003, provided: {self.version}"


@dataclass(frozen=True)
class InvalidValue(ManifestIssue):
    """A directive value that could not be converted to its field type."""

    field: str
    raw: str

    kind: ClassVar[str] = "InvalidValue"

    @property
    def message(self) -> str:
        return f"invalid value for {self.field}: {self.raw!r}"


@dataclass(frozen=True)
class ReadLineError(ManifestIssue):
    reason: str

    kind: ClassVar[str] = "ReadLineError"

    @property
    def message(self) -> str:
        return f"error reading line: {self.reason}"


@dataclass(frozen=True)
class Unknown(ManifestIssue):
    """Reserved catch-all."""

    kind: ClassVar[str] = "Unknown"


__all__ = [
    "ApiMinimumVersion",
    "CommentLength",
    "Encoding",
    "InvalidDirective",
    "InvalidValue",
    "LineLength",
    "ManifestIssue",
    "ManifestSourceError",
    "MissingDirective",
    "ReadLineError",
    "TitleLength",
    "Unknown",
    "UnknownDirective",
    "UnmappedDirective",
]
