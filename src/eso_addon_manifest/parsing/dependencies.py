"""Dependency list parsing for ``DependsOn`` and ``OptionalDependsOn``.

A dependency value is a space separated list of tokens of the form
``<name>[<comparator><version>]``, for example::

    LibAddonMenu-2.0>=32 LibDialog LibOther<=5
"""

from dataclasses import dataclass, field

from ..core.errors import InvalidValue, ManifestIssue
from ..core.types import DependencyEntry
from .values import parse_unsigned

COMPARATOR_CHARS = frozenset("<=>")


@dataclass
class DependencyParseResult:
    """Entries parsed from one directive value plus any field-level issues."""

    entries: list[DependencyEntry] = field(default_factory=list)
    issues: list[ManifestIssue] = field(default_factory=list)


def split_token(token: str) -> tuple[str, str | None]:
    """Split a dependency token into its name and version text.

    The name is everything before the first comparator character. The
    comparator run itself is discarded.

    Example:
        "LibLibrary>=20" -> ("LibLibrary", "20")
        "LibLibrary" -> ("LibLibrary", None)

    Args:
        token: A single token from a dependency list

    Returns:
        Tuple of (name, version_text). version_text is None when the token
        has no comparator.
    """
    for index, char in enumerate(token):
        if char in COMPARATOR_CHARS:
            rest = token[index:]
            return token[:index], rest.lstrip("<=>")
    return token, None


def parse_dependencies(value: str, directive: str = "DependsOn") -> DependencyParseResult:
    """Parse a dependency directive value into ordered entries.

    Tokens whose name is empty after trimming are dropped without a
    diagnostic. A comparator followed by anything other than a non-negative
    integer keeps the entry without a version and reports InvalidValue.

    Args:
        value: Raw directive value
        directive: Directive name used when reporting issues

    Returns:
        DependencyParseResult with entries in input order
    """
    result = DependencyParseResult()

    for token in value.split(" "):
        name, version_text = split_token(token)
        name = name.strip()
        if not name:
            continue

        version = None
        if version_text is not None:
            version = parse_unsigned(version_text)
            if version is None:
                result.issues.append(InvalidValue(directive, token))

        result.entries.append(DependencyEntry(title=name, version=version))

    return result
