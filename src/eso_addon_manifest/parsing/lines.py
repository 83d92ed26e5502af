"""Line classification and directive grammar.

A manifest line is one of four kinds:

* ``## Name: Value`` directives carrying one metadata field
* comments, starting with ``#`` or ``;``
* blank lines
* data lines (file lists and anything else), which the parser ignores
"""

from dataclasses import dataclass
from enum import Enum

DIRECTIVE_PREFIX = "## "
DIRECTIVE_SEPARATOR = ": "
COMMENT_PREFIXES = ("#", ";")


class LineType(Enum):
    DIRECTIVE = "directive"
    COMMENT = "comment"
    BLANK = "blank"
    DATA = "data"


def classify_line(line: str) -> LineType:
    """Categorize a single raw manifest line.

    Rules are checked in order, so ``## Title: X`` is a directive while
    ``##Title: X`` and ``# note`` are comments.

    Args:
        line: Line text without its terminator

    Returns:
        The line's LineType
    """
    if line.startswith(DIRECTIVE_PREFIX):
        return LineType.DIRECTIVE
    if line.startswith(COMMENT_PREFIXES):
        return LineType.COMMENT
    if not line.strip():
        return LineType.BLANK
    return LineType.DATA


@dataclass(frozen=True)
class DirectiveMatch:
    """Name and value split out of a directive line."""

    name: str
    value: str


def match_directive(line: str) -> DirectiveMatch | None:
    """Split a ``## <name>: <value>`` line into its name and value.

    The name ends at the first ``": "``; everything after that separator is
    the value, verbatim, and may itself contain colons and spaces.

    Args:
        line: Line already classified as a directive

    Returns:
        DirectiveMatch, or None if the line lacks a separator. The name may
        be empty (``## : value``); dispatch treats it as an unmapped name.
    """
    if not line.startswith(DIRECTIVE_PREFIX):
        return None

    start = len(DIRECTIVE_PREFIX)
    separator = line.find(DIRECTIVE_SEPARATOR, start)
    if separator < start:
        return None

    return DirectiveMatch(
        name=line[start:separator],
        value=line[separator + len(DIRECTIVE_SEPARATOR):],
    )
