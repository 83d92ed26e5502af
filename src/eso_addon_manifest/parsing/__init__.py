"""Line grammar, directive dispatch and dependency parsing.

Everything in this package works on single lines or single directive values
and reports problems as diagnostics on the record rather than raising.
"""

from .dependencies import DependencyParseResult, parse_dependencies
from .directives import BUILTIN_DIRECTIVES, DirectiveRegistry, dispatch_directive
from .lines import DirectiveMatch, LineType, classify_line, match_directive

__all__ = [
    "BUILTIN_DIRECTIVES",
    "DependencyParseResult",
    "DirectiveMatch",
    "DirectiveRegistry",
    "LineType",
    "classify_line",
    "dispatch_directive",
    "match_directive",
    "parse_dependencies",
]
