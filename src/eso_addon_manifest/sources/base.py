"""Base abstraction for line sources.

A line source supplies the raw text lines of one manifest to the pipeline.
The parser itself never opens files; it only consumes what a source yields.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator


class LineSource(ABC):
    """Abstract base class for all line sources.

    Implementations provide the lines of a single manifest, in order and
    without line terminators. A source is read once per parse.
    """

    @abstractmethod
    def read_lines(self) -> Iterator[str]:
        """Yield the manifest's lines in order.

        Yields:
            Lines without their terminators

        Raises:
            OSError: If reading from the underlying medium fails
            UnicodeDecodeError: If the content is not valid UTF-8
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """Return a short human-readable name for log and error messages."""
        pass
