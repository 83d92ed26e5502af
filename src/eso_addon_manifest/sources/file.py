"""Filesystem line source.

Reads a manifest file (e.g. ``MyAddon/MyAddon.txt``) as strict UTF-8.
"""

from collections.abc import Iterator
from pathlib import Path

from ..core.errors import ManifestSourceError
from .base import LineSource


class FileLineSource(LineSource):
    """Line source backed by a manifest file on disk.

    The file is decoded as plain ``utf-8`` rather than ``utf-8-sig`` so that
    a byte-order mark reaches the accumulator and gets reported.

    Example:
        >>> source = FileLineSource(Path('AddOns/MyAddon/MyAddon.txt'))
        >>> for line in source.read_lines():
        ...     print(line)
    """

    def __init__(self, path: Path | str):
        """Initialize file source.

        Args:
            path: Path to the manifest file

        Raises:
            ManifestSourceError: If path doesn't exist or isn't a file
        """
        self.path = Path(path).expanduser().resolve()

        if not self.path.exists():
            raise ManifestSourceError(f"Path does not exist: {self.path}")

        if not self.path.is_file():
            raise ManifestSourceError(f"Path is not a file: {self.path}")

    def read_lines(self) -> Iterator[str]:
        # newline="\n": a lone "\r" is content, "\r\n" loses only its "\r"
        with self.path.open("r", encoding="utf-8", newline="\n") as handle:
            for line in handle:
                yield line.removesuffix("\n").removesuffix("\r")

    def describe(self) -> str:
        return str(self.path)
