"""Line sources for the parsing pipeline.

This package contains the LineSource interface and the built-in file and
in-memory implementations. Both register themselves with the
SourceRegistry when this package is imported.
"""

from pathlib import Path

from ..registry import SourceRegistry
from .base import LineSource
from .file import FileLineSource
from .text import TextLineSource


def _create_file_source(path: Path | str, **kwargs) -> FileLineSource:
    """Factory function for creating file sources.

    Args:
        path: Manifest file to read
        **kwargs: Additional parameters (unused for files)

    Returns:
        FileLineSource instance
    """
    return FileLineSource(path)


def _create_text_source(text, name: str = "<text>", **kwargs) -> TextLineSource:
    return TextLineSource(text, name=name)


# Auto-register at module import
SourceRegistry.register_factory("file", _create_file_source)
SourceRegistry.register_factory("text", _create_text_source)

__all__ = ["FileLineSource", "LineSource", "TextLineSource"]
