"""Parsing pipeline for addon manifests.

This module provides the main interface for turning a line source into a
ManifestRecord, plus convenience functions for the common cases.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from .accumulator import ManifestAccumulator
from .core.errors import Encoding, ReadLineError
from .core.types import ManifestRecord
from .sources.base import LineSource
from .sources.file import FileLineSource
from .sources.text import TextLineSource

logger = logging.getLogger(__name__)


class ManifestPipeline:
    """Main interface for manifest parsing.

    The pipeline works with any LineSource. It pulls every line once,
    feeds it to a fresh ManifestAccumulator and returns the finished
    record. Failures while reading lines are recorded on the record rather
    than raised, so a partially read manifest is still returned.

    Example:
        >>> # Via registry (recommended)
        >>> from eso_addon_manifest import SourceRegistry
        >>> pipeline = SourceRegistry.create_pipeline('file', path=Path('MyAddon.txt'))
        >>>
        >>> # Direct instantiation
        >>> pipeline = ManifestPipeline(FileLineSource(Path('MyAddon.txt')), full_validate=True)
        >>> record = pipeline.run()
    """

    def __init__(self, source: LineSource, full_validate: bool = False):
        """Initialize the pipeline.

        Args:
            source: LineSource to read the manifest from
            full_validate: Enable length thresholds and the required-field
                           and minimum-version checks
        """
        self.source = source
        self.full_validate = full_validate

    def run(self) -> ManifestRecord:
        """Parse the whole source into a record.

        Returns:
            The finished ManifestRecord. Read failures appear as
            ReadLineError (I/O) or Encoding (invalid UTF-8) in ``errors``.
        """
        accumulator = ManifestAccumulator(full_validate=self.full_validate)
        record = accumulator.record

        try:
            for line in self.source.read_lines():
                accumulator.process_line(line)
        except UnicodeDecodeError as e:
            logger.warning("Invalid UTF-8 in %s: %s", self.source.describe(), e)
            record.errors.append(Encoding())
        except OSError as e:
            logger.warning("Failed to read %s: %s", self.source.describe(), e)
            record.errors.append(ReadLineError(str(e)))

        record = accumulator.finish()

        logger.info(
            "Parsed %s: %d lines, %d errors, %d warnings",
            self.source.describe(),
            accumulator.line_count,
            len(record.errors),
            len(record.warnings),
        )
        return record


def parse_lines(lines: Iterable[str], full_validate: bool = False) -> ManifestRecord:
    """Parse an iterable of manifest lines.

    Example:
        >>> record = parse_lines(["## Title: MyAddon", "## APIVersion: 101041"])
        >>> record.title
        'MyAddon'
    """
    return ManifestPipeline(TextLineSource(lines, name="<lines>"), full_validate).run()


def parse_text(text: str, full_validate: bool = False) -> ManifestRecord:
    """Parse manifest content held in a single string."""
    return ManifestPipeline(TextLineSource(text), full_validate).run()


def parse_file(path: Path | str, full_validate: bool = False) -> ManifestRecord:
    """Parse a manifest file.

    Args:
        path: Path to the manifest (.txt) file
        full_validate: Enable full validation

    Returns:
        The parsed ManifestRecord

    Raises:
        ManifestSourceError: If the file doesn't exist or isn't a file
    """
    return ManifestPipeline(FileLineSource(path), full_validate).run()
