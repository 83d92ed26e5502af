"""Line-by-line accumulation of a manifest record.

The accumulator owns the record for the duration of one parse. Every line
is classified and dispatched in stream order; anomalies are appended to
``record.errors`` or ``record.warnings`` and never raised.
"""

import logging

from .core.errors import CommentLength, Encoding, InvalidDirective, LineLength
from .core.limits import MAX_COMMENT_CHARS, MAX_DIRECTIVE_LINE_BYTES
from .core.types import ManifestRecord
from .core.validator import validate_record
from .parsing.directives import dispatch_directive
from .parsing.lines import LineType, classify_line, match_directive

logger = logging.getLogger(__name__)

BYTE_ORDER_MARK = "\ufeff"


def process_line(line: str, record: ManifestRecord, full_validate: bool = False) -> None:
    """Apply one manifest line to ``record``.

    Args:
        line: Raw line, with or without its terminator
        record: Record to mutate in place
        full_validate: Enable length checks
    """
    line = line.removesuffix("\n").removesuffix("\r")
    line_type = classify_line(line)

    if line_type is LineType.DIRECTIVE:
        match = match_directive(line)
        if match is None:
            record.errors.append(InvalidDirective(line))
            return

        if full_validate:
            byte_len = len(line.encode("utf-8"))
            if byte_len > MAX_DIRECTIVE_LINE_BYTES:
                record.errors.append(LineLength(byte_len))

        dispatch_directive(record, match, full_validate)

    elif line_type is LineType.COMMENT:
        if full_validate:
            char_len = len(line)
            if char_len > MAX_COMMENT_CHARS:
                record.errors.append(CommentLength(char_len))

    # Blank and data lines carry nothing the record tracks


class ManifestAccumulator:
    """Builds one ManifestRecord from a stream of lines.

    Example:
        >>> accumulator = ManifestAccumulator(full_validate=True)
        >>> for line in lines:
        ...     accumulator.process_line(line)
        >>> record = accumulator.finish()
    """

    def __init__(self, full_validate: bool = False):
        """Initialize the accumulator.

        Args:
            full_validate: Enable length thresholds and the end-of-stream
                           required-field/minimum-version checks
        """
        self.full_validate = full_validate
        self.record = ManifestRecord.empty()
        self.line_count = 0
        self._finished = False

    def process_line(self, line: str) -> None:
        """Classify one line and apply it to the record."""
        if self.line_count == 0 and line.startswith(BYTE_ORDER_MARK):
            # Only the start of the stream can carry a BOM
            self.record.errors.append(Encoding())
            line = line[len(BYTE_ORDER_MARK):]

        self.line_count += 1
        process_line(line, self.record, self.full_validate)

    def finish(self) -> ManifestRecord:
        """Run end-of-stream validation and return the record.

        Validation runs at most once, even if finish is called again.
        """
        if not self._finished:
            self._finished = True
            if self.full_validate:
                self.record.errors.extend(validate_record(self.record))
            logger.debug(
                "Accumulated %d lines: %d errors, %d warnings",
                self.line_count,
                len(self.record.errors),
                len(self.record.warnings),
            )
        return self.record
