"""Line parser — splits one tab-delimited, quote-aware line into a Record."""

import csv
import logging

from cloudfront_logs.columns import REQUIRED_COLUMNS
from cloudfront_logs.errors import MalformedLineError
from cloudfront_logs.record import Record

logger = logging.getLogger(__name__)

DELIMITER = "\t"
QUOTE_CHAR = '"'


def tokenize(line: str) -> list[str]:
    """Split a line on tabs; a quoted field may hold tabs and doubled quotes."""
    stripped = line.rstrip("\r\n")
    if not stripped:
        return []
    # csv rejects fields longer than its global limit (128 KiB by default)
    if len(stripped) > csv.field_size_limit():
        csv.field_size_limit(len(stripped))
    reader = csv.reader(
        [stripped],
        delimiter=DELIMITER,
        quotechar=QUOTE_CHAR,
        doublequote=True,
    )
    try:
        return next(reader, [])
    except csv.Error as exc:
        raise MalformedLineError(f"cannot tokenize line {stripped!r}: {exc}") from exc


class LineParser:
    """Stateless parser; one instance may be shared freely."""

    def parse(self, line: str) -> Record:
        """Parse a single access log line.

        Raises:
            MalformedLineError: if fewer than twelve columns are present.
        """
        fields = tokenize(line)
        if len(fields) < REQUIRED_COLUMNS:
            logger.debug("Rejected line with %d of %d columns", len(fields), REQUIRED_COLUMNS)
            raise MalformedLineError(
                f"expected at least {REQUIRED_COLUMNS} tab-separated fields, "
                f"got {len(fields)}: {line!r}"
            )
        return Record.from_fields(fields)


_default_parser = LineParser()


def parse_line(line: str) -> Record:
    """Parse a line with a shared LineParser."""
    return _default_parser.parse(line)
