"""Record — one decoded CloudFront access log entry.

The twelve fields are kept as the raw text found in the log. Typed views
(timestamp, byte count, decoded user agent, query parameters) are computed
on each access and never cached on the instance.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from datetime import datetime, timezone
from typing import Any, Sequence
from urllib.parse import parse_qsl, unquote

from cloudfront_logs.columns import NO_VALUE, REQUIRED_COLUMNS, VIEWER_DISCONNECTED, Column
from cloudfront_logs.errors import FormatError, MalformedLineError

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# strptime alone would accept "2015-6-30 1:2:3"
_TIMESTAMP_RE = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", re.ASCII)

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


def _to_int(value: str) -> int:
    """Best-effort integer coercion: leading digits win, anything else is 0."""
    m = _LEADING_INT_RE.match(value)
    if not m:
        return 0
    return int(m.group(1))


@dataclass(frozen=True)
class Record:
    date: str
    time: str
    edge_location: str
    raw_bytes: str
    ip: str
    method: str
    host: str
    uri_stem: str
    status: str
    referer: str
    raw_user_agent: str
    uri_query: str

    @classmethod
    def from_fields(cls, values: Sequence[str]) -> Record:
        """Build a Record from tokenized columns; columns past URI_QUERY are ignored."""
        if len(values) < REQUIRED_COLUMNS:
            raise MalformedLineError(
                f"expected at least {REQUIRED_COLUMNS} fields, got {len(values)}"
            )
        return cls(*(values[column] for column in Column))

    @property
    def date_time(self) -> datetime:
        """Combine date and time into an aware UTC datetime.

        Raises:
            FormatError: if the text is not ``YYYY-MM-DD HH:MM:SS``.
        """
        text = f"{self.date} {self.time}"
        if not _TIMESTAMP_RE.fullmatch(text):
            raise FormatError(f"invalid timestamp {text!r}: expected YYYY-MM-DD HH:MM:SS")
        try:
            dt = datetime.strptime(text, TIMESTAMP_FORMAT)
        except ValueError as exc:
            raise FormatError(f"invalid timestamp {text!r}: {exc}") from exc
        return dt.replace(tzinfo=timezone.utc)

    def bytes(self, cast: bool = True) -> int | str:
        """Bytes served to the viewer.

        With ``cast`` the text is coerced leniently: a corrupt value reads as
        0 instead of raising, so one bad column never hides the rest of the
        record.
        """
        if cast:
            return _to_int(self.raw_bytes)
        return self.raw_bytes

    def user_agent(self, decode: bool = True) -> str:
        """User-Agent header; CloudFront writes it percent-encoded twice."""
        if decode:
            return unquote(unquote(self.raw_user_agent))
        return self.raw_user_agent

    @property
    def uri_parameters(self) -> dict[str, str]:
        """Decoded query parameters. Repeated keys keep the last value."""
        if self.uri_query in (NO_VALUE, ""):
            return {}
        return dict(parse_qsl(self.uri_query, keep_blank_values=True))

    @property
    def viewer_disconnected(self) -> bool:
        return self.status == VIEWER_DISCONNECTED

    def to_dict(self) -> dict[str, Any]:
        """Raw fields plus derived values, ready for JSON output."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        try:
            data["date_time"] = self.date_time.isoformat()
        except FormatError:
            data["date_time"] = None
        data["bytes"] = self.bytes()
        data["user_agent"] = self.user_agent()
        data["uri_parameters"] = self.uri_parameters
        return data
