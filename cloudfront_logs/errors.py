"""Errors raised while parsing CloudFront access log lines."""


class AccessLogError(Exception):
    """Base error for this package."""


class MalformedLineError(AccessLogError):
    """Raised when a raw line cannot be split into the required columns."""


class FormatError(AccessLogError, ValueError):
    """Raised when a field does not match the format a derived value expects."""
