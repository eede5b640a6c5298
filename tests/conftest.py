"""Shared pytest fixtures for the CloudFront access log test suite."""

from __future__ import annotations

import pytest

from cloudfront_logs.columns import Column
from cloudfront_logs.parser import LineParser

SAMPLE_FIELDS = [
    "2015-06-30",
    "01:42:39",
    "DFW3",
    "1045619",
    "192.0.2.183",
    "GET",
    "d111111abcdef8.cloudfront.net",
    "/images/daily-ad.jpg",
    "200",
    "http://www.example.com/",
    "Mozilla%2520Firefox",
    "a=1&b=2&a=3",
]


def make_line(**overrides: str) -> str:
    """Return a tab-joined sample line, optionally replacing columns by name."""
    fields = list(SAMPLE_FIELDS)
    for name, value in overrides.items():
        fields[Column[name.upper()]] = value
    return "\t".join(fields)


@pytest.fixture()
def sample_fields() -> list[str]:
    """Return the twelve raw columns of a well-formed line."""
    return list(SAMPLE_FIELDS)


@pytest.fixture()
def sample_line() -> str:
    return make_line()


@pytest.fixture()
def line_parser() -> LineParser:
    return LineParser()
