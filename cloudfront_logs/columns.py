"""Column layout of the CloudFront W3C extended access log.

Only the twelve leading columns are consumed. See
https://docs.aws.amazon.com/AmazonCloudFront/latest/DeveloperGuide/AccessLogs.html
"""

from enum import IntEnum

# A hyphen stands in for "not applicable", e.g. a request without a query.
NO_VALUE = "-"

# sc-status when the viewer closed the connection before CloudFront responded.
VIEWER_DISCONNECTED = "000"


class Column(IntEnum):
    DATE = 0  # yyyy-mm-dd, UTC
    TIME = 1  # hh:mm:ss, UTC
    EDGE_LOCATION = 2  # x-edge-location, e.g. DFW3
    BYTES = 3  # sc-bytes, including headers
    IP = 4  # c-ip, proxy address when the viewer used one
    METHOD = 5  # cs-method
    HOST = 6  # cs(Host), the distribution domain
    URI_STEM = 7  # cs-uri-stem
    STATUS = 8  # sc-status
    REFERER = 9  # cs(Referer)
    USER_AGENT = 10  # cs(User-Agent), double percent-encoded
    URI_QUERY = 11  # cs-uri-query


REQUIRED_COLUMNS = len(Column)

# Columns after URI_QUERY, in order. Present in the file, ignored by the parser.
TRAILING_COLUMNS = (
    "cs(Cookie)",
    "x-edge-result-type",
    "x-edge-request-id",
    "x-host-header",
    "cs-protocol",
    "cs-bytes",
    "time-taken",
    "x-forwarded-for",
    "ssl-protocol",
    "ssl-cipher",
    "x-edge-response-result-type",
    "cs-protocol-version",
)
