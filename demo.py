#!/usr/bin/env python3
"""One-shot demo — parses hardcoded CloudFront access log lines."""

import argparse
import json
import logging
import sys

from cloudfront_logs.config import LOG_LEVELS, load_config
from cloudfront_logs.errors import MalformedLineError
from cloudfront_logs.parser import LineParser

logger = logging.getLogger(__name__)

SAMPLE_LINES = [
    "2015-06-30\t01:42:39\tDFW3\t1045619\t192.0.2.183\tGET\td111111abcdef8.cloudfront.net"
    "\t/images/daily-ad.jpg\t200\thttp://www.example.com/\tMozilla/5.0%2520(Windows%2520NT%25206.1)"
    "\t-\tzip=98101\tRefreshHit\tMRVMF7KydIvxMWfJIglgwHQwZsbG2IhRJ07sn9AkKUFSHS9EXAMPLE=="
    "\td111111abcdef8.cloudfront.net\thttp\t-\t0.001\t-\t-\t-\tRefreshHit\tHTTP/1.1",
    "2015-06-30\t01:42:40\tSEA4\t2390282\t192.0.2.202\tGET\td111111abcdef8.cloudfront.net"
    "\t/media/video.mp4\t000\t-\tcurl/7.43.0\tsize=large&id=7&size=small",
    '2015-06-30\t01:43:02\tLHR5\t-\t198.51.100.7\tPOST\td111111abcdef8.cloudfront.net'
    '\t/api/submit\t502\t"http://example.com/a\tb"\t"Agent ""quoted"""\t-',
    "2015-06-30\t01:42:39\tDFW3\t1045619",
]


def main():
    parser = argparse.ArgumentParser(description="CloudFront access log parsing demo")
    parser.add_argument("--config", "-c", help="Path to a YAML config file")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Override the configured log level")
    args = parser.parse_args()

    config = load_config(args.config)
    logging.basicConfig(
        level=args.log_level or config.log_level,
        format="%(asctime)s [PARSER] %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    line_parser = LineParser()
    success = 0
    failure = 0

    for number, line in enumerate(SAMPLE_LINES, start=1):
        try:
            record = line_parser.parse(line)
        except MalformedLineError as e:
            logger.warning("Line %d skipped: %s", number, e)
            failure += 1
            continue

        d = record.to_dict()
        if not config.decode_user_agent:
            d["user_agent"] = record.user_agent(decode=False)
        print(f"\n--- line {number} [{record.edge_location}] ---")
        print(json.dumps(d, indent=config.json_indent))
        success += 1

    print(f"\nSummary: {success} parsed, {failure} failed, {len(SAMPLE_LINES)} total")


if __name__ == "__main__":
    main()
