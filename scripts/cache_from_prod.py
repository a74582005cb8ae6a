#!/usr/bin/env python3
"""
Fixture Cache Tool for fake_cloudwatch_logs

Downloads log groups, streams and events from a real AWS account into the
fixture cache, or reports what the cache currently holds.

Usage:
    python scripts/cache_from_prod.py [command] [options]

Commands:
    count       - Load the cache and print group, stream and event counts
    download    - Fetch every region of the current AWS profile into the cache
"""

import argparse
import logging
import sys
from pathlib import Path

import boto3

from fake_cloudwatch_logs import FakeCloudWatchLogs, FakeCloudWatchLogsConfig, FakeCloudWatchLogsError

DEFAULT_CACHE_PATH = Path(__file__).parent.parent / "fixtures"


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Fixture cache tool for fake_cloudwatch_logs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    parser.add_argument(
        "command",
        choices=["count", "download"],
        nargs="?",
        default="count",
        help="Command to execute (default: count)"
    )

    parser.add_argument(
        "--cache-path",
        default=str(DEFAULT_CACHE_PATH),
        help=f"Fixture directory (default: {DEFAULT_CACHE_PATH})"
    )

    parser.add_argument(
        "--profile",
        help="AWS profile to download with (default: boto3 default chain)"
    )

    parser.add_argument(
        "--region",
        action="append",
        dest="regions",
        help="Region to download; repeatable (default: all regions)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every fetched page"
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    config = FakeCloudWatchLogsConfig(cache_path=args.cache_path)
    fake = FakeCloudWatchLogs(config)

    try:
        if args.command == "count":
            fake.populate_from_cache()
            for kind, total in fake.backend.counts().items():
                print(f"{kind} count {total}")

        elif args.command == "download":
            session = boto3.Session(profile_name=args.profile)
            fake.fetch_and_cache(session, args.regions or 'all')

    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        sys.exit(1)

    except FakeCloudWatchLogsError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
