#!/usr/bin/env python3
"""
Demonstration driver for the recency cache.

Usage:
    python -m recency_cache [--json] [--quiet] [--log-level LEVEL]

Options:
    --json        Output the result as JSON (no event logging)
    --quiet       Don't log put and eviction events
    --log-level   Logging level (defaults to RECENCY_CACHE_LOG_LEVEL)
"""

import argparse
import json
import sys
from typing import List, Optional

from recency_cache.core.config import get_settings
from recency_cache.utils.logging import log_eviction_event, log_put_event, setup_logging
from recency_cache.utils.lru_cache import UnboundedLRUCache

SCENARIO = [
    ("test", "test"),
    ("test1", "test1"),
    ("test2", "test2"),
    ("test", "newTest"),
]


def run_scenario(cache: UnboundedLRUCache[str, str]) -> dict:
    """Fill the cache, update the first key, then evict once."""
    for key, value in SCENARIO:
        cache.put(key, value)

    evicted = cache.evict_least_recently_used()

    return {
        "evicted": None
        if evicted is None
        else {
            "key": evicted.key,
            "value": evicted.value,
            "evicted_at": evicted.evicted_at.isoformat(),
        },
        "remaining": [{"key": k, "value": v} for k, v in cache.items()],
    }


def format_simple_output(result: dict) -> str:
    """Format result for human-readable output."""
    lines = []
    evicted = result["evicted"]
    if evicted is None:
        lines.append("Nothing evicted (cache empty)")
    else:
        lines.append(f"Evicted: {evicted['key']}={evicted['value']}")

    lines.append("Remaining (least recently used first):")
    for item in result["remaining"]:
        lines.append(f"  {item['key']}={item['value']}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the demonstration scenario and print the outcome."""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Exercise the unbounded LRU cache",
        prog="python -m recency_cache",
    )
    parser.add_argument(
        "--json", "-j",
        action="store_true",
        help="Output the result as JSON",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Don't log put and eviction events",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    args = parser.parse_args(argv)

    setup_logging(
        log_level=args.log_level,
        log_to_file=settings.log_to_file,
        logs_dir=settings.logs_dir,
    )

    # JSON output goes to stdout, keep it free of event log lines
    if args.quiet or args.json or not settings.log_events:
        cache = UnboundedLRUCache[str, str]()
    else:
        cache = UnboundedLRUCache[str, str](
            eviction_listener=log_eviction_event,
            put_listener=log_put_event,
        )

    result = run_scenario(cache)

    if args.json:
        print(json.dumps(result, indent=2))
    else:
        print(format_simple_output(result))

    return 0


if __name__ == "__main__":
    sys.exit(main())
