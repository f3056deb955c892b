"""Command line entry point."""

import argparse
import asyncio
import json
import sys
from typing import List, Optional
import structlog
from jsonfetch.common import setup_logging, get_env, JsonFetchException
from jsonfetch.common import constants
from jsonfetch.pipeline import fetch

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser, taking defaults from the environment."""
    parser = argparse.ArgumentParser(
        prog="jsonfetch",
        description="Fetch a JSON document from a URL or a local file",
    )
    parser.add_argument(
        "source",
        type=str,
        help="http(s) URL or path of the JSON document",
    )
    parser.add_argument(
        "--retry",
        type=int,
        default=get_env(constants.ENV_RETRY, str(constants.DEFAULT_RETRY)),
        help=f"Additional attempts after a failure (default: ${constants.ENV_RETRY} or 0)",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=get_env(constants.ENV_DELAY_MS, str(constants.DEFAULT_DELAY_MS)),
        help=f"Milliseconds between attempts (default: ${constants.ENV_DELAY_MS} or 0)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Indent the printed JSON by this many spaces",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=get_env(constants.ENV_LOG_LEVEL, constants.DEFAULT_LOG_LEVEL).upper(),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Output logs in JSON format",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # Setup logging
    global logger
    logger = setup_logging(
        level=args.log_level,
        service_name=constants.SERVICE_NAME,
        json_format=args.json_logs,
    )

    try:
        data = asyncio.run(
            fetch(args.source, {"retry": args.retry, "delay": args.delay})
        )

    except KeyboardInterrupt:
        logger.info("Fetch interrupted by user")
        return 130

    except JsonFetchException as e:
        logger.error("Fetch failed", source=args.source, error=str(e))
        return 1

    print(json.dumps(data, indent=args.indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
