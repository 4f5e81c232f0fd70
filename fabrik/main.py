import argparse
import logging
import sys
from datetime import datetime
from typing import List, Optional

from fabrik.cache.store import FreshnessCache
from fabrik.core.config import settings
from fabrik.core.errors import FabrikError
from fabrik.services.lunch import get_todays_menu

logger = logging.getLogger("fabrik")

DEFAULT_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fabrik",
        description="Print today's lunch at die Fabrik.",
    )
    parser.add_argument("--force", action="store_true", help="always download, no caching")
    parser.add_argument("--url", default=None, help=f"menu page (default: {settings.MENU_URL})")
    parser.add_argument("--cache-dir", default=None, help=f"cache directory (default: {settings.CACHE_DIR})")
    parser.add_argument("--clear-cache", action="store_true", help="delete all cached menus and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress to stderr")
    return parser


def configure_logging(verbose: bool):
    level = logging.DEBUG if verbose else getattr(logging, settings.LOG_LEVEL, logging.WARNING)
    logging.basicConfig(
        level=level,
        format=settings.LOG_FORMAT or DEFAULT_LOG_FORMAT,
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    # The only clock read of the run
    now = datetime.now()
    cache = FreshnessCache(now, directory=args.cache_dir)

    if args.clear_cache:
        removed = cache.clear()
        print(f"removed {removed} cached menu(s)")
        return 0

    try:
        result = get_todays_menu(now=now, force=args.force, url=args.url, cache=cache)
    except FabrikError as e:
        if e.expected:
            print(e)
        else:
            print(e, file=sys.stderr)
        return e.exit_code
    except Exception as e:
        logger.exception("Unexpected failure")
        print(f"lunch lookup failed: {e}", file=sys.stderr)
        return 1

    print(result.text)
    return 0


def run():
    raise SystemExit(main())


if __name__ == "__main__":
    run()
