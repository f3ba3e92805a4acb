#!/usr/bin/env python3
"""Reading List CLI - search Google Books and keep a local reading list."""
import argparse
import sys
import logging
from readinglist.client import GoogleBooksClient
from readinglist.config import Config
from readinglist.database import ReadingListStore
from readinglist.errors import ReadingListError
from readinglist.workflow import list_books, run_query

__version__ = "0.0.1"

logger = logging.getLogger(__name__)


def show_list(args, config: Config):
    """View the locally stored reading list."""
    with ReadingListStore(config.READING_LIST_PATH) as store:
        list_books(store)


def query(args, config: Config):
    """Search Google Books and add selected titles to the reading list."""
    with ReadingListStore(config.READING_LIST_PATH) as store:
        with GoogleBooksClient(
            api_key=config.GOOGLE_BOOKS_API_KEY,
            timeout=config.DEFAULT_TIMEOUT,
            base_url=config.GOOGLE_BOOKS_URL
        ) as client:
            run_query(store, client, limit=config.search_limit)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Search Google Books and create a reading list.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # View the reading list
  %(prog)s list

  # Search and pick books to add
  %(prog)s query
        """
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    list_parser = subparsers.add_parser(
        "list", aliases=["ls"], help="View the locally-stored reading list"
    )
    list_parser.set_defaults(handler=show_list)

    query_parser = subparsers.add_parser(
        "query", aliases=["q"], help="Search Google Books library for a title"
    )
    query_parser.set_defaults(handler=query)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = Config()
    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    try:
        args.handler(args, config)

    except (KeyboardInterrupt, EOFError):
        logger.info("Interrupted by user")
        print()
        sys.exit(0)
    except ReadingListError as e:
        logger.error(f"Error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
