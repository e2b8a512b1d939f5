"""
wordbook CLI.
"""

import argparse
import logging

from rich.logging import RichHandler

from wordbook.cli.commands import shell, words


def setup_logging(verbosity: int):
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def main():
    parser = argparse.ArgumentParser(prog="wordbook", description="Personal dictionary CLI")
    parser.add_argument("--api-url", help="API base URL (default: $WORDBOOK_API_URL or http://localhost:8000/api)")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-vv for debug)")
    subparsers = parser.add_subparsers(dest="command")

    words.add_subparser(subparsers)
    shell.add_subparser(subparsers)

    args = parser.parse_args()
    setup_logging(args.verbose)

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
