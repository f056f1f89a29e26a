import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from termcolor import colored

from minigrep.core.common.exceptions import EmptyQueryError, RootNotFoundError
from minigrep.core.config.settings import settings
from minigrep.core.shared_types import PathError
from minigrep.features.line_scanner.service.scanner import match_spans
from minigrep.features.search.domain.models import MatchRecord, Query
from minigrep.features.search.service.api import search

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_EMPTY_QUERY = 1
EXIT_ROOT_NOT_FOUND = 2

COLOR_CHOICES = ("auto", "always", "never")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=settings.APP_NAME,
        description="Print every line containing QUERY, as PATH:LINE:TEXT.",
    )
    parser.add_argument("query", help="The string to search for matches")
    parser.add_argument(
        "path",
        nargs="?",
        default=str(settings.DEFAULT_ROOT),
        help="File or directory to search (default: %(default)s)",
    )
    parser.add_argument(
        "-i", "--ignore-case",
        action="store_true",
        help="Match regardless of case (Unicode case folding)",
    )
    parser.add_argument(
        "--skip-hidden",
        action="store_true",
        default=not settings.INCLUDE_HIDDEN,
        help="Skip files and directories whose name starts with '.'",
    )
    parser.add_argument(
        "--color",
        choices=COLOR_CHOICES,
        default=settings.COLOR if settings.COLOR in COLOR_CHOICES else "auto",
        help="Highlight matches: always, never, or only on a terminal (default: %(default)s)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-vv for per-path detail)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {settings.APP_VERSION}",
    )
    return parser


def configure_logging(verbosity: int) -> None:
    level = settings.LOG_LEVEL
    if verbosity == 1:
        level = "INFO"
    elif verbosity >= 2:
        level = "DEBUG"
    logging.basicConfig(level=level, format=settings.LOG_FORMAT, stream=sys.stderr)


def configure_streams() -> None:
    """
    Undecodable file names arrive as surrogate escapes; write them back as
    the original bytes instead of failing mid-run. Line buffering makes each
    match visible to a downstream reader as soon as it is printed.
    """
    for stream in (sys.stdout, sys.stderr):
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(errors="surrogateescape", line_buffering=True)


def use_color(choice: str) -> bool:
    if choice == "always":
        return True
    if choice == "never":
        return False
    return sys.stdout.isatty()


def highlight(record: MatchRecord, query: Query) -> str:
    """
    Same PATH:LINE:TEXT layout, with the path, line number and every
    occurrence of the query coloured.
    """
    text = record.line_text
    chunks = []
    position = 0
    for start, end in match_spans(text, query.text, query.ignore_case):
        chunks.append(text[position:start])
        chunks.append(colored(text[start:end], "red", attrs=["bold"], force_color=True))
        position = end
    chunks.append(text[position:])

    path = colored(str(record.source_path), "magenta", force_color=True)
    line_number = colored(str(record.line_number), "yellow", force_color=True)
    return f"{path}:{line_number}:{''.join(chunks)}"


def report_error(error: PathError) -> None:
    print(f"{settings.APP_NAME}: {error}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_streams()
    configure_logging(args.verbose)

    try:
        run = search(
            args.query,
            root=Path(args.path),
            ignore_case=args.ignore_case,
            include_hidden=not args.skip_hidden,
            on_error=report_error,
        )
    except EmptyQueryError as e:
        print(f"{settings.APP_NAME}: {e}", file=sys.stderr)
        return EXIT_EMPTY_QUERY
    except RootNotFoundError as e:
        print(f"{settings.APP_NAME}: {e}", file=sys.stderr)
        return EXIT_ROOT_NOT_FOUND

    color = use_color(args.color)
    query = run.request.query

    try:
        for record in run:
            print(highlight(record, query) if color else record)
    except BrokenPipeError:
        # Reader went away (e.g. piped into `head`); stop walking quietly
        run.close()
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return EXIT_OK

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
