import argparse
import logging
from typing import List, Optional

from kmp_logging import setup_logging
from kmp_report import highlight_text, render_banner, render_report, render_summary
from kmp_search import search

logger = logging.getLogger(__name__)

DEMO_TEXT = "ABABDABACDABABCABAB"
DEMO_PATTERN = "ABABCABAB"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kmp-search",
        description="Search a pattern in a text with the KMP algorithm and show the matches.")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("-t", "--text", type=str, help="Target string to search in")
    group.add_argument("-f", "--file", type=str, help="Path to a file to search in")

    parser.add_argument("-p", "--pattern", type=str, default=None,
                        help="Pattern to search for (required with --text/--file)")
    parser.add_argument("-c", "--case", action="store_false",
                        dest='case_sensitivity',
                        help="Ignore case (case is respected by default)")
    parser.add_argument("-m", "--method", type=str, choices=["first", "last"],
                        default="first", help="Search direction (first/last)")
    parser.add_argument("-n", "--count", type=int, default=None,
                        help="Maximum number of matches")
    parser.add_argument("-l", "--lines", type=int, default=10,
                        help="Maximum number of lines to search in")
    parser.add_argument("--highlight", action="store_true",
                        help="Print the text with highlighted matches instead of the alignment view")
    parser.add_argument("--no-color", action="store_false", dest="use_color", default=None,
                        help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log debug messages and timings")
    return parser


def _read_lines(args: argparse.Namespace) -> Optional[List[str]]:
    """Returns the text lines from --text, --file or the demo text, None on error."""
    if args.text is not None:
        return args.text.splitlines()
    if args.file is not None:
        try:
            with open(args.file, 'r', encoding="utf-8") as f:
                return [line.rstrip('\n') for line in f.readlines()]
        except FileNotFoundError:
            logger.error("Error: file '%s' not found.", args.file)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error while reading file '%s': %s", args.file, e)
        return None
    return [DEMO_TEXT]


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    demo = args.text is None and args.file is None
    if demo and args.pattern is None:
        args.pattern = DEMO_PATTERN
    elif args.pattern is None:
        parser.error("the following arguments are required: -p/--pattern")

    # --- 1. Text from the arguments, the file or the demo ---
    text_lines = _read_lines(args)
    if text_lines is None:
        return 1

    text_lines = text_lines[:args.lines]
    if not text_lines or all(line.strip() == "" for line in text_lines):
        logger.error("Error: the text to search in is empty or whitespace only.")
        return 1

    if not args.pattern:
        logger.error("Error: a non-empty pattern is required (-p).")
        return 1

    # Keep the line structure for the search
    text = "\n".join(text_lines)
    logger.debug("Searching %r in %d characters (%d lines)", args.pattern, len(text), len(text_lines))

    # --- 2. Search ---
    try:
        positions = search(
            string=text,
            pattern=args.pattern,
            case_sensitivity=args.case_sensitivity,
            method=args.method,
            count=args.count,
        )
    except ValueError as e:
        logger.error("Error: %s", e)
        return 1

    # --- 3. Output ---
    if args.highlight:
        print(render_banner(args.use_color))
        print(render_summary(positions, args.use_color))
        print(highlight_text(text, args.pattern, positions, use_color=args.use_color))
    else:
        print(render_report(text, args.pattern, positions, use_color=args.use_color))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
