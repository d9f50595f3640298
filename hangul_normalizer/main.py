"""
Command-line entry point: `hangul-normalize`.

Reads a named file line by line (or stdin as one buffer), runs the
normalization pipeline and writes to a named file or stdout.
"""

import argparse
import sys
from typing import List, Optional

from hangul_normalizer import __version__
from hangul_normalizer.core.config import LOG_LEVEL
from hangul_normalizer.core.logging_config import get_logger, setup_logging
from hangul_normalizer.core.normalizer import NormalizeConfig
from hangul_normalizer.utils.text_io import normalize_buffer, normalize_lines, open_input, open_output

logger = get_logger(__name__)


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hangul-normalize",
        description="Normalize Korean (Hangul) text.",
    )
    parser.add_argument("-i", "--input-file-path", help="read this file line by line (default: stdin as one buffer)")
    parser.add_argument("-o", "--output-file-path", help="write here instead of stdout")
    parser.add_argument("-j", "--hangul-to-jamo", action="store_true", help="decompose syllables into jamos")
    parser.add_argument("-c", "--control-chars", metavar="REPLACEMENT",
                        help="replace characters outside the allow-list with REPLACEMENT")
    parser.add_argument("-r", "--repeat", type=non_negative_int, metavar="N",
                        help="keep at most N consecutive copies of a character")
    parser.add_argument("-w", "--whitespace-less", action="store_true", help="trim and collapse whitespace runs")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="more logging (repeatable)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_config(args: argparse.Namespace) -> NormalizeConfig:
    return NormalizeConfig(
        decompose_syllables=args.hangul_to_jamo,
        filter_replacement=args.control_chars,
        max_repeat=args.repeat,
        collapse_whitespace=args.whitespace_less,
    )


def run(args: argparse.Namespace) -> None:
    config = build_config(args)
    logger.info(f"Enabled stages: {config.enabled_stages() or 'none'}")

    writer = open_output(args.output_file_path)
    try:
        if args.input_file_path is not None:
            with open_input(args.input_file_path) as reader:
                normalize_lines(reader, writer, config)
        else:
            normalize_buffer(open_input(None), writer, config)
        writer.flush()
    finally:
        if writer is not sys.stdout:
            writer.close()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(LOG_LEVEL, args.verbose)

    try:
        run(args)
    except (OSError, UnicodeError) as e:
        logger.error(f"Normalization failed: {e}")
        logger.debug("Traceback", exc_info=True)
        print(f"hangul-normalize: error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
