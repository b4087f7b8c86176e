"""Command-line interface for generating a C++ header from native-module schemas."""

from __future__ import annotations

import argparse
import logging
import os.path
from collections.abc import Sequence

from cxx_module_header_generator.run import run
from cxx_module_header_generator.writer import UnsupportedTypeError

logger = logging.getLogger(__name__)


def setup_parser() -> argparse.ArgumentParser:
    """Setup for the parser.

    Returns:
        argparse.ArgumentParser: The parser after setup.
    """
    parser = argparse.ArgumentParser(description="Generate a C++ interface header for native-module schemas.")

    parser.add_argument(
        "-p",
        "--paths",
        type=str,
        nargs="+",
        default=["**/*.json"],
        help="path or glob expressions that match *.json schema files.",
    )

    parser.add_argument(
        "-e",
        "--excludes",
        type=str,
        nargs="+",
        default=[],
        help="path or glob expressions to exclude from path matches.",
    )

    parser.add_argument(
        "-r",
        "--recursive",
        dest="recursive",
        default=False,
        action="store_true",
        help="recursively search for *.json files with a given glob expression.",
    )

    parser.add_argument(
        "-l",
        "--library-name",
        type=str,
        default="",
        help="name of the library the schemas belong to.",
    )

    parser.add_argument(
        "-m",
        "--module-spec-name",
        type=str,
        default="",
        help="naming key of the module spec.",
    )

    parser.add_argument(
        "--clang-format",
        dest="clang_format",
        default=False,
        action="store_true",
        help="format the generated header with clang-format.",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        default=False,
        action="store_true",
        help="enable debug logging.",
    )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the header generator.

    Args:
        argv (Sequence[str] | None, optional): Run arguments. Defaults to None.

    Returns:
        int: Error code.
    """
    parser = setup_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    root_directory = os.getcwd()
    logger.info("Working from root directory: %s", root_directory)

    try:
        run(args, root_directory)
    except UnsupportedTypeError as e:
        logger.error("Header generation failed: %s", e)
        return 1

    return 0
