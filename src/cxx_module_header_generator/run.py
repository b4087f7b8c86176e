"""Top-level module for header generation."""

from __future__ import annotations

import argparse
import glob
import json
import logging
import os.path
import subprocess
import sys
from typing import Any

from cxx_module_header_generator.schema import Schema
from cxx_module_header_generator.writer import OUTPUT_FILE_NAME, Writer

logger = logging.getLogger(__name__)

SCHEMA_SUFFIX = ".json"


def generate(library_name: str, schema: Schema, module_spec_name: str) -> dict[str, str]:
    """Entry-point for generating the native module header from a schema.

    Args:
        library_name (str): Name of the library the schema belongs to. Not used for rendering.
        schema (Schema): The schema to generate the header for.
        module_spec_name (str): Naming key of the module spec. Not used for rendering.

    Returns:
        dict[str, str]: A single entry, mapping the header file name to its content.
    """
    native_modules = schema.native_modules()
    logger.debug(
        "Generating '%s' for library '%s' (%s) with %d native module(s).",
        OUTPUT_FILE_NAME,
        library_name,
        module_spec_name,
        len(native_modules),
    )

    writer = Writer(native_modules)
    return {OUTPUT_FILE_NAME: writer.dumps()}


def load_schema(paths: list[str]) -> Schema:
    """Load and combine JSON schema files.

    The `modules` mappings of all files are merged in the given order. Each source file
    entry is keyed by `<schema path>:<source file>`, so two schema files that describe
    the same source file both keep their native modules.

    Args:
        paths (list[str]): Paths of the schema files.

    Returns:
        Schema: The combined schema.
    """
    combined: dict[str, Any] = {"modules": {}}
    for path in paths:
        with open(path, encoding="utf8") as schema_file:
            raw = json.load(schema_file)
        for file_name, file_entry in raw["modules"].items():
            combined["modules"][f"{path}:{file_name}"] = file_entry
        logger.debug("Loaded schema '%s'.", path)

    return Schema.from_dict(combined)


def format_outputs(raw_input: str) -> str:
    """Format a generated header with clang-format.

    Args:
        raw_input (str): The unformatted header.

    Returns:
        str: The formatted header, or the input unchanged if formatting is not possible.
    """
    try:
        result = subprocess.run(
            ["clang-format", "--assume-filename", OUTPUT_FILE_NAME],
            input=raw_input.encode("utf-8"),
            capture_output=True,
            check=True,
        )
    except FileNotFoundError:
        logger.warning("clang-format not found, skipping formatting of the generated header")
        return raw_input
    except subprocess.CalledProcessError as e:
        logger.error(f"clang-format failed: {e}")
        logger.error(f"Stderr: {e.stderr.decode('utf-8', errors='replace')}")
        return raw_input

    return result.stdout.decode("utf-8")


def find_schema_files(args: argparse.Namespace, root_directory: str) -> list[str]:
    """Collect the schema files matched by the path and exclude arguments.

    Args:
        args (argparse.Namespace): The arguments that were passed when calling the generator.
        root_directory (str): The directory, from which the generator is executed.

    Returns:
        list[str]: The matched schema files, sorted.
    """
    excluded_paths: set[str] = set()
    for exclude in args.excludes:
        exclude_path = os.path.join(root_directory, exclude)
        if os.path.isfile(exclude_path):
            excluded_paths.add(exclude_path)
        else:
            excluded_paths = excluded_paths.union(glob.glob(exclude_path, recursive=args.recursive))

    search_paths: set[str] = set()
    for path in args.paths:
        search_path = os.path.join(root_directory, path)

        if args.recursive and os.path.isdir(search_path):
            for root, _, files in os.walk(search_path):
                for file in files:
                    if file.endswith(SCHEMA_SUFFIX):
                        search_paths.add(os.path.join(root, file))
        elif os.path.isdir(search_path):
            for file in os.listdir(search_path):
                file_path = os.path.join(search_path, file)
                if os.path.isfile(file_path) and file.endswith(SCHEMA_SUFFIX):
                    search_paths.add(file_path)
        else:
            search_paths = search_paths.union(glob.glob(search_path, recursive=args.recursive))

    return sorted(search_paths - excluded_paths)


def run(args: argparse.Namespace, root_directory: str):
    """Run the generator on a set of paths that point to JSON schemas.

    The header is written to stdout.

    Args:
        args (argparse.Namespace): The arguments that were passed when calling the generator.
        root_directory (str): The directory, from which the generator is executed.

    Raises:
        FileNotFoundError: If no schema file matched.
    """
    schema_paths = find_schema_files(args, root_directory)
    if not schema_paths:
        raise FileNotFoundError(f"No schema files found for {args.paths}.")

    logger.info("Generating header from %d schema file(s).", len(schema_paths))
    schema = load_schema(schema_paths)

    outputs = generate(args.library_name, schema, args.module_spec_name)

    for file_name, content in outputs.items():
        if args.clang_format:
            content = format_outputs(content)

        sys.stdout.write(content)
        logger.info("Wrote '%s' to stdout.", file_name)
