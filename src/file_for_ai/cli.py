# src/file_for_ai/cli.py
import sys
import argparse
import logging
import os
from pathlib import Path
from typing import Optional, Sequence

# Module imports
from file_for_ai.config import (
    DEFAULT_MODEL,
    DEFAULT_OUTPUT_FILE,
    ENV_IGNORE_GITIGNORE,
    ENV_MODEL,
    ENV_OUTPUT_FILE,
    ENV_PROCESS_NON_TEXT,
    TRUTHY_VALUES,
)
from file_for_ai.core.ignore import build_ignore_matcher
from file_for_ai.core.scanner import DirectoryScanner, PatternScanner
from file_for_ai.core.writer import ContextWriter, open_output
from file_for_ai.errors import FileForAIError, UsageError
from file_for_ai.models import Settings
from file_for_ai.utils.formatting import display_path, format_int
from file_for_ai.utils.tokenizer import Tokenizer

USAGE_TEXT = """\
Usage: file-for-ai <directory|pattern> --output [output file]

Examples:
  file-for-ai /path/to/directory
  file-for-ai './*.txt'
  file-for-ai '**/*.py' --model gpt-4o
  file-for-ai /path/to/directory --output custom-output.txt
"""


def env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in TRUTHY_VALUES


def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog="file-for-ai",
        description="Merge the text files of a directory or glob match into one file for AI chats.",
    )
    parser.add_argument("input", type=str, nargs="?", default=None, help="Directory path or glob pattern")
    parser.add_argument(
        "--model",
        type=str,
        default=os.environ.get(ENV_MODEL, DEFAULT_MODEL),
        help=f"Model used for token counting (env {ENV_MODEL}, default: {DEFAULT_MODEL})",
    )
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=os.environ.get(ENV_OUTPUT_FILE, DEFAULT_OUTPUT_FILE),
        help=f"Output file, overwritten if it exists (env {ENV_OUTPUT_FILE}, default: {DEFAULT_OUTPUT_FILE})",
    )
    parser.add_argument(
        "--ignore-gitignore",
        action="store_true",
        default=env_flag(ENV_IGNORE_GITIGNORE),
        help=f"Do not filter files with .gitignore rules (env {ENV_IGNORE_GITIGNORE})",
    )
    parser.add_argument(
        "--process-non-text",
        action="store_true",
        default=env_flag(ENV_PROCESS_NON_TEXT),
        help=f"Include files with binary/non-text extensions (env {ENV_PROCESS_NON_TEXT})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log why files are skipped")
    return parser


def resolve_settings(args: argparse.Namespace) -> Settings:
    if not args.input:
        raise UsageError("Directory path or glob pattern is required.")
    return Settings(
        model=args.model,
        output_file=Path(args.output),
        ignore_gitignore=args.ignore_gitignore,
        process_non_text=args.process_non_text,
    )


def run(input_path: str, settings: Settings) -> ContextWriter:
    """Merges everything under input_path into the output file and returns the writer with its totals."""
    output_name = settings.output_file.name

    with open_output(settings.output_file) as stream:
        tokenizer = Tokenizer.for_model(settings.model)
        writer = ContextWriter(stream)

        print("Merging files:")
        if os.path.isdir(input_path):
            if not settings.ignore_gitignore:
                print("Filtering files using .gitignore... ")
            matcher = build_ignore_matcher(Path(input_path), settings.ignore_gitignore)
            scanner = DirectoryScanner(
                input_path, tokenizer, output_name,
                process_non_text=settings.process_non_text,
                ignore_matcher=matcher,
            )
        else:
            scanner = PatternScanner(
                input_path, tokenizer, output_name,
                process_non_text=settings.process_non_text,
            )

        for entry in scanner.scan():
            print(display_path(entry.rel_path))
            writer.write(entry)

    return writer


def main(argv: Optional[Sequence[str]] = None):
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args(argv)
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )

        try:
            settings = resolve_settings(args)
        except UsageError as e:
            print(f"Error: {e}", file=sys.stderr)
            print(USAGE_TEXT, file=sys.stderr)
            sys.exit(1)

        # 2. Merge
        writer = run(args.input, settings)

        # 3. Summary
        print()
        print(f"Files merged successfully into {settings.output_file}")
        print(f"Total files: {writer.file_count}")
        print(f"Total tokens for model {settings.model}: {format_int(writer.total_tokens)}")

    except FileForAIError as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)

    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
