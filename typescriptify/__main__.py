import argparse
import os
import sys

from .config import TypescriptifyOptions
from .console import configure_logging
from .emitter import formatter_available
from .errors import FormatterUnavailable, TypescriptifyError, UsageError
from .pipeline import dump_ast_file, typescriptify_file

USAGE = "Usage: typescriptify <input.js> <output.ts> [--no-format] [--dump-ast]"


def build_arg_parser():
    ap = argparse.ArgumentParser(
        prog="typescriptify",
        description="Infer types for JavaScript declarations and write TypeScript.",
    )
    ap.add_argument("input_file", nargs="?", help="JavaScript source file")
    ap.add_argument("output_file", nargs="?", help="Destination file")
    ap.add_argument(
        "--no-format",
        action="store_true",
        help="Skip the prettier pass and write the output as generated",
    )
    ap.add_argument(
        "--dump-ast",
        action="store_true",
        help="Write the parsed syntax tree as JSON instead of TypeScript",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug details")
    return ap


def _run(args):
    if not args.input_file or not args.output_file:
        raise UsageError(USAGE)

    input_path = os.path.abspath(args.input_file)
    output_path = os.path.abspath(args.output_file)
    if not os.path.exists(input_path):
        raise UsageError(f"Input file not found: {input_path}")
    if not os.path.isfile(input_path):
        raise UsageError(f"Input path is not a file: {input_path}")

    if args.dump_ast:
        dump_ast_file(input_path, output_path)
        print(f"AST written to {output_path}")
        return

    options = TypescriptifyOptions.from_args(args)
    if options.format_output and not formatter_available(options.formatter_command):
        raise FormatterUnavailable(
            "Prettier not found. Install it for better output formatting, or pass --no-format."
        )

    result = typescriptify_file(input_path, output_path, options)
    print(f"TypeScript file written to {result.output_path}")
    print(f"Found {result.num_variables} variables and {result.num_functions} functions")


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        _run(args)
    except TypescriptifyError as e:
        print(str(e), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
