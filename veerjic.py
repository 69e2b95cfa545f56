#!/usr/bin/env python3
"""
Command line compiler for Veerji source files.
"""
import argparse
import logging
import sys

import config
from compiler import compile_file, format_program, format_tokens
from errors import LineTooLongError, VeerjiSyntaxError

def build_arg_parser():
    ap = argparse.ArgumentParser(
        prog="veerjic",
        description="Compile the first line of a Veerji program to NASM assembly.",
    )
    ap.add_argument("source", help=f"source file (*{config.SOURCE_EXTENSION})")
    ap.add_argument("-o", "--output", default=config.DEFAULT_OUTPUT,
                    help=f"assembly output file (default: {config.DEFAULT_OUTPUT})")
    ap.add_argument("-q", "--quiet", action="store_true", help="do not print token and statement dumps")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap

def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        result = compile_file(args.source, args.output)
    except VeerjiSyntaxError as e:
        print(e, file=sys.stderr)
        return 1
    except LineTooLongError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"{e.filename or args.source}: {e.strerror or e}", file=sys.stderr)
        return 1

    if not args.quiet:
        print(format_tokens(result.tokens))
        print(format_program(result.program))
    print(f"Assembly written to {args.output}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
