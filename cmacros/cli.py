"""Command-line tools for listing and translating header macros.

Usage:
    cmacros defines <header-or-dir>       Print every #define found
    cmacros translate <header> [options]  Emit Rust constants for simple macros
"""

import argparse
import logging
import os
import sys
from typing import Dict, List, Optional

from cmacros.errors import MacroParseError
from cmacros.extractor import extract_macros
from cmacros.codegen import generate_rust_src
from cmacros.headers import extract_from_headers, iter_header_files, read_header
from cmacros.translate import skip_names, translate_macro, with_types

logger = logging.getLogger("cmacros.cli")


def _parse_type_overrides(pairs: List[str]) -> Dict[str, str]:
    overrides = {}
    for pair in pairs:
        name, sep, type_name = pair.partition("=")
        if not sep or not name.strip() or not type_name.strip():
            raise argparse.ArgumentTypeError(f"expected NAME=TYPE, got {pair!r}")
        overrides[name.strip()] = type_name.strip()
    return overrides


def cmd_defines(args: argparse.Namespace) -> int:
    if os.path.isdir(args.path):
        paths = iter_header_files(args.path)
    else:
        paths = [args.path]

    failures = 0
    for result in extract_from_headers(paths, strict=not args.lenient):
        if not result.ok:
            print(f"{result.path}: {result.error}", file=sys.stderr)
            failures += 1
            continue
        for macro in result.macros:
            print(macro.to_define())
    return 1 if failures else 0


def cmd_translate(args: argparse.Namespace) -> int:
    try:
        overrides = _parse_type_overrides(args.types)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        macros = extract_macros(read_header(args.header), strict=not args.lenient)
    except OSError as e:
        print(f"Failed to read {args.header}: {e}", file=sys.stderr)
        return 1
    except MacroParseError as e:
        print(f"Failed to extract macros from {args.header}: {e}", file=sys.stderr)
        return 1

    policy = with_types(overrides, skip_names(args.skip, translate_macro))
    src = generate_rust_src(macros, policy)
    emitted = src.count("\n") + 1 if src else 0
    logger.info("Emitted %d constants for %d macros from %s", emitted, len(macros), args.header)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(src)
        print(f"Generated {args.output}")
    elif src:
        print(src)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cmacros",
        description="Extract #define macros from C headers and translate them to Rust constants",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("CMACROS_LOG_LEVEL", "WARNING"),
        help="Logging level (default: $CMACROS_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--lenient", action="store_true",
        help="Skip malformed #define lines instead of failing the header",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # Also accepted after the subcommand; SUPPRESS keeps a top-level --lenient
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--lenient", action="store_true", default=argparse.SUPPRESS,
                        help="Skip malformed #define lines instead of failing the header")

    p = sub.add_parser("defines", parents=[common], help="Print all macro definitions found")
    p.add_argument("path", help="Header file, or directory containing headers")
    p.set_defaults(func=cmd_defines)

    p = sub.add_parser("translate", parents=[common], help="Translate simple macros to Rust constants")
    p.add_argument("header", help="Input header file to parse")
    p.add_argument("--skip", action="append", default=[], metavar="NAME",
                   help="Macro to leave untranslated (repeatable)")
    p.add_argument("--type", dest="types", action="append", default=[], metavar="NAME=TYPE",
                   help="Explicit constant type for a macro (repeatable)")
    p.add_argument("-o", "--output", help="Write generated source to this file")
    p.set_defaults(func=cmd_translate)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point: cmacros <command> [args]"""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
