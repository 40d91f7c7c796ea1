"""Recursive-descent parser for #define directives.

Grammar, over one logical line with leading whitespace already removed:

    directive := '#' WS* 'define' WS+ name args? WS* body?
    name      := [A-Za-z0-9_]+
    args      := '(' ( WS | ',' | name )* ')'
    body      := rest of the line, stripped
"""

from typing import List, Tuple

from cmacros.errors import MacroParseError
from cmacros.models import CMacro
from cmacros.parsing.stream import CharStream


def is_ident_char(ch: str) -> bool:
    return ch == "_" or ("0" <= ch <= "9") or ("A" <= ch <= "Z") or ("a" <= ch <= "z")


def parse_ident(stream: CharStream) -> str:
    return stream.consume_while(is_ident_char)


def parse_arg_list(stream: CharStream) -> Tuple[str, ...]:
    """Parse a parenthesized, comma-separated list of parameter names.

    The stream must be positioned on the opening paren. Running out of
    input before the closing paren is an error.
    """
    args: List[str] = []
    stream.consume_char("(")
    while True:
        ch = stream.peek(0)
        if ch == ",":
            stream.next()
        elif ch == ")":
            stream.next()
            return tuple(args)
        elif ch.isspace():
            stream.next()
        elif is_ident_char(ch):
            args.append(parse_ident(stream))
        else:
            raise MacroParseError(f"Unexpected char {ch!r} in macro argument list")


def parse_macro(stream: CharStream) -> CMacro:
    """Parse the name, argument list and body following ``#define``."""
    name = parse_ident(stream)
    if not name:
        raise MacroParseError(f"Could not parse macro name from {stream.tail()!r}")

    args = None
    if stream.peek(0) == "(":
        args = parse_arg_list(stream)

    body = stream.tail().strip()
    return CMacro(name=name, args=args, body=body or None)


def match_define(stream: CharStream) -> bool:
    """Consume a ``#define`` keyword and the whitespace after it.

    Returns False for any line that is not a #define directive; the
    stream position is then unspecified.
    """
    if not stream.consume_char("#"):
        return False
    stream.skip_whitespace()
    if not stream.consume("define") or not stream.peek(0).isspace():
        return False
    stream.skip_whitespace()
    return True
