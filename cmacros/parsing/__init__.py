"""Hand-written lexing and parsing of #define directives."""

from cmacros.parsing.directive import match_define, parse_arg_list, parse_ident, parse_macro
from cmacros.parsing.lines import iter_logical_lines, iter_numbered_lines
from cmacros.parsing.stream import NUL, CharStream

__all__ = [
    "CharStream",
    "NUL",
    "iter_logical_lines",
    "iter_numbered_lines",
    "match_define",
    "parse_arg_list",
    "parse_ident",
    "parse_macro",
]
