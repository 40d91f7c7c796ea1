"""Extraction of #define macro definitions from C header source."""

import logging
from typing import List

from cmacros.errors import MacroParseError
from cmacros.models import CMacro
from cmacros.parsing.directive import match_define, parse_macro
from cmacros.parsing.lines import iter_numbered_lines
from cmacros.parsing.stream import CharStream

logger = logging.getLogger("cmacros.extractor")


class MacroExtractor:
    """Extract macro definitions from the text of a C header.

    Lines that are not #define directives (other directives, comments,
    declarations) are ignored. A #define that fails to parse raises
    MacroParseError in strict mode; with ``strict=False`` it is logged
    and skipped instead.
    """

    def __init__(self, strict: bool = True) -> None:
        self.strict = strict

    def extract(self, source: str) -> List[CMacro]:
        macros: List[CMacro] = []
        for line_number, line in iter_numbered_lines(source):
            stream = CharStream(line)
            if not match_define(stream):
                continue

            try:
                macros.append(parse_macro(stream))
            except MacroParseError as e:
                err = e.with_context(line, line_number)
                if self.strict:
                    raise err from e
                logger.warning("Skipping malformed directive: %s", err)

        logger.debug("Extracted %d macros", len(macros))
        return macros


def extract_macros(source: str, strict: bool = True) -> List[CMacro]:
    """Module-level convenience function for extraction."""
    return MacroExtractor(strict=strict).extract(source)
