"""Logical line iteration over C header source.

Physical lines ending in a backslash are joined with the following line,
so a multi-line #define arrives as one logical line.
"""

from typing import Iterator, Tuple

from cmacros.parsing.stream import CharStream


def iter_numbered_lines(source: str) -> Iterator[Tuple[int, str]]:
    """Yield ``(line_number, text)`` for each logical line of ``source``.

    ``line_number`` is the 1-based physical line on which the logical line
    starts. Leading whitespace, including any run of blank lines, is
    skipped before each logical line. A final line without a trailing
    newline is still yielded.
    """
    stream = CharStream(source)
    line_number = 1
    while not stream.at_end():
        line_number += stream.skip_whitespace().count("\n")
        start_line = line_number

        chars = []
        while not stream.at_end():
            ch = stream.next()
            if ch == "\n":
                line_number += 1
                break
            if ch == "\\" and stream.peek(0) == "\n":
                stream.next()  # line continuation
                line_number += 1
                continue
            chars.append(ch)
        yield start_line, "".join(chars)


def iter_logical_lines(source: str) -> Iterator[str]:
    """Yield logical lines of ``source`` with leading whitespace removed."""
    for _, line in iter_numbered_lines(source):
        yield line
