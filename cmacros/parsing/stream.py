"""Character stream view over a string for hand-written parsers."""

from typing import Callable

# Returned by peek() past the end of input. Not whitespace and not an
# identifier char, so scanning loops stop on it.
NUL = "\0"


class CharStream:
    """A string viewed as a stream of chars that can be peeked and consumed.

    All operations are total: reading past the end yields NUL and
    never raises.
    """

    __slots__ = ("text", "pos")

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        if index < len(self.text):
            return self.text[index]
        return NUL

    def next(self) -> str:
        """Return the current char and advance past it."""
        ch = self.peek(0)
        self.pos += 1
        return ch

    def consume(self, text: str) -> bool:
        """Advance past ``text`` if the remaining input starts with it."""
        if self.text.startswith(text, self.pos):
            self.pos += len(text)
            return True
        return False

    def consume_char(self, required: str) -> bool:
        return len(self.consume_while(lambda ch: ch == required)) > 0

    def consume_while(self, test: Callable[[str], bool]) -> str:
        start = self.pos
        while not self.at_end() and test(self.text[self.pos]):
            self.pos += 1
        return self.text[start:self.pos]

    def skip_whitespace(self) -> str:
        return self.consume_while(str.isspace)

    def tail(self) -> str:
        return self.text[self.pos:]

    def __repr__(self) -> str:
        return f"CharStream(pos={self.pos}, tail={self.tail()[:20]!r})"
