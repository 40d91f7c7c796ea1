"""Error raised for #define directives that do not parse."""

from typing import Optional


class MacroParseError(ValueError):
    """A line identified as a #define directive failed to parse.

    ``reason`` describes what went wrong. ``line`` is the offending logical
    line and ``line_number`` the 1-based physical line it starts on; both
    are filled in by the extractor once the failing directive is known.
    """

    def __init__(self, reason: str, line: Optional[str] = None,
                 line_number: Optional[int] = None) -> None:
        self.reason = reason
        self.line = line
        self.line_number = line_number
        if line is None:
            message = reason
        elif line_number is None:
            message = f"failed to parse {line!r}: {reason}"
        else:
            message = f"line {line_number}: failed to parse {line!r}: {reason}"
        super().__init__(message)

    def with_context(self, line: str, line_number: int) -> "MacroParseError":
        """Return a copy of this error carrying the offending logical line."""
        return MacroParseError(self.reason, line=line, line_number=line_number)
