"""Header file discovery and batch extraction.

Everything that touches the filesystem lives here; the parsing core only
ever sees in-memory text.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Sequence

from cmacros.errors import MacroParseError
from cmacros.extractor import MacroExtractor
from cmacros.models import CMacro

logger = logging.getLogger("cmacros.headers")

HEADER_EXTENSIONS = (".h", ".hpp")
# Only VCS metadata is pruned; build and output dirs may hold generated headers.
SKIP_DIRS = {".git", ".hg", ".svn", "CVS"}


def header_extensions() -> Sequence[str]:
    """Header extensions, overridable via CMACROS_HEADER_EXTENSIONS."""
    override = os.environ.get("CMACROS_HEADER_EXTENSIONS", "")
    exts = [e.strip() for e in override.split(",") if e.strip()]
    if not exts:
        return HEADER_EXTENSIONS
    return tuple(e if e.startswith(".") else f".{e}" for e in exts)


def is_header(path: str, extensions: Optional[Sequence[str]] = None) -> bool:
    if extensions is None:
        extensions = header_extensions()
    return path.endswith(tuple(extensions))


def iter_header_files(root: str, extensions: Optional[Sequence[str]] = None) -> Iterator[str]:
    """Walk ``root`` and yield header paths in a stable order."""
    if extensions is None:
        extensions = header_extensions()

    def _on_error(err: OSError) -> None:
        logger.warning("Skipping %s: %s", err.filename, err.strerror)

    for dirpath, dirs, files in os.walk(root, onerror=_on_error):
        for d in dirs:
            if d in SKIP_DIRS:
                logger.debug("Pruning %s", os.path.join(dirpath, d))
        dirs[:] = sorted(d for d in dirs if d not in SKIP_DIRS)
        for fname in sorted(files):
            if is_header(fname, extensions):
                yield os.path.join(dirpath, fname)


def read_header(path: str) -> str:
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


@dataclass
class HeaderResult:
    """Outcome of extracting macros from one header file."""
    path: str
    macros: List[CMacro] = field(default_factory=list)
    error: Optional[str] = None  # set when the header could not be read or parsed

    @property
    def ok(self) -> bool:
        return self.error is None


def extract_from_headers(paths: Iterable[str], strict: bool = True) -> Iterator[HeaderResult]:
    """Extract macros from each header, isolating per-file failures."""
    extractor = MacroExtractor(strict=strict)
    for path in paths:
        try:
            source = read_header(path)
        except OSError as e:
            logger.warning("Failed to read %s: %s", path, e)
            yield HeaderResult(path=path, error=f"failed to read: {e}")
            continue

        try:
            macros = extractor.extract(source)
        except MacroParseError as e:
            logger.warning("Failed to parse %s: %s", path, e)
            yield HeaderResult(path=path, error=f"failed to parse: {e}")
            continue

        yield HeaderResult(path=path, macros=macros)
