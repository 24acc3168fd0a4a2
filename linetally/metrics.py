"""Per-line source metrics: effective lines, reserved words and comments."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List, TextIO

BUFFER_SIZE = 256
MAX_LINE = BUFFER_SIZE - 1

KEYWORDS = (
    "int", "long", "float", "double", "char", "const", "void",
    "if", "else", "switch", "case", "return",
    "for", "while", "do", "break", "continue",
    "sizeof", "struct", "typedef", "unsigned", "#include",
)
_KEYWORD_SET = frozenset(KEYWORDS)

_WHITESPACE = " \t\n\v\f\r"
_DELIMITERS = " \t\n;(){}=<>+-*^%!&|"
_TOKEN_SPLIT = re.compile("[" + re.escape(_DELIMITERS) + "]+")
_COMPARISONS = ("==", "!=", "<=", ">=", "<", ">")
_SKIPPED_PREFIXES = ("//", "/*", "#include")


@dataclass(frozen=True)
class Counts:
    """Accumulated metrics for one or more lines."""

    effective_lines: int = 0
    keywords: int = 0
    comments: int = 0

    def __add__(self, other: object) -> "Counts":
        if not isinstance(other, Counts):
            return NotImplemented
        return Counts(
            self.effective_lines + other.effective_lines,
            self.keywords + other.keywords,
            self.comments + other.comments,
        )

    def total_lines(self) -> int:
        """Effective lines plus comments, the figure rates are based on."""
        return self.effective_lines + self.comments


def is_effective_line(line: str) -> bool:
    """Return whether the line ends a statement or holds a comparison."""
    stripped = line.lstrip(_WHITESPACE)
    if not stripped or stripped.startswith(_SKIPPED_PREFIXES) or stripped in ("{", "}"):
        return False
    if stripped.rstrip(_WHITESPACE).endswith(";"):
        return True
    return any(op in stripped for op in _COMPARISONS)


def count_keywords(line: str) -> int:
    """Count tokens of the line that are reserved words."""
    tokens = _TOKEN_SPLIT.split(line[:MAX_LINE])
    return sum(1 for token in tokens if token in _KEYWORD_SET)


def count_comments(line: str) -> int:
    """Count comment openings on the line, honouring block comment extents."""
    count = 0
    in_block = False
    pos = 0
    while pos < len(line):
        if not in_block and line.startswith("//", pos):
            count += 1
            break
        if not in_block and line.startswith("/*", pos):
            in_block = True
            count += 1
            pos += 2
        elif in_block and line.startswith("*/", pos):
            in_block = False
            pos += 2
        else:
            pos += 1
    return count


def analyze_line(line: str) -> Counts:
    """Compute all metrics for one line; an empty line yields zero counts."""
    if not line:
        return Counts()
    return Counts(
        effective_lines=int(is_effective_line(line)),
        keywords=count_keywords(line),
        comments=count_comments(line),
    )


def read_chunks(stream: TextIO, size: int) -> Iterator[List[str]]:
    """Yield lists of up to ``size`` lines, each at most 255 characters long.

    Longer physical lines are split into several pieces, as a fixed buffer
    reader would return them.
    """
    if size <= 0:
        raise ValueError("chunk size must be positive")
    while True:
        chunk = []
        for _ in range(size):
            piece = stream.readline(MAX_LINE)
            if not piece:
                break
            chunk.append(piece)
        if not chunk:
            return
        yield chunk