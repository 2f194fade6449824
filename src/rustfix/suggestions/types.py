"""Suggestion value types: what the collector hands back to callers.

All values are frozen and hashable; sequences are tuples so that order is
kept and results can be compared or used as dict keys.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True)
class LinePosition:
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class LineRange:
    start: LinePosition
    end: LinePosition

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


class SnippetText(NamedTuple):
    """Leading context, text to replace, trailing context.

    The split lets renderers highlight the part that gets replaced.
    """

    lead: str
    body: str
    tail: str


@dataclass(frozen=True)
class Snippet:
    sub_message: str | None
    file_name: str
    line_range: LineRange
    text: SnippetText

    @property
    def location(self) -> str:
        return f"{self.file_name}:{self.line_range}"


@dataclass(frozen=True)
class Replacement:
    snippet: Snippet
    replacement: str


@dataclass(frozen=True)
class Suggestion:
    message: str
    snippets: tuple[Snippet, ...]
    replacements: tuple[Replacement, ...]

    @property
    def files(self) -> list[str]:
        """File names touched by replacements, in first-seen order."""
        seen: dict[str, None] = {}
        for r in self.replacements:
            seen.setdefault(r.snippet.file_name, None)
        return list(seen)
