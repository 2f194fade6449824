"""Typed records for rustc's JSON diagnostic output (`--error-format=json`).

These mirror the compiler's schema closely so that decoded records can be fed
straight into the suggestion collector. Only the fields the collector needs are
required; the rest default the way rustc leaves them out.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class Level(enum.Enum):
    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"
    HELP = "help"
    FAILURE_NOTE = "failure-note"
    ICE = "error: internal compiler error"


@dataclass(frozen=True)
class DiagnosticCode:
    code: str
    explanation: str | None = None

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class DiagnosticSpanLine:
    """One physical source line covered by a span.

    `highlight_start` and `highlight_end` are 1-based columns.
    """

    text: str
    highlight_start: int
    highlight_end: int


@dataclass(frozen=True)
class DiagnosticSpanMacroExpansion:
    span: DiagnosticSpan
    macro_decl_name: str
    def_site_span: DiagnosticSpan | None = None


@dataclass(frozen=True)
class DiagnosticSpan:
    file_name: str
    line_start: int
    line_end: int
    column_start: int
    column_end: int
    text: tuple[DiagnosticSpanLine, ...] = ()
    byte_start: int = 0
    byte_end: int = 0
    is_primary: bool = False
    label: str | None = None
    suggested_replacement: str | None = None
    expansion: DiagnosticSpanMacroExpansion | None = None


@dataclass(frozen=True)
class Diagnostic:
    message: str
    spans: tuple[DiagnosticSpan, ...] = ()
    children: tuple[Diagnostic, ...] = ()
    code: DiagnosticCode | None = None
    level: Level = Level.ERROR
    rendered: str | None = None

    # -- Query methods ----------------------------------------------------------

    @property
    def code_str(self) -> str | None:
        return self.code.code if self.code is not None else None


@dataclass
class DiagnosticBatch:
    """Diagnostics decoded from one input, with the count of skipped records."""

    diagnostics: list[Diagnostic] = field(default_factory=list)
    skipped: int = 0
