"""Diagnostic input schema: rustc JSON records and their decoder."""

from rustfix.diagnostics.load import (
    DiagnosticFormatError,
    decode_stream,
    parse_diagnostic,
    parse_diagnostics,
    parse_span,
)
from rustfix.diagnostics.types import (
    Diagnostic,
    DiagnosticBatch,
    DiagnosticCode,
    DiagnosticSpan,
    DiagnosticSpanLine,
    DiagnosticSpanMacroExpansion,
    Level,
)

__all__ = [
    "Diagnostic",
    "DiagnosticBatch",
    "DiagnosticCode",
    "DiagnosticFormatError",
    "DiagnosticSpan",
    "DiagnosticSpanLine",
    "DiagnosticSpanMacroExpansion",
    "Level",
    "decode_stream",
    "parse_diagnostic",
    "parse_diagnostics",
    "parse_span",
]
