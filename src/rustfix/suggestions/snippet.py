"""Snippet extraction: split a span's source lines into lead / body / tail."""

from __future__ import annotations

from rustfix.diagnostics.types import DiagnosticSpan, DiagnosticSpanLine
from rustfix.suggestions.types import LinePosition, LineRange, Snippet, SnippetText


class EmptySpanError(ValueError):
    """Raised when a span carries no source lines to extract from."""


def _leading_whitespace(text: str) -> int:
    count = 0
    for ch in text:
        if not ch.isspace():
            break
        count += 1
    return count


def common_indent(lines: tuple[DiagnosticSpanLine, ...]) -> int:
    """Indent width shared by every line.

    Each line contributes its leading whitespace capped at its highlight start;
    the result never passes the first line's 0-based highlight offset, so the
    lead slice cannot invert. One width is stripped from all lines so
    multi-line snippets stay aligned relative to each other.
    """
    if not lines:
        raise EmptySpanError("span has no source text to extract")
    indent = min(min(_leading_whitespace(line.text), line.highlight_start) for line in lines)
    return min(indent, lines[0].highlight_start - 1)


def build_snippet(message: str | None, span: DiagnosticSpan) -> Snippet:
    """Build an unindented Snippet for `span`, annotated with `message`.

    Columns in the span are 1-based; slicing below works on 0-based offsets.
    Raises EmptySpanError if `span.text` is empty.
    """
    lines = span.text
    indent = common_indent(lines)

    first = lines[0]
    start = first.highlight_start - 1
    end = first.highlight_end - 1
    lead = first.text[indent:start]
    body = first.text[start:end]

    for line in lines[1:-1]:
        body += "\n" + line.text[indent:]

    last = lines[-1]
    if len(lines) > 1:
        body += "\n" + last.text[indent : last.highlight_end - 1]
    tail = last.text[last.highlight_end - 1 :]

    return Snippet(
        sub_message=message,
        file_name=span.file_name,
        line_range=LineRange(
            start=LinePosition(line=span.line_start, column=span.column_start),
            end=LinePosition(line=span.line_end, column=span.column_end),
        ),
        text=SnippetText(lead=lead, body=body, tail=tail),
    )
