"""Collect suggestions from diagnostics.

A diagnostic's own spans become context snippets; spans on its children that
carry `suggested_replacement` become replacements. Order is kept throughout:
snippets follow the diagnostic's span order, replacements follow
child-then-span order.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable

from rustfix.diagnostics.load import parse_diagnostics
from rustfix.diagnostics.types import Diagnostic, DiagnosticSpan
from rustfix.suggestions.snippet import build_snippet
from rustfix.suggestions.types import Replacement, Suggestion


def _collect_span(message: str | None, span: DiagnosticSpan) -> Replacement | None:
    if span.suggested_replacement is None:
        return None
    return Replacement(
        snippet=build_snippet(message, span),
        replacement=span.suggested_replacement,
    )


def collect_suggestions(diagnostic: Diagnostic) -> Suggestion | None:
    """Return the Suggestion for `diagnostic`, or None if nothing is replaceable."""
    snippets = tuple(build_snippet(None, span) for span in diagnostic.spans)

    replacements: list[Replacement] = []
    for child in diagnostic.children:
        for span in child.spans:
            replacement = _collect_span(child.message, span)
            if replacement is not None:
                replacements.append(replacement)

    if not replacements:
        return None
    return Suggestion(
        message=diagnostic.message,
        snippets=snippets,
        replacements=tuple(replacements),
    )


def filter_diagnostics(
    diagnostics: Iterable[Diagnostic], only: Collection[str] | None = None
) -> list[Diagnostic]:
    """Keep diagnostics whose code is in `only`. None keeps everything."""
    if only is None:
        return list(diagnostics)
    return [d for d in diagnostics if d.code_str is not None and d.code_str in only]


def collect_all(
    diagnostics: Iterable[Diagnostic], only: Collection[str] | None = None
) -> list[Suggestion]:
    """Collect every non-empty suggestion, in input order."""
    suggestions: list[Suggestion] = []
    for diagnostic in filter_diagnostics(diagnostics, only):
        suggestion = collect_suggestions(diagnostic)
        if suggestion is not None:
            suggestions.append(suggestion)
    return suggestions


def get_suggestions_from_json(
    text: str, only: Collection[str] | None = None
) -> list[Suggestion]:
    """Decode rustc/cargo JSON output and collect its suggestions.

    Raises DiagnosticFormatError on malformed input.
    """
    return collect_all(parse_diagnostics(text), only)
