"""Suggestion extraction: snippets, replacements and their renderings."""

from rustfix.suggestions.collect import (
    collect_all,
    collect_suggestions,
    filter_diagnostics,
    get_suggestions_from_json,
)
from rustfix.suggestions.render import render_json, render_text
from rustfix.suggestions.snippet import EmptySpanError, build_snippet, common_indent
from rustfix.suggestions.types import (
    LinePosition,
    LineRange,
    Replacement,
    Snippet,
    SnippetText,
    Suggestion,
)

__all__ = [
    "EmptySpanError",
    "LinePosition",
    "LineRange",
    "Replacement",
    "Snippet",
    "SnippetText",
    "Suggestion",
    "build_snippet",
    "collect_all",
    "collect_suggestions",
    "common_indent",
    "filter_diagnostics",
    "get_suggestions_from_json",
    "render_json",
    "render_text",
]
