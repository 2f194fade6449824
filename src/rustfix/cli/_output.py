"""Shared output formatting for CLI commands."""

from __future__ import annotations

import json

from rustfix.suggestions.render import render_json, render_text
from rustfix.suggestions.types import Suggestion


def format_suggestions(suggestions: list[Suggestion], *, output_format: str = "text") -> str:
    if output_format == "json":
        return json.dumps([render_json(s) for s in suggestions], indent=2)
    return render_text(suggestions)
