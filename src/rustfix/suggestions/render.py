"""Render suggestions for terminal (text) and tooling (JSON) output."""

from __future__ import annotations

from rustfix.suggestions.types import LinePosition, Replacement, Snippet, Suggestion


def render_json(suggestion: Suggestion) -> dict:
    """Render a Suggestion as a JSON-serializable dict."""
    return {
        "message": suggestion.message,
        "snippets": [_snippet_to_dict(s) for s in suggestion.snippets],
        "replacements": [
            {"snippet": _snippet_to_dict(r.snippet), "replacement": r.replacement}
            for r in suggestion.replacements
        ],
    }


def render_text(suggestions: list[Suggestion]) -> str:
    """Render suggestions as a human-readable before/after listing."""
    lines: list[str] = []
    for i, s in enumerate(suggestions):
        if i:
            lines.append("")
        lines.append(f"suggestion: {s.message}")
        for snippet in s.snippets:
            lines.append(f"  --> {snippet.location}")
        for r in s.replacements:
            lines.extend(_replacement_lines(r))
    return "\n".join(lines)


def _replacement_lines(r: Replacement) -> list[str]:
    lead, body, tail = r.snippet.text
    out = [f"  = {r.snippet.sub_message or 'replace'} ({r.snippet.location})"]
    out.extend(_marked("-", lead + body + tail))
    out.extend(_marked("+", lead + r.replacement + tail))
    return out


def _marked(marker: str, text: str) -> list[str]:
    return [f"    {marker} {line}" for line in text.split("\n")]


def _position(pos: LinePosition) -> dict:
    return {"line": pos.line, "column": pos.column}


def _snippet_to_dict(s: Snippet) -> dict:
    return {
        "file_name": s.file_name,
        "line_range": str(s.line_range),
        "start": _position(s.line_range.start),
        "end": _position(s.line_range.end),
        "sub_message": s.sub_message,
        "lead": s.text.lead,
        "body": s.text.body,
        "tail": s.text.tail,
    }
