"""Decode rustc/cargo JSON output into Diagnostic records."""

from __future__ import annotations

import json
from collections.abc import Mapping

from rustfix.diagnostics.types import (
    Diagnostic,
    DiagnosticBatch,
    DiagnosticCode,
    DiagnosticSpan,
    DiagnosticSpanLine,
    DiagnosticSpanMacroExpansion,
    Level,
)

_CARGO_MESSAGE = "compiler-message"


class DiagnosticFormatError(ValueError):
    """Raised when input does not match the rustc diagnostic schema."""


def _require(data: Mapping, key: str, kind: type | tuple[type, ...], path: str):
    if key not in data:
        raise DiagnosticFormatError(f"{path}: missing field '{key}'")
    value = data[key]
    # bool is an int subclass; rustc never sends booleans for positions.
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise DiagnosticFormatError(
            f"{path}.{key}: expected {_kind_name(kind)}, got {type(value).__name__}"
        )
    return value


def _optional(data: Mapping, key: str, kind: type, path: str):
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, kind):
        raise DiagnosticFormatError(
            f"{path}.{key}: expected {_kind_name(kind)} or null, got {type(value).__name__}"
        )
    return value


def _kind_name(kind: type | tuple[type, ...]) -> str:
    if isinstance(kind, tuple):
        return " or ".join(k.__name__ for k in kind)
    return kind.__name__


def _parse_line(data: object, path: str) -> DiagnosticSpanLine:
    if not isinstance(data, Mapping):
        raise DiagnosticFormatError(f"{path}: expected object")
    return DiagnosticSpanLine(
        text=_require(data, "text", str, path),
        highlight_start=_require(data, "highlight_start", int, path),
        highlight_end=_require(data, "highlight_end", int, path),
    )


def _parse_expansion(data: Mapping, path: str) -> DiagnosticSpanMacroExpansion:
    def_site = data.get("def_site_span")
    return DiagnosticSpanMacroExpansion(
        span=parse_span(_require(data, "span", Mapping, path), f"{path}.span"),
        macro_decl_name=_require(data, "macro_decl_name", str, path),
        def_site_span=(
            parse_span(def_site, f"{path}.def_site_span") if isinstance(def_site, Mapping) else None
        ),
    )


def parse_span(data: Mapping, path: str = "span") -> DiagnosticSpan:
    """Build a DiagnosticSpan from a decoded JSON object."""
    lines = _require(data, "text", list, path)
    expansion = _optional(data, "expansion", Mapping, path)
    return DiagnosticSpan(
        file_name=_require(data, "file_name", str, path),
        line_start=_require(data, "line_start", int, path),
        line_end=_require(data, "line_end", int, path),
        column_start=_require(data, "column_start", int, path),
        column_end=_require(data, "column_end", int, path),
        text=tuple(_parse_line(line, f"{path}.text[{i}]") for i, line in enumerate(lines)),
        byte_start=data.get("byte_start") or 0,
        byte_end=data.get("byte_end") or 0,
        is_primary=bool(data.get("is_primary", False)),
        label=_optional(data, "label", str, path),
        suggested_replacement=_optional(data, "suggested_replacement", str, path),
        expansion=(
            _parse_expansion(expansion, f"{path}.expansion") if expansion is not None else None
        ),
    )


def parse_diagnostic(data: Mapping, path: str = "diagnostic") -> Diagnostic:
    """Build a Diagnostic (and its children) from a decoded JSON object.

    Raises DiagnosticFormatError naming the offending field path.
    """
    if not isinstance(data, Mapping):
        raise DiagnosticFormatError(f"{path}: expected object, got {type(data).__name__}")

    code = _optional(data, "code", Mapping, path)
    spans = data.get("spans") or []
    children = data.get("children") or []
    if not isinstance(spans, list):
        raise DiagnosticFormatError(f"{path}.spans: expected list")
    if not isinstance(children, list):
        raise DiagnosticFormatError(f"{path}.children: expected list")

    return Diagnostic(
        message=_require(data, "message", str, path),
        spans=tuple(
            parse_span(_as_mapping(s, f"{path}.spans[{i}]"), f"{path}.spans[{i}]")
            for i, s in enumerate(spans)
        ),
        children=tuple(
            parse_diagnostic(c, f"{path}.children[{i}]") for i, c in enumerate(children)
        ),
        code=(
            DiagnosticCode(
                code=_require(code, "code", str, f"{path}.code"),
                explanation=_optional(code, "explanation", str, f"{path}.code"),
            )
            if code is not None
            else None
        ),
        level=_parse_level(data, path),
        rendered=_optional(data, "rendered", str, path),
    )


def _parse_level(data: Mapping, path: str) -> Level:
    value = _optional(data, "level", str, path)
    if value is None:
        return Level.ERROR
    try:
        return Level(value)
    except ValueError as e:
        valid = ", ".join(level.value for level in Level)
        raise DiagnosticFormatError(f"{path}.level: unknown level '{value}'. Valid: {valid}") from e


def _as_mapping(value: object, path: str) -> Mapping:
    if not isinstance(value, Mapping):
        raise DiagnosticFormatError(f"{path}: expected object, got {type(value).__name__}")
    return value


def _unwrap(obj: object, path: str) -> Mapping | None:
    """Return the rustc diagnostic inside `obj`, or None for other cargo messages."""
    record = _as_mapping(obj, path)
    reason = record.get("reason")
    if reason is None:
        return record
    if reason == _CARGO_MESSAGE:
        return _as_mapping(record.get("message"), f"{path}.message")
    return None


def decode_stream(text: str) -> DiagnosticBatch:
    """Decode a JSON array, a single JSON object, or JSON-lines output.

    Cargo envelopes other than `compiler-message` and lines that are not JSON
    objects (plain compiler chatter) are counted as skipped.
    """
    batch = DiagnosticBatch()
    stripped = text.strip()
    if not stripped:
        return batch

    if stripped.startswith("["):
        try:
            records = json.loads(stripped)
        except json.JSONDecodeError as e:
            raise DiagnosticFormatError(f"invalid JSON array: {e}") from e
        for i, obj in enumerate(records):
            inner = _unwrap(obj, f"[{i}]")
            if inner is None:
                batch.skipped += 1
                continue
            batch.diagnostics.append(parse_diagnostic(inner, f"[{i}]"))
        return batch

    first_content = True
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        is_first, first_content = first_content, False
        if not line.startswith("{"):
            batch.skipped += 1
            continue
        try:
            obj = json.loads(line)
        except json.JSONDecodeError as e:
            # A pretty-printed single object spans many lines.
            if is_first:
                return _decode_single(stripped, lineno, batch)
            raise DiagnosticFormatError(f"line {lineno}: invalid JSON: {e}") from e
        inner = _unwrap(obj, f"line {lineno}")
        if inner is None:
            batch.skipped += 1
            continue
        batch.diagnostics.append(parse_diagnostic(inner, f"line {lineno}"))
    return batch


def _decode_single(text: str, lineno: int, batch: DiagnosticBatch) -> DiagnosticBatch:
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise DiagnosticFormatError(f"line {lineno}: invalid JSON: {e}") from e
    inner = _unwrap(obj, "diagnostic")
    if inner is None:
        batch.skipped += 1
    else:
        batch.diagnostics.append(parse_diagnostic(inner))
    return batch


def parse_diagnostics(text: str) -> list[Diagnostic]:
    """Decode every diagnostic in `text`. See decode_stream for accepted forms."""
    return decode_stream(text).diagnostics
