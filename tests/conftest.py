"""Root conftest — shared fixtures and sample compiler output."""

from __future__ import annotations

import copy
import json

import pytest

UNUSED_IMPORT = {
    "message": "unused import: `std::collections::HashMap`",
    "code": {"code": "unused_imports", "explanation": None},
    "level": "warning",
    "spans": [
        {
            "file_name": "src/main.rs",
            "byte_start": 4,
            "byte_end": 29,
            "line_start": 1,
            "line_end": 1,
            "column_start": 5,
            "column_end": 30,
            "is_primary": True,
            "text": [
                {
                    "text": "use std::collections::HashMap;",
                    "highlight_start": 5,
                    "highlight_end": 30,
                }
            ],
            "label": None,
            "suggested_replacement": None,
            "suggestion_applicability": None,
            "expansion": None,
        }
    ],
    "children": [
        {
            "message": "`#[warn(unused_imports)]` on by default",
            "code": None,
            "level": "note",
            "spans": [],
            "children": [],
            "rendered": None,
        },
        {
            "message": "remove the whole `use` item",
            "code": None,
            "level": "help",
            "spans": [
                {
                    "file_name": "src/main.rs",
                    "byte_start": 0,
                    "byte_end": 30,
                    "line_start": 1,
                    "line_end": 1,
                    "column_start": 1,
                    "column_end": 31,
                    "is_primary": True,
                    "text": [
                        {
                            "text": "use std::collections::HashMap;",
                            "highlight_start": 1,
                            "highlight_end": 31,
                        }
                    ],
                    "label": None,
                    "suggested_replacement": "",
                    "suggestion_applicability": "MachineApplicable",
                    "expansion": None,
                }
            ],
            "children": [],
            "rendered": None,
        },
    ],
    "rendered": "warning: unused import: `std::collections::HashMap`\n",
}

UNUSED_VARIABLE = {
    "message": "unused variable: `x`",
    "code": {"code": "unused_variables", "explanation": None},
    "level": "warning",
    "spans": [
        {
            "file_name": "src/main.rs",
            "byte_start": 48,
            "byte_end": 49,
            "line_start": 4,
            "line_end": 4,
            "column_start": 9,
            "column_end": 10,
            "is_primary": True,
            "text": [{"text": "    let x = 1;", "highlight_start": 9, "highlight_end": 10}],
            "label": None,
            "suggested_replacement": None,
            "expansion": None,
        }
    ],
    "children": [
        {
            "message": "if this is intentional, prefix it with an underscore",
            "code": None,
            "level": "help",
            "spans": [
                {
                    "file_name": "src/main.rs",
                    "byte_start": 48,
                    "byte_end": 49,
                    "line_start": 4,
                    "line_end": 4,
                    "column_start": 9,
                    "column_end": 10,
                    "is_primary": True,
                    "text": [{"text": "    let x = 1;", "highlight_start": 9, "highlight_end": 10}],
                    "label": None,
                    "suggested_replacement": "_x",
                    "expansion": None,
                }
            ],
            "children": [],
            "rendered": None,
        }
    ],
    "rendered": "warning: unused variable: `x`\n",
}

UNRESOLVED_NAME = {
    "message": "cannot find value `y` in this scope",
    "code": {"code": "E0425", "explanation": "An unresolved name was used.\n"},
    "level": "error",
    "spans": [
        {
            "file_name": "src/main.rs",
            "byte_start": 70,
            "byte_end": 71,
            "line_start": 5,
            "line_end": 5,
            "column_start": 20,
            "column_end": 21,
            "is_primary": True,
            "text": [
                {"text": "    println!(\"{}\", y);", "highlight_start": 20, "highlight_end": 21}
            ],
            "label": "not found in this scope",
            "suggested_replacement": None,
            "expansion": None,
        }
    ],
    "children": [],
    "rendered": "error[E0425]: cannot find value `y` in this scope\n",
}


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config lookup at an empty temp location for every test."""
    path = tmp_path / "config.toml"
    monkeypatch.setenv("RUSTFIX_CONFIG", str(path))
    return path


@pytest.fixture
def rustc_output() -> str:
    """JSON-lines output as printed by `rustc --error-format=json`."""
    return "\n".join(json.dumps(d) for d in (UNUSED_IMPORT, UNUSED_VARIABLE, UNRESOLVED_NAME))


@pytest.fixture
def cargo_output() -> str:
    """JSON-lines output as printed by `cargo build --message-format=json`."""
    target = {"kind": ["bin"], "name": "demo", "src_path": "/work/demo/src/main.rs"}
    messages = [
        {"reason": "compiler-artifact", "package_id": "libc 0.2.150", "target": target},
        {"reason": "compiler-message", "package_id": "demo 0.1.0", "target": target,
         "message": UNUSED_IMPORT},
        {"reason": "compiler-message", "package_id": "demo 0.1.0", "target": target,
         "message": UNRESOLVED_NAME},
        {"reason": "build-finished", "success": False},
    ]
    return "\n".join(json.dumps(m) for m in messages)


@pytest.fixture
def unused_import() -> dict:
    return copy.deepcopy(UNUSED_IMPORT)


@pytest.fixture
def unused_variable() -> dict:
    return copy.deepcopy(UNUSED_VARIABLE)


@pytest.fixture
def unresolved_name() -> dict:
    return copy.deepcopy(UNRESOLVED_NAME)
