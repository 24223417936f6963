from __future__ import annotations
import json
import os
import re
from typing import Any

def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)

def write_json(path: str, payload: dict[str, Any]) -> None:
    ensure_dir(os.path.dirname(path) or ".")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)
        f.write("\n")

def read_json(path: str) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(data).__name__}")
    return data

def normalize_whitespace(s: str) -> str:
    return re.sub(r"\s+", " ", s).strip()

def extract_lines(text: str) -> list[str]:
    # trimmed, non-empty, document order kept
    raw = text.replace("\r\n", "\n").replace("\r", "\n")
    out = []
    for ln in raw.split("\n"):
        ln = ln.strip()
        if ln:
            out.append(ln)
    return out
