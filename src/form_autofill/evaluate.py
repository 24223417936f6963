from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Any, Mapping
from rapidfuzz import fuzz

# identifier-like fields: compared exactly once formatting noise is removed
EXACT_FIELDS = {
    "email", "phoneNumber", "aadhaar", "pan", "pincode", "dateOfBirth",
    "accountNumber", "ifscCode", "passportNo", "drivingLicenseNo", "voterId",
}

FUZZY_OK = 0.85

def _norm(s: str) -> str:
    return "".join(ch.lower() for ch in s.strip() if ch.isalnum() or ch.isspace())

def _norm_id(s: str) -> str:
    return re.sub(r"[\s\-]", "", s).lower()

def exact_match(pred: str, gt: str) -> bool:
    return _norm_id(pred) == _norm_id(gt)

def fuzzy_score(pred: str, gt: str) -> float:
    return fuzz.token_set_ratio(_norm(pred), _norm(gt)) / 100.0

@dataclass
class EvalRow:
    field: str
    ok: bool
    score: float
    predicted: str | None = None

def evaluate_one(predicted: Mapping[str, Any], expected: Mapping[str, Any]) -> list[EvalRow]:
    rows: list[EvalRow] = []
    for field, gt in expected.items():
        if gt is None or gt == "":
            continue
        pred = predicted.get(field)
        if pred is None:
            rows.append(EvalRow(field, False, 0.0))
            continue

        if field in EXACT_FIELDS:
            ok = exact_match(str(pred), str(gt))
            rows.append(EvalRow(field, ok, 1.0 if ok else 0.0, str(pred)))
        else:
            score = fuzzy_score(str(pred), str(gt))
            rows.append(EvalRow(field, score >= FUZZY_OK, score, str(pred)))
    return rows

def summarize(rows: list[EvalRow]) -> dict[str, Any]:
    total = len(rows)
    ok_count = sum(1 for r in rows if r.ok)
    missing = sum(1 for r in rows if r.predicted is None)
    return {
        "rows": total,
        "ok": ok_count,
        "missing": missing,
        "acc": (ok_count / total) if total else 0.0,
    }
