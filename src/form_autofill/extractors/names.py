from __future__ import annotations
import re

# "Name: Anita Devi" / "name - anita devi" anywhere in the text
INLINE_NAME_RE = re.compile(r"\bname\s*[:\-]\s*([A-Za-z][A-Za-z \t]{2,47})", re.IGNORECASE)

# 2-5 Capitalized words, whole line
PROPER_CASE_RE = re.compile(r"[A-Z][a-zA-Z]+(?:\s+[A-Z][a-zA-Z]+){1,4}")

LETTERS_ONLY_RE = re.compile(r"[A-Za-z\s]{3,50}")

def inline_name(text: str) -> str | None:
    m = INLINE_NAME_RE.search(text)
    if not m:
        return None
    return m.group(1).strip() or None

def proper_case_name(lines: list[str]) -> str | None:
    for ln in lines:
        if PROPER_CASE_RE.fullmatch(ln):
            return ln
    return None

def loose_name(lines: list[str]) -> str | None:
    for ln in lines:
        if LETTERS_ONLY_RE.fullmatch(ln) and len(ln.split()) >= 2:
            return ln
    return None

def find_name(text: str, lines: list[str]) -> tuple[str, str] | None:
    """
    Best-effort applicant name when no label produced one.
    Returns (value, heuristic) for the first heuristic that fires:
      "inline"      -> name:/name- followed by letters
      "proper_case" -> first line of Capitalized words
      "loose"       -> first letters-only line with 2+ words
    """
    value = inline_name(text)
    if value:
        return value, "inline"
    value = proper_case_name(lines)
    if value:
        return value, "proper_case"
    value = loose_name(lines)
    if value:
        return value, "loose"
    return None
