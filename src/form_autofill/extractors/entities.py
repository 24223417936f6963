from __future__ import annotations
import re
from .base import EntityRecognizer

EMAIL_RE = re.compile(r"([a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,})")

# Indian mobile: 10 digits, leading 6-9
MOBILE_RE = re.compile(r"\b([6-9]\d{9})\b", re.ASCII)

# 12 digits, optionally grouped 4-4-4 with a space or hyphen
AADHAAR_RE = re.compile(r"\b(\d{4}[ \t\-]?\d{4}[ \t\-]?\d{4})\b", re.ASCII)

PAN_RE = re.compile(r"\b([A-Z]{5}[0-9]{4}[A-Z])\b", re.ASCII)

PINCODE_RE = re.compile(r"\b(\d{6})\b", re.ASCII)

# D/M/Y (1-2, 1-2, 2-4 digits) or Y/M/D with a 4-digit year
DOB_RE = re.compile(
    r"\b(\d{1,2}[/\-.]\d{1,2}[/\-.]\d{2,4}|\d{4}[/\-.]\d{1,2}[/\-.]\d{1,2})\b",
    re.ASCII,
)

# last resort: no word boundaries, so "born12/05/1988" still yields a date
DATE_ANYWHERE_RE = re.compile(r"(\d{1,2}[/\-.]\d{1,2}[/\-.]\d{2,4})", re.ASCII)

def normalize_aadhaar(raw: str) -> str:
    digits = re.sub(r"\D", "", raw)
    return f"{digits[0:4]} {digits[4:8]} {digits[8:12]}"

ENTITY_RECOGNIZERS: tuple[EntityRecognizer, ...] = (
    EntityRecognizer("email", EMAIL_RE),
    EntityRecognizer("phoneNumber", MOBILE_RE),
    EntityRecognizer("aadhaar", AADHAAR_RE, normalize_aadhaar),
    EntityRecognizer("pan", PAN_RE),
    EntityRecognizer("pincode", PINCODE_RE),
    EntityRecognizer("dateOfBirth", DOB_RE),
)

FALLBACK_RECOGNIZERS: tuple[EntityRecognizer, ...] = (
    EntityRecognizer("dateOfBirth", DATE_ANYWHERE_RE),
)
