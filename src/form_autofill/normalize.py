from __future__ import annotations
import re

# whitespace and the punctuation OCR tends to scatter through labels
_STRIP_RE = re.compile(r"[\s\-_.,;:()\[\]/\\]+")

def normalize_label(label: str) -> str:
    """Lowercase and drop spacing/punctuation so "Full Name", "full-name"
    and "FULLNAME:" all compare equal ("fullname")."""
    return _STRIP_RE.sub("", label.lower())
