from .base import EntityRecognizer
from .entities import (
    ENTITY_RECOGNIZERS,
    FALLBACK_RECOGNIZERS,
    normalize_aadhaar,
)
from .names import (
    find_name,
    inline_name,
    proper_case_name,
    loose_name,
)

__all__ = [
    "EntityRecognizer",
    "ENTITY_RECOGNIZERS",
    "FALLBACK_RECOGNIZERS",
    "normalize_aadhaar",
    "find_name",
    "inline_name",
    "proper_case_name",
    "loose_name",
]
