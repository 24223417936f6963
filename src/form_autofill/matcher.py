from __future__ import annotations

from .catalog import DEFAULT_CATALOG, FieldCatalog, Pattern
from .normalize import normalize_label

def _pattern_hits(pattern: Pattern, label: str, low: str) -> bool:
    if isinstance(pattern, str):
        return pattern.lower() in low
    return bool(pattern.search(label) or pattern.search(low))

class LabelMatcher:
    """
    Resolves a document label to a canonical field id.

    Three tiers, tried strictly in order, first hit wins:
      1) recognition patterns (regex or literal, raw + lowercased label)
      2) fused keyword aliases contained in the normalized label
      3) loose single-keyword hints
    Tiers are never merged; catalog and hint order decide ties.
    """

    def __init__(self, catalog: FieldCatalog | None = None):
        self.catalog = catalog if catalog is not None else DEFAULT_CATALOG

    def match_pattern(self, label: str) -> str | None:
        low = label.lower().strip()
        for d in self.catalog:
            if any(_pattern_hits(p, label, low) for p in d.recognition_patterns):
                return d.id
        return None

    def match_alias(self, label: str) -> str | None:
        # substring, not equality: garbled OCR labels still carry the alias
        norm = normalize_label(label)
        for d in self.catalog:
            if any(k in norm for k in d.keyword_aliases):
                return d.id
        return None

    def match_loose(self, label: str) -> str | None:
        norm = normalize_label(label)
        for fid, kw in self.catalog.loose_hints:
            if kw in norm:
                return fid
        return None

    def match_field(self, label: str) -> str | None:
        return self.match_pattern(label) or self.match_alias(label) or self.match_loose(label)


_default_matcher = LabelMatcher()

def match_field(label: str) -> str | None:
    return _default_matcher.match_field(label)
