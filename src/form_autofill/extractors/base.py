from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Callable, Optional

@dataclass(frozen=True)
class EntityRecognizer:
    field: str
    pattern: re.Pattern[str]
    normalizer: Optional[Callable[[str], str]] = None
    group: int = 1

    def find(self, text: str) -> str | None:
        # first match in document order
        m = self.pattern.search(text)
        if not m:
            return None
        raw = m.group(self.group)
        return self.normalizer(raw) if self.normalizer else raw
