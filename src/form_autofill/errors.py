from __future__ import annotations

class MalformedInputError(TypeError):
    """Raised when extraction is handed something other than text."""
