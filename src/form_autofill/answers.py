from __future__ import annotations

class AnswerMap(dict):
    """
    Field id -> value for one extraction run.

    All writes go through ``set_if_absent``: the first pass to find a
    field owns it, later passes cannot overwrite it.
    """

    def set_if_absent(self, field_id: str, value: str) -> bool:
        if field_id in self:
            return False
        self[field_id] = value
        return True
