from __future__ import annotations

from .occurrence_index import OccurrenceIndex, group_index

__all__ = ["OccurrenceIndex", "group_index"]
