"""In-memory analysis history."""
import uuid
from datetime import datetime, timezone
from typing import Literal, Union

from config import HISTORY_LIMIT
from schemas import Analysis, ComparisonResult, SequenceStats

class MemStorage:
    """Keeps saved analyses newest first for the lifetime of the process."""

    def __init__(self, limit: int = HISTORY_LIMIT):
        self.limit = limit
        self._analyses: list[Analysis] = []

    def save_analysis(
        self,
        type: Literal["single", "comparison"],
        input: dict,
        results: Union[SequenceStats, ComparisonResult],
    ) -> Analysis:
        saved = Analysis(
            id=str(uuid.uuid4()),
            type=type,
            input=input,
            results=results,
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        self._analyses.insert(0, saved)
        if self.limit:
            del self._analyses[self.limit:]
        return saved

    def get_history(self) -> list[Analysis]:
        return list(self._analyses)

    def clear(self) -> None:
        self._analyses.clear()

storage = MemStorage()
