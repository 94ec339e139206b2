from __future__ import annotations

from datetime import date
from typing import Protocol


class CalendarRepository(Protocol):
    def get_sandwich_dates(self, month: str) -> frozenset[date]:
        """Org-wide sandwich holidays falling in the YYYY-MM month."""

        raise NotImplementedError
