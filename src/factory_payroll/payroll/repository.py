from __future__ import annotations

from typing import Optional, Protocol

from .model import SalaryRecord


class SalaryRepository(Protocol):
    def get(self, employee_id: int, month: str) -> Optional[SalaryRecord]:
        raise NotImplementedError

    def latest(self, employee_id: int) -> Optional[SalaryRecord]:
        raise NotImplementedError

    def upsert(self, record: SalaryRecord) -> None:
        """Insert or replace the row for (employee_id, month)."""

        raise NotImplementedError
