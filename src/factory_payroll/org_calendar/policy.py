from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from ..employees.model import Employee


def _folded(values: Iterable[str]) -> frozenset[str]:
    return frozenset(v.strip().lower() for v in values if v and v.strip())


@dataclass(frozen=True)
class PayrollPolicy:
    """Factory-wide allow-lists that bend the Sunday and salary rules.

    Department and supervisor names match case-insensitively. The value is
    passed into every computation so tests can vary it per case.
    """

    special_departments: frozenset[str] = field(default_factory=frozenset)
    special_supervisors: frozenset[str] = field(default_factory=frozenset)
    full_salary_employee_ids: frozenset[int] = field(default_factory=frozenset)

    @classmethod
    def from_lists(
        cls,
        *,
        special_departments: Iterable[str] = (),
        special_supervisors: Iterable[str] = (),
        full_salary_employee_ids: Iterable[int] = (),
    ) -> "PayrollPolicy":
        return cls(
            special_departments=_folded(special_departments),
            special_supervisors=_folded(special_supervisors),
            full_salary_employee_ids=frozenset(int(i) for i in full_salary_employee_ids),
        )

    def has_full_salary(self, employee_id: int) -> bool:
        return int(employee_id) in self.full_salary_employee_ids

    def is_special_department(self, employee: Employee) -> bool:
        return (employee.department or "").lower() in self.special_departments

    def is_special_supervisor(self, employee: Employee) -> bool:
        # Full-salary employees never get the stricter Sunday rule.
        if self.has_full_salary(employee.employee_id):
            return False
        return (employee.supervisor_name or "").lower() in self.special_supervisors
