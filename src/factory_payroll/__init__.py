"""Attendance classification and salary computation for factory workers.

Feature modules (timekeeping, attendance, payroll, leaves, ...) each keep a
plain data model, a repository protocol, a MySQL repository and a service.
"""
