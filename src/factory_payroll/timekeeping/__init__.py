from .accounting import calculator_for, effective_hours, format_hours, lunch_deduction

__all__ = ["calculator_for", "effective_hours", "format_hours", "lunch_deduction"]
