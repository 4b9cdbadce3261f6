"""Date manipulation utilities"""

from datetime import date


def months_between(start: date, end: date) -> int:
    """Whole months completed between two dates (a month counts once its day is reached)"""
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if end.day < start.day:
        months -= 1
    return months
