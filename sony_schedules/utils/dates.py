"""
Date utilities

Resolves the optional yyyy/mm/dd trio of a schedule request.
"""
from datetime import date

from sony_schedules.exceptions import IncompleteDate


# Each supplied key is checked against the others in this order.
_COMPLETENESS_ORDER = (
    ("yyyy", ("mm", "dd")),
    ("mm", ("yyyy", "dd")),
    ("dd", ("yyyy", "mm")),
)


def normalize(
    year: int | None,
    month: int | None,
    day: int | None,
    today: date | None = None
) -> tuple[int, int, int]:
    """
    Resolve a possibly missing date to (year, month, day)

    Missing date falls back to the current local date. Month and day ranges
    are not checked against the calendar, so 2011-02-31 passes through.

    Args:
        year: Four digit year or None
        month: Month or None
        day: Day of month or None
        today: Date to use instead of the process clock

    Returns:
        Tuple of (year, month, day)

    Raises:
        IncompleteDate: If one or two of the three values are given
    """
    values = {"yyyy": year, "mm": month, "dd": day}

    if all(value is None for value in values.values()):
        current = today or date.today()
        return current.year, current.month, current.day

    for present, others in _COMPLETENESS_ORDER:
        if values[present] is None:
            continue
        for other in others:
            if values[other] is None:
                raise IncompleteDate(other)

    return year, month, day
