from datetime import date

import pytest

from sony_schedules.exceptions import IncompleteDate
from sony_schedules.utils import dates


def test_all_missing_uses_injected_today():
    assert dates.normalize(None, None, None, today=date(2011, 4, 7)) == (2011, 4, 7)


def test_all_missing_uses_process_clock(monkeypatch):
    class FixedDate(date):
        @classmethod
        def today(cls):
            return cls(2012, 12, 21)

    monkeypatch.setattr(dates, "date", FixedDate)
    assert dates.normalize(None, None, None) == (2012, 12, 21)


def test_complete_date_passes_through():
    assert dates.normalize(2011, 4, 7) == (2011, 4, 7)


def test_calendar_validity_is_not_checked():
    assert dates.normalize(2011, 2, 31) == (2011, 2, 31)


@pytest.mark.parametrize(
    "year, month, day, missing",
    [
        (2011, None, None, "mm"),
        (2011, 4, None, "dd"),
        (2011, None, 7, "mm"),
        (None, 4, None, "yyyy"),
        (None, 4, 7, "yyyy"),
        (None, None, 7, "yyyy"),
    ],
)
def test_partial_date_is_rejected(year, month, day, missing):
    with pytest.raises(IncompleteDate, match=f"missing {missing}") as exc_info:
        dates.normalize(year, month, day)
    assert exc_info.value.key == missing
