"""Delivery schedule arithmetic and display labels for subscriptions.

Everything here is a pure function of its arguments: the reference date is
always passed in, never read from the clock.
"""

from datetime import date, timedelta
from enum import Enum

from protean.exceptions import ValidationError


class Frequency(Enum):
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"


WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

_FREQUENCY_LABELS = {
    Frequency.BIWEEKLY.value: "Bi-weekly",
    Frequency.MONTHLY.value: "Monthly",
}

_WEEK_LABELS = {1: "1st", 2: "2nd", 3: "3rd", 4: "4th"}

BIWEEKLY_INTERVAL = timedelta(days=14)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------
def validate_schedule(frequency, preferred_day, week_of_month=None) -> None:
    if frequency not in _FREQUENCY_LABELS:
        raise ValidationError({"frequency": [f"Unknown frequency '{frequency}'"]})
    if preferred_day not in WEEKDAYS:
        raise ValidationError({"preferred_day": ["Please choose a delivery day"]})
    if frequency == Frequency.MONTHLY.value and week_of_month not in _WEEK_LABELS:
        raise ValidationError({"week_of_month": ["Please choose a week between 1 and 4"]})


# ---------------------------------------------------------------------------
# Date computation
# ---------------------------------------------------------------------------
def _next_weekday_on_or_after(start: date, weekday: int) -> date:
    return start + timedelta(days=(weekday - start.weekday()) % 7)


def _nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> date:
    first = date(year, month, 1)
    return _next_weekday_on_or_after(first, weekday) + timedelta(weeks=n - 1)


def compute_next_delivery_date(frequency, preferred_day, week_of_month, reference_date, last_delivery=None) -> date:
    """Next delivery strictly after ``reference_date``.

    Bi-weekly: the first preferred weekday at least two weeks after
    ``last_delivery``, or after ``reference_date`` when nothing has been
    delivered yet. A last delivery so old that its follow-up is already in
    the past falls back to the first preferred weekday after
    ``reference_date``.

    Monthly: the preferred weekday of the ``week_of_month``-th week of the
    reference month if it is still ahead, otherwise of the following month.
    """
    validate_schedule(frequency, preferred_day, week_of_month)
    weekday = WEEKDAYS.index(preferred_day)

    if frequency == Frequency.BIWEEKLY.value:
        if last_delivery is None:
            return _next_weekday_on_or_after(reference_date + BIWEEKLY_INTERVAL, weekday)
        after_reference = _next_weekday_on_or_after(reference_date + timedelta(days=1), weekday)
        candidate = _next_weekday_on_or_after(last_delivery + BIWEEKLY_INTERVAL, weekday)
        return candidate if candidate > reference_date else after_reference

    candidate = _nth_weekday_of_month(reference_date.year, reference_date.month, weekday, week_of_month)
    if candidate > reference_date:
        return candidate
    if reference_date.month == 12:
        year, month = reference_date.year + 1, 1
    else:
        year, month = reference_date.year, reference_date.month + 1
    return _nth_weekday_of_month(year, month, weekday, week_of_month)


# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------
def frequency_label(frequency) -> str:
    return _FREQUENCY_LABELS.get(frequency, frequency)


def day_label(preferred_day) -> str:
    return preferred_day.capitalize() if preferred_day else ""


def week_label(week_of_month) -> str:
    return _WEEK_LABELS.get(week_of_month, "")


def schedule_summary(frequency, preferred_day, week_of_month=None) -> str:
    """Human readable schedule, e.g. "2nd Monday" or "Every Monday"."""
    if frequency == Frequency.MONTHLY.value and week_of_month in _WEEK_LABELS:
        return f"{week_label(week_of_month)} {day_label(preferred_day)}"
    return f"Every {day_label(preferred_day)}"
