"""Pure calendar calculations — no UI dependencies."""

import calendar
import re
from dataclasses import dataclass
from datetime import date, timedelta

TOTAL_CELLS = 42
DAYS_IN_WEEK = 7

SUNDAY = calendar.SUNDAY
MONDAY = calendar.MONDAY

# d.MM.yyyy: day may omit its leading zero, month and year may not
_DATE_RE = re.compile(r"^([0-9]{1,2})\.([0-9]{2})\.([0-9]{4})$")


class FormatError(ValueError):
    """Raised when a date string is malformed or names an impossible date."""


@dataclass(frozen=True)
class NameTable:
    """Month and weekday display names, injected by the presentation layer.

    ``months`` runs January..December, ``day_abbr`` runs Monday..Sunday
    (the order used by ``date.weekday()`` and the ``calendar`` module).
    """

    months: tuple[str, ...]
    day_abbr: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.months) != 12:
            raise ValueError(f"expected 12 month names, got {len(self.months)}")
        if len(self.day_abbr) != DAYS_IN_WEEK:
            raise ValueError(f"expected 7 weekday names, got {len(self.day_abbr)}")

    @classmethod
    def from_locale(cls) -> "NameTable":
        """Build a table from the process locale (see ``locale.setlocale``)."""
        return cls(
            months=tuple(calendar.month_name[1:]),
            day_abbr=tuple(calendar.day_abbr),
        )

    def month_name(self, month: int) -> str:
        return self.months[month - 1]


ENGLISH = NameTable(
    months=("January", "February", "March", "April", "May", "June", "July",
            "August", "September", "October", "November", "December"),
    day_abbr=("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
)


def first_of_month(d: date) -> date:
    """Return the 1st of the month containing ``d``."""
    return d.replace(day=1)


def leading_offset(first: date, first_weekday: int = SUNDAY) -> int:
    """Return how many days to step back from ``first`` to reach the week start.

    0 when ``first`` already falls on ``first_weekday``, otherwise 1–6.
    """
    return (first.weekday() - first_weekday) % DAYS_IN_WEEK


def visible_days(year: int, month: int,
                 first_weekday: int = SUNDAY) -> tuple[date, ...]:
    """Return the 42 consecutive dates shown for the given month.

    Starts on the week start on/before the 1st and always spans 6 rows,
    filling with days of the neighbouring months.
    """
    first = date(year, month, 1)
    start = first - timedelta(days=leading_offset(first, first_weekday))
    return tuple(start + timedelta(days=i) for i in range(TOTAL_CELLS))


def weekday_headers(names: NameTable = ENGLISH,
                    first_weekday: int = SUNDAY) -> list[str]:
    """Return the 7 column headers, starting with ``first_weekday``."""
    return [names.day_abbr[(first_weekday + i) % DAYS_IN_WEEK]
            for i in range(DAYS_IN_WEEK)]


def parse_date(text: str) -> date:
    """Parse ``d.MM.yyyy`` (e.g. ``2.04.2025``) into a date."""
    m = _DATE_RE.match(text.strip()) if text else None
    if m is None:
        raise FormatError(f"expected d.MM.yyyy, got {text!r}")
    day, month, year = (int(g) for g in m.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise FormatError(f"invalid date {text!r}: {exc}") from exc


def format_short(d: date) -> str:
    """Return ``dd.MM.yyyy``."""
    return f"{d.day:02d}.{d.month:02d}.{d.year:04d}"


def format_day_label(d: date, names: NameTable = ENGLISH) -> str:
    """Return the label for a grid cell: ``"07"``, or ``"April  01"`` on the 1st."""
    label = f"{d.day:02d}"
    if d.day == 1:
        return f"{names.month_name(d.month)}  {label}"
    return label


def format_month_title(d: date, names: NameTable = ENGLISH) -> str:
    """Return e.g. ``"April 2025"``."""
    return f"{names.month_name(d.month)} {d.year:04d}"


def is_same_day(a: date, b: date) -> bool:
    return (a.year, a.month, a.day) == (b.year, b.month, b.day)


def is_same_month(a: date, b: date) -> bool:
    return (a.year, a.month) == (b.year, b.month)


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1


def add_months(d: date, n: int) -> date:
    """Return the 1st of the month ``n`` months away from ``d``'s month."""
    y, m = d.year, d.month
    step = next_month if n > 0 else prev_month
    for _ in range(abs(n)):
        y, m = step(y, m)
    return date(y, m, 1)
