"""Viewed month, its 42-day grid, and meeting notes keyed by calendar day."""

import logging
from collections.abc import Iterable, Mapping
from datetime import date

from calendar_logic import SUNDAY, add_months, first_of_month, visible_days

logger = logging.getLogger(__name__)


def _as_day(d: date) -> date:
    # datetime is a date subclass; strip the time so keys stay per-day
    return date(d.year, d.month, d.day)


def _clean_notes(notes: Iterable[str | None]) -> list[str]:
    return [n for n in notes if n is not None and n.strip()]


class CalendarStore:
    """Owns the viewed month, the visible grid and the meeting notes.

    Notes are keyed by ``datetime.date`` values, so two independently built
    dates for the same day address the same list.
    """

    def __init__(self, initial: date | None = None,
                 first_weekday: int = SUNDAY,
                 meetings: Mapping[date, Iterable[str]] | None = None) -> None:
        self.first_weekday = first_weekday
        self._viewed: date = first_of_month(initial or date.today())
        self._grid: tuple[date, ...] = ()
        self._meetings: dict[date, list[str]] = {}
        if meetings:
            self.load_meetings(meetings)
        self._fill_grid()

    # ------------------------------------------------------------------
    # Viewed month + grid
    # ------------------------------------------------------------------
    @property
    def viewed_month(self) -> date:
        """The 1st of the month currently on display."""
        return self._viewed

    @property
    def visible_grid(self) -> tuple[date, ...]:
        return self._grid

    def set_viewed_month(self, d: date) -> None:
        """Show the month containing ``d``; the day itself is ignored."""
        self._viewed = first_of_month(_as_day(d))
        self._fill_grid()

    def show_previous_month(self) -> None:
        self.set_viewed_month(add_months(self._viewed, -1))

    def show_next_month(self) -> None:
        self.set_viewed_month(add_months(self._viewed, 1))

    def show_today(self) -> None:
        self.set_viewed_month(date.today())

    def _fill_grid(self) -> None:
        # Build the whole tuple before swapping it in
        grid = visible_days(self._viewed.year, self._viewed.month,
                            self.first_weekday)
        self._grid = grid
        logger.debug("grid for %04d-%02d: %s .. %s", self._viewed.year,
                     self._viewed.month, grid[0], grid[-1])

    # ------------------------------------------------------------------
    # Meetings
    # ------------------------------------------------------------------
    def add_meeting(self, d: date, text: str | None) -> None:
        """Append ``text`` to the day's notes; blank text is dropped."""
        notes = self._meetings.setdefault(_as_day(d), [])
        if text is not None and text.strip():
            notes.append(text)

    def get_meetings(self, d: date) -> list[str]:
        """Return a copy of the day's notes (empty if there are none)."""
        return list(self._meetings.get(_as_day(d), ()))

    def replace_meetings(self, d: date, notes: Iterable[str] | None) -> None:
        """Overwrite the day's notes with ``notes`` (None clears the day)."""
        self._meetings[_as_day(d)] = list(notes or ())

    def dates_with_meetings(self, year: int, month: int) -> set[date]:
        """Return the days of the given month that have at least one note."""
        return {d for d, notes in self._meetings.items()
                if notes and d.year == year and d.month == month}

    def grid_days_with_meetings(self) -> set[date]:
        """Return the visible grid days, filler days included, that have notes."""
        return {d for d in self._grid if self._meetings.get(d)}

    def meetings_snapshot(self) -> dict[date, list[str]]:
        """Return a copy of every non-empty note list, for saving."""
        return {d: list(notes) for d, notes in self._meetings.items() if notes}

    def load_meetings(self, meetings: Mapping[date, Iterable[str]]) -> None:
        """Replace all notes with ``meetings``; blank notes are dropped."""
        loaded: dict[date, list[str]] = {}
        for d, notes in meetings.items():
            cleaned = _clean_notes(notes)
            if cleaned:
                loaded.setdefault(_as_day(d), []).extend(cleaned)
        self._meetings = loaded
        logger.debug("loaded notes for %d day(s)", len(loaded))
