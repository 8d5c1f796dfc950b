"""Working copy of one day's notes, as edited in the meeting dialog."""

from datetime import date

from calendar_logic import format_short
from calendar_store import CalendarStore


class MeetingEditor:
    """Edits the notes of a single day on behalf of the meeting dialog.

    ``add`` and ``delete`` write through to the store immediately; in-place
    ``edit`` only touches the working copy until ``save`` is called.
    """

    def __init__(self, store: CalendarStore, day: date) -> None:
        self.store = store
        self.day = day
        self._items: list[str] = store.get_meetings(day)

    @property
    def notes(self) -> tuple[str, ...]:
        return tuple(self._items)

    def title(self) -> str:
        return f"Meetings: {format_short(self.day)}"

    def add(self, text: str | None) -> None:
        self.store.add_meeting(self.day, text)
        self._items = self.store.get_meetings(self.day)

    def delete(self, index: int) -> bool:
        """Remove the item at ``index``; returns False if there is none."""
        if not 0 <= index < len(self._items):
            return False
        del self._items[index]
        self.store.replace_meetings(self.day, self._items)
        return True

    def edit(self, index: int, text: str) -> bool:
        if not 0 <= index < len(self._items):
            return False
        if text.strip():
            self._items[index] = text
        else:
            del self._items[index]
        return True

    def save(self) -> None:
        self.store.replace_meetings(self.day, self._items)
