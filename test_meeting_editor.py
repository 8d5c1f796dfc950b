"""Tests for the meeting dialog's working copy."""

from datetime import date

import pytest

from calendar_store import CalendarStore
from meeting_editor import MeetingEditor

DAY = date(2025, 4, 2)


@pytest.fixture
def store() -> CalendarStore:
    s = CalendarStore(date(2025, 4, 1))
    s.add_meeting(DAY, "Dentist")
    s.add_meeting(DAY, "Lunch")
    return s


def test_loads_existing_notes(store: CalendarStore) -> None:
    editor = MeetingEditor(store, date(2025, 4, 2))
    assert editor.notes == ("Dentist", "Lunch")
    assert editor.title() == "Meetings: 02.04.2025"


def test_add_writes_through(store: CalendarStore) -> None:
    editor = MeetingEditor(store, DAY)
    editor.add("Gym")
    editor.add("   ")
    assert editor.notes == ("Dentist", "Lunch", "Gym")
    assert store.get_meetings(DAY) == ["Dentist", "Lunch", "Gym"]


def test_delete_writes_through(store: CalendarStore) -> None:
    editor = MeetingEditor(store, DAY)
    assert editor.delete(0)
    assert store.get_meetings(DAY) == ["Lunch"]
    assert not editor.delete(5)
    assert not editor.delete(-1)
    assert store.get_meetings(DAY) == ["Lunch"]


def test_edit_is_kept_until_save(store: CalendarStore) -> None:
    editor = MeetingEditor(store, DAY)
    assert editor.edit(1, "Late lunch")
    assert editor.notes == ("Dentist", "Late lunch")
    assert store.get_meetings(DAY) == ["Dentist", "Lunch"]
    editor.save()
    assert store.get_meetings(DAY) == ["Dentist", "Late lunch"]


def test_blank_edit_removes_item(store: CalendarStore) -> None:
    editor = MeetingEditor(store, DAY)
    assert editor.edit(0, "  ")
    editor.save()
    assert store.get_meetings(DAY) == ["Lunch"]


def test_edit_out_of_range(store: CalendarStore) -> None:
    editor = MeetingEditor(store, DAY)
    assert not editor.edit(2, "Nope")
    assert editor.notes == ("Dentist", "Lunch")


def test_empty_day() -> None:
    store = CalendarStore(date(2025, 4, 1))
    editor = MeetingEditor(store, date(2025, 4, 9))
    assert editor.notes == ()
    editor.save()
    assert store.get_meetings(date(2025, 4, 9)) == []
