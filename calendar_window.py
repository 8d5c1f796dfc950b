"""Month calendar window and meeting dialog (tkinter)."""

import logging
from datetime import date
from tkinter import font as tkfont
from tkinter import simpledialog
from typing import Callable
import tkinter as tk

from calendar_logic import (
    DAYS_IN_WEEK,
    ENGLISH,
    TOTAL_CELLS,
    FormatError,
    NameTable,
    format_day_label,
    format_month_title,
    format_short,
    is_same_day,
    is_same_month,
    parse_date,
    weekday_headers,
)
from calendar_store import CalendarStore
from meeting_editor import MeetingEditor

logger = logging.getLogger(__name__)

# Colours
ACCENT = "#0078D4"
HEADER_BG = "#F3F3F3"
GRID_BG = "white"
OTHER_MONTH_BG = "#EEEEEE"
TODAY_BG = "gainsboro"
MEETING_FG = "#0B6E2E"
ERROR_FG = "#CC0000"


class MeetingDialog:
    """Modal dialog listing, adding, editing and deleting one day's notes."""

    def __init__(self, parent: tk.Misc, editor: MeetingEditor, fonts: dict,
                 on_close: Callable[[], None] | None = None) -> None:
        self.editor = editor
        self._on_close = on_close

        self.top = tk.Toplevel(parent)
        self.top.title(editor.title())
        self.top.resizable(True, True)
        self.top.transient(parent)

        tk.Label(
            self.top, text=editor.title(), font=fonts["header"],
            bg=HEADER_BG, padx=10, pady=6,
        ).pack(fill="x")

        entry_row = tk.Frame(self.top)
        entry_row.pack(fill="x", padx=8, pady=(8, 4))
        self.entry = tk.Entry(entry_row, font=fonts["normal"])
        self.entry.pack(side="left", fill="x", expand=True)
        self.entry.bind("<Return>", lambda _e: self._on_add())
        tk.Button(entry_row, text="Add", width=8, command=self._on_add).pack(
            side="left", padx=(6, 0),
        )

        self.listbox = tk.Listbox(self.top, font=fonts["normal"], height=8,
                                  activestyle="none")
        self.listbox.pack(fill="both", expand=True, padx=8, pady=4)
        self.listbox.bind("<Double-Button-1>", self._on_edit)

        btn_row = tk.Frame(self.top)
        btn_row.pack(pady=(4, 8))
        tk.Button(btn_row, text="Delete", width=8, command=self._on_delete).pack(
            side="left", padx=4,
        )
        tk.Button(btn_row, text="Save", width=8, command=self._on_save).pack(
            side="left", padx=4,
        )

        self.top.protocol("WM_DELETE_WINDOW", self.close)
        self.top.bind("<Escape>", lambda _e: self.close())
        self._refresh()
        self.top.grab_set()
        self.entry.focus_set()

    def _refresh(self) -> None:
        self.listbox.delete(0, "end")
        for note in self.editor.notes:
            self.listbox.insert("end", note)

    def _selected_index(self) -> int | None:
        sel = self.listbox.curselection()
        return sel[0] if sel else None

    def _on_add(self) -> None:
        self.editor.add(self.entry.get())
        self.entry.delete(0, "end")
        self._refresh()

    def _on_delete(self) -> None:
        index = self._selected_index()
        if index is not None and self.editor.delete(index):
            self._refresh()

    def _on_edit(self, _event: tk.Event) -> None:
        index = self._selected_index()
        if index is None:
            return
        text = simpledialog.askstring(
            "Edit meeting", "Meeting:", parent=self.top,
            initialvalue=self.editor.notes[index],
        )
        if text is not None and self.editor.edit(index, text):
            self._refresh()

    def _on_save(self) -> None:
        self.editor.save()

    def close(self) -> None:
        self.editor.save()
        self.top.grab_release()
        self.top.destroy()
        if self._on_close is not None:
            self._on_close()


class CalendarWindow:
    """Single-month calendar with a date entry and clickable day cells."""

    def __init__(self, store: CalendarStore, names: NameTable = ENGLISH,
                 on_meetings_changed: Callable[[], str | None] | None = None,
                 size: tuple[int | None, int | None] = (None, None)) -> None:
        self.store = store
        self.names = names
        self._on_meetings_changed = on_meetings_changed
        self._saved_width, self._saved_height = size

        self.root = tk.Tk()
        self.root.title("Meeting Calendar")
        self.root.resizable(True, True)
        self.root.configure(bg=GRID_BG)

        self._setup_fonts()
        self._cells: list[tk.Button] = []
        self._title_label: tk.Label | None = None
        self._footer_label: tk.Label | None = None
        self._build_shell()
        self._rebuild()

        self.root.bind("<Escape>", lambda _e: self.hide())
        self.root.protocol("WM_DELETE_WINDOW", self.hide)
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.fonts = {
            "normal": tkfont.Font(family=base, size=10),
            "bold": tkfont.Font(family=base, size=10, weight="bold"),
            "header": tkfont.Font(family=base, size=14, weight="bold"),
            "nav": tkfont.Font(family=base, size=12, weight="bold"),
            "footer": tkfont.Font(family=base, size=9),
        }

    # ------------------------------------------------------------------
    # Build shell (once): nav bar, title, 7x6 cell pool, footer
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        outer = tk.Frame(self.root, bg=GRID_BG)
        outer.pack(fill="both", expand=True, padx=6, pady=4)

        # Navigation row: ◀  [date entry] Go  Today  ▶
        nav = tk.Frame(outer, bg=GRID_BG)
        nav.pack(fill="x", pady=(0, 4))

        btn_prev = tk.Label(
            nav, text="◀", font=self.fonts["nav"], bg=GRID_BG, cursor="hand2",
        )
        btn_prev.pack(side="left", padx=6)
        btn_prev.bind("<Button-1>", lambda _e: self._navigate(-1))

        btn_next = tk.Label(
            nav, text="▶", font=self.fonts["nav"], bg=GRID_BG, cursor="hand2",
        )
        btn_next.pack(side="right", padx=6)
        btn_next.bind("<Button-1>", lambda _e: self._navigate(1))

        self._date_entry = tk.Entry(nav, width=12, font=self.fonts["normal"],
                                    justify="center")
        self._date_entry.pack(side="left", padx=6)
        self._date_entry.bind("<Return>", lambda _e: self._on_date_entered())

        tk.Button(nav, text="Go", command=self._on_date_entered).pack(side="left")

        btn_today = tk.Label(
            nav, text="Today", font=self.fonts["bold"], bg=GRID_BG, fg=ACCENT,
            cursor="hand2",
        )
        btn_today.pack(side="left", padx=10)
        btn_today.bind("<Button-1>", lambda _e: self._go_today())

        self._title_label = tk.Label(
            outer, font=self.fonts["header"], bg=HEADER_BG, fg="#333333", pady=6,
        )
        self._title_label.pack(fill="x")

        grid = tk.Frame(outer, bg=GRID_BG)
        grid.pack(fill="both", expand=True, pady=(4, 0))
        for col, abbr in enumerate(weekday_headers(self.names, self.store.first_weekday)):
            tk.Label(
                grid, text=abbr, font=self.fonts["bold"], bg=GRID_BG, fg="#333333",
                padx=4, pady=4,
            ).grid(row=0, column=col, sticky="nsew")
            grid.columnconfigure(col, weight=1, uniform="day")

        for i in range(TOTAL_CELLS):
            row, col = divmod(i, DAYS_IN_WEEK)
            cell = tk.Button(
                grid, font=self.fonts["bold"], relief="groove", borderwidth=1,
                cursor="hand2", command=lambda i=i: self._on_cell_pressed(i),
            )
            cell.grid(row=row + 1, column=col, sticky="nsew", ipady=10)
            grid.rowconfigure(row + 1, weight=1, uniform="week")
            self._cells.append(cell)

        self._footer_label = tk.Label(
            outer, font=self.fonts["footer"], bg=GRID_BG, fg="#555555",
        )
        self._footer_label.pack(pady=(4, 0))

    # ------------------------------------------------------------------
    # Refresh title + cells from the store
    # ------------------------------------------------------------------
    def _rebuild(self, message: str | None = None, error: bool = False) -> None:
        viewed = self.store.viewed_month
        today = date.today()
        marked = self.store.grid_days_with_meetings()

        self._title_label.configure(text=format_month_title(viewed, self.names))
        self._date_entry.delete(0, "end")
        self._date_entry.insert(0, format_short(viewed))

        for cell, d in zip(self._cells, self.store.visible_grid):
            bg, fg = self._day_colors(
                is_same_day(d, today), is_same_month(d, viewed), d in marked,
            )
            cell.configure(text=format_day_label(d, self.names), bg=bg, fg=fg,
                           activebackground=bg)

        self._set_footer(message, error)

    @staticmethod
    def _day_colors(is_today: bool, in_month: bool, has_meetings: bool) -> tuple[str, str]:
        if is_today:
            bg = TODAY_BG
        elif not in_month:
            bg = OTHER_MONTH_BG
        else:
            bg = GRID_BG
        if has_meetings:
            return bg, MEETING_FG
        return bg, "black" if in_month else "#777777"

    def _set_footer(self, message: str | None, error: bool = False) -> None:
        if message is None:
            message = f"Today: {format_short(date.today())}"
        self._footer_label.configure(text=message, fg=ERROR_FG if error else "#555555")

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def _on_date_entered(self) -> None:
        text = self._date_entry.get()
        try:
            picked = parse_date(text)
        except FormatError:
            logger.info("rejected date entry %r", text)
            self._set_footer(f"Invalid date: {text!r} (expected d.MM.yyyy)", error=True)
            return
        self.store.set_viewed_month(picked)
        self._rebuild()

    def _navigate(self, direction: int) -> None:
        if direction < 0:
            self.store.show_previous_month()
        else:
            self.store.show_next_month()
        self._rebuild()

    def _go_today(self) -> None:
        self.store.show_today()
        self._rebuild()

    # ------------------------------------------------------------------
    # Meeting dialog
    # ------------------------------------------------------------------
    def _on_cell_pressed(self, index: int) -> None:
        day = self.store.visible_grid[index]
        MeetingDialog(self.root, MeetingEditor(self.store, day), self.fonts,
                      on_close=self._meetings_changed)

    def _meetings_changed(self) -> None:
        message = None
        if self._on_meetings_changed is not None:
            message = self._on_meetings_changed()
        self._rebuild(message, error=message is not None)

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    @property
    def size(self) -> tuple[int | None, int | None]:
        return self._saved_width, self._saved_height

    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self._rebuild()
        self.root.deiconify()
        if self._saved_width is not None and self._saved_height is not None:
            self.root.geometry(f"{self._saved_width}x{self._saved_height}")
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        if self.root.winfo_viewable():
            self._saved_width = self.root.winfo_width()
            self._saved_height = self.root.winfo_height()
        self.root.withdraw()
