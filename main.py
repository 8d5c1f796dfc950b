"""Entry point — glues pystray (daemon thread) with tkinter (main thread)."""

import ctypes
import logging
import threading

from calendar_logic import ENGLISH
from calendar_store import CalendarStore
from calendar_window import CalendarWindow
from icon_gen import create_icon_image
from meeting_storage import StorageError, load_meetings, save_meetings, set_aside
from settings import first_weekday_index, load_settings, save_settings
from tray_icon import create_tray

logger = logging.getLogger(__name__)


def _enable_dpi_awareness() -> None:
    # Crisp fonts on Hi-DPI Windows monitors; no-op elsewhere
    try:
        ctypes.windll.shcore.SetProcessDpiAwareness(1)
    except (AttributeError, OSError):
        pass


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings["log_level"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _enable_dpi_awareness()

    meetings_file = settings["meetings_file"]
    # Set when the unreadable file is still in place; saving would overwrite it
    read_only = False
    try:
        meetings = load_meetings(meetings_file)
    except StorageError:
        logger.exception("could not load meetings, starting empty")
        meetings = {}
        try:
            set_aside(meetings_file)
        except StorageError:
            logger.exception("leaving meetings file untouched, saving disabled")
            read_only = True

    store = CalendarStore(first_weekday=first_weekday_index(settings),
                          meetings=meetings)

    def persist() -> str | None:
        if read_only:
            return f"Not saving: {meetings_file} could not be read"
        try:
            save_meetings(meetings_file, store.meetings_snapshot())
        except StorageError as exc:
            logger.error("could not save meetings: %s", exc)
            return f"Could not save meetings: {exc}"
        return None

    def on_meetings_changed() -> str | None:
        return persist() if settings["autosave"] else None

    cal_win = CalendarWindow(
        store, ENGLISH, on_meetings_changed=on_meetings_changed,
        size=(settings["window_width"], settings["window_height"]),
    )

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        cal_win.root.after(0, cal_win.toggle)

    def on_exit() -> None:
        def _quit() -> None:
            try:
                cal_win.hide()
                persist()
                settings["window_width"], settings["window_height"] = cal_win.size
                save_settings(settings)
            except OSError:
                logger.exception("could not save settings on exit")
            finally:
                tray.stop()
                cal_win.root.destroy()
        cal_win.root.after(0, _quit)

    tray = create_tray(create_icon_image(), on_show, on_exit)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()

    cal_win.show()
    # tkinter main loop on the main thread
    cal_win.root.mainloop()


if __name__ == "__main__":
    main()
