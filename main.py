"""Entry point — glues pystray (daemon thread) with tkinter (main thread)."""

import ctypes
import logging
import threading

from calendar_window import CalendarWindow
from icon_gen import create_icon_image, refresh_tray
from log_setup import setup_logging
from prayer_log import load_prayer_log
from settings import load_settings
from storage import DEFAULT_STORAGE_PATH
from tray_icon import create_tray

logger = logging.getLogger(__name__)


def main() -> None:
    settings = load_settings()
    setup_logging(settings["log_level"], settings["log_file"])

    # DPI awareness so positions / fonts are crisp on Hi-DPI monitors
    try:
        ctypes.windll.shcore.SetProcessDpiAwareness(1)
    except (AttributeError, OSError):
        pass

    log = load_prayer_log(settings["storage_path"] or DEFAULT_STORAGE_PATH)
    cal_win = CalendarWindow(log)

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        def _show() -> None:
            cal_win.toggle()
            refresh_tray(tray)
        cal_win.root.after(0, _show)

    def on_today() -> None:
        def _today() -> None:
            cal_win.today_handle.go_to_today()
            if cal_win.root.state() == "withdrawn":
                cal_win.show()
            refresh_tray(tray)
        cal_win.root.after(0, _today)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            cal_win.hide()
            cal_win.root.destroy()
        cal_win.root.after(0, _quit)

    tray = create_tray(create_icon_image(), on_show, on_today, on_exit)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()

    logger.info("Prayer calendar started")
    cal_win.root.mainloop()


if __name__ == "__main__":
    main()
