"""Single-month prayer calendar window (tkinter) positioned bottom-right."""

import logging
import tkinter as tk
from datetime import date
from tkinter import font as tkfont

from calendar_logic import DAY_ABBR, GRID_CELLS
from calendar_state import CalendarState, CellView, TodayHandle, cell_views
from prayer_log import PrayerLog, month_progress
from prayer_schedule import month_base_minutes, target_minutes
from settings import load_settings, save_settings

logger = logging.getLogger(__name__)

# Colours
ACCENT = "#0078D4"
DONE_BG = "#2E7D32"
HEADER_BG = "#F3F3F3"
GRID_BG = "white"
OTHER_FG = "#BBBBBB"
TARGET_FG = "#888888"
INACTIVE = "#E0E0E0"
BAR_BG = "#E6E6E6"

_CELL_W = 44
_CELL_H = 46
_BOX = 14


class CalendarWindow:
    """Prayer calendar for one month with a completion box per day."""

    def __init__(self, log: PrayerLog) -> None:
        self.root = tk.Tk()
        self.root.title(self._title())
        self.root.resizable(True, True)
        self.root.configure(bg=GRID_BG)

        try:
            self.root.attributes("-toolwindow", True)
        except tk.TclError:
            pass  # Windows only
        self.root.attributes("-topmost", True)

        self._setup_fonts()

        settings = load_settings()
        self._saved_width: int | None = settings["window_width"]
        self._saved_height: int | None = settings["window_height"]

        self.log = log
        self.state = CalendarState()
        self.state.subscribe(self._refresh)
        self.today_handle = TodayHandle(self.state)

        # Widget-to-date mapping (filled during _refresh)
        self._widget_dates: dict[int, date] = {}
        self._cells: list[tk.Canvas] = []

        self._build_shell()
        self._refresh()

        self.root.bind("<Escape>", lambda _e: self.hide())
        self.root.bind("<Left>", lambda _e: self.state.previous())
        self.root.bind("<Right>", lambda _e: self.state.next())
        self.root.bind("<Configure>", self._on_configure)
        self.root.protocol("WM_DELETE_WINDOW", self.hide)
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=9)
        self.font_bold = tkfont.Font(family=base, size=9, weight="bold")
        self.font_small = tkfont.Font(family=base, size=7)
        self.font_header = tkfont.Font(family=base, size=12, weight="bold")
        self.font_nav = tkfont.Font(family=base, size=12, weight="bold")
        self.font_footer = tkfont.Font(family=base, size=9)

    @staticmethod
    def _title() -> str:
        minutes = target_minutes(date.today())
        if minutes:
            return f"Prayer Calendar 2026  Today: {minutes} min"
        return "Prayer Calendar 2026"

    # ------------------------------------------------------------------
    # Build shell (once) — nav bar + day grid + progress footer
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        self._outer = tk.Frame(self.root, bg=GRID_BG)
        self._outer.pack(padx=6, pady=4)

        # Navigation row: ◀  Month YYYY  ▶
        nav = tk.Frame(self._outer, bg=HEADER_BG)
        nav.pack(fill="x", pady=(0, 2))

        btn_prev = tk.Label(
            nav, text="◀", font=self.font_nav, bg=HEADER_BG, cursor="hand2"
        )
        btn_prev.pack(side="left", padx=6)
        btn_prev.bind("<Button-1>", lambda _e: self.state.previous())

        btn_next = tk.Label(
            nav, text="▶", font=self.font_nav, bg=HEADER_BG, cursor="hand2"
        )
        btn_next.pack(side="right", padx=6)
        btn_next.bind("<Button-1>", lambda _e: self.state.next())

        info = tk.Frame(nav, bg=HEADER_BG)
        info.pack(side="left", expand=True)
        self._month_label = tk.Label(
            info, font=self.font_header, bg=HEADER_BG, fg="#333333",
        )
        self._month_label.pack()
        self._base_label = tk.Label(
            info, font=self.font_footer, bg=HEADER_BG, fg="#555555",
        )
        self._base_label.pack()

        # Day headers + 6x7 grid of canvases
        grid = tk.Frame(self._outer, bg=GRID_BG)
        grid.pack()
        for col, abbr in enumerate(DAY_ABBR):
            tk.Label(
                grid, text=abbr, font=self.font_bold, bg=GRID_BG, fg="#333333",
            ).grid(row=0, column=col)

        for i in range(GRID_CELLS):
            cell = tk.Canvas(
                grid, width=_CELL_W, height=_CELL_H,
                bg=GRID_BG, highlightthickness=1, highlightbackground=INACTIVE,
                borderwidth=0,
            )
            cell.grid(row=i // 7 + 1, column=i % 7, padx=1, pady=1)
            cell.bind("<ButtonPress-1>", self._on_press)
            self._cells.append(cell)

        # Progress footer
        footer = tk.Frame(self._outer, bg=GRID_BG)
        footer.pack(fill="x", pady=(6, 0))
        tk.Label(
            footer, text="MONTHLY PROGRESS", font=self.font_bold,
            bg=GRID_BG, fg="#555555",
        ).grid(row=0, column=0, sticky="w")
        self._pct_label = tk.Label(
            footer, font=self.font_bold, bg=GRID_BG, fg=ACCENT,
        )
        self._pct_label.grid(row=0, column=1, sticky="e")
        self._stats_label = tk.Label(
            footer, font=self.font_footer, bg=GRID_BG, fg="#555555",
        )
        self._stats_label.grid(row=1, column=0, columnspan=2, sticky="w")
        footer.columnconfigure(0, weight=1)

        self._bar = tk.Canvas(
            self._outer, height=8, bg=BAR_BG, highlightthickness=0, borderwidth=0,
        )
        self._bar.pack(fill="x", pady=(2, 4))

        btn_today = tk.Label(
            self._outer, text="Today", font=self.font_bold, bg=GRID_BG, fg=ACCENT,
            cursor="hand2",
        )
        btn_today.pack(pady=(0, 2))
        btn_today.bind("<Button-1>", lambda _e: self.today_handle.go_to_today())

    # ------------------------------------------------------------------
    # Refresh labels and cells for the displayed month
    # ------------------------------------------------------------------
    def _refresh(self) -> None:
        self._widget_dates.clear()
        year, month = self.state.year, self.state.month

        self._month_label.configure(text=self.state.title())
        base = month_base_minutes(year, month)
        if base > 0:
            self._base_label.configure(
                text=f"Month Base: {base} min{'s' if base != 1 else ''}")
        else:
            self._base_label.configure(text="")

        for cell, view in zip(self._cells, cell_views(self.state, self.log)):
            self._draw_cell(cell, view)
            self._widget_dates[id(cell)] = view.cell.calendar_date

        self._update_progress()

    def _update_progress(self) -> None:
        progress = month_progress(self.log, self.state.year, self.state.month)
        self._pct_label.configure(text=f"{progress.percentage}%")
        self._stats_label.configure(text=f"{progress.completed} / {progress.total} days")

        self._bar.delete("all")
        self._bar.update_idletasks()
        width = self._bar.winfo_width()
        if width <= 1:
            width = int(self._outer.winfo_reqwidth())
        fill_w = round(width * progress.percentage / 100)
        if fill_w > 0:
            self._bar.create_rectangle(0, 0, fill_w, 8, fill=ACCENT, outline="")

    # ------------------------------------------------------------------
    # Canvas cell drawing: day number, target minutes, completion box
    # ------------------------------------------------------------------
    def _draw_cell(self, cell: tk.Canvas, view: CellView) -> None:
        cell.delete("all")
        in_month = view.cell.belongs_to_displayed_month
        is_today = view.cell.is_today

        cell.configure(
            bg=GRID_BG,
            highlightbackground=ACCENT if is_today else INACTIVE,
            highlightthickness=2 if is_today else 1,
            cursor="hand2" if view.enabled else "",
        )

        fg = "black" if in_month else OTHER_FG
        cell.create_text(
            4, 3, anchor="nw", text=str(view.day_number), fill=fg,
            font=self.font_bold if is_today else self.font_normal,
        )
        if view.target_label:
            cell.create_text(
                _CELL_W - 3, 4, anchor="ne", text=view.target_label,
                fill=TARGET_FG, font=self.font_small,
            )

        x0 = (_CELL_W - _BOX) // 2
        y0 = _CELL_H - _BOX - 5
        if not view.enabled:
            cell.create_rectangle(x0, y0, x0 + _BOX, y0 + _BOX,
                                  outline=INACTIVE, fill=INACTIVE)
        elif view.completed:
            cell.create_rectangle(x0, y0, x0 + _BOX, y0 + _BOX,
                                  outline=DONE_BG, fill=DONE_BG)
            cell.create_line(x0 + 3, y0 + 7, x0 + 6, y0 + 10, x0 + 11, y0 + 4,
                             fill="white", width=2)
        else:
            cell.create_rectangle(x0, y0, x0 + _BOX, y0 + _BOX,
                                  outline=TARGET_FG, fill=GRID_BG)

    # ------------------------------------------------------------------
    # Click to toggle completion
    # ------------------------------------------------------------------
    def _on_press(self, event: tk.Event) -> None:
        d = self._widget_dates.get(id(event.widget))
        if d is None:
            return
        if self.log.toggle(d):
            self._refresh()

    # ------------------------------------------------------------------
    # Track window size (persisted on hide)
    # ------------------------------------------------------------------
    def _on_configure(self, event: tk.Event) -> None:
        if event.widget is not self.root:
            return
        self._saved_width = self.root.winfo_width()
        self._saved_height = self.root.winfo_height()

    def _persist_size(self) -> None:
        settings = load_settings()
        settings["window_width"] = self._saved_width
        settings["window_height"] = self._saved_height
        save_settings(settings)

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self.root.title(self._title())
        self.today_handle.go_to_today()
        self.root.deiconify()
        self.root.update_idletasks()

        if self._saved_width is not None and self._saved_height is not None:
            self._position_window(override_size=(self._saved_width, self._saved_height))
        else:
            self._position_window()

        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        if self._saved_width is not None and self._saved_height is not None:
            self._persist_size()
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Position bottom-right of the screen
    # ------------------------------------------------------------------
    def _position_window(self, override_size: tuple[int, int] | None = None) -> None:
        self.root.update_idletasks()

        if override_size:
            win_w, win_h = override_size
        else:
            win_w = self.root.winfo_reqwidth()
            win_h = self.root.winfo_reqheight()

        x = self.root.winfo_screenwidth() - win_w - 12
        y = self.root.winfo_screenheight() - win_h - 60
        self.root.geometry(f"{win_w}x{win_h}+{max(0, x)}+{max(0, y)}")
