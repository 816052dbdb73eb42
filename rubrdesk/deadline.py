"""The lecturer's "create work" screen and its deadline picker."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional, Union

from .style import DARK_BLUE, FONT_FAMILY, WHITE, build_header, make_window, rgb_hex

DEADLINE_FORMAT = "%d.%m.%Y %H:%M"
_WEEKDAYS = ("Mo", "Tu", "We", "Th", "Fr", "Sa", "Su")


def format_deadline(moment: datetime) -> str:
    """Render a deadline as day.month.year hour:minute."""
    return moment.strftime(DEADLINE_FORMAT)


def hour_options() -> list[str]:
    """Return the two-digit hours a deadline may use."""
    return [f"{hour:02d}" for hour in range(24)]


def minute_options() -> list[str]:
    """Return the two-digit minutes a deadline may use."""
    return [f"{minute:02d}" for minute in range(60)]


def combine_deadline(
    day: Union[date, datetime], hour: Union[str, int], minute: Union[str, int]
) -> datetime:
    """Join a calendar day with an hour and minute into one moment."""
    return datetime(
        day.year,
        day.month,
        day.day,
        int(hour),
        int(minute),
        tzinfo=getattr(day, "tzinfo", None),
    )


@dataclass
class WorkDraft:
    """A work being created: title, description and optional deadline."""

    title: str = ""
    description: str = ""
    deadline: Optional[datetime] = None

    def summary(self) -> str:
        """Return the report printed when the form is submitted."""
        if self.deadline is None:
            deadline_text = "Дата и время не выбраны"
        else:
            deadline_text = format_deadline(self.deadline)
        return "\n".join(
            [
                f"Название: {self.title}",
                f"Описание: {self.description}",
                f"Полный дедлайн: {deadline_text}",
            ]
        )


class _Calendar:
    """A month view that lets the user pick one day."""

    def __init__(self, parent, selected: date):
        import tkinter as tk

        self.selected = selected
        self._year = selected.year
        self._month = selected.month
        self.frame = tk.Frame(parent)
        navigation = tk.Frame(self.frame)
        navigation.pack(fill="x")
        tk.Button(navigation, text="<", command=lambda: self._shift(-1)).pack(side="left")
        self._title = tk.Label(navigation, font=(FONT_FAMILY, 11, "bold"))
        self._title.pack(side="left", expand=True)
        tk.Button(navigation, text=">", command=lambda: self._shift(1)).pack(side="right")
        self._days = tk.Frame(self.frame)
        self._days.pack()
        self._render()

    def pack(self, **options) -> None:
        self.frame.pack(**options)

    def _shift(self, delta: int) -> None:
        index = self._year * 12 + (self._month - 1) + delta
        self._year, month_index = divmod(index, 12)
        self._month = month_index + 1
        self._render()

    def _pick(self, day: int) -> None:
        self.selected = date(self._year, self._month, day)
        self._render()

    def _render(self) -> None:
        import tkinter as tk

        for child in self._days.winfo_children():
            child.destroy()
        self._title.configure(text=f"{calendar.month_name[self._month]} {self._year}")
        for column, name in enumerate(_WEEKDAYS):
            tk.Label(self._days, text=name, width=4).grid(row=0, column=column)
        weeks = calendar.Calendar().monthdayscalendar(self._year, self._month)
        for row, week in enumerate(weeks, start=1):
            for column, day in enumerate(week):
                if not day:
                    continue
                chosen = date(self._year, self._month, day) == self.selected
                tk.Button(
                    self._days,
                    text=str(day),
                    width=3,
                    relief="sunken" if chosen else "raised",
                    command=lambda d=day: self._pick(d),
                ).grid(row=row, column=column)


def show_datetime_picker(
    parent, draft: WorkDraft, on_change: Callable[[datetime], None]
):
    """Open a dialog choosing the draft's deadline; on Ok store it and notify."""
    import tkinter as tk
    from tkinter import ttk

    initial = draft.deadline if draft.deadline is not None else datetime.now()

    dialog = tk.Toplevel(parent)
    dialog.title("")
    dialog.geometry("400x500")
    dialog.transient(parent)

    tk.Label(
        dialog, text="Choose date and time", font=(FONT_FAMILY, 11, "bold")
    ).pack(pady=4)
    ttk.Separator(dialog).pack(fill="x")
    picker = _Calendar(dialog, initial.date())
    picker.pack(pady=4)
    ttk.Separator(dialog).pack(fill="x")

    time_row = tk.Frame(dialog)
    time_row.pack(fill="x", padx=8, pady=8)
    tk.Label(time_row, text="Time").pack(side="left")
    hour_box = ttk.Combobox(time_row, values=hour_options(), width=3, state="readonly")
    hour_box.set(f"{initial.hour:02d}")
    hour_box.pack(side="left")
    tk.Label(time_row, text=":").pack(side="left")
    minute_box = ttk.Combobox(time_row, values=minute_options(), width=3, state="readonly")
    minute_box.set(f"{initial.minute:02d}")
    minute_box.pack(side="left")

    def set_now() -> None:
        now = datetime.now()
        hour_box.set(f"{now.hour:02d}")
        minute_box.set(f"{now.minute:02d}")

    tk.Button(time_row, text="Now", command=set_now).pack(side="right")

    def confirm() -> None:
        moment = combine_deadline(picker.selected, hour_box.get(), minute_box.get())
        draft.deadline = moment
        on_change(moment)
        dialog.destroy()

    def cancel() -> None:
        print("Выбор даты и времени отменен")
        dialog.destroy()

    buttons = tk.Frame(dialog)
    buttons.pack(side="bottom", fill="x", pady=8)
    tk.Button(buttons, text="Ok", command=confirm).pack(side="right", padx=8)
    tk.Button(buttons, text="Cancel", command=cancel).pack(side="right")
    dialog.protocol("WM_DELETE_WINDOW", cancel)
    dialog.grab_set()
    return dialog


def create_work_page() -> None:
    """Show the form for creating a new work with title, description and deadline."""
    import tkinter as tk

    root = make_window("Создать работу", 700, 900)
    root.configure(bg=rgb_hex(*DARK_BLUE))
    build_header(root, "Создать работу").pack(fill="x")

    white = rgb_hex(*WHITE)
    content = tk.Frame(root, bg=white)
    content.pack(fill="both", expand=True, padx=12, pady=12)

    draft = WorkDraft()

    top_row = tk.Frame(content, bg=white)
    top_row.pack(fill="x", padx=8, pady=8)

    title_entry = tk.Entry(top_row, width=30)
    title_entry.pack(side="left")
    title_hint = "Название"
    title_empty = True

    def title_focus_in(_event=None):
        nonlocal title_empty
        if title_empty:
            title_entry.delete(0, "end")
            title_entry.configure(fg="black")
            title_empty = False

    def title_focus_out(_event=None):
        nonlocal title_empty
        if not title_entry.get():
            title_entry.configure(fg="grey")
            title_entry.insert(0, title_hint)
            title_empty = True

    title_entry.bind("<FocusIn>", title_focus_in)
    title_entry.bind("<FocusOut>", title_focus_out)
    title_focus_out()

    deadline_text = tk.StringVar(value="Выберите дату и время дедлайна")
    deadline_entry = tk.Entry(
        top_row, textvariable=deadline_text, state="readonly", width=32, fg="grey"
    )

    def show_deadline(moment: datetime) -> None:
        deadline_text.set(format_deadline(moment))
        deadline_entry.configure(fg="black")

    tk.Button(
        top_row,
        text="Выбрать",
        command=lambda: show_datetime_picker(root, draft, show_deadline),
    ).pack(side="right")
    deadline_entry.pack(side="right", padx=4)

    description_frame = tk.Frame(content, bg=white)
    description_frame.pack(fill="both", expand=True, padx=8, pady=8)
    description = tk.Text(description_frame, height=10, wrap="word")
    scrollbar = tk.Scrollbar(description_frame, command=description.yview)
    description.configure(yscrollcommand=scrollbar.set)
    scrollbar.pack(side="right", fill="y")
    description.pack(side="left", fill="both", expand=True)

    def submit() -> None:
        draft.title = "" if title_empty else title_entry.get()
        draft.description = description.get("1.0", "end-1c")
        print(draft.summary())

    bottom = tk.Frame(root, bg=rgb_hex(*DARK_BLUE))
    bottom.pack(fill="x", padx=12, pady=(0, 12))
    tk.Button(bottom, text="Далее", command=submit).pack(side="right")

    root.mainloop()