"""The student's list of all works with deadlines and statuses."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from datetime import datetime, timezone

from .style import DARK_BLUE, WHITE, build_header, make_window, rgb_hex

ROW_DATE_FORMAT = "%d.%m.%Y"
SEPARATOR_GREY = (200, 200, 200)


@dataclass(frozen=True)
class Work:
    """A work the student has to hand in."""

    deadline: datetime
    title: str
    status: str


WORKS = (
    Work(datetime(2025, 6, 10, tzinfo=timezone.utc), "Лабораторная работа 1", "Просрочено"),
    Work(datetime(2025, 6, 20, tzinfo=timezone.utc), "Проект по физике", "В процессе"),
    Work(datetime(2025, 6, 15, tzinfo=timezone.utc), "Эссе по истории", "Сдано"),
    Work(datetime(2025, 7, 5, tzinfo=timezone.utc), "Курсовая работа", "Не сдано"),
)


def work_row(work: Work) -> tuple[str, str, str]:
    """Return the deadline, title and status cells of a work's table row."""
    return work.deadline.strftime(ROW_DATE_FORMAT), work.title, work.status


def works_page() -> None:
    """Show the student's table of works."""
    import tkinter as tk

    white = rgb_hex(*WHITE)
    grey = rgb_hex(*SEPARATOR_GREY)
    root = make_window("Студент: Список всех работ", 1920, 1080)
    root.configure(bg=rgb_hex(*DARK_BLUE))
    build_header(root, "Список работ").pack(fill="x")

    content = tk.Frame(root, bg=white)
    content.pack(fill="both", expand=True)

    def go_back() -> None:
        print("Кнопка 'назад' нажата. Возврат на предыдущий экран.", file=sys.stderr)
        root.destroy()

    tk.Button(content, text="назад", command=go_back).pack(fill="x")

    for number, work in enumerate(WORKS):
        if number:
            tk.Frame(content, bg=grey, height=2).pack(fill="x")
        row = tk.Frame(content, bg=white)
        row.pack(fill="x")
        for cell in work_row(work):
            tk.Label(row, text=cell, bg=white).pack(side="left", padx=4)
        tk.Button(row, text="Подробнее", command=lambda: None).pack(side="left", padx=4)

    print("Экран 'Список всех работ' запущен.", file=sys.stderr)
    root.mainloop()