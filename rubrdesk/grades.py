"""The student's table of grades per subject."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from .style import DARK_BLUE, WHITE, build_header, make_window, rgb_hex


@dataclass(frozen=True)
class Subject:
    """A subject with its grades, their average and a textual breakdown."""

    name: str
    grades: tuple[float, ...]
    average: float
    details: str


SUBJECTS = (
    Subject(
        "Математика",
        (4.0, 3.5, 4.5, 4.0),
        4.0,
        "Оценки: 4.0 (контрольная 1), 3.5 (контрольная 2), 4.5 (экзамен), 4.0 (итог)",
    ),
    Subject(
        "Физика",
        (3.0, 4.0, 3.5),
        3.5,
        "Оценки: 3.0 (лабораторная), 4.0 (контрольная), 3.5 (экзамен)",
    ),
    Subject(
        "Информатика",
        (5.0, 4.5, 5.0),
        4.833,
        "Оценки: 5.0 (проект), 4.5 (тест), 5.0 (экзамен)",
    ),
    Subject(
        "Химия",
        (4.0, 4.0, 3.5, 4.5),
        4.0,
        "Оценки: 4.0 (лабораторная), 4.0 (контрольная), 3.5 (тест), 4.5 (экзамен)",
    ),
    Subject(
        "История",
        (3.5, 4.0, 4.0),
        3.833,
        "Оценки: 3.5 (эссе), 4.0 (тест), 4.0 (экзамен)",
    ),
)

_SHOWN_GRADES = 3


def grades_text(subject: Subject) -> str:
    """Return the first three grades with two decimals, comma separated."""
    if len(subject.grades) < _SHOWN_GRADES:
        raise ValueError(
            f"subject {subject.name!r} needs at least {_SHOWN_GRADES} grades"
        )
    return ", ".join(f"{grade:.2f}" for grade in subject.grades[:_SHOWN_GRADES])


def average_text(subject: Subject) -> str:
    """Return the subject's average with two decimals."""
    return f"{subject.average:.2f}"


def grades_page() -> None:
    """Show the student's grades, one row per subject."""
    import tkinter as tk
    from tkinter import messagebox

    white = rgb_hex(*WHITE)
    root = make_window("студент: Оценки студента", 1600, 900)
    root.configure(bg=rgb_hex(*DARK_BLUE))
    build_header(root, "ОЦЕНКИ СТУДЕНТА").pack(fill="x")

    content = tk.Frame(root, bg=white)
    content.pack(fill="both", expand=True)

    def go_back() -> None:
        print("Кнопка 'назад' нажата. Возврат на предыдущий экран.", file=sys.stderr)
        root.destroy()

    tk.Button(content, text="назад", command=go_back).pack(fill="x")

    def show_details(subject: Subject) -> None:
        print("Нажата оценка для предмета:", subject.name, file=sys.stderr)
        messagebox.showinfo("Детали оценки", subject.details, parent=root)

    for number, subject in enumerate(SUBJECTS):
        if number:
            tk.Frame(content, bg="black", height=2).pack(fill="x")
        row = tk.Frame(content, bg=white)
        row.pack(fill="x")
        tk.Label(row, text=subject.name, bg=white).pack(side="left", padx=4)
        tk.Button(
            row, text=grades_text(subject), command=lambda s=subject: show_details(s)
        ).pack(side="left", padx=4)
        tk.Label(row, text=average_text(subject), bg=white).pack(side="left", padx=4)

    print("Экран оценок студента запущен.", file=sys.stderr)
    root.mainloop()