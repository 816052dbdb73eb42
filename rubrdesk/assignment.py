"""The student's view of one assignment: details, file attachment and hand-in."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import PurePath
from typing import Optional

from .deadline import format_deadline
from .style import DARK_BLUE, WHITE, build_header, make_window, rgb_hex

ALLOWED_EXTENSIONS = (".txt", ".pdf", ".docx", ".zip", ".rar")
SEPARATOR_GREY = (200, 200, 200)
NOT_SUBMITTED = "Не сдано"
NO_FILE = "Файл не прикреплён"


class MissingFile(ValueError):
    """Raised when a work is handed in before a file is attached."""


def is_allowed_file(path: str) -> bool:
    """True if the file has one of the extensions accepted for hand-in."""
    return PurePath(path).suffix.lower() in ALLOWED_EXTENSIONS


@dataclass
class Assignment:
    """An assignment with its deadline, hand-in time and attached file."""

    title: str = "НАЗВАНИЕ РАБОТЫ"
    description: str = "ОПИСАНИЕ\n" * 8
    deadline: datetime = field(
        default_factory=lambda: datetime(2025, 6, 20, tzinfo=timezone.utc)
    )
    submission: Optional[datetime] = None
    file_path: str = ""

    def attach(self, path: str) -> str:
        """Attach a file to the assignment and return its path."""
        self.file_path = path
        return path

    def submit(self, now: datetime) -> bool:
        """Hand the work in at a moment.

        Returns True for the first hand-in, False for a later one, which
        keeps the original hand-in time. Raises MissingFile if no file is
        attached.
        """
        if not self.file_path:
            raise MissingFile("прикрепите файл перед сдачей")
        if self.submission is None:
            self.submission = now
            return True
        return False

    def submission_text(self) -> str:
        """Return the hand-in time, or a note that nothing was handed in."""
        if self.submission is None:
            return NOT_SUBMITTED
        return format_deadline(self.submission)

    def file_text(self) -> str:
        """Return the attached file's path, or a note that none is attached."""
        return self.file_path or NO_FILE


def assignment_page() -> None:
    """Show an assignment with buttons to attach a file and hand the work in."""
    import tkinter as tk
    from tkinter import filedialog

    assignment = Assignment()
    white = rgb_hex(*WHITE)
    grey = rgb_hex(*SEPARATOR_GREY)

    root = make_window("Студент: Задание", 1920, 1080)
    root.configure(bg=rgb_hex(*DARK_BLUE))
    build_header(root, "Задание").pack(fill="x")

    content = tk.Frame(root, bg=white)
    content.pack(fill="both", expand=True)

    def go_back() -> None:
        print("Кнопка 'назад' нажата. Возврат на предыдущий экран.", file=sys.stderr)
        root.destroy()

    tk.Button(content, text="назад", command=go_back).pack(fill="x")

    submission_var = tk.StringVar(value=assignment.submission_text())
    file_var = tk.StringVar(value=assignment.file_text())

    def info_row(caption: str, **value) -> None:
        row = tk.Frame(content, bg=white)
        row.pack(fill="x")
        tk.Label(row, text=caption, bg=white).pack(side="left", padx=4)
        tk.Label(row, bg=white, justify="left", **value).pack(side="left", padx=4)
        tk.Frame(content, bg=grey, height=2).pack(fill="x")

    info_row("Название", text=assignment.title)
    info_row("Описание", text=assignment.description)
    info_row("Дедлайн", text=format_deadline(assignment.deadline))
    info_row("Время сдачи", textvariable=submission_var)
    info_row("Прикреплённый файл", textvariable=file_var)

    def attach() -> None:
        path = filedialog.askopenfilename(
            parent=root,
            filetypes=[("Документы", " ".join(f"*{ext}" for ext in ALLOWED_EXTENSIONS))],
        )
        if not path:
            print("Ошибка при выборе файла: <nil>", file=sys.stderr)
            return
        if not is_allowed_file(path):
            print(f"Ошибка при выборе файла: {path}", file=sys.stderr)
            return
        assignment.attach(path)
        file_var.set(assignment.file_text())
        print("Файл прикреплён:", path, file=sys.stderr)

    def submit() -> None:
        now = datetime.now()
        try:
            first = assignment.submit(now)
        except MissingFile:
            print("Ошибка: прикрепите файл перед сдачей", file=sys.stderr)
            return
        if first:
            submission_var.set(assignment.submission_text())
            print(
                "Работа сдана в",
                assignment.submission_text(),
                "с файлом:",
                assignment.file_path,
                file=sys.stderr,
            )
        else:
            print(
                "Работа пересдана в",
                format_deadline(now),
                "с новым файлом:",
                assignment.file_path,
                file=sys.stderr,
            )

    buttons = tk.Frame(content, bg=white)
    buttons.pack(fill="x")
    tk.Button(buttons, text="Прикрепить файл", command=attach).pack(side="left", padx=4)
    tk.Button(buttons, text="Сдать работу", command=submit).pack(side="left", padx=4)
    tk.Button(buttons, text="Посмотреть критерии", command=lambda: None).pack(
        side="left", padx=4
    )

    print("Экран 'Задание' запущен.", file=sys.stderr)
    root.mainloop()