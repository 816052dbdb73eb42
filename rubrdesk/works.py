"""The lecturer's list of works with add, change and delete actions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable, Iterator, Optional, Union

from .style import DARK_BLUE, FONT_FAMILY, WHITE, build_header, make_window, rgb_hex

DUE_FORMAT = "%Y-%m-%d"


@dataclass
class WorkItem:
    """One work in the lecturer's list."""

    name: str
    is_active: bool
    due_date: str


def due_label(item: WorkItem) -> str:
    """Return the due-date caption shown above a work's name."""
    return "Дата сдачи: " + item.due_date


class WorkList:
    """The ordered list of a lecturer's works."""

    def __init__(self, items: Optional[Iterable[WorkItem]] = None):
        if items is None:
            items = [WorkItem("Название работы 1", True, "2025-06-10")]
        self._items: list[WorkItem] = list(items)

    def add_next(self, today: Union[date, datetime]) -> WorkItem:
        """Append a new work due one more week ahead than the list is long."""
        number = len(self._items) + 1
        due = today + timedelta(weeks=number)
        item = WorkItem(f"Новая работа {number}", True, due.strftime(DUE_FORMAT))
        self._items.append(item)
        return item

    def remove(self, index: int) -> WorkItem:
        """Remove and return the work at a position; raise IndexError if absent."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"no work at position {index}")
        return self._items.pop(index)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[WorkItem]:
        return iter(self._items)

    def __getitem__(self, index: int) -> WorkItem:
        return self._items[index]


def lector_works_page() -> None:
    """Show the lecturer's list of works."""
    import tkinter as tk
    from tkinter import messagebox

    works = WorkList()
    white = rgb_hex(*WHITE)
    dark = rgb_hex(*DARK_BLUE)

    root = make_window("Приложение для работ", 700, 900)
    root.configure(bg=dark)
    build_header(root, "Список работ").pack(fill="x")

    holder = tk.Frame(root, bg=white)
    holder.pack(fill="both", expand=True, padx=12, pady=12)
    canvas = tk.Canvas(holder, bg=white, highlightthickness=0)
    scrollbar = tk.Scrollbar(holder, command=canvas.yview)
    canvas.configure(yscrollcommand=scrollbar.set)
    scrollbar.pack(side="right", fill="y")
    canvas.pack(side="left", fill="both", expand=True)
    rows = tk.Frame(canvas, bg=white)
    canvas.create_window((0, 0), window=rows, anchor="nw", tags="rows")
    rows.bind("<Configure>", lambda _e: canvas.configure(scrollregion=canvas.bbox("all")))
    canvas.bind("<Configure>", lambda e: canvas.itemconfigure("rows", width=e.width))

    def change(index: int) -> None:
        print(f"Кнопка 'Изменить' для работы '{works[index].name}' (ID: {index}) нажата!")

    def delete(index: int) -> None:
        name = works[index].name
        confirmed = messagebox.askyesno(
            "Подтверждение удаления",
            f"Вы уверены, что хотите удалить работу '{name}'?",
            parent=root,
        )
        if confirmed:
            print(f"Подтверждено удаление работы '{name}' (ID: {index}).")
            works.remove(index)
            refresh()
        else:
            print(f"Удаление работы '{name}' (ID: {index}) отменено.")

    def select(index: int) -> None:
        print(f"Выбран элемент списка: {index} - {works[index].name}")

    def refresh() -> None:
        for child in rows.winfo_children():
            child.destroy()
        for index, item in enumerate(works):
            row = tk.Frame(rows, bg=white)
            row.pack(fill="x", padx=8, pady=4)
            text = tk.Frame(row, bg=white)
            text.pack(side="left", fill="x", expand=True)
            labels = (
                tk.Label(text, text=due_label(item), bg=white, anchor="w"),
                tk.Label(
                    text,
                    text=item.name,
                    font=(FONT_FAMILY, 11, "bold"),
                    bg=white,
                    anchor="w",
                    justify="left",
                    wraplength=400,
                ),
            )
            for label in labels:
                label.pack(fill="x")
                label.bind("<Button-1>", lambda _e, i=index: select(i))
            tk.Button(row, text="Удалить", command=lambda i=index: delete(i)).pack(
                side="right"
            )
            tk.Button(row, text="Изменить", command=lambda i=index: change(i)).pack(
                side="right", padx=4
            )

    def add() -> None:
        item = works.add_next(datetime.now())
        print("Добавлен новый элемент:", item.name)
        refresh()

    bottom = tk.Frame(root, bg=dark)
    bottom.pack(fill="x", padx=12, pady=(0, 12))
    tk.Button(bottom, text="Добавить", command=add).pack(side="right")

    refresh()
    root.mainloop()