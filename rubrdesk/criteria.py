"""Editable tables of blocking criteria and of student groups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Iterator, Sequence, TypeVar

from .style import DARK_BLUE, FONT_FAMILY, WHITE, build_header, make_window, rgb_hex
from .welcome import _placeholder_entry

T = TypeVar("T")


@dataclass
class BlockingCriterion:
    """One row of the blocking-criteria table."""

    name: str = ""
    description: str = ""
    comment: str = ""
    evaluation: str = ""


@dataclass
class GroupDraft:
    """One row of the group table."""

    name: str = ""
    description: str = ""
    disciplines: str = ""


class RowList(Generic[T]):
    """An ordered set of table rows that grows and shrinks at its end."""

    def __init__(self, items: Iterable[T] = ()):
        self._items: list[T] = list(items)

    def add(self, item: T) -> T:
        """Append a row and return it."""
        self._items.append(item)
        return item

    def remove_last(self) -> T:
        """Remove and return the last row; raise IndexError if there is none."""
        if not self._items:
            raise IndexError("no rows to remove")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]


def blocking_criteria_report(criteria: Iterable[BlockingCriterion]) -> str:
    """Return the text printed when the criteria form is submitted."""
    lines = ["Кнопка 'Далее' нажата. Собираем данные критериев:"]
    for number, criterion in enumerate(criteria, start=1):
        lines += [
            f"Критерий {number}:",
            f"  Название: {criterion.name}",
            f"  Описание: {criterion.description}",
            f"  Комментарий: {criterion.comment}",
            f"  Оценка: {criterion.evaluation}",
        ]
    return "\n".join(lines)


def group_list_report(groups: Iterable[GroupDraft]) -> str:
    """Return the text printed when the group form is submitted."""
    lines = ["Кнопка 'Далее' нажата. Собираем данные групп:"]
    for number, group in enumerate(groups, start=1):
        lines += [
            f"Группа {number}:",
            f"  Название: {group.name}",
            f"  Описание: {group.description}",
            f"  Дисциплина: {group.disciplines}",
        ]
    return "\n".join(lines)


def _table_page(
    window_title: str,
    heading: str,
    headers: Sequence[str],
    list_caption: str,
    placeholders: Sequence[str],
    make_record: Callable[..., T],
    report: Callable[[list[T]], str],
    with_details: bool,
) -> None:
    """Show a page with an editable table whose rows are added and removed at the end."""
    import tkinter as tk

    dark = rgb_hex(*DARK_BLUE)
    white = rgb_hex(*WHITE)

    root = make_window(window_title, 1280, 720)
    root.configure(bg=dark)
    build_header(root, heading).pack(fill="x")

    back_row = tk.Frame(root, bg=dark)
    back_row.pack(fill="x", padx=12)
    tk.Button(
        back_row,
        text="Назад",
        command=lambda: print("Кнопка 'Назад' нажата. Возврат на предыдущую страницу."),
    ).pack(side="right")

    content = tk.Frame(root, bg=white)
    content.pack(fill="both", expand=True, padx=12, pady=12)

    column_headers = tk.Frame(content, bg=white)
    column_headers.pack(fill="x", padx=8, pady=8)
    for column in range(4):
        column_headers.columnconfigure(column, weight=1, uniform="col")
    for column, text in enumerate(headers):
        tk.Label(
            column_headers, text=text, font=(FONT_FAMILY, 11, "bold"), bg=white
        ).grid(row=0, column=column, padx=4, sticky="ew")

    tk.Label(content, text=list_caption, font=(FONT_FAMILY, 11, "bold"), bg=white).pack()

    scroll_area = tk.Frame(content, bg=white)
    scroll_area.pack(fill="both", expand=True, padx=8, pady=8)
    canvas = tk.Canvas(scroll_area, bg=white, height=400, highlightthickness=0)
    scrollbar = tk.Scrollbar(scroll_area, command=canvas.yview)
    canvas.configure(yscrollcommand=scrollbar.set)
    scrollbar.pack(side="right", fill="y")
    canvas.pack(side="left", fill="both", expand=True)
    rows_frame = tk.Frame(canvas, bg=white)
    canvas.create_window((0, 0), window=rows_frame, anchor="nw", tags="rows")
    rows_frame.bind(
        "<Configure>", lambda _e: canvas.configure(scrollregion=canvas.bbox("all"))
    )
    canvas.bind("<Configure>", lambda e: canvas.itemconfigure("rows", width=e.width))

    rows: RowList = RowList()

    def add_row() -> None:
        row = tk.Frame(rows_frame, bg=white)
        row.pack(fill="x", pady=4)
        for column in range(4):
            row.columnconfigure(column, weight=1, uniform="col")
        values = []
        for column, hint in enumerate(placeholders):
            entry, value = _placeholder_entry(row, hint)
            entry.grid(row=0, column=column, padx=8, sticky="ew")
            values.append(value)
        if with_details:
            tk.Button(
                row,
                text="Подробнее",
                command=lambda: print("Кнопка 'Далее' нажата. Собираем данные критериев:"),
            ).grid(row=0, column=len(placeholders), padx=8, sticky="ew")
        rows.add((row, values))

    def delete_row() -> None:
        try:
            row, _values = rows.remove_last()
        except IndexError:
            print("Нет критериев для удаления.")
            return
        row.destroy()
        print("Последний критерий удален.")

    def submit() -> None:
        records = [make_record(*(value() for value in values)) for _row, values in rows]
        print(report(records))

    add_row()

    bottom = tk.Frame(root, bg=dark)
    bottom.pack(fill="x", padx=12, pady=(0, 12))
    tk.Button(bottom, text="Добавить", command=add_row).pack(side="left")
    tk.Button(bottom, text="Удалить", command=delete_row).pack(side="left", padx=4)
    tk.Button(bottom, text="Далее", command=submit).pack(side="right")

    root.mainloop()


def blocking_criteria_page() -> None:
    """Show the page for editing a work's blocking criteria."""
    _table_page(
        "Блокирующие критерии",
        "Блокирующие критерии",
        ("Название критерия", "Описание критерия", "Комментарий", "Финальная оценка"),
        "Список блокирующих критериев",
        ("Название", "Описание", "Комментарий", "Оценка"),
        BlockingCriterion,
        blocking_criteria_report,
        with_details=False,
    )


def group_list_page() -> None:
    """Show the page for editing the list of student groups."""
    _table_page(
        "Список групп",
        "Список групп",
        ("Название группы", "Описание", "Дисциплинны"),
        "Список групп",
        ("Название группы", "Описание", "Дисциплинны"),
        GroupDraft,
        group_list_report,
        with_details=True,
    )