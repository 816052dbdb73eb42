"""The super-account's list of users in one group, with statuses and removal."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from .style import DARK_BLUE, WHITE, build_header, make_window, rgb_hex
from .users import LIGHT_GREY, MEDIUM_GREY, STATUS_OPTIONS

EMPTY_MESSAGE = "Нет пользователей для отображения"


@dataclass
class UserEntry:
    """One user row: combined name and e-mail, and the user's status."""

    fio_email: str
    status: str


DIRECTORY = (
    UserEntry("Иванов И.И., ivanov@example.com", "студ"),
    UserEntry("Петров П.П., petrov@example.com", "лек"),
    UserEntry("Сидоров С.С., sidorov@example.com", "асс"),
    UserEntry("Козлов К.К., kozlov@example.com", "студ"),
    UserEntry("Михайлов М.М., mikhailov@example.com", "семи"),
)

_SAMPLE_SIZE = 16


def _sample_roster() -> list[UserEntry]:
    return [
        UserEntry("Иванов И.И., ivanov@example.com", "студ")
        for _ in range(_SAMPLE_SIZE)
    ]


def search_directory(directory: Iterable[UserEntry], query: str) -> list[UserEntry]:
    """Return the entries whose name and e-mail contain the query, ignoring case."""
    needle = query.lower()
    return [entry for entry in directory if needle in entry.fio_email.lower()]


class GroupRoster:
    """The ordered members of one group."""

    def __init__(self, entries: Optional[Iterable[UserEntry]] = None):
        self._entries: list[UserEntry] = (
            _sample_roster() if entries is None else list(entries)
        )

    def add(self, user: UserEntry) -> UserEntry:
        """Append a copy of a user to the group and return the copy."""
        member = dataclasses.replace(user)
        self._entries.append(member)
        return member

    def remove(self, index: int) -> UserEntry:
        """Remove and return the member at a position; raise IndexError if absent."""
        if not 0 <= index < len(self._entries):
            raise IndexError(f"no user at position {index}")
        return self._entries.pop(index)

    def set_status(self, index: int, status: str) -> UserEntry:
        """Change a member's status; raise ValueError for an unknown status."""
        if status not in STATUS_OPTIONS:
            raise ValueError(f"unknown status: {status}")
        if not 0 <= index < len(self._entries):
            raise IndexError(f"no user at position {index}")
        member = self._entries[index]
        member.status = status
        return member

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[UserEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> UserEntry:
        return self._entries[index]


def group_users_page(group_name: str) -> None:
    """Show a group's members with status selectors, removal and a search to add."""
    import tkinter as tk
    from tkinter import messagebox, ttk

    roster = GroupRoster()
    white = rgb_hex(*WHITE)
    dark = rgb_hex(*DARK_BLUE)
    light = rgb_hex(*LIGHT_GREY)
    medium = rgb_hex(*MEDIUM_GREY)
    title = f"Список пользователей: {group_name}"

    root = make_window(title, 1200, 720)
    root.configure(bg=dark)
    build_header(root, title).pack(fill="x")

    content = tk.Frame(root, bg=white)
    content.pack(fill="both", expand=True, padx=12, pady=12)

    def go_back() -> None:
        print("Кнопка 'Назад' нажата. Возврат на предыдущую страницу.")
        root.destroy()

    back_row = tk.Frame(content, bg=white)
    back_row.pack(fill="x", padx=4, pady=4)
    tk.Button(back_row, text="Назад", command=go_back).pack(side="left")

    headers = tk.Frame(content, bg=white)
    headers.pack(anchor="w", pady=4)
    tk.Label(headers, text="ФИО, почта", bg=white, padx=12).pack(side="left")
    tk.Frame(headers, bg=medium, width=1).pack(side="left", fill="y")
    tk.Label(headers, text="Статус", bg=white, padx=12).pack(side="left")

    holder = tk.Frame(content, bg=white)
    holder.pack(fill="both", expand=True)
    canvas = tk.Canvas(holder, bg=white, width=215, height=450, highlightthickness=0)
    scrollbar = tk.Scrollbar(holder, command=canvas.yview)
    canvas.configure(yscrollcommand=scrollbar.set)
    scrollbar.pack(side="right", fill="y")
    canvas.pack(side="left", fill="both", expand=True)
    rows = tk.Frame(canvas, bg=white)
    canvas.create_window((0, 0), window=rows, anchor="nw", tags="rows")
    rows.bind("<Configure>", lambda _e: canvas.configure(scrollregion=canvas.bbox("all")))
    canvas.bind("<Configure>", lambda e: canvas.itemconfigure("rows", width=e.width))

    def delete(index: int) -> None:
        name = roster[index].fio_email
        if messagebox.askyesno(
            "Подтверждение удаления", f"Удалить пользователя '{name}'?", parent=root
        ):
            roster.remove(index)
            refresh()
            print(f"Удален пользователь: {name}")

    def make_row(index: int, user: UserEntry) -> None:
        row = tk.Frame(rows, bg=white)
        row.pack(fill="x", padx=4, pady=4)
        tk.Label(
            row, text=user.fio_email, bg=white, anchor="w", justify="left", wraplength=500
        ).pack(fill="x", padx=4, pady=2)
        tk.Frame(row, bg=medium, height=1).pack(fill="x")
        status = ttk.Combobox(row, values=STATUS_OPTIONS, state="readonly")
        status.set(user.status)

        def on_status(_event=None, i=index, box=status) -> None:
            member = roster.set_status(i, box.get())
            print(f"Статус пользователя {member.fio_email} изменен на: {member.status}")

        status.bind("<<ComboboxSelected>>", on_status)
        status.pack(fill="x", padx=4, pady=2)
        tk.Frame(row, bg=medium, height=1).pack(fill="x")
        tk.Button(row, text="Удалить", command=lambda i=index: delete(i)).pack(
            fill="x", padx=4, pady=2
        )

    def refresh() -> None:
        for child in rows.winfo_children():
            child.destroy()
        if not len(roster):
            tk.Label(rows, text=EMPTY_MESSAGE, bg=white).pack(pady=8)
            return
        for index, user in enumerate(roster):
            make_row(index, user)
            tk.Frame(rows, bg=light, height=2).pack(fill="x")

    def open_search() -> None:
        dialog = tk.Toplevel(root)
        dialog.title("Поиск пользователя")
        dialog.transient(root)
        query = tk.StringVar()
        tk.Entry(dialog, textvariable=query, width=40).pack(fill="x", padx=8, pady=8)
        results = tk.Listbox(dialog, exportselection=False)
        results.pack(fill="both", expand=True, padx=8)
        found: list[UserEntry] = []

        def update(*_args) -> None:
            found[:] = search_directory(DIRECTORY, query.get())
            results.delete(0, "end")
            for entry in found:
                results.insert("end", entry.fio_email)

        def on_select(_event=None) -> None:
            chosen = results.curselection()
            if not chosen:
                return
            member = roster.add(found[chosen[0]])
            refresh()
            print(f"Добавлен пользователь: {member.fio_email}")

        query.trace_add("write", update)
        results.bind("<<ListboxSelect>>", on_select)
        tk.Button(dialog, text="Закрыть", command=dialog.destroy).pack(pady=8)
        update()

    tk.Button(content, text="Добавить", command=open_search).pack(fill="x", pady=4)

    refresh()
    root.mainloop()