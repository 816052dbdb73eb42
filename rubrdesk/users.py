"""The super-account's searchable list of all users with editable statuses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .style import DARK_BLUE, FONT_FAMILY, WHITE, build_header, make_window, rgb_hex

STATUS_OPTIONS = ("асс", "студ", "лек", "семи")
LIGHT_GREY = (220, 220, 220)
MEDIUM_GREY = (180, 180, 180)
EMPTY_MESSAGE = "Нет пользователей для отображения по заданным критериям."


@dataclass
class User:
    """A user of the system with group and role."""

    id: int
    fio: str
    email: str
    group: str
    status: str


ALL_USERS = [
    User(1, "Иванов Иван", "ivanov@example.com", "Математики", "студ"),
    User(2, "Петров Петр", "petrov@example.com", "Физики", "лек"),
    User(3, "Сидорова Анна", "sidorova@example.com", "Математики", "асс"),
    User(4, "Кузнецов Дмитрий", "kuznetsov@example.com", "Химики", "семи"),
    User(5, "Васильева Елена", "vasilieva@example.com", "Физики", "студ"),
    User(6, "Смирнов Артем", "smirnov@example.com", "Биологи", "студ"),
    User(7, "Волкова Мария", "volkova@example.com", "Химики", "асс"),
    User(8, "Морозов Сергей", "morozov@example.com", "Математики", "лек"),
    User(9, "Новикова Ольга", "novikova@example.com", "Биологи", "семи"),
    User(10, "Федоров Алексей", "fedorov@example.com", "Физики", "студ"),
]


def filter_users(users: Iterable[User], query: str) -> list[User]:
    """Return users whose name or e-mail contains the query, ignoring case."""
    if not query:
        return list(users)
    needle = query.lower()
    return [
        user
        for user in users
        if needle in user.fio.lower() or needle in user.email.lower()
    ]


def user_cell(user: User) -> str:
    """Return the combined name and e-mail cell of a user's row."""
    return f"{user.fio}, {user.email}"


def users_list_page() -> None:
    """Show all users with a search field and a status selector per user."""
    import tkinter as tk
    from tkinter import ttk

    white = rgb_hex(*WHITE)
    dark = rgb_hex(*DARK_BLUE)
    light = rgb_hex(*LIGHT_GREY)
    medium = rgb_hex(*MEDIUM_GREY)

    root = make_window("Супер-акк: Список пользователей", 1200, 720)
    root.configure(bg=dark)
    build_header(root, "Список пользователей").pack(fill="x")

    tk.Frame(root, bg=dark, width=60).pack(side="left", fill="y")
    content = tk.Frame(root, bg=white)
    content.pack(side="left", fill="both", expand=True, padx=8, pady=8)

    search_box = tk.Frame(content, bg=white)
    search_box.pack(fill="x", padx=4, pady=4)
    tk.Label(search_box, text="поиск", bg=white, anchor="w").pack(fill="x")
    query = tk.StringVar()
    tk.Entry(search_box, textvariable=query, width=40).pack(anchor="w")

    headers = tk.Frame(content, bg=white)
    headers.pack(anchor="w", pady=4)
    for number, caption in enumerate(("ФИО почта", "группа", "Статус")):
        if number:
            tk.Frame(headers, bg=medium, width=1).pack(side="left", fill="y")
        tk.Label(headers, text=caption, bg=white, padx=12).pack(side="left")

    holder = tk.Frame(content, bg=white)
    holder.pack(fill="both", expand=True)
    canvas = tk.Canvas(holder, bg=white, height=450, highlightthickness=0)
    scrollbar = tk.Scrollbar(holder, command=canvas.yview)
    canvas.configure(yscrollcommand=scrollbar.set)
    scrollbar.pack(side="right", fill="y")
    canvas.pack(side="left", fill="both", expand=True)
    rows = tk.Frame(canvas, bg=white)
    canvas.create_window((0, 0), window=rows, anchor="nw", tags="rows")
    rows.bind("<Configure>", lambda _e: canvas.configure(scrollregion=canvas.bbox("all")))
    canvas.bind("<Configure>", lambda e: canvas.itemconfigure("rows", width=e.width))

    def make_row(user: User) -> None:
        row = tk.Frame(rows, bg=white)
        row.pack(fill="x", padx=4, pady=4)
        tk.Label(
            row, text=user_cell(user), bg=white, anchor="w", justify="left", wraplength=500
        ).pack(fill="x", padx=4, pady=2)
        tk.Frame(row, bg=medium, height=1).pack(fill="x")
        tk.Label(row, text=user.group, bg=white, anchor="w").pack(fill="x", padx=4, pady=2)
        tk.Frame(row, bg=medium, height=1).pack(fill="x")
        status = ttk.Combobox(row, values=STATUS_OPTIONS, state="readonly")
        status.set(user.status)

        def on_status(_event=None, u=user, box=status) -> None:
            u.status = box.get()
            print(f"Статус пользователя {u.fio} ({u.email}) изменен на: {u.status}")

        status.bind("<<ComboboxSelected>>", on_status)
        status.pack(fill="x", padx=4, pady=2)

    def refresh(*_args) -> None:
        for child in rows.winfo_children():
            child.destroy()
        shown = filter_users(ALL_USERS, query.get())
        if not shown:
            tk.Label(rows, text=EMPTY_MESSAGE, bg=white, font=(FONT_FAMILY, 10)).pack(
                pady=8
            )
        for user in shown:
            make_row(user)
            tk.Frame(rows, bg=light, height=2).pack(fill="x")
        canvas.yview_moveto(0)

    query.trace_add("write", refresh)
    refresh()
    root.mainloop()