"""Greeting and sign-in screens shown to every user."""

from __future__ import annotations

from .style import FONT_FAMILY, PANEL_BLUE, WHITE, make_window, rgb_hex


def credentials_message(login: str, password: str) -> str:
    """Return the text reported when the sign-in button is pressed."""
    return f"Login: {login}\nPassword: {password}\n"


def _split_halves(root):
    """Divide the window into two equal columns and return both frames."""
    import tkinter as tk

    root.columnconfigure(0, weight=1, uniform="half")
    root.columnconfigure(1, weight=1, uniform="half")
    root.rowconfigure(0, weight=1)
    left = tk.Frame(root, bg=rgb_hex(*WHITE))
    left.grid(row=0, column=0, sticky="nsew")
    right = tk.Frame(root, bg=rgb_hex(*PANEL_BLUE))
    right.grid(row=0, column=1, sticky="nsew")
    return left, right


def _caption(frame, text: str):
    import tkinter as tk

    label = tk.Label(
        frame,
        text=text,
        font=(FONT_FAMILY, 14, "bold"),
        bg=rgb_hex(*PANEL_BLUE),
        fg=rgb_hex(*WHITE),
    )
    label.place(relx=0.5, rely=0.5, anchor="center")
    return label


def _placeholder_entry(parent, placeholder: str, show: str = ""):
    """Create an entry that shows grey hint text while empty.

    Returns the entry and a function giving its real contents.
    """
    import tkinter as tk

    entry = tk.Entry(parent, width=32)
    empty = True

    def show_hint(_event=None):
        nonlocal empty
        if not entry.get():
            entry.configure(show="", fg="grey")
            entry.insert(0, placeholder)
            empty = True

    def hide_hint(_event=None):
        nonlocal empty
        if empty:
            entry.delete(0, "end")
            entry.configure(show=show, fg="black")
            empty = False

    entry.bind("<FocusIn>", hide_hint)
    entry.bind("<FocusOut>", show_hint)
    show_hint()

    def value() -> str:
        return "" if empty else entry.get()

    return entry, value


def greeting_page() -> None:
    """Show the start screen with sign-in and registration buttons."""
    import tkinter as tk

    root = make_window("Greeting page", 1280, 720)
    left, right = _split_halves(root)

    buttons = tk.Frame(left, bg=rgb_hex(*WHITE))
    buttons.place(relx=0.5, rely=0.5, anchor="center")
    tk.Button(
        buttons,
        text="Авторизоваться",
        font=(FONT_FAMILY, 12, "bold"),
        command=lambda: print("authorization button clicked"),
    ).pack(fill="x", pady=4)
    tk.Button(
        buttons,
        text="Зарегистрироваться",
        command=lambda: print("registration button clicked"),
    ).pack(fill="x", pady=4)

    _caption(right, "Вход в систему оценивания")
    root.mainloop()


def authorization_page() -> None:
    """Show the sign-in screen with login and password fields."""
    import tkinter as tk

    root = make_window("Greeting page", 1280, 720)
    left, right = _split_halves(root)

    form = tk.Frame(left, bg=rgb_hex(*WHITE))
    form.place(relx=0.5, rely=0.5, anchor="center")
    login_entry, login_value = _placeholder_entry(form, "Введите логин")
    login_entry.pack(fill="x", pady=4)
    secret_entry, secret_value = _placeholder_entry(form, "Введите пароль", show="*")
    secret_entry.pack(fill="x", pady=4)

    def submit() -> str:
        message = credentials_message(login_value(), secret_value())
        print(message, end="")
        return message

    tk.Button(
        form,
        text="Войти в аккаунт",
        font=(FONT_FAMILY, 12, "bold"),
        command=submit,
    ).pack(fill="x", pady=4)

    _caption(right, "Войдите в аккаунт")
    root.mainloop()