"""The lecturer's "main criteria" screen: groups, criteria and score descriptions."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Callable, Optional

from .style import DARK_BLUE, FONT_FAMILY, WHITE, build_header, make_window, rgb_hex

SCORES = (0.0, 0.25, 0.5, 0.75, 1.0)
DIVIDER_GREY = (180, 180, 180)


def format_score(score: float) -> str:
    """Render a score with two decimals."""
    return f"{score:.2f}"


@dataclass
class ScoreDescription:
    """The text explaining what one score means."""

    score: float
    description: str = ""

    @property
    def is_blank(self) -> bool:
        """True while no description has been written."""
        return not self.description


def _default_scores() -> list[ScoreDescription]:
    return [ScoreDescription(score) for score in SCORES]


@dataclass
class MainCriteriaForm:
    """Everything the main-criteria page edits."""

    groups: list[str] = field(default_factory=lambda: ["Группа 1", "Группа 2"])
    criteria: list[str] = field(default_factory=lambda: ["Критерий А", "Критерий Б"])
    scores: list[ScoreDescription] = field(default_factory=_default_scores)
    weight: str = "1.0"

    def add_group(self) -> None:
        """Append an unnamed group."""
        self.groups.append("")

    def remove_last_group(self) -> Optional[str]:
        """Drop the last group and return its name; do nothing if there is none."""
        return self.groups.pop() if self.groups else None

    def rename_group(self, index: int, name: str) -> None:
        """Give the group at a position a new name."""
        self.groups[index] = name

    def add_criterion(self) -> None:
        """Append an unnamed criterion."""
        self.criteria.append("")

    def remove_last_criterion(self) -> Optional[str]:
        """Drop the last criterion and return its name; do nothing if there is none."""
        return self.criteria.pop() if self.criteria else None

    def rename_criterion(self, index: int, name: str) -> None:
        """Give the criterion at a position a new name."""
        self.criteria[index] = name

    def describe_score(self, score: float, text: str) -> ScoreDescription:
        """Set the description of a score; raise ValueError for an unknown score."""
        for entry in self.scores:
            if entry.score == score:
                entry.description = text
                return entry
        raise ValueError(f"unknown score: {score}")

    def summary_lines(self) -> list[str]:
        """Return the lines reported when the form is saved."""
        lines = [
            "Кнопка 'Создать' нажата. Сохраняем все данные.",
            f"Текущий вес: {self.weight}",
            "Группы: " + ", ".join(self.groups),
            "Критерии: " + ", ".join(self.criteria),
            "Описания оценок:",
        ]
        lines += [
            f"  {format_score(entry.score)}: '{entry.description}'"
            for entry in self.scores
        ]
        return lines


def _scrolled(parent, width: int, height: int):
    """Return a frame inside a vertically scrolling canvas packed into parent."""
    import tkinter as tk

    white = rgb_hex(*WHITE)
    holder = tk.Frame(parent, bg=white)
    holder.pack(fill="both", expand=True)
    canvas = tk.Canvas(holder, bg=white, width=width, height=height, highlightthickness=0)
    scrollbar = tk.Scrollbar(holder, command=canvas.yview)
    canvas.configure(yscrollcommand=scrollbar.set)
    scrollbar.pack(side="right", fill="y")
    canvas.pack(side="left", fill="both", expand=True)
    inner = tk.Frame(canvas, bg=white)
    canvas.create_window((0, 0), window=inner, anchor="nw", tags="inner")
    inner.bind("<Configure>", lambda _e: canvas.configure(scrollregion=canvas.bbox("all")))
    canvas.bind("<Configure>", lambda e: canvas.itemconfigure("inner", width=e.width))
    return inner


def _name_column(
    parent,
    caption: str,
    names: Callable[[], list[str]],
    add: Callable[[], None],
    remove: Callable[[], object],
    rename: Callable[[int, str], None],
):
    """Build a scrollable column of editable names with add and delete buttons."""
    import tkinter as tk

    white = rgb_hex(*WHITE)
    section = tk.Frame(parent, bg=white)
    rows = _scrolled(section, 200, 400)

    def refresh() -> None:
        for child in rows.winfo_children():
            child.destroy()
        tk.Label(rows, text=caption, font=(FONT_FAMILY, 11, "bold"), bg=white).pack(fill="x")
        for index, name in enumerate(names()):
            var = tk.StringVar(value=name)
            var.trace_add(
                "write", lambda *_args, i=index, v=var: rename(i, v.get())
            )
            tk.Entry(rows, textvariable=var).pack(fill="x", padx=4, pady=4)

    def on_add() -> None:
        add()
        refresh()

    def on_remove() -> None:
        remove()
        refresh()

    buttons = tk.Frame(section, bg=white)
    buttons.pack(fill="x", pady=4)
    tk.Button(buttons, text="добавить", command=on_add).pack(side="left")
    tk.Button(buttons, text="удалить", command=on_remove).pack(side="left", padx=4)
    refresh()
    return section


def main_criteria_page() -> None:
    """Show the page for editing groups, criteria, score descriptions and weight."""
    import tkinter as tk

    form = MainCriteriaForm()
    white = rgb_hex(*WHITE)
    grey = rgb_hex(*DIVIDER_GREY)

    root = make_window("Супер-акк: Основные критерии", 1200, 720)
    root.configure(bg=rgb_hex(*DARK_BLUE))
    build_header(root, "Основные критерии").pack(fill="x")

    tk.Frame(root, bg=white, width=60).pack(side="left", fill="y")

    content = tk.Frame(root, bg=white)
    content.pack(side="left", fill="both", expand=True, padx=8, pady=8)

    def go_back() -> None:
        print("Кнопка 'назад' нажата. Возврат на предыдущую страницу.", file=sys.stderr)
        root.destroy()

    back_row = tk.Frame(content, bg=white)
    back_row.pack(fill="x", padx=4, pady=4)
    tk.Button(back_row, text="назад", command=go_back).pack(side="left")

    columns = tk.Frame(content, bg=white)
    columns.pack(fill="both", expand=True)

    _name_column(
        columns,
        "список групп и их названия",
        lambda: form.groups,
        form.add_group,
        form.remove_last_group,
        form.rename_group,
    ).pack(side="left", fill="both", expand=True, padx=4)
    tk.Frame(columns, bg=grey, width=2).pack(side="left", fill="y")
    _name_column(
        columns,
        "список критериев и их названия",
        lambda: form.criteria,
        form.add_criterion,
        form.remove_last_criterion,
        form.rename_criterion,
    ).pack(side="left", fill="both", expand=True, padx=4)
    tk.Frame(columns, bg=grey, width=2).pack(side="left", fill="y")

    score_section = tk.Frame(columns, bg=white)
    score_section.pack(side="left", fill="both", expand=True, padx=4)
    score_rows = _scrolled(score_section, 250, 300)
    bold_font = (FONT_FAMILY, 10, "bold")
    plain_font = ("TkFixedFont", 10)
    for entry in form.scores:
        tk.Label(score_rows, text=format_score(entry.score), bg=white, anchor="w").pack(
            fill="x"
        )
        var = tk.StringVar(value=entry.description)
        field_widget = tk.Entry(
            score_rows,
            textvariable=var,
            font=bold_font if entry.is_blank else plain_font,
        )
        field_widget.pack(fill="x", padx=4, pady=(0, 6))

        def on_write(*_args, score=entry.score, v=var, w=field_widget) -> None:
            updated = form.describe_score(score, v.get())
            w.configure(font=bold_font if updated.is_blank else plain_font)

        var.trace_add("write", on_write)

    bottom = tk.Frame(content, bg=white)
    bottom.pack(fill="x", padx=4, pady=8)
    tk.Label(bottom, text="вес", bg=white).pack(side="left")
    weight_var = tk.StringVar(value=form.weight)
    tk.Entry(bottom, textvariable=weight_var, width=10).pack(side="left", padx=4)

    def create() -> None:
        form.weight = weight_var.get()
        for line in form.summary_lines():
            print(line, file=sys.stderr)

    tk.Button(bottom, text="Создать", command=create).pack(side="right")

    root.mainloop()