"""A two-level rubric editor: criteria groups, their criteria and score comments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from .main_criteria import SCORES, format_score
from .style import make_window
from .welcome import _placeholder_entry


class NoGroupSelected(LookupError):
    """Raised when a criterion is added before any group is chosen."""


@dataclass
class CriteriaGroup:
    """A named group holding an ordered list of criterion names."""

    name: str
    criteria: list[str] = field(default_factory=list)


def _default_groups() -> list[CriteriaGroup]:
    return [
        CriteriaGroup("Группа 1", ["Критерий 1.1", "Критерий 1.2"]),
        CriteriaGroup("Группа 2", ["Критерий 2.1", "Критерий 2.2"]),
    ]


class RubricBuilder:
    """Groups of criteria with one group optionally selected for editing."""

    def __init__(self, groups: Optional[Iterable[CriteriaGroup]] = None):
        self.groups: list[CriteriaGroup] = (
            _default_groups() if groups is None else list(groups)
        )
        self.selected: Optional[int] = None

    def add_group(self, name: str) -> Optional[CriteriaGroup]:
        """Append a group with no criteria; an empty name is ignored."""
        if not name:
            return None
        group = CriteriaGroup(name)
        self.groups.append(group)
        return group

    def select_group(self, index: int) -> CriteriaGroup:
        """Make the group at a position the selected one."""
        if not 0 <= index < len(self.groups):
            raise IndexError(f"no group at position {index}")
        self.selected = index
        return self.groups[index]

    def add_criterion(self, name: str) -> Optional[str]:
        """Append a criterion to the selected group; an empty name is ignored."""
        if self.selected is None:
            raise NoGroupSelected("Сначала выберите группу")
        if not name:
            return None
        self.groups[self.selected].criteria.append(name)
        return name

    def criteria(self) -> list[str]:
        """Return the selected group's criteria, or nothing if none is selected."""
        if self.selected is None or not 0 <= self.selected < len(self.groups):
            return []
        return list(self.groups[self.selected].criteria)


def score_field_labels() -> list[tuple[str, str]]:
    """Return (label, hint) pairs for the score-comment form, weight last."""
    fields = [
        (f"Оценка {format_score(score)}", f"Комментарий для {format_score(score)}")
        for score in SCORES
    ]
    fields.append(("Вес", "Вес критерия"))
    return fields


def rubric_builder_page() -> None:
    """Show the editor for criteria groups, their criteria and score comments."""
    import tkinter as tk
    from tkinter import messagebox, simpledialog

    builder = RubricBuilder()
    root = make_window("Student", 800, 600)

    outer = tk.PanedWindow(root, orient="horizontal")
    outer.pack(fill="both", expand=True)
    lists = tk.PanedWindow(outer, orient="horizontal")
    outer.add(lists, width=240)

    group_frame = tk.Frame(lists)
    group_box = tk.Listbox(group_frame, exportselection=False)
    group_box.pack(fill="both", expand=True)
    lists.add(group_frame, width=120)

    criteria_frame = tk.Frame(lists)
    criteria_box = tk.Listbox(criteria_frame, exportselection=False)
    criteria_box.pack(fill="both", expand=True)
    lists.add(criteria_frame, width=120)

    main = tk.Frame(outer)
    outer.add(main)
    content = tk.Frame(main)
    content.pack(fill="both", expand=True)

    def show_content(build) -> None:
        for child in content.winfo_children():
            child.destroy()
        build(content)

    def show_text(text: str) -> None:
        show_content(lambda frame: tk.Label(frame, text=text).pack(expand=True))

    tk.Button(
        main,
        text="Создать",
        command=lambda: messagebox.showinfo(
            "Успех", "Переход на следующую страницу (бэкэнд не реализован)", parent=root
        ),
    ).pack(side="bottom", fill="x")

    def refresh_groups() -> None:
        group_box.delete(0, "end")
        for group in builder.groups:
            group_box.insert("end", group.name)

    def refresh_criteria() -> None:
        criteria_box.delete(0, "end")
        for name in builder.criteria():
            criteria_box.insert("end", name)

    def add_group() -> None:
        name = simpledialog.askstring("Новая группа", "Название группы", parent=root)
        if name and builder.add_group(name):
            refresh_groups()

    def add_criterion() -> None:
        if builder.selected is None:
            messagebox.showinfo("Ошибка", "Сначала выберите группу", parent=root)
            return
        name = simpledialog.askstring("Новый критерий", "Название критерия", parent=root)
        if name and builder.add_criterion(name):
            refresh_criteria()

    def on_group_selected(_event=None) -> None:
        chosen = group_box.curselection()
        if not chosen:
            return
        builder.select_group(chosen[0])
        refresh_criteria()
        show_text("Выберите критерий")

    def build_form(frame) -> None:
        form = tk.Frame(frame)
        form.pack(fill="x", padx=8, pady=8)
        form.columnconfigure(1, weight=1)
        for row, (label, hint) in enumerate(score_field_labels()):
            tk.Label(form, text=label, anchor="w").grid(row=row, column=0, sticky="w", pady=2)
            entry, _value = _placeholder_entry(form, hint)
            entry.grid(row=row, column=1, sticky="ew", padx=4, pady=2)

    def on_criterion_selected(_event=None) -> None:
        if criteria_box.curselection():
            show_content(build_form)

    group_box.bind("<<ListboxSelect>>", on_group_selected)
    criteria_box.bind("<<ListboxSelect>>", on_criterion_selected)
    tk.Button(group_frame, text="Добавить группу", command=add_group).pack(fill="x")
    tk.Button(criteria_frame, text="Добавить критерий", command=add_criterion).pack(fill="x")

    refresh_groups()
    show_text("Выберите группу и критерий")
    root.mainloop()