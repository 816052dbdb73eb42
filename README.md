# rubrdesk

Desktop screens for a rubric-based grading system. Lecturers create works
with deadlines, set up blocking and main assessment criteria and keep a list
of their works; students see their grades, their works and the details of an
assignment; the administrator manages groups and users.

The windows are built with Tkinter from the standard library, so there is
nothing to install beyond Python 3.10 or later with Tk support.

## Installation

```
pip install .
```

## Running

```
rubrdesk
```

With no argument this opens the `rubric-builder` screen. Any other screen is
opened by name:

```
rubrdesk greeting
rubrdesk --list
```

`--list` prints the available screen names and exits. The same names are
returned by `rubrdesk.app.page_names()`:

| Name | Screen |
| --- | --- |
| `greeting` | greeting with sign-in and registration buttons |
| `authorization` | login and password form |
| `create-work` | new work with title, description and deadline picker |
| `rubric-builder` | groups of criteria with score comments |
| `lector-works` | a lecturer's list of works |
| `blocking-criteria` | table of blocking criteria |
| `main-criteria` | groups, criteria, score descriptions and weight |
| `grades` | a student's grades by subject |
| `assignment` | assignment details, file attachment and submission |
| `student-works` | a student's works with deadlines and status |
| `users` | searchable list of all users with their status |
| `group-users` | the users of one group (opened with an empty group name) |
| `group-list` | table of groups |

## Opening screens from Python

| Function | Screen |
| --- | --- |
| `rubrdesk.welcome.greeting_page()` | greeting |
| `rubrdesk.welcome.authorization_page()` | login and password form |
| `rubrdesk.deadline.create_work_page()` | new work with deadline picker |
| `rubrdesk.criteria.blocking_criteria_page()` | blocking criteria |
| `rubrdesk.criteria.group_list_page()` | groups |
| `rubrdesk.main_criteria.main_criteria_page()` | main criteria |
| `rubrdesk.works.lector_works_page()` | a lecturer's works |
| `rubrdesk.rubric_builder.rubric_builder_page()` | rubric builder |
| `rubrdesk.grades.grades_page()` | a student's grades |
| `rubrdesk.worklist.works_page()` | a student's works |
| `rubrdesk.assignment.assignment_page()` | one assignment |
| `rubrdesk.users.users_list_page()` | all users |
| `rubrdesk.group_users.group_users_page(group_name)` | the users of one group |

Each call builds its window and runs the Tk main loop until the window is
closed.

## Working with the data directly

The state behind the screens lives in plain classes and functions that can be
used without a window, for example:

```python
from datetime import date
from rubrdesk.deadline import combine_deadline, format_deadline
from rubrdesk.works import WorkList

moment = combine_deadline(date(2025, 6, 20), "18", "30")
print(format_deadline(moment))          # 20.06.2025 18:30

works = WorkList()                      # starts with one sample work
item = works.add_next(date(2025, 6, 1))
print(item.name, item.due_date)         # Новая работа 2 2025-06-15
```

Other pieces:

- `rubrdesk.criteria.RowList` with `BlockingCriterion` and `GroupDraft`, and
  the report texts from `blocking_criteria_report` and `group_list_report`.
- `rubrdesk.main_criteria.MainCriteriaForm`: groups, criteria, descriptions
  for the scores 0.00, 0.25, 0.50, 0.75 and 1.00, and a weight;
  `describe_score` raises `ValueError` for any other score.
- `rubrdesk.rubric_builder.RubricBuilder` raises `NoGroupSelected` when a
  criterion is added before a group has been chosen.
- `rubrdesk.assignment.Assignment` raises `MissingFile` when a work is
  submitted without an attached file; `is_allowed_file` accepts `.txt`,
  `.pdf`, `.docx`, `.zip` and `.rar`.
- `rubrdesk.users.filter_users` and `rubrdesk.group_users.search_directory`
  match names and e-mail addresses without regard to case;
  `GroupRoster.set_status` accepts only the statuses `асс`, `студ`, `лек`
  and `семи`.

## What it does not do

The screens are not connected to any server or database. Every list starts
from sample data held in memory, and nothing is saved when a window closes.
Signing in does not check the login or password, and registering only prints
a message. Form buttons such as "Далее" and "Создать" print the entered data
instead of sending it anywhere; the "Назад" buttons close the window or only
print a message, and the "Подробнее" and "Посмотреть критерии" buttons do
nothing. The screens are separate windows: one screen does not lead to
another.

## Tests

```
pip install .[test]
pytest
```