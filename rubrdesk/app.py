"""Command-line launcher that opens one of the application's screens."""

from __future__ import annotations

import argparse
from typing import Callable, Optional, Sequence

from .assignment import assignment_page
from .criteria import blocking_criteria_page, group_list_page
from .deadline import create_work_page
from .grades import grades_page
from .group_users import group_users_page
from .main_criteria import main_criteria_page
from .rubric_builder import rubric_builder_page
from .users import users_list_page
from .welcome import authorization_page, greeting_page
from .works import lector_works_page
from .worklist import works_page

DEFAULT_PAGE = "rubric-builder"

_PAGES: dict[str, Callable[[], None]] = {
    "greeting": greeting_page,
    "authorization": authorization_page,
    "create-work": create_work_page,
    "rubric-builder": rubric_builder_page,
    "lector-works": lector_works_page,
    "blocking-criteria": blocking_criteria_page,
    "main-criteria": main_criteria_page,
    "grades": grades_page,
    "assignment": assignment_page,
    "student-works": works_page,
    "users": users_list_page,
    "group-users": lambda: group_users_page(""),
    "group-list": group_list_page,
}


def page_names() -> list[str]:
    """Return the names of the screens that can be opened."""
    return list(_PAGES)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the named screen, or list the screens with --list."""
    parser = argparse.ArgumentParser(
        prog="rubrdesk", description="Open one of the grading screens."
    )
    parser.add_argument(
        "page",
        nargs="?",
        default=DEFAULT_PAGE,
        choices=page_names(),
        help=f"screen to open (default: {DEFAULT_PAGE})",
    )
    parser.add_argument(
        "--list", action="store_true", help="print the available screens and exit"
    )
    args = parser.parse_args(argv)
    if args.list:
        for name in page_names():
            print(name)
        return 0
    _PAGES[args.page]()
    return 0