from datetime import datetime

import pytest

from rubrdesk.worklist import WORKS, Work, work_row


def test_first_row_matches_source_data():
    assert work_row(WORKS[0]) == ("10.06.2025", "Лабораторная работа 1", "Просрочено")


@pytest.mark.parametrize("work", WORKS, ids=lambda w: w.title)
def test_deadline_cell_round_trips(work):
    deadline, _title, _status = work_row(work)
    assert datetime.strptime(deadline, "%d.%m.%Y").date() == work.deadline.date()


@pytest.mark.parametrize("work", WORKS, ids=lambda w: w.title)
def test_title_and_status_are_kept(work):
    _deadline, title, status = work_row(work)
    assert (title, status) == (work.title, work.status)


def test_custom_work_row():
    work = Work(datetime(2030, 12, 31, 23, 59), "Итоговый проект", "В процессе")
    assert work_row(work)[1:] == ("Итоговый проект", "В процессе")
    assert work_row(work)[0].endswith("2030")


def test_statuses_follow_source():
    assert [work_row(w)[2] for w in WORKS] == [
        "Просрочено",
        "В процессе",
        "Сдано",
        "Не сдано",
    ]