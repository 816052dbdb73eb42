from datetime import date, datetime

import pytest

from rubrdesk.works import WorkItem, WorkList, due_label


def test_default_list_holds_demo_work():
    works = WorkList()
    assert list(works) == [WorkItem("Название работы 1", True, "2025-06-10")]


def test_due_label():
    assert due_label(WorkItem("Название работы 1", True, "2025-06-10")) == (
        "Дата сдачи: 2025-06-10"
    )


def test_add_next_names_and_dates():
    works = WorkList()
    item = works.add_next(date(2025, 1, 1))
    assert item.name == "Новая работа 2"
    assert item.is_active is True
    assert item.due_date == "2025-01-15"
    assert works[-1] is item
    assert len(works) == 2


def test_add_next_accepts_datetime():
    works = WorkList([])
    item = works.add_next(datetime(2025, 3, 3, 18, 30))
    assert item.due_date == works.add_next(datetime(2025, 3, 3, 1, 0)).due_date[:0] + item.due_date
    assert len(works) == 2


def test_successive_due_dates_grow():
    works = WorkList([])
    today = date(2025, 5, 1)
    dues = [works.add_next(today).due_date for _ in range(4)]
    assert dues == sorted(dues)
    assert len(set(dues)) == 4
    assert all(due > today.isoformat() for due in dues)


def test_remove_returns_item_and_shrinks():
    works = WorkList()
    works.add_next(date(2025, 1, 1))
    removed = works.remove(0)
    assert removed.name == "Название работы 1"
    assert [item.name for item in works] == ["Новая работа 2"]


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_remove_out_of_range_raises(index):
    works = WorkList()
    with pytest.raises(IndexError):
        works.remove(index)
    assert len(works) == 1


def test_empty_list_remove_raises():
    works = WorkList([])
    with pytest.raises(IndexError):
        works.remove(0)
    assert len(works) == 0