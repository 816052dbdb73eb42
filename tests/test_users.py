import pytest

from rubrdesk.users import ALL_USERS, STATUS_OPTIONS, User, filter_users, user_cell


@pytest.fixture
def users():
    return [
        User(1, "Иванов Иван", "ivan@example.com", "Математики", "студ"),
        User(2, "Петров Петр", "petr@example.com", "Физики", "лек"),
        User(3, "Сидорова Анна", "anna@example.com", "Математики", "асс"),
    ]


def test_empty_query_returns_everyone(users):
    assert filter_users(users, "") == users


def test_filter_by_name_ignores_case(users):
    result = filter_users(users, "ИВАН")
    assert [user.id for user in result] == [1]


def test_filter_by_email(users):
    result = filter_users(users, "PETR@")
    assert [user.id for user in result] == [2]


def test_filter_does_not_match_group(users):
    assert filter_users(users, "Математики") == []


def test_filter_keeps_order(users):
    result = filter_users(users, "example.com")
    assert [user.id for user in result] == [1, 2, 3]


def test_filtered_users_are_same_objects(users):
    result = filter_users(users, "анна")
    assert result[0] is users[2]


def test_user_cell_joins_name_and_email(users):
    assert user_cell(users[0]) == "Иванов Иван, ivan@example.com"


def test_directory_unfiltered_lists_everyone_with_known_statuses():
    shown = filter_users(ALL_USERS, "")
    assert [user.id for user in shown] == list(range(1, 11))
    assert all(user.status in STATUS_OPTIONS for user in shown)


def test_directory_search_by_surname():
    result = filter_users(ALL_USERS, "петров")
    assert [user.fio for user in result] == ["Петров Петр"]