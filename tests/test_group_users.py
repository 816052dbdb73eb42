import pytest

from rubrdesk.group_users import (
    DIRECTORY,
    GroupRoster,
    UserEntry,
    search_directory,
)


def _roster():
    return GroupRoster(
        [
            UserEntry("Иванов И.И., ivanov@example.com", "студ"),
            UserEntry("Петров П.П., petrov@example.com", "лек"),
        ]
    )


def test_default_roster_has_sample_members():
    roster = GroupRoster()
    assert len(roster) == 16
    assert all(user.status == "студ" for user in roster)


def test_add_appends_copy():
    roster = _roster()
    source = DIRECTORY[2]
    member = roster.add(source)
    assert len(roster) == 3
    assert roster[2] == source
    roster.set_status(2, "лек")
    assert source.status == "асс"
    assert member.status == "лек"


def test_remove_shifts_following_members():
    roster = _roster()
    removed = roster.remove(0)
    assert removed.fio_email.startswith("Иванов")
    assert len(roster) == 1
    assert roster[0].fio_email.startswith("Петров")


def test_remove_out_of_range_raises():
    roster = _roster()
    with pytest.raises(IndexError):
        roster.remove(2)
    with pytest.raises(IndexError):
        roster.remove(-1)


def test_set_status_changes_member():
    roster = _roster()
    roster.set_status(1, "семи")
    assert roster[1].status == "семи"


def test_set_status_rejects_unknown_status():
    roster = _roster()
    with pytest.raises(ValueError):
        roster.set_status(0, "admin")
    assert roster[0].status == "студ"


def test_set_status_rejects_missing_index():
    with pytest.raises(IndexError):
        _roster().set_status(5, "асс")


def test_search_empty_query_returns_all():
    assert search_directory(DIRECTORY, "") == list(DIRECTORY)


def test_search_ignores_case():
    found = search_directory(DIRECTORY, "иванов")
    assert [entry.fio_email for entry in found] == ["Иванов И.И., ivanov@example.com"]


def test_search_matches_email_domain():
    assert len(search_directory(DIRECTORY, "EXAMPLE.COM")) == len(DIRECTORY)


def test_search_without_match_is_empty():
    assert search_directory(DIRECTORY, "zzz") == []