import pytest

from rubrdesk.app import DEFAULT_PAGE, main, page_names


def test_page_names_are_unique_and_include_default():
    names = page_names()
    assert len(names) == len(set(names))
    assert DEFAULT_PAGE in names


def test_page_names_cover_group_users():
    assert "group-users" in page_names()


def test_list_prints_every_page(capsys):
    assert main(["--list"]) == 0
    printed = capsys.readouterr().out.split()
    assert printed == page_names()


def test_unknown_page_is_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["no-such-page"])
    assert excinfo.value.code == 2