import pytest

from rubrdesk.main_criteria import MainCriteriaForm, ScoreDescription, format_score


def test_initial_groups_and_criteria():
    form = MainCriteriaForm()
    assert form.groups == ["Группа 1", "Группа 2"]
    assert form.criteria == ["Критерий А", "Критерий Б"]
    assert form.weight == "1.0"


def test_initial_scores_are_blank_and_ordered():
    form = MainCriteriaForm()
    assert [entry.score for entry in form.scores] == [0.0, 0.25, 0.5, 0.75, 1.0]
    assert all(entry.is_blank for entry in form.scores)


def test_format_score_two_decimals():
    assert format_score(0.25) == "0.25"
    assert format_score(1.0) == "1.00"


def test_add_and_remove_group():
    form = MainCriteriaForm()
    form.add_group()
    assert form.groups[-1] == ""
    assert len(form.groups) == 3
    assert form.remove_last_group() == ""
    assert form.remove_last_group() == "Группа 2"
    assert form.groups == ["Группа 1"]


def test_remove_from_empty_lists_is_noop():
    form = MainCriteriaForm(groups=[], criteria=[])
    assert form.remove_last_group() is None
    assert form.remove_last_criterion() is None
    assert form.groups == []
    assert form.criteria == []


def test_rename_group_and_criterion():
    form = MainCriteriaForm()
    form.rename_group(1, "Б-01")
    form.add_criterion()
    form.rename_criterion(2, "Оформление")
    assert form.groups == ["Группа 1", "Б-01"]
    assert form.criteria == ["Критерий А", "Критерий Б", "Оформление"]


def test_rename_out_of_range_raises():
    form = MainCriteriaForm()
    with pytest.raises(IndexError):
        form.rename_group(5, "x")


def test_describe_score_updates_entry():
    form = MainCriteriaForm()
    updated = form.describe_score(0.5, "половина")
    assert updated == ScoreDescription(0.5, "половина")
    assert not form.scores[2].is_blank


def test_describe_unknown_score_raises():
    form = MainCriteriaForm()
    with pytest.raises(ValueError):
        form.describe_score(0.3, "x")


def test_summary_lines():
    form = MainCriteriaForm()
    form.describe_score(0.75, "почти")
    lines = form.summary_lines()
    assert lines[0] == "Кнопка 'Создать' нажата. Сохраняем все данные."
    assert lines[1] == "Текущий вес: 1.0"
    assert "Описания оценок:" in lines
    assert "  0.75: 'почти'" in lines
    assert "  0.00: ''" in lines
    assert len(lines) == 5 + len(form.scores)


def test_forms_do_not_share_state():
    first = MainCriteriaForm()
    second = MainCriteriaForm()
    first.add_group()
    first.describe_score(1.0, "всё")
    assert len(second.groups) == 2
    assert second.scores[-1].is_blank