import pytest

from rubrdesk.rubric_builder import (
    CriteriaGroup,
    NoGroupSelected,
    RubricBuilder,
    score_field_labels,
)


def test_default_groups_match_source_data():
    builder = RubricBuilder()
    assert [group.name for group in builder.groups] == ["Группа 1", "Группа 2"]


def test_no_selection_gives_no_criteria():
    assert RubricBuilder().criteria() == []


def test_selecting_group_shows_its_criteria():
    builder = RubricBuilder()
    builder.select_group(1)
    assert builder.criteria() == ["Критерий 2.1", "Критерий 2.2"]


def test_select_out_of_range_raises():
    builder = RubricBuilder()
    with pytest.raises(IndexError):
        builder.select_group(len(builder.groups))
    with pytest.raises(IndexError):
        builder.select_group(-1)
    assert builder.selected is None


def test_add_criterion_without_selection_raises():
    builder = RubricBuilder()
    with pytest.raises(NoGroupSelected):
        builder.add_criterion("Новый")


def test_add_criterion_appends_to_selected_group():
    builder = RubricBuilder()
    builder.select_group(0)
    builder.add_criterion("Оформление")
    assert builder.criteria()[-1] == "Оформление"
    assert builder.groups[1].criteria == ["Критерий 2.1", "Критерий 2.2"]


def test_empty_names_are_ignored():
    builder = RubricBuilder()
    before = len(builder.groups)
    assert builder.add_group("") is None
    assert len(builder.groups) == before
    builder.select_group(0)
    count = len(builder.criteria())
    assert builder.add_criterion("") is None
    assert len(builder.criteria()) == count


def test_new_group_starts_without_criteria():
    builder = RubricBuilder(groups=[])
    group = builder.add_group("Группа 3")
    assert group == CriteriaGroup("Группа 3", [])
    builder.select_group(0)
    assert builder.criteria() == []


def test_criteria_returns_a_copy():
    builder = RubricBuilder()
    builder.select_group(0)
    listed = builder.criteria()
    listed.append("лишний")
    assert "лишний" not in builder.criteria()


def test_score_field_labels_shape():
    fields = score_field_labels()
    assert fields[0] == ("Оценка 0.00", "Комментарий для 0.00")
    assert fields[-1] == ("Вес", "Вес критерия")
    for label, hint in fields[:-1]:
        assert label.split()[-1] == hint.split()[-1]
    assert len({label for label, _hint in fields}) == len(fields)