import pytest

from rubrdesk.grades import SUBJECTS, Subject, average_text, grades_text


def test_first_subject_grades_text():
    assert grades_text(SUBJECTS[0]) == "4.00, 3.50, 4.50"


def test_average_text_rounds_to_two_decimals():
    informatics = next(s for s in SUBJECTS if s.name == "Информатика")
    assert average_text(informatics) == "4.83"


@pytest.mark.parametrize("subject", SUBJECTS, ids=lambda s: s.name)
def test_grades_text_shows_first_three_grades(subject):
    parts = grades_text(subject).split(", ")
    assert len(parts) == 3
    for part, grade in zip(parts, subject.grades):
        assert len(part.split(".")[1]) == 2
        assert float(part) == pytest.approx(grade)


@pytest.mark.parametrize("subject", SUBJECTS, ids=lambda s: s.name)
def test_average_text_is_close_to_average(subject):
    text = average_text(subject)
    assert len(text.split(".")[1]) == 2
    assert abs(float(text) - subject.average) <= 0.005


def test_too_few_grades_raise():
    subject = Subject("Пусто", (4.0, 5.0), 4.5, "")
    with pytest.raises(ValueError):
        grades_text(subject)


def test_first_two_subjects_averages():
    assert [s.name for s in SUBJECTS][:2] == ["Математика", "Физика"]
    assert [average_text(s) for s in SUBJECTS[:2]] == ["4.00", "3.50"]
    assert all(subject.details.startswith("Оценки: ") for subject in SUBJECTS)