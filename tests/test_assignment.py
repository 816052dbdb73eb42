from datetime import datetime

import pytest

from rubrdesk.assignment import (
    NO_FILE,
    NOT_SUBMITTED,
    Assignment,
    MissingFile,
    is_allowed_file,
)
from rubrdesk.deadline import format_deadline


def test_fresh_assignment_texts():
    work = Assignment()
    assert work.submission_text() == "Не сдано"
    assert work.file_text() == "Файл не прикреплён"


def test_default_deadline_and_title():
    work = Assignment()
    assert format_deadline(work.deadline) == "20.06.2025 00:00"
    assert work.title == "НАЗВАНИЕ РАБОТЫ"
    assert work.description.count("ОПИСАНИЕ") == 8


def test_submit_without_file_raises():
    work = Assignment()
    with pytest.raises(MissingFile):
        work.submit(datetime(2025, 6, 1, 12, 30))
    assert work.submission is None
    assert work.submission_text() == NOT_SUBMITTED


def test_attach_shows_path():
    work = Assignment()
    assert work.attach("/tmp/report.pdf") == "/tmp/report.pdf"
    assert work.file_text() == "/tmp/report.pdf"


def test_first_submit_records_time():
    work = Assignment()
    work.attach("report.pdf")
    moment = datetime(2025, 6, 1, 12, 30)
    assert work.submit(moment) is True
    assert work.submission == moment
    assert work.submission_text() == format_deadline(moment)


def test_resubmit_keeps_first_time():
    work = Assignment()
    work.attach("a.txt")
    first = datetime(2025, 6, 1, 9, 0)
    work.submit(first)
    work.attach("b.txt")
    assert work.submit(datetime(2025, 6, 2, 10, 0)) is False
    assert work.submission == first
    assert work.file_text() == "b.txt"


def test_file_text_falls_back_after_clearing():
    work = Assignment()
    work.attach("")
    assert work.file_text() == NO_FILE


@pytest.mark.parametrize(
    "path", ["notes.txt", "paper.pdf", "essay.docx", "bundle.zip", "bundle.rar", "X.PDF"]
)
def test_allowed_files(path):
    assert is_allowed_file(path) is True


@pytest.mark.parametrize("path", ["image.png", "script.py", "noext", "archive.tar.gz"])
def test_rejected_files(path):
    assert is_allowed_file(path) is False