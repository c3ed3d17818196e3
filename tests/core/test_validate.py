"""Field Validation: title and description shape rules.

Tests cover:
    - Title empty / too short / too long / bad characters
    - Title boundaries (3 and 200 characters) and the Cyrillic alphabet
    - Description upper bound (5000 ok, 5001 rejected), empty allowed
"""

import pytest

from taskboard.core.errors import TaskValidationError
from taskboard.core.validate import check_task_description, check_task_title


def test_empty_title_rejected():
    with pytest.raises(TaskValidationError) as exc:
        check_task_title("")
    assert "cannot be empty" in exc.value.message
    assert exc.value.field == "title"


def test_two_character_title_rejected():
    with pytest.raises(TaskValidationError, match="at least 3"):
        check_task_title("ab")


def test_three_character_title_accepted():
    check_task_title("abc")


def test_two_hundred_character_title_accepted():
    check_task_title("a" * 200)


def test_two_hundred_one_character_title_rejected():
    with pytest.raises(TaskValidationError, match="longer than 200"):
        check_task_title("a" * 201)


def test_length_counts_characters_not_bytes():
    # 200 Cyrillic letters are 400 bytes in UTF-8
    check_task_title("я" * 200)


@pytest.mark.parametrize("title", [
    "Buy milk",
    "Купить молоко",
    "Fix bug 1",
    "Really?! Yes, done.",
    "multi-word-title",
    "tabs\tand\nnewlines",
])
def test_allowed_alphabet(title):
    check_task_title(title)


@pytest.mark.parametrize("title", [
    "email@example",
    "path/to/file",
    "under_score",
    "semi;colon",
    "ёлка",  # outside the А-я range
    "non\u00a0breaking",
])
def test_disallowed_characters_rejected(title):
    with pytest.raises(TaskValidationError, match="invalid characters"):
        check_task_title(title)


def test_empty_description_accepted():
    check_task_description("")


def test_description_at_limit_accepted():
    check_task_description("x" * 5000)


def test_description_over_limit_rejected():
    with pytest.raises(TaskValidationError) as exc:
        check_task_description("x" * 5001)
    assert exc.value.field == "description"


def test_description_has_no_alphabet_restriction():
    check_task_description("anything @ # $ % goes here")
