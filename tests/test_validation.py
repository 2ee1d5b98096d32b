"""Validation primitive tests."""

from datetime import UTC, datetime, timedelta

import pytest

from inventory.exceptions import IntegrityError, InvalidArgumentError, ValidationError
from inventory.services import validation

NOW = datetime(2024, 1, 1, tzinfo=UTC)


@pytest.mark.parametrize("value", [0, 1, 42])
def test_check_id_accepts_non_negative_integers(value):
    assert validation.check_id(value) == value
    assert validation.is_valid_id(value)


@pytest.mark.parametrize("value", [-1, 1.0, "1", None, True, False])
def test_check_id_rejects(value):
    with pytest.raises(InvalidArgumentError):
        validation.check_id(value)
    assert not validation.is_valid_id(value)


def test_check_id_uses_given_error_class():
    with pytest.raises(IntegrityError, match="item 3: id: was < 0"):
        validation.check_id(-5, "item 3: id", IntegrityError)


@pytest.mark.parametrize("value", [0, -1, 2.5, "3", None, True])
def test_check_count_rejects(value):
    with pytest.raises(ValidationError):
        validation.check_count(value)


def test_check_count_accepts_one():
    assert validation.check_count(1) == 1


@pytest.mark.parametrize(
    ("value", "message"),
    [(None, "is missing"), (3, "not a string"), (["a"], "not a string"), ("", "was empty")],
)
def test_check_non_empty_string_rejects(value, message):
    with pytest.raises(ValidationError, match=message):
        validation.check_non_empty_string(value)


def test_check_non_empty_string_keeps_whitespace():
    assert validation.check_non_empty_string(" ") == " "


def test_check_timestamps():
    validation.check_timestamps(NOW, NOW, "category 0")
    validation.check_timestamps(NOW, NOW + timedelta(seconds=1), "category 0")

    with pytest.raises(ValidationError, match="created_at is later than modified_at"):
        validation.check_timestamps(NOW + timedelta(seconds=1), NOW, "category 0")
    with pytest.raises(ValidationError, match="modified_at not a timezone-aware datetime"):
        validation.check_timestamps(NOW, datetime(2024, 1, 1), "category 0")
    with pytest.raises(ValidationError, match="created_at not a timezone-aware datetime"):
        validation.check_timestamps("2024-01-01", NOW, "category 0")


def test_check_sequence():
    assert validation.check_sequence((1, 2), "category_ids") == [1, 2]
    with pytest.raises(ValidationError):
        validation.check_sequence("12", "category_ids")
    with pytest.raises(ValidationError):
        validation.check_sequence(5, "category_ids")


def test_check_mapping_copies():
    original = {"name": "Books"}
    copied = validation.check_mapping(original)
    assert copied == original
    assert copied is not original

    with pytest.raises(InvalidArgumentError, match="payload: not an object"):
        validation.check_mapping(["name"])
