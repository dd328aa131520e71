"""Tests for the Result type in `app/domain/result.py`."""

import pytest

from app.domain.blood_pressure import BPCategory, InvalidRelationshipError
from app.domain.result import Result


def test_ok_holds_category() -> None:
    result = Result.ok(BPCategory.IDEAL)
    assert result.is_ok()
    assert not result.is_err()
    assert result.unwrap() == BPCategory.IDEAL
    assert result.error is None


def test_err_holds_relationship_error() -> None:
    error = InvalidRelationshipError(80, 90)
    result = Result.err(error)
    assert result.is_err()
    assert result.value is None
    assert result.unwrap_err() is error


def test_unwrap_on_error_raises_the_stored_error() -> None:
    with pytest.raises(InvalidRelationshipError, match="greater than"):
        Result.err(InvalidRelationshipError(100, 100)).unwrap()


def test_unwrap_err_on_value_raises() -> None:
    with pytest.raises(ValueError, match="holds a value"):
        Result.ok(BPCategory.HIGH).unwrap_err()


@pytest.mark.parametrize(
    "kwargs",
    [{}, {"value": BPCategory.LOW, "error": InvalidRelationshipError(80, 90)}],
)
def test_exactly_one_of_value_or_error(kwargs: dict) -> None:
    with pytest.raises(ValueError, match="exactly one"):
        Result(**kwargs)


def test_results_compare_by_content() -> None:
    assert Result.ok(BPCategory.LOW) == Result.ok(BPCategory.LOW)
    assert Result.ok(BPCategory.LOW) != Result.ok(BPCategory.HIGH)
    assert Result.err(InvalidRelationshipError(80, 90)) == Result.err(InvalidRelationshipError(80, 90))
