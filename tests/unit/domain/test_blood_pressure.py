"""
Tests for the blood pressure classifier in `app/domain/blood_pressure.py`.

Covers:
- Category boundaries (inclusive Ideal bounds, High checked before Pre-High)
- Invalid systolic/diastolic relationship
- Explanation and label lookups
- Properties over arbitrary integer readings
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from app.domain.blood_pressure import (
    BloodPressure,
    BPCategory,
    InvalidRelationshipError,
    classify,
    explain,
    label,
)


class TestClassify:
    """Boundary scenarios from the reference chart."""

    @pytest.mark.parametrize(
        ("systolic", "diastolic", "expected"),
        [
            (85, 55, BPCategory.LOW),
            (100, 55, BPCategory.LOW),
            (89, 70, BPCategory.LOW),
            (90, 60, BPCategory.IDEAL),
            (120, 80, BPCategory.IDEAL),
            (115, 75, BPCategory.IDEAL),
            (121, 75, BPCategory.PRE_HIGH),
            (130, 75, BPCategory.PRE_HIGH),
            (115, 85, BPCategory.PRE_HIGH),
            (140, 90, BPCategory.PRE_HIGH),
            (141, 90, BPCategory.HIGH),
            (140, 91, BPCategory.HIGH),
            (150, 95, BPCategory.HIGH),
            (141, 70, BPCategory.HIGH),
        ],
    )
    def test_classify_returns_expected_category(
        self, systolic: int, diastolic: int, expected: BPCategory
    ) -> None:
        result = classify(systolic, diastolic)
        assert result.is_ok()
        assert result.unwrap() == expected

    @pytest.mark.parametrize(("systolic", "diastolic"), [(100, 100), (80, 90), (70, 100)])
    def test_classify_rejects_systolic_not_greater_than_diastolic(
        self, systolic: int, diastolic: int
    ) -> None:
        result = classify(systolic, diastolic)
        assert result.is_err()
        error = result.unwrap_err()
        assert isinstance(error, InvalidRelationshipError)
        assert error.systolic == systolic
        assert error.diastolic == diastolic
        assert "greater than" in str(error)

    def test_unwrap_on_invalid_reading_raises(self) -> None:
        with pytest.raises(InvalidRelationshipError):
            classify(100, 100).unwrap()

    def test_out_of_range_reading_is_still_classified(self) -> None:
        assert classify(500, 10).unwrap() == BPCategory.LOW
        assert classify(500, 95).unwrap() == BPCategory.HIGH

    def test_ideal_reading_explanation(self) -> None:
        text = explain(classify(115, 75).unwrap()).lower()
        assert "ideal" in text
        assert "healthy" in text

    def test_high_reading_explanation(self) -> None:
        text = explain(classify(150, 95).unwrap()).lower()
        assert "high" in text
        assert "consult" in text


class TestClassifyProperties:
    """Property-based checks over arbitrary integers."""

    @given(systolic=st.integers(min_value=-1000, max_value=1000), offset=st.integers(min_value=0, max_value=500))
    def test_non_greater_systolic_is_always_an_error(self, systolic: int, offset: int) -> None:
        result = classify(systolic, systolic + offset)
        assert result.is_err()
        assert result.value is None

    @given(diastolic=st.integers(min_value=-1000, max_value=1000), offset=st.integers(min_value=1, max_value=500))
    def test_valid_relationship_always_gets_one_category(self, diastolic: int, offset: int) -> None:
        result = classify(diastolic + offset, diastolic)
        assert result.is_ok()
        assert result.unwrap() in set(BPCategory)

    @given(systolic=st.integers(min_value=0, max_value=300), diastolic=st.integers(min_value=0, max_value=300))
    def test_classify_is_idempotent(self, systolic: int, diastolic: int) -> None:
        assert classify(systolic, diastolic) == classify(systolic, diastolic)


class TestExplain:
    """Explanation and label lookups."""

    @pytest.mark.parametrize(
        ("category", "words"),
        [
            (BPCategory.LOW, ("low", "consult")),
            (BPCategory.IDEAL, ("ideal", "healthy")),
            (BPCategory.PRE_HIGH, ("pre-high", "lifestyle")),
            (BPCategory.HIGH, ("high", "consult")),
        ],
    )
    def test_explanation_mentions_category_advice(self, category: BPCategory, words: tuple) -> None:
        text = explain(category).lower()
        for word in words:
            assert word in text

    @pytest.mark.parametrize("category", list(BPCategory))
    def test_explanation_is_non_empty_and_stable(self, category: BPCategory) -> None:
        assert explain(category).strip()
        assert explain(category) == explain(category)

    def test_unknown_category_gets_fallback_explanation(self) -> None:
        assert explain("Unknown").strip()  # type: ignore[arg-type]

    def test_labels(self) -> None:
        assert label(BPCategory.LOW) == "Low Blood Pressure"
        assert label(BPCategory.IDEAL) == "Ideal Blood Pressure"
        assert label(BPCategory.PRE_HIGH) == "Pre-High Blood Pressure"
        assert label(BPCategory.HIGH) == "High Blood Pressure"


class TestBloodPressure:
    """The reading value object."""

    def test_invalid_reading_can_be_constructed(self) -> None:
        reading = BloodPressure(systolic=80, diastolic=90)
        assert reading.category().is_err()

    def test_category_delegates_to_classify(self) -> None:
        reading = BloodPressure(systolic=130, diastolic=75)
        assert reading.category().unwrap() == BPCategory.PRE_HIGH

    @pytest.mark.parametrize(
        ("systolic", "diastolic", "expected"),
        [(70, 40, True), (190, 100, True), (69, 50, False), (191, 50, False), (120, 39, False), (120, 101, False)],
    )
    def test_is_within_range(self, systolic: int, diastolic: int, expected: bool) -> None:
        assert BloodPressure(systolic, diastolic).is_within_range() is expected

    def test_to_dict(self) -> None:
        assert BloodPressure(120, 80).to_dict() == {"systolic": 120, "diastolic": 80}
