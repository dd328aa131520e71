"""血圧ドメインモデル"""

from dataclasses import dataclass
from enum import Enum

from app.domain.result import Result

# 入力フォームで許容する範囲 (mmHg)
SYSTOLIC_MIN = 70
SYSTOLIC_MAX = 190
DIASTOLIC_MIN = 40
DIASTOLIC_MAX = 100


class BPCategory(str, Enum):
    """血圧の分類"""
    LOW = "Low"
    IDEAL = "Ideal"
    PRE_HIGH = "PreHigh"
    HIGH = "High"


class InvalidRelationshipError(ValueError):
    """収縮期血圧が拡張期血圧以下の場合のエラー"""

    def __init__(self, systolic: int, diastolic: int):
        super().__init__("Systolic pressure must be greater than Diastolic pressure")
        self.systolic = systolic
        self.diastolic = diastolic

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidRelationshipError):
            return NotImplemented
        return (self.systolic, self.diastolic) == (other.systolic, other.diastolic)

    def __hash__(self) -> int:
        return hash((self.systolic, self.diastolic))


_LABELS = {
    BPCategory.LOW: "Low Blood Pressure",
    BPCategory.IDEAL: "Ideal Blood Pressure",
    BPCategory.PRE_HIGH: "Pre-High Blood Pressure",
    BPCategory.HIGH: "High Blood Pressure",
}

_EXPLANATIONS = {
    BPCategory.LOW: (
        "Your blood pressure is low. If you feel dizzy, faint or tired, "
        "consult your doctor."
    ),
    BPCategory.IDEAL: (
        "Your blood pressure is ideal. Keep up your healthy habits and "
        "check it regularly."
    ),
    BPCategory.PRE_HIGH: (
        "Your blood pressure is pre-high. Lifestyle changes such as less salt, "
        "regular exercise and less alcohol can help bring it down."
    ),
    BPCategory.HIGH: (
        "Your blood pressure is high. Please consult your doctor about "
        "treatment options."
    ),
}

_FALLBACK_EXPLANATION = "Blood pressure category could not be determined."


def classify(systolic: int, diastolic: int) -> Result[BPCategory, InvalidRelationshipError]:
    """
    収縮期/拡張期の値から血圧の分類を判定する

    範囲 (70-190 / 40-100) のチェックは呼び出し側の責務で、ここでは
    収縮期 > 拡張期 の関係のみ検証する。判定の順序は固定で、
    High は Pre-High より先に評価する。

    Args:
        systolic: 収縮期血圧 (mmHg)
        diastolic: 拡張期血圧 (mmHg)

    Returns:
        分類、または InvalidRelationshipError を保持する Result
    """
    if systolic <= diastolic:
        return Result.err(InvalidRelationshipError(systolic, diastolic))

    if systolic < 90 or diastolic < 60:
        return Result.ok(BPCategory.LOW)

    if 90 <= systolic <= 120 and 60 <= diastolic <= 80:
        return Result.ok(BPCategory.IDEAL)

    if systolic > 140 or diastolic > 90:
        return Result.ok(BPCategory.HIGH)

    # Ideal と High の間は全て Pre-High
    return Result.ok(BPCategory.PRE_HIGH)


def explain(category: BPCategory) -> str:
    """分類ごとの説明文を返す"""
    return _EXPLANATIONS.get(category, _FALLBACK_EXPLANATION)


def label(category: BPCategory) -> str:
    """画面表示用のラベルを返す"""
    return _LABELS.get(category, str(getattr(category, "value", category)))


@dataclass(frozen=True)
class BloodPressure:
    """血圧測定値ドメインモデル"""
    systolic: int   # mmHg
    diastolic: int  # mmHg

    def category(self) -> Result[BPCategory, InvalidRelationshipError]:
        """この測定値の分類"""
        return classify(self.systolic, self.diastolic)

    def is_within_range(self) -> bool:
        """入力フォームの許容範囲内かどうか"""
        return (
            SYSTOLIC_MIN <= self.systolic <= SYSTOLIC_MAX and
            DIASTOLIC_MIN <= self.diastolic <= DIASTOLIC_MAX
        )

    def to_dict(self) -> dict:
        return {"systolic": self.systolic, "diastolic": self.diastolic}
