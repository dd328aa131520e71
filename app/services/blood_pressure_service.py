"""血圧判定に関連するアプリケーションサービス"""

from dataclasses import dataclass

from app.domain.blood_pressure import (
    BloodPressure,
    BPCategory,
    InvalidRelationshipError,
    explain,
    label,
)
from app.domain.result import Result
from app.services.gateways.telemetry_sink import TelemetrySink


@dataclass(frozen=True)
class Assessment:
    """判定結果"""
    reading: BloodPressure
    category: BPCategory
    label: str
    explanation: str

    def to_dict(self) -> dict:
        return {
            "systolic": self.reading.systolic,
            "diastolic": self.reading.diastolic,
            "category": self.category.value,
            "label": self.label,
            "explanation": self.explanation,
        }


class BloodPressureService:
    """血圧判定のユースケースを扱うサービス"""

    def __init__(self, telemetry: TelemetrySink):
        """
        Args:
            telemetry: 判定結果を記録するゲートウェイインスタンス
        """
        self._telemetry = telemetry

    def calculate(self, systolic: int, diastolic: int) -> Result[Assessment, InvalidRelationshipError]:
        """
        測定値を判定し、結果をテレメトリに記録する

        Returns:
            Assessment、または InvalidRelationshipError を保持する Result
        """
        reading = BloodPressure(systolic=systolic, diastolic=diastolic)
        result = reading.category()

        if result.is_err():
            error = result.unwrap_err()
            self._telemetry.record(systolic, diastolic, None, error)
            return Result.err(error)

        category = result.unwrap()
        self._telemetry.record(systolic, diastolic, category, None)
        return Result.ok(Assessment(
            reading=reading,
            category=category,
            label=label(category),
            explanation=explain(category),
        ))
