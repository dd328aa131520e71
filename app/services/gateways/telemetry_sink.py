from typing import Optional, Protocol

from app.domain.blood_pressure import BPCategory, InvalidRelationshipError


class TelemetrySink(Protocol):
    def record(
        self,
        systolic: int,
        diastolic: int,
        category: Optional[BPCategory],
        error: Optional[InvalidRelationshipError],
    ) -> None:
        ...
