"""判定結果をログに記録するテレメトリ"""

import logging
from typing import Optional

from app.domain.blood_pressure import BPCategory, InvalidRelationshipError
from app.services.gateways.telemetry_sink import TelemetrySink


class LoggingTelemetrySink(TelemetrySink):
    """判定1回ごとに構造化されたログレコードを1件出力する"""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger("app.telemetry")

    def record(
        self,
        systolic: int,
        diastolic: int,
        category: Optional[BPCategory],
        error: Optional[InvalidRelationshipError],
    ) -> None:
        fields = {
            "systolic": systolic,
            "diastolic": diastolic,
            "category": category.value if category is not None else None,
            "error": str(error) if error is not None else None,
        }
        if error is not None:
            self._logger.warning(
                "BP validation failed: Systolic=%s not greater than Diastolic=%s",
                systolic, diastolic,
                extra=fields,
            )
        else:
            self._logger.info(
                "BP calculation successful: Systolic=%s, Diastolic=%s, Result=%s",
                systolic, diastolic, fields["category"],
                extra=fields,
            )
