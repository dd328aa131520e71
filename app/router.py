"""全てのルーティングを管理"""

import logging
from pathlib import Path

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from app.domain.blood_pressure import (
    DIASTOLIC_MAX,
    DIASTOLIC_MIN,
    SYSTOLIC_MAX,
    SYSTOLIC_MIN,
)
from app.infrastructure.config import get_config
from app.infrastructure.logging_telemetry import LoggingTelemetrySink
from app.services.blood_pressure_service import BloodPressureService
from app.spec import ClassifyRequest, ClassifyResponse, HealthResponse, form_errors

router = APIRouter()
logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

# 初期表示の値
DEFAULT_SYSTOLIC = 100
DEFAULT_DIASTOLIC = 60

RELATIONSHIP_MESSAGE = "Systolic must be greater than Diastolic"


def _to_int(value: str):
    try:
        return int(value)
    except ValueError:
        return None


def _render_form(request: Request, systolic, diastolic, errors=None, assessment=None):
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "systolic": systolic,
            "diastolic": diastolic,
            "systolic_min": SYSTOLIC_MIN,
            "systolic_max": SYSTOLIC_MAX,
            "diastolic_min": DIASTOLIC_MIN,
            "diastolic_max": DIASTOLIC_MAX,
            "errors": errors or {},
            "assessment": assessment,
        },
    )


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """血圧入力フォーム"""
    logger.info("BP Calculator page accessed")
    return _render_form(request, DEFAULT_SYSTOLIC, DEFAULT_DIASTOLIC)


@router.post("/", response_class=HTMLResponse)
async def submit(request: Request, systolic: str = Form(""), diastolic: str = Form("")):
    """
    フォーム送信

    範囲チェックはここで行い、範囲内の値だけを判定サービスに渡す。
    範囲外の場合も大小関係はチェックしてメッセージを出す。
    """
    logger.info(f"BP calculation requested: Systolic={systolic}, Diastolic={diastolic}")

    try:
        reading = ClassifyRequest(systolic=systolic, diastolic=diastolic)
    except ValidationError as e:
        errors = form_errors(e)
        logger.warning(f"BP range validation failed: {errors}")

        # 範囲外でも、両方が整数なら大小関係のエラーも合わせて表示する
        s, d = _to_int(systolic), _to_int(diastolic)
        if s is not None and d is not None and s <= d:
            logger.warning(f"BP validation failed: Systolic={s} not greater than Diastolic={d}")
            errors.setdefault("", []).append(RELATIONSHIP_MESSAGE)
        return _render_form(request, systolic, diastolic, errors=errors)

    # 依存性注入：インフラ層をアプリケーションサービスに注入
    service = BloodPressureService(LoggingTelemetrySink())
    result = service.calculate(reading.systolic, reading.diastolic)

    if result.is_err():
        return _render_form(
            request,
            reading.systolic,
            reading.diastolic,
            errors={"": [RELATIONSHIP_MESSAGE]},
        )

    return _render_form(request, reading.systolic, reading.diastolic, assessment=result.unwrap())


@router.post("/api/classify", response_model=ClassifyResponse)
async def classify_reading(request: ClassifyRequest):
    """
    血圧判定API

    収縮期/拡張期の値から分類と説明文を返す。
    """
    try:
        service = BloodPressureService(LoggingTelemetrySink())
        result = service.calculate(request.systolic, request.diastolic)

        if result.is_err():
            return ClassifyResponse(
                success=False,
                systolic=request.systolic,
                diastolic=request.diastolic,
                error=str(result.unwrap_err()),
            )

        return ClassifyResponse(success=True, **result.unwrap().to_dict())
    except Exception as e:
        # 予期せぬエラーが発生した場合のフォールバック
        logger.exception(
            f"BP calculation error: Systolic={request.systolic}, Diastolic={request.diastolic}"
        )
        return ClassifyResponse(
            success=False,
            systolic=request.systolic,
            diastolic=request.diastolic,
            error=f"Internal server error: {str(e)}",
        )


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """ヘルスチェックエンドポイント"""
    return {"status": "healthy", "version": get_config().app_version}
