"""API仕様とPydanticモデル定義"""

from typing import Dict, List, Optional, Literal

from pydantic import BaseModel, Field, ValidationError

from app.domain.blood_pressure import (
    DIASTOLIC_MAX,
    DIASTOLIC_MIN,
    SYSTOLIC_MAX,
    SYSTOLIC_MIN,
)


class HealthResponse(BaseModel):
    """ヘルスチェックレスポンス"""
    status: str = Field(..., description="サービスの状態", examples=["healthy"])
    version: str = Field(..., description="APIのバージョン", examples=["0.1.0"])


class ClassifyRequest(BaseModel):
    """血圧判定リクエスト（範囲外の値はここで弾く）"""
    systolic: int = Field(
        ...,
        ge=SYSTOLIC_MIN,
        le=SYSTOLIC_MAX,
        description="収縮期血圧 (mmHg)",
        examples=[115],
    )
    diastolic: int = Field(
        ...,
        ge=DIASTOLIC_MIN,
        le=DIASTOLIC_MAX,
        description="拡張期血圧 (mmHg)",
        examples=[75],
    )


class ClassifyResponse(BaseModel):
    """血圧判定レスポンス"""
    success: bool = Field(..., description="処理の成功/失敗")
    systolic: int = Field(..., description="収縮期血圧 (mmHg)")
    diastolic: int = Field(..., description="拡張期血圧 (mmHg)")
    category: Optional[Literal["Low", "Ideal", "PreHigh", "High"]] = Field(None, description="分類")
    label: Optional[str] = Field(None, description="表示用ラベル", examples=["Ideal Blood Pressure"])
    explanation: Optional[str] = Field(None, description="分類の説明文")
    error: Optional[str] = Field(None, description="エラーメッセージ（失敗時のみ）")


# フォームの項目ごとのエラーメッセージ
FORM_ERROR_MESSAGES = {
    "systolic": "Invalid Systolic Value",
    "diastolic": "Invalid Diastolic Value",
}


def form_errors(exc: ValidationError) -> Dict[str, List[str]]:
    """ValidationError をフォーム項目ごとのメッセージに変換"""
    errors: Dict[str, List[str]] = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err.get("loc") else ""
        message = FORM_ERROR_MESSAGES.get(field, err.get("msg", "Invalid value"))
        messages = errors.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return errors
