"""アプリケーション設定"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# プロジェクトルートの.envファイルを明示的に読み込み
project_root = Path(__file__).parent.parent.parent
env_path = project_root / ".env"
load_dotenv(env_path)

_TRUTHY = {"1", "true", "yes", "on"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


class AppConfig:
    """アプリケーション設定クラス"""

    def __init__(self):
        self.environment: str = os.getenv("ENVIRONMENT", "dev")
        self.app_version: str = os.getenv("APP_VERSION", "0.1.0")
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # CloudWatch Logs 設定
        self.cloudwatch_enabled: bool = _env_flag("CLOUDWATCH_ENABLED")
        self.cloudwatch_log_group: Optional[str] = os.getenv("CLOUDWATCH_LOG_GROUP", "bp-calculator-logs")
        self.cloudwatch_log_stream: str = os.getenv("CLOUDWATCH_LOG_STREAM", f"{self.environment}-app")
        self.aws_region: str = os.getenv("AWS_REGION", "eu-west-1")

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    def validate(self) -> bool:
        """設定の妥当性をチェック"""
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL環境変数の値が不正です。現在の値: {self.log_level}")
        if self.cloudwatch_enabled and not self.cloudwatch_log_group:
            raise ValueError("CLOUDWATCH_ENABLEDが有効ですが、CLOUDWATCH_LOG_GROUP環境変数が設定されていません。")
        return True


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """設定インスタンスを取得（初回のみ生成）"""
    config = AppConfig()
    config.validate()
    return config
