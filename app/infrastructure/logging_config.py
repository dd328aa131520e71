"""ロギングの初期設定"""

import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import Any, Optional

from app.infrastructure.cloudwatch_log_handler import CloudWatchLogHandler
from app.infrastructure.config import AppConfig

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# CloudWatch への送信を担当するバックグラウンドのリスナー
_listener: Optional[QueueListener] = None


def configure_logging(config: AppConfig, cloudwatch_client: Optional[Any] = None) -> logging.Logger:
    """
    ルートロガーにハンドラを設定する

    標準出力へのハンドラは常に追加する。CLOUDWATCH_ENABLED が有効な場合は
    CloudWatch Logs ハンドラを QueueHandler の後ろに置き、送信は
    QueueListener のスレッドで行う（リクエスト処理側では通信しない）。
    複数回呼ばれても以前の設定を置き換える。

    Args:
        config: アプリケーション設定
        cloudwatch_client: CloudWatch Logs クライアント（省略時は boto3 で生成）

    Returns:
        設定済みのルートロガー
    """
    global _listener

    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_bp_calculator", False):
            root.removeHandler(handler)
            handler.close()
    shutdown_logging()

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    console._bp_calculator = True  # type: ignore[attr-defined]
    root.addHandler(console)

    if config.cloudwatch_enabled:
        cloudwatch = CloudWatchLogHandler(
            log_group=config.cloudwatch_log_group,
            log_stream=config.cloudwatch_log_stream,
            region=config.aws_region,
            client=cloudwatch_client,
        )
        cloudwatch.setFormatter(formatter)

        log_queue: "queue.Queue[logging.LogRecord]" = queue.Queue(-1)
        queued = QueueHandler(log_queue)
        queued.addFilter(cloudwatch.accepts)
        queued._bp_calculator = True  # type: ignore[attr-defined]
        root.addHandler(queued)

        _listener = QueueListener(log_queue, cloudwatch, respect_handler_level=True)
        _listener.start()

    root.setLevel(config.log_level_value)
    logging.getLogger("botocore").setLevel(logging.WARNING)
    return root


def shutdown_logging() -> None:
    """キューに残ったレコードを送信してリスナーを停止する"""
    global _listener

    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, QueueHandler) and getattr(handler, "_bp_calculator", False):
            root.removeHandler(handler)

    if _listener is None:
        return
    listener, _listener = _listener, None
    listener.stop()
    for handler in listener.handlers:
        handler.close()
