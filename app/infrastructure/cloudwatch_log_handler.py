"""CloudWatch Logs へログを送信する logging ハンドラ"""

import logging
import threading
from typing import Any, Optional

import boto3
from botocore.exceptions import ClientError

# 送信処理そのものがログを出すライブラリ（送信対象にすると無限ループになる）
AWS_CLIENT_LOGGERS = ("boto3", "botocore", "urllib3", "s3transfer")


def _is_aws_client_logger(name: str) -> bool:
    return any(name == prefix or name.startswith(prefix + ".") for prefix in AWS_CLIENT_LOGGERS)


class CloudWatchLogHandler(logging.Handler):
    """1レコードごとに put_log_events で CloudWatch Logs に送信する薄いハンドラ"""

    def __init__(
        self,
        log_group: str,
        log_stream: str,
        region: str = "eu-west-1",
        client: Optional[Any] = None,
        level: int = logging.NOTSET,
    ) -> None:
        super().__init__(level)
        self.log_group = log_group
        self.log_stream = log_stream
        self._client = client or boto3.client("logs", region_name=region)
        self._stream_ready = False
        self._local = threading.local()
        self.addFilter(self.accepts)

    def is_sending(self) -> bool:
        """現在のスレッドで送信処理中かどうか"""
        return getattr(self._local, "sending", False)

    def accepts(self, record: logging.LogRecord) -> bool:
        """
        送信対象のレコードかどうか

        送信処理中に同じスレッドで出たログと AWS クライアント自身のログは送らない。
        """
        if self.is_sending():
            return False
        return not _is_aws_client_logger(record.name)

    def _ensure_stream(self) -> None:
        """ログストリームを作成（既に存在する場合はそのまま使う）"""
        if self._stream_ready:
            return
        try:
            self._client.create_log_stream(
                logGroupName=self.log_group,
                logStreamName=self.log_stream,
            )
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") != "ResourceAlreadyExistsException":
                raise
        self._stream_ready = True

    def emit(self, record: logging.LogRecord) -> None:
        self._local.sending = True
        try:
            message = self.format(record)
            self._ensure_stream()
            self._client.put_log_events(
                logGroupName=self.log_group,
                logStreamName=self.log_stream,
                logEvents=[{
                    "timestamp": int(record.created * 1000),
                    "message": message,
                }],
            )
        except Exception:
            self.handleError(record)
        finally:
            self._local.sending = False
