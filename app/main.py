"""FastAPI アプリケーションのメインエントリーポイント"""

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

from app.infrastructure.config import get_config
from app.infrastructure.logging_config import configure_logging, shutdown_logging
from app.middleware.logging import LoggingMiddleware
from app.router import router

# 環境変数を読み込み
load_dotenv()

config = get_config()
configure_logging(config)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # 終了時にキューに残ったログを送信
    shutdown_logging()


app = FastAPI(
    title="BP Calculator",
    version=config.app_version,
    description="Blood pressure category calculator",
    lifespan=lifespan,
)

app.add_middleware(LoggingMiddleware)

# ルーターを登録
app.include_router(router)

logging.getLogger(__name__).info("Blood Pressure Calculator application starting up")
