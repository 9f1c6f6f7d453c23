"""
Точка входа.

Настраивает логирование и создаёт таблицы в пустой базе.
Миграции схемы сюда не входят: create_all не трогает существующие таблицы.

Запуск:
    python -m jobboard.main
"""

import asyncio
import logging

from jobboard.common import setup_logging
from jobboard.db import engine
from jobboard.db.models import BaseModel
from jobboard.settings import app_settings

logger = logging.getLogger(__name__)


async def init_db() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)
    logger.info("Database schema is ready: tables=%s", sorted(BaseModel.metadata.tables))


async def main() -> None:
    try:
        await init_db()
    finally:
        await engine.dispose()


if __name__ == "__main__":
    setup_logging(app_settings.LOG_LEVEL)
    asyncio.run(main())
