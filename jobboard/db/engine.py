"""
Конфигурация подключения к БД.

Создаёт engine и session_factory для SQLAlchemy.
Используется в DI провайдерах для инжекта сессии.
"""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from jobboard.settings import app_settings

engine = create_async_engine(
    app_settings.DB.db_url,
    echo=app_settings.DB.ECHO,
)

# expire_on_commit=False: объекты остаются доступны после commit,
# сервис собирает ответ уже после выхода из транзакции
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)
