"""
Модуль для работы с базой данных.

Содержит:
- engine.py — подключение к БД
- uow.py — единица работы (границы транзакции)
- models/ — ORM модели SQLAlchemy
- repositories/ — репозитории для доступа к данным
"""

from jobboard.db.engine import async_session_factory, engine
from jobboard.db.uow import UnitOfWork

__all__ = [
    "engine",
    "async_session_factory",
    "UnitOfWork",
]
