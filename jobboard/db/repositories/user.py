"""
Репозиторий для работы с пользователями.

Наследует базовые CRUD операции и добавляет поиск по email.
"""

import logging

from jobboard.db.models import UserModel
from jobboard.db.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[UserModel]):
    model = UserModel

    async def get_by_email(self, email: str) -> UserModel | None:
        """
        Получает пользователя по email.

        Returns:
            UserModel или None если не найден
        """
        logger.debug("Get user by email=%s", email)
        return await self.get_one(email=email)
