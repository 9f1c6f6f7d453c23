"""
Базовый репозиторий для работы с БД.

Каждый конкретный репозиторий наследуется от BaseRepository,
указывает свою ORM модель и оборачивает ровно одну таблицу.
Репозитории не открывают транзакции сами: границы задаёт
UnitOfWork, который выдаёт transaction().
"""

import logging
from typing import Generic, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.db.models.base import BaseModel
from jobboard.db.uow import UnitOfWork

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseRepository(Generic[ModelT]):
    """
    Базовый репозиторий с типовыми CRUD операциями.

    Attributes:
        model: Класс ORM модели (указывается в наследнике)
        session: AsyncSession для работы с БД

    Example:
        ```python
        class SkillRepository(BaseRepository[SkillModel]):
            model = SkillModel

        repo = SkillRepository(session)
        async with repo.transaction():
            skill = await repo.create(skill="Python", vacancy_id=1)
        ```
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession):
        """
        Args:
            session: Асинхронная сессия SQLAlchemy.
                     Обычно инжектится через Dishka.
        """
        self.session = session

    def transaction(self) -> UnitOfWork:
        """
        Открывает транзакцию на сессии репозитория.

        Все репозитории одного запроса делят одну сессию, поэтому
        транзакция, открытая через любой из них, покрывает всех.
        """
        return UnitOfWork(self.session)

    async def get_by_id(self, entity_id: int) -> ModelT | None:
        """
        Получает сущность по ID.

        Returns:
            ORM модель или None если не найдена
        """
        logger.debug("Get %s by id=%s", self.model.__name__, entity_id)
        return await self.session.get(self.model, entity_id)

    async def get_one(self, **filters) -> ModelT | None:
        """
        Получает одну сущность по фильтрам (field=value).

        Returns:
            ORM модель или None
        """
        logger.debug("Get %s with filters=%s", self.model.__name__, filters)
        stmt = select(self.model).filter_by(**filters)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_many(self, **filters) -> list[ModelT]:
        """
        Получает список сущностей по фильтрам в порядке вставки.

        Returns:
            Список ORM моделей (может быть пустым)
        """
        logger.debug("Get many %s with filters=%s", self.model.__name__, filters)
        stmt = select(self.model).filter_by(**filters).order_by(self.model.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, **data) -> ModelT:
        """
        Создаёт новую сущность.

        Returns:
            Созданная ORM модель с заполненным id (после flush, без commit)
        """
        logger.debug("Create %s with data=%s", self.model.__name__, data)
        instance = self.model(**data)
        self.session.add(instance)
        await self.session.flush()
        logger.debug("Created %s with id=%s", self.model.__name__, instance.id)
        return instance

    async def update(self, entity_id: int, **data) -> ModelT | None:
        """
        Обновляет сущность по ID (только переданные поля).

        Returns:
            Обновлённая ORM модель или None если не найдена
        """
        logger.debug("Update %s id=%s with data=%s", self.model.__name__, entity_id, data)
        instance = await self.get_by_id(entity_id)
        if not instance:
            logger.debug("%s with id=%s not found", self.model.__name__, entity_id)
            return None

        for key, value in data.items():
            if hasattr(instance, key):
                setattr(instance, key, value)

        await self.session.flush()
        logger.debug("Updated %s id=%s", self.model.__name__, entity_id)
        return instance

    async def delete(self, entity_id: int) -> bool:
        """
        Удаляет сущность по ID.

        Returns:
            True если удалено, False если не найдено
        """
        logger.debug("Delete %s id=%s", self.model.__name__, entity_id)
        instance = await self.get_by_id(entity_id)
        if not instance:
            logger.debug("%s with id=%s not found", self.model.__name__, entity_id)
            return False

        await self.session.delete(instance)
        await self.session.flush()
        logger.debug("Deleted %s id=%s", self.model.__name__, entity_id)
        return True

    async def delete_many(self, **filters) -> int:
        """
        Удаляет все сущности, подходящие под фильтры, одним запросом.

        Returns:
            Количество удалённых строк
        """
        logger.debug("Delete many %s with filters=%s", self.model.__name__, filters)
        stmt = delete(self.model).filter_by(**filters)
        result = await self.session.execute(stmt)
        await self.session.flush()
        logger.debug("Deleted %s rows of %s", result.rowcount, self.model.__name__)
        return result.rowcount
