"""
Репозиторий вакансий.

Помимо базовых CRUD операций умеет:
- upsert по идентификатору
- постраничную выдачу с фильтрами (компания, область, тип договора,
  категория инвалидности, полнотекстовый поиск по заголовку и описанию)
"""

import logging

from sqlalchemy import or_, select

from jobboard.constants import VacancyContractType
from jobboard.db.models import DisabilityModel, VacancyDisabilityModel, VacancyModel
from jobboard.db.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

LIKE_ESCAPE = "\\"


def escape_like(text: str) -> str:
    """Экранирует спецсимволы LIKE, чтобы текст искался буквально."""
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


class VacancyRepository(BaseRepository[VacancyModel]):
    model = VacancyModel

    async def upsert(self, vacancy_id: int | None = None, **data) -> VacancyModel:
        """
        Создаёт вакансию или обновляет существующую с тем же id.

        Args:
            vacancy_id: Идентификатор вакансии (None — всегда создание)
            **data: Поля вакансии

        Returns:
            ORM модель с заполненным id
        """
        if vacancy_id is not None:
            updated = await self.update(vacancy_id, **data)
            if updated is not None:
                return updated
            logger.debug("Vacancy id=%s not found, creating new one", vacancy_id)
            data["id"] = vacancy_id
        return await self.create(**data)

    async def list_vacancies(
        self,
        *,
        page: int,
        per_page: int,
        company_id: int | None = None,
        disability_category: str | None = None,
        area: str | None = None,
        contract_type: VacancyContractType | None = None,
        search_text: str | None = None,
    ) -> list[VacancyModel]:
        """
        Постраничная выдача вакансий.

        Пустые фильтры (None, "", 0) не применяются.
        Фильтр по категории инвалидности выполняется в самом запросе
        (EXISTS по связующей таблице), поэтому страница заполняется целиком.

        Args:
            page: Номер страницы, начиная с 1
            per_page: Размер страницы
        """
        logger.debug(
            "List vacancies page=%s per_page=%s company_id=%s category=%s area=%s "
            "contract_type=%s search_text=%s",
            page,
            per_page,
            company_id,
            disability_category,
            area,
            contract_type,
            search_text,
        )
        stmt = select(self.model)

        if company_id:
            stmt = stmt.where(self.model.company_id == company_id)
        if area:
            stmt = stmt.where(self.model.area == area)
        if contract_type:
            stmt = stmt.where(self.model.contract_type == contract_type)
        if search_text:
            pattern = f"%{escape_like(search_text)}%"
            stmt = stmt.where(
                or_(
                    self.model.title.ilike(pattern, escape=LIKE_ESCAPE),
                    self.model.description.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )
        if disability_category:
            has_category = (
                select(VacancyDisabilityModel.id)
                .join(DisabilityModel, DisabilityModel.id == VacancyDisabilityModel.disability_id)
                .where(
                    VacancyDisabilityModel.vacancy_id == self.model.id,
                    DisabilityModel.category == disability_category,
                )
                .exists()
            )
            stmt = stmt.where(has_category)

        stmt = stmt.order_by(self.model.id).offset((page - 1) * per_page).limit(per_page)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
