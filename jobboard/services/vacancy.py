"""
Сервис агрегата вакансии.

Агрегат = вакансия + навыки, требования, обязанности и привязки
к видам инвалидности. Запись агрегата всегда идёт одной транзакцией,
чтение — несколькими независимыми запросами без транзакции
(между ними данные могут измениться).
"""

import logging
from collections.abc import Awaitable
from typing import TypeVar

from sqlalchemy.exc import SQLAlchemyError

from jobboard.constants import VacancyContractType
from jobboard.db.repositories import (
    RequirementRepository,
    ResponsibilityRepository,
    SkillRepository,
    VacancyDisabilityRepository,
    VacancyRepository,
)
from jobboard.exceptions import ErrorKind, VacancyOperation, VacancyServiceError
from jobboard.schemas import VacancyCreate, VacancyRead, VacancySimpleRead
from jobboard.settings import app_settings
from jobboard.utils import disability_categories

logger = logging.getLogger(__name__)

T = TypeVar("T")


class VacancyService:
    def __init__(
        self,
        vacancy_repo: VacancyRepository,
        skill_repo: SkillRepository,
        requirement_repo: RequirementRepository,
        responsibility_repo: ResponsibilityRepository,
        vacancy_disability_repo: VacancyDisabilityRepository,
    ):
        self._vacancy_repo = vacancy_repo
        self._skill_repo = skill_repo
        self._requirement_repo = requirement_repo
        self._responsibility_repo = responsibility_repo
        self._vacancy_disability_repo = vacancy_disability_repo

    async def create_vacancy(self, request: VacancyCreate) -> int:
        """
        Создаёт вакансию вместе с дочерними строками.

        Всё в одной транзакции: ошибка любой вставки откатывает
        и саму вакансию.

        Returns:
            id созданной вакансии

        Raises:
            VacancyServiceError: код 01
        """
        try:
            async with self._vacancy_repo.transaction():
                vacancy = await self._vacancy_repo.upsert(**request.to_model_data())
                vacancy_id = vacancy.id
                await self._create_details(vacancy_id, request)
        except SQLAlchemyError as err:
            logger.error("Failed to create vacancy: %s", err, exc_info=err)
            raise VacancyServiceError(VacancyOperation.CREATE) from err

        logger.info(
            "Vacancy created: id=%s, skills=%s, requirements=%s, responsibilities=%s, "
            "disabilities=%s",
            vacancy_id,
            len(request.skills),
            len(request.requirements),
            len(request.responsibilities),
            len(request.disabilities),
        )
        return vacancy_id

    async def list_vacancies(
        self,
        page: int = 1,
        per_page: int | None = None,
        company_id: int | None = None,
        disability_category: str | None = None,
        area: str | None = None,
        contract_type: VacancyContractType | None = None,
        search_text: str | None = None,
    ) -> list[VacancySimpleRead]:
        """
        Постраничный список вакансий с категориями инвалидности.

        Фильтр disability_category применяется и в запросе, и здесь,
        к уже дедуплицированным категориям каждой вакансии.

        Raises:
            VacancyServiceError: код 02 (список) или 10 (категории вакансии)
        """
        page = max(page, 1)
        per_page = self._normalize_per_page(per_page)

        try:
            vacancies = await self._vacancy_repo.list_vacancies(
                page=page,
                per_page=per_page,
                company_id=company_id,
                disability_category=disability_category,
                area=area,
                contract_type=contract_type,
                search_text=search_text,
            )
        except SQLAlchemyError as err:
            logger.error("Failed to list vacancies: %s", err, exc_info=err)
            raise VacancyServiceError(VacancyOperation.LIST) from err

        result: list[VacancySimpleRead] = []
        for vacancy in vacancies:
            links = await self._lookup(
                VacancyOperation.LIST_DISABILITIES,
                vacancy.id,
                self._vacancy_disability_repo.list_by_vacancy_id(vacancy.id),
            )
            categories = disability_categories(links)

            if disability_category and disability_category not in categories:
                continue

            result.append(VacancySimpleRead.from_model(vacancy, categories))

        logger.debug("Listed %s vacancies on page=%s", len(result), page)
        return result

    async def get_vacancy_by_id(self, vacancy_id: int) -> VacancyRead:
        """
        Вакансия целиком: сама строка и четыре дочерние коллекции.

        Raises:
            VacancyServiceError: 03 (вакансия, not_found если её нет),
                04 навыки, 05 требования, 06 обязанности, 07 инвалидность
        """
        vacancy = await self._lookup(
            VacancyOperation.GET, vacancy_id, self._vacancy_repo.get_by_id(vacancy_id)
        )
        if vacancy is None:
            logger.warning("Vacancy id=%s not found", vacancy_id)
            raise VacancyServiceError(
                VacancyOperation.GET, kind=ErrorKind.NOT_FOUND, vacancy_id=vacancy_id
            )

        skills = await self._lookup(
            VacancyOperation.GET_SKILLS,
            vacancy_id,
            self._skill_repo.list_by_vacancy_id(vacancy_id),
        )
        requirements = await self._lookup(
            VacancyOperation.GET_REQUIREMENTS,
            vacancy_id,
            self._requirement_repo.list_by_vacancy_id(vacancy_id),
        )
        responsibilities = await self._lookup(
            VacancyOperation.GET_RESPONSIBILITIES,
            vacancy_id,
            self._responsibility_repo.list_by_vacancy_id(vacancy_id),
        )
        links = await self._lookup(
            VacancyOperation.GET_DISABILITIES,
            vacancy_id,
            self._vacancy_disability_repo.list_by_vacancy_id(vacancy_id),
        )

        return VacancyRead.from_model(
            vacancy,
            disabilities=disability_categories(links),
            skills=skills,
            requirements=requirements,
            responsibilities=responsibilities,
        )

    async def update_vacancy(self, request: VacancyCreate, vacancy_id: int) -> None:
        """
        Полная замена вакансии.

        Поля вакансии перезаписываются значениями из запроса,
        дочерние строки удаляются и создаются заново.

        Raises:
            VacancyServiceError: код 08 (not_found если вакансии нет)
        """
        try:
            async with self._vacancy_repo.transaction():
                await self._ensure_exists(VacancyOperation.UPDATE, vacancy_id)
                await self._vacancy_repo.upsert(vacancy_id, **request.to_model_data())
                await self._delete_details(vacancy_id)
                await self._create_details(vacancy_id, request)
        except SQLAlchemyError as err:
            logger.error("Failed to update vacancy id=%s: %s", vacancy_id, err, exc_info=err)
            raise VacancyServiceError(VacancyOperation.UPDATE, vacancy_id=vacancy_id) from err

        logger.info("Vacancy updated: id=%s", vacancy_id)

    async def delete_vacancy(self, vacancy_id: int) -> None:
        """
        Удаляет вакансию и все её дочерние строки.

        Raises:
            VacancyServiceError: код 09 (not_found если вакансии нет)
        """
        try:
            async with self._vacancy_repo.transaction():
                await self._ensure_exists(VacancyOperation.DELETE, vacancy_id)
                await self._delete_details(vacancy_id)
                await self._vacancy_repo.delete(vacancy_id)
        except SQLAlchemyError as err:
            logger.error("Failed to delete vacancy id=%s: %s", vacancy_id, err, exc_info=err)
            raise VacancyServiceError(VacancyOperation.DELETE, vacancy_id=vacancy_id) from err

        logger.info("Vacancy deleted: id=%s", vacancy_id)

    async def _create_details(self, vacancy_id: int, request: VacancyCreate) -> None:
        for skill in request.skills:
            await self._skill_repo.create(**skill.model_dump(), vacancy_id=vacancy_id)

        for requirement in request.requirements:
            await self._requirement_repo.create(**requirement.model_dump(), vacancy_id=vacancy_id)

        for responsibility in request.responsibilities:
            await self._responsibility_repo.create(
                **responsibility.model_dump(), vacancy_id=vacancy_id
            )

        for disability_id in request.disabilities:
            await self._vacancy_disability_repo.upsert(
                vacancy_id=vacancy_id, disability_id=disability_id
            )

    async def _delete_details(self, vacancy_id: int) -> None:
        await self._skill_repo.delete_by_vacancy_id(vacancy_id)
        await self._requirement_repo.delete_by_vacancy_id(vacancy_id)
        await self._responsibility_repo.delete_by_vacancy_id(vacancy_id)
        await self._vacancy_disability_repo.delete_by_vacancy_id(vacancy_id)

    async def _ensure_exists(self, operation: VacancyOperation, vacancy_id: int) -> None:
        if await self._vacancy_repo.get_by_id(vacancy_id) is None:
            logger.warning("Vacancy id=%s not found for %s", vacancy_id, operation.name.lower())
            raise VacancyServiceError(operation, kind=ErrorKind.NOT_FOUND, vacancy_id=vacancy_id)

    async def _lookup(
        self, operation: VacancyOperation, vacancy_id: int, query: Awaitable[T]
    ) -> T:
        try:
            return await query
        except SQLAlchemyError as err:
            logger.error(
                "Lookup %s failed for vacancy id=%s: %s",
                operation.name.lower(),
                vacancy_id,
                err,
                exc_info=err,
            )
            raise VacancyServiceError(operation, vacancy_id=vacancy_id) from err

    @staticmethod
    def _normalize_per_page(per_page: int | None) -> int:
        if not per_page or per_page < 1:
            return app_settings.PAGINATION.DEFAULT_PER_PAGE
        return min(per_page, app_settings.PAGINATION.MAX_PER_PAGE)
