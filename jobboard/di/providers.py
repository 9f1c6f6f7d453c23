"""
DI провайдеры для Dishka.

Scope (область жизни):
- APP — создаётся один раз при старте приложения (singleton)
- REQUEST — создаётся на каждый запрос

Сессия, репозитории и сервис живут в REQUEST: все репозитории одного
запроса делят одну сессию, поэтому транзакция сервиса покрывает их всех.
"""

from collections.abc import AsyncGenerator

from dishka import Provider, Scope, provide
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.db import async_session_factory
from jobboard.db.repositories import (
    CompanyRepository,
    DisabilityRepository,
    RequirementRepository,
    ResponsibilityRepository,
    SkillRepository,
    UserRepository,
    VacancyDisabilityRepository,
    VacancyRepository,
)
from jobboard.services import VacancyService


class DatabaseProvider(Provider):
    """
    Провайдер сессии БД.

    Новая сессия на каждый запрос — изоляция транзакций между запросами.
    """

    @provide(scope=Scope.REQUEST)
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Жизненный цикл:
        1. Создаётся новая сессия из фабрики
        2. yield — сессия используется в обработчике запроса
        3. commit() — если не было исключений
        4. rollback() — если было исключение
        5. close() — всегда закрываем сессию
        """
        async with async_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise


class RepositoriesProvider(Provider):
    """
    Репозитории. Зависят только от AsyncSession, поэтому провайдер
    переиспользуется в тестах с подменённой сессией.
    """

    scope = Scope.REQUEST

    @provide
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return UserRepository(session)

    @provide
    def get_company_repository(self, session: AsyncSession) -> CompanyRepository:
        return CompanyRepository(session)

    @provide
    def get_disability_repository(self, session: AsyncSession) -> DisabilityRepository:
        return DisabilityRepository(session)

    @provide
    def get_vacancy_repository(self, session: AsyncSession) -> VacancyRepository:
        return VacancyRepository(session)

    @provide
    def get_skill_repository(self, session: AsyncSession) -> SkillRepository:
        return SkillRepository(session)

    @provide
    def get_requirement_repository(self, session: AsyncSession) -> RequirementRepository:
        return RequirementRepository(session)

    @provide
    def get_responsibility_repository(self, session: AsyncSession) -> ResponsibilityRepository:
        return ResponsibilityRepository(session)

    @provide
    def get_vacancy_disability_repository(
        self, session: AsyncSession
    ) -> VacancyDisabilityRepository:
        return VacancyDisabilityRepository(session)


class ServicesProvider(Provider):
    """Провайдер сервисов. Сервис держит репозитории запроса, поэтому тоже REQUEST."""

    scope = Scope.REQUEST

    @provide
    def get_vacancy_service(
        self,
        vacancy_repo: VacancyRepository,
        skill_repo: SkillRepository,
        requirement_repo: RequirementRepository,
        responsibility_repo: ResponsibilityRepository,
        vacancy_disability_repo: VacancyDisabilityRepository,
    ) -> VacancyService:
        """
        Dishka сам разрешает репозитории из RepositoriesProvider.
        """
        return VacancyService(
            vacancy_repo=vacancy_repo,
            skill_repo=skill_repo,
            requirement_repo=requirement_repo,
            responsibility_repo=responsibility_repo,
            vacancy_disability_repo=vacancy_disability_repo,
        )
