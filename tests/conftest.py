"""
Общие фикстуры для тестов.

Этот файл автоматически загружается pytest.
Фикстуры доступны во всех тестах без импорта.
"""

import os
from collections.abc import AsyncGenerator, Awaitable, Callable

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

# Устанавливаем тестовые переменные окружения ДО импорта settings
# Это нужно, чтобы AppSettings не падал при загрузке
os.environ.setdefault("DB__USER", "test")
os.environ.setdefault("DB__PASS", "test")
os.environ.setdefault("DB__HOST", "localhost")
os.environ.setdefault("DB__NAME", "test_db")

# Теперь можно импортировать пакет
from jobboard.constants import VacancyContractType  # noqa: E402
from jobboard.db.models import BaseModel, CompanyModel, DisabilityModel, UserModel  # noqa: E402
from jobboard.db.repositories import (  # noqa: E402
    CompanyRepository,
    DisabilityRepository,
    RequirementRepository,
    ResponsibilityRepository,
    SkillRepository,
    UserRepository,
    VacancyDisabilityRepository,
    VacancyRepository,
)
from jobboard.schemas import (  # noqa: E402
    RequirementCreate,
    ResponsibilityCreate,
    SkillCreate,
    VacancyCreate,
)
from jobboard.services import VacancyService  # noqa: E402


def _setup_sqlite(engine: AsyncEngine) -> None:
    """
    Включает внешние ключи и корректные SAVEPOINT для aiosqlite.

    Без этого драйвер сам решает, когда слать BEGIN, и вложенные
    транзакции (UnitOfWork поверх уже начатой) откатываются неверно.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def do_begin(conn):
        conn.exec_driver_sql("BEGIN")


@pytest.fixture
async def async_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Создаёт in-memory SQLite сессию для тестов.

    Таблицы создаются заново для каждого теста.
    """
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    _setup_sqlite(engine)

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    async_session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_factory() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.drop_all)

    await engine.dispose()


# =============================================================================
# Репозитории
# =============================================================================


@pytest.fixture
def user_repo(async_session: AsyncSession) -> UserRepository:
    return UserRepository(async_session)


@pytest.fixture
def company_repo(async_session: AsyncSession) -> CompanyRepository:
    return CompanyRepository(async_session)


@pytest.fixture
def disability_repo(async_session: AsyncSession) -> DisabilityRepository:
    return DisabilityRepository(async_session)


@pytest.fixture
def vacancy_repo(async_session: AsyncSession) -> VacancyRepository:
    return VacancyRepository(async_session)


@pytest.fixture
def skill_repo(async_session: AsyncSession) -> SkillRepository:
    return SkillRepository(async_session)


@pytest.fixture
def requirement_repo(async_session: AsyncSession) -> RequirementRepository:
    return RequirementRepository(async_session)


@pytest.fixture
def responsibility_repo(async_session: AsyncSession) -> ResponsibilityRepository:
    return ResponsibilityRepository(async_session)


@pytest.fixture
def vacancy_disability_repo(async_session: AsyncSession) -> VacancyDisabilityRepository:
    return VacancyDisabilityRepository(async_session)


@pytest.fixture
def vacancy_service(
    vacancy_repo: VacancyRepository,
    skill_repo: SkillRepository,
    requirement_repo: RequirementRepository,
    responsibility_repo: ResponsibilityRepository,
    vacancy_disability_repo: VacancyDisabilityRepository,
) -> VacancyService:
    """
    Сервис на тех же репозиториях, что и фикстуры выше.

    Тест может проверять результат напрямую через репозитории.
    """
    return VacancyService(
        vacancy_repo=vacancy_repo,
        skill_repo=skill_repo,
        requirement_repo=requirement_repo,
        responsibility_repo=responsibility_repo,
        vacancy_disability_repo=vacancy_disability_repo,
    )


# =============================================================================
# Данные
# =============================================================================


@pytest.fixture
async def sample_user(user_repo: UserRepository) -> UserModel:
    return await user_repo.create(email="owner@example.com", password="s3cret-pass")


@pytest.fixture
async def sample_company(company_repo: CompanyRepository, sample_user: UserModel) -> CompanyModel:
    """
    Компания, от имени которой публикуются вакансии.

    Внешние ключи в тестовой БД включены, поэтому вакансии без неё не создать.
    """
    return await company_repo.create(
        name="Acme Ltda",
        cnpj="12345678000190",
        phone="5511999990000",
        user_id=sample_user.id,
    )


@pytest.fixture
async def disabilities(disability_repo: DisabilityRepository) -> dict[str, DisabilityModel]:
    """
    Справочник видов инвалидности.

    Два вида в категории Visual — чтобы проверять дедупликацию категорий.
    """
    data = {
        "low_vision": ("Low vision", "Visual"),
        "blindness": ("Blindness", "Visual"),
        "deafness": ("Deafness", "Hearing"),
        "wheelchair": ("Wheelchair user", "Physical"),
    }
    return {
        key: await disability_repo.create(name=name, category=category)
        for key, (name, category) in data.items()
    }


@pytest.fixture
def vacancy_request_factory(sample_company: CompanyModel) -> Callable[..., VacancyCreate]:
    """
    Фабрика запросов на создание вакансии.

    Пример использования:
        request = vacancy_request_factory(title="QA", skills=[SkillCreate(skill="pytest")])
    """

    def _create(**kwargs) -> VacancyCreate:
        defaults = {
            "company_id": sample_company.id,
            "title": "Backend developer",
            "description": "Async Python services for the job board",
            "department": "Engineering",
            "area": "Technology",
            "contract_type": VacancyContractType.CLT,
            "state": "SP",
            "city": "São Paulo",
        }
        defaults.update(kwargs)
        return VacancyCreate(**defaults)

    return _create


@pytest.fixture
def full_vacancy_request(
    vacancy_request_factory: Callable[..., VacancyCreate],
    disabilities: dict[str, DisabilityModel],
) -> VacancyCreate:
    """Запрос с полным набором дочерних строк: 3 навыка, 2 требования, 2 обязанности."""
    return vacancy_request_factory(
        skills=[SkillCreate(skill="Python"), SkillCreate(skill="SQL"), SkillCreate(skill="Docker")],
        requirements=[
            RequirementCreate(requirement="3+ years with Python"),
            RequirementCreate(requirement="English B2"),
        ],
        responsibilities=[
            ResponsibilityCreate(responsibility="Design REST services"),
            ResponsibilityCreate(responsibility="Review pull requests"),
        ],
        disabilities=[
            disabilities["low_vision"].id,
            disabilities["deafness"].id,
            disabilities["blindness"].id,
        ],
    )


@pytest.fixture
def vacancy_factory(
    vacancy_service: VacancyService,
    vacancy_request_factory: Callable[..., VacancyCreate],
) -> Callable[..., Awaitable[int]]:
    """Создаёт вакансию через сервис и возвращает её id."""

    async def _create(**kwargs) -> int:
        return await vacancy_service.create_vacancy(vacancy_request_factory(**kwargs))

    return _create
