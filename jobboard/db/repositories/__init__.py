"""
Репозитории для работы с БД.

Репозитории инкапсулируют логику доступа к данным, по одному на таблицу.
Используют AsyncSession из SQLAlchemy.
"""

from jobboard.db.repositories.base import BaseRepository
from jobboard.db.repositories.company import CompanyRepository
from jobboard.db.repositories.disability import DisabilityRepository
from jobboard.db.repositories.user import UserRepository
from jobboard.db.repositories.vacancy import VacancyRepository
from jobboard.db.repositories.vacancy_details import (
    RequirementRepository,
    ResponsibilityRepository,
    SkillRepository,
)
from jobboard.db.repositories.vacancy_disability import VacancyDisabilityRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "CompanyRepository",
    "DisabilityRepository",
    "VacancyRepository",
    "SkillRepository",
    "RequirementRepository",
    "ResponsibilityRepository",
    "VacancyDisabilityRepository",
]
