"""
Pydantic схемы — форма данных на границе сервиса.

Схемы разделены по назначению:
- *Create — данные для создания сущности
- *Read — данные для чтения (включают id, created_at)
"""

from jobboard.schemas.company import CompanyCreate, CompanyRead
from jobboard.schemas.user import UserCreate, UserRead
from jobboard.schemas.vacancy import (
    RequirementCreate,
    RequirementRead,
    ResponsibilityCreate,
    ResponsibilityRead,
    SkillCreate,
    SkillRead,
    VacancyCreate,
    VacancyRead,
    VacancySimpleRead,
)

__all__ = [
    # User
    "UserCreate",
    "UserRead",
    # Company
    "CompanyCreate",
    "CompanyRead",
    # Vacancy
    "VacancyCreate",
    "VacancyRead",
    "VacancySimpleRead",
    "SkillCreate",
    "SkillRead",
    "RequirementCreate",
    "RequirementRead",
    "ResponsibilityCreate",
    "ResponsibilityRead",
]
