"""
ORM модели SQLAlchemy.

Все модели наследуются от BaseModel, который предоставляет:
- id: первичный ключ
- created_at: дата создания
"""

from jobboard.db.models.base import BaseModel
from jobboard.db.models.company import CompanyModel
from jobboard.db.models.disability import DisabilityModel
from jobboard.db.models.user import UserModel
from jobboard.db.models.vacancy import (
    RequirementModel,
    ResponsibilityModel,
    SkillModel,
    VacancyDisabilityModel,
    VacancyModel,
)

__all__ = [
    "BaseModel",
    "UserModel",
    "CompanyModel",
    "DisabilityModel",
    "VacancyModel",
    "SkillModel",
    "RequirementModel",
    "ResponsibilityModel",
    "VacancyDisabilityModel",
]
