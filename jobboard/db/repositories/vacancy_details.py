"""
Репозитории дочерних строк вакансии: навыки, требования, обязанности.

Строки принадлежат вакансии целиком и живут, пока жива она.
"""

import logging

from jobboard.db.models import RequirementModel, ResponsibilityModel, SkillModel
from jobboard.db.repositories.base import BaseRepository, ModelT

logger = logging.getLogger(__name__)


class VacancyChildRepository(BaseRepository[ModelT]):
    async def list_by_vacancy_id(self, vacancy_id: int) -> list[ModelT]:
        return await self.get_many(vacancy_id=vacancy_id)

    async def delete_by_vacancy_id(self, vacancy_id: int) -> int:
        return await self.delete_many(vacancy_id=vacancy_id)


class SkillRepository(VacancyChildRepository[SkillModel]):
    model = SkillModel


class RequirementRepository(VacancyChildRepository[RequirementModel]):
    model = RequirementModel


class ResponsibilityRepository(VacancyChildRepository[ResponsibilityModel]):
    model = ResponsibilityModel
