"""
Схемы вакансии.

VacancyCreate — входные данные агрегата (вакансия + дочерние строки + id видов инвалидности)
VacancySimpleRead — элемент списка вакансий
VacancyRead — вакансия целиком со всеми дочерними строками

Категории инвалидности в ответах — уже дедуплицированный список строк.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from pydantic import Field

from jobboard.constants import VacancyContractType
from jobboard.schemas.base import BaseReadSchema, BaseSchema

if TYPE_CHECKING:
    from jobboard.db.models import (
        RequirementModel,
        ResponsibilityModel,
        SkillModel,
        VacancyModel,
    )

CHILD_FIELDS = {"skills", "requirements", "responsibilities", "disabilities"}


class SkillCreate(BaseSchema):
    skill: str = Field(..., min_length=1, max_length=200)


class RequirementCreate(BaseSchema):
    requirement: str = Field(..., min_length=1, max_length=500)


class ResponsibilityCreate(BaseSchema):
    responsibility: str = Field(..., min_length=1, max_length=500)


class SkillRead(BaseReadSchema, SkillCreate):
    pass


class RequirementRead(BaseReadSchema, RequirementCreate):
    pass


class ResponsibilityRead(BaseReadSchema, ResponsibilityCreate):
    pass


class VacancyCreate(BaseSchema):
    """
    Схема для создания и полной замены вакансии.

    Example:
        ```python
        request = VacancyCreate(
            company_id=1,
            title="Backend разработчик",
            description="...",
            area="TI",
            contract_type=VacancyContractType.CLT,
            skills=[SkillCreate(skill="Python")],
            disabilities=[1, 3],
        )
        ```
    """

    company_id: int
    title: str = Field(..., min_length=1, max_length=200)
    description: str
    department: str | None = Field(None, max_length=100)
    section: str | None = Field(None, max_length=100)
    area: str = Field(..., min_length=1, max_length=100)
    contract_type: VacancyContractType
    state: str | None = Field(None, max_length=2)
    city: str | None = Field(None, max_length=100)

    skills: list[SkillCreate] = Field(default_factory=list)
    requirements: list[RequirementCreate] = Field(default_factory=list)
    responsibilities: list[ResponsibilityCreate] = Field(default_factory=list)
    disabilities: list[int] = Field(default_factory=list, description="id видов инвалидности")

    def to_model_data(self) -> dict:
        """Поля самой вакансии, без дочерних коллекций"""
        return self.model_dump(exclude=CHILD_FIELDS)


class VacancySimpleRead(BaseReadSchema):
    company_id: int
    title: str
    area: str
    contract_type: VacancyContractType
    department: str | None = None
    state: str | None = None
    city: str | None = None
    disabilities: list[str] = Field(default_factory=list)

    @classmethod
    def from_model(
        cls, vacancy: "VacancyModel", disabilities: Sequence[str]
    ) -> "VacancySimpleRead":
        return cls.model_validate(vacancy).model_copy(
            update={"disabilities": list(disabilities)}
        )


class VacancyRead(BaseReadSchema):
    company_id: int
    title: str
    description: str
    department: str | None = None
    section: str | None = None
    area: str
    contract_type: VacancyContractType
    state: str | None = None
    city: str | None = None

    skills: list[SkillRead] = Field(default_factory=list)
    requirements: list[RequirementRead] = Field(default_factory=list)
    responsibilities: list[ResponsibilityRead] = Field(default_factory=list)
    disabilities: list[str] = Field(default_factory=list)

    @classmethod
    def from_model(
        cls,
        vacancy: "VacancyModel",
        *,
        disabilities: Sequence[str],
        skills: Sequence["SkillModel"],
        requirements: Sequence["RequirementModel"],
        responsibilities: Sequence["ResponsibilityModel"],
    ) -> "VacancyRead":
        return cls.model_validate(vacancy).model_copy(
            update={
                "skills": [SkillRead.model_validate(skill) for skill in skills],
                "requirements": [RequirementRead.model_validate(item) for item in requirements],
                "responsibilities": [
                    ResponsibilityRead.model_validate(item) for item in responsibilities
                ],
                "disabilities": list(disabilities),
            }
        )
