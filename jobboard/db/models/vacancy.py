from typing import TYPE_CHECKING

from sqlalchemy import Enum, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobboard.constants import VacancyContractType
from jobboard.db.models.base import BaseModel

if TYPE_CHECKING:
    from .disability import DisabilityModel


class VacancyModel(BaseModel):
    __tablename__ = "vacancies"

    company_id: Mapped[int] = mapped_column(
        ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    department: Mapped[str | None] = mapped_column(String(100), nullable=True)
    section: Mapped[str | None] = mapped_column(String(100), nullable=True)
    area: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    contract_type: Mapped[VacancyContractType] = mapped_column(
        Enum(VacancyContractType, native_enum=False, values_callable=lambda e: [i.value for i in e]),
        nullable=False,
    )
    state: Mapped[str | None] = mapped_column(String(2), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)


class SkillModel(BaseModel):
    __tablename__ = "skills"

    skill: Mapped[str] = mapped_column(String(200), nullable=False)
    vacancy_id: Mapped[int] = mapped_column(
        ForeignKey("vacancies.id", ondelete="CASCADE"), nullable=False, index=True
    )


class RequirementModel(BaseModel):
    __tablename__ = "requirements"

    requirement: Mapped[str] = mapped_column(String(500), nullable=False)
    vacancy_id: Mapped[int] = mapped_column(
        ForeignKey("vacancies.id", ondelete="CASCADE"), nullable=False, index=True
    )


class ResponsibilityModel(BaseModel):
    __tablename__ = "responsibilities"

    responsibility: Mapped[str] = mapped_column(String(500), nullable=False)
    vacancy_id: Mapped[int] = mapped_column(
        ForeignKey("vacancies.id", ondelete="CASCADE"), nullable=False, index=True
    )


class VacancyDisabilityModel(BaseModel):
    __tablename__ = "vacancy_disabilities"
    __table_args__ = (UniqueConstraint("vacancy_id", "disability_id"),)

    vacancy_id: Mapped[int] = mapped_column(
        ForeignKey("vacancies.id", ondelete="CASCADE"), nullable=False, index=True
    )
    disability_id: Mapped[int] = mapped_column(
        ForeignKey("disabilities.id", ondelete="CASCADE"), nullable=False
    )

    disability: Mapped["DisabilityModel"] = relationship(lazy="joined")
