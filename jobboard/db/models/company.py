from typing import TYPE_CHECKING

from sqlalchemy import CHAR, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobboard.constants import CNPJ_LENGTH, COMPANY_NAME_MAX_LENGTH, PHONE_MAX_LENGTH
from jobboard.db.models.base import BaseModel

if TYPE_CHECKING:
    from .user import UserModel


class CompanyModel(BaseModel):
    __tablename__ = "companies"

    name: Mapped[str] = mapped_column(String(COMPANY_NAME_MAX_LENGTH), nullable=False)
    cnpj: Mapped[str] = mapped_column(CHAR(CNPJ_LENGTH), nullable=False, unique=True)
    phone: Mapped[str] = mapped_column(String(PHONE_MAX_LENGTH), nullable=False)

    # одна компания на пользователя
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    user: Mapped["UserModel"] = relationship(lazy="joined")
