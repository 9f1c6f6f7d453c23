"""
Схемы компании.

Компания создаётся вместе с пользователем-владельцем: из одного
CompanyCreate получаются данные для двух таблиц.
"""

from pydantic import Field

from jobboard.constants import CNPJ_LENGTH, COMPANY_NAME_MAX_LENGTH, PHONE_MAX_LENGTH
from jobboard.schemas.base import BaseReadSchema, BaseSchema
from jobboard.schemas.user import UserCreate, UserRead


class CompanyCreate(BaseSchema):
    name: str = Field(..., min_length=1, max_length=COMPANY_NAME_MAX_LENGTH)
    cnpj: str = Field(..., pattern=rf"^\d{{{CNPJ_LENGTH}}}$", description="CNPJ, только цифры")
    phone: str = Field(..., min_length=1, max_length=PHONE_MAX_LENGTH)
    user: UserCreate

    def to_user_data(self) -> dict:
        """Поля для UserRepository.create(): регистрация компании живёт вне пакета"""
        return self.user.model_dump()

    def to_company_data(self, user_id: int) -> dict:
        """Поля для CompanyRepository.create() с уже созданным владельцем"""
        return {**self.model_dump(exclude={"user"}), "user_id": user_id}


class CompanyRead(BaseReadSchema):
    name: str
    cnpj: str
    phone: str
    user: UserRead
