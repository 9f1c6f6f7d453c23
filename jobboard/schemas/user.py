"""
Схемы пользователя.

UserCreate — данные нового пользователя (приходят вместе с компанией)
UserRead — данные для ответа, без пароля
"""

from pydantic import EmailStr, Field

from jobboard.schemas.base import BaseReadSchema, BaseSchema


class UserCreate(BaseSchema):
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)


class UserRead(BaseReadSchema):
    email: str
