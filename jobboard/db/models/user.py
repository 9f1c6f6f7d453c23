from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from jobboard.db.models.base import BaseModel


class UserModel(BaseModel):
    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(254), unique=True, index=True)
    password: Mapped[str] = mapped_column(String, nullable=False)
