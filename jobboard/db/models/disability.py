from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from jobboard.db.models.base import BaseModel


class DisabilityModel(BaseModel):
    """Справочник видов инвалидности. Категория — то, что видит клиент в вакансии."""

    __tablename__ = "disabilities"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
