import logging

from jobboard.db.models import CompanyModel
from jobboard.db.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class CompanyRepository(BaseRepository[CompanyModel]):
    """
    Репозиторий компаний.

    cnpj и user_id уникальны на уровне схемы: повторная вставка
    падает с IntegrityError при flush.
    """

    model = CompanyModel

    async def get_by_cnpj(self, cnpj: str) -> CompanyModel | None:
        logger.debug("Get company by cnpj=%s", cnpj)
        return await self.get_one(cnpj=cnpj)

    async def get_by_user_id(self, user_id: int) -> CompanyModel | None:
        logger.debug("Get company by user_id=%s", user_id)
        return await self.get_one(user_id=user_id)
