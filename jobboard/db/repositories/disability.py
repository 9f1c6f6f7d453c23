import logging

from jobboard.db.models import DisabilityModel
from jobboard.db.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class DisabilityRepository(BaseRepository[DisabilityModel]):
    model = DisabilityModel

    async def list_by_category(self, category: str) -> list[DisabilityModel]:
        """Справочник по категории, для форм выбора тегов вне этого пакета."""
        logger.debug("Get disabilities by category=%s", category)
        return await self.get_many(category=category)
