import logging

from jobboard.db.models import VacancyDisabilityModel
from jobboard.db.repositories.vacancy_details import VacancyChildRepository

logger = logging.getLogger(__name__)


class VacancyDisabilityRepository(VacancyChildRepository[VacancyDisabilityModel]):
    """
    Связующая таблица вакансия <-> вид инвалидности.

    Связь disability подгружается вместе со строкой (lazy="joined"),
    так что категория доступна без дополнительных запросов.
    """

    model = VacancyDisabilityModel

    async def upsert(self, vacancy_id: int, disability_id: int) -> tuple[VacancyDisabilityModel, bool]:
        """
        Идемпотентно привязывает вид инвалидности к вакансии.

        Returns:
            Tuple[VacancyDisabilityModel, bool]: (строка связи, создана_ли_новая)
        """
        existing = await self.get_one(vacancy_id=vacancy_id, disability_id=disability_id)
        if existing:
            logger.debug(
                "Disability id=%s already linked to vacancy id=%s", disability_id, vacancy_id
            )
            return existing, False

        link = await self.create(vacancy_id=vacancy_id, disability_id=disability_id)
        # relationship не подгружается после flush, догружаем явно
        await self.session.refresh(link, ["disability"])
        return link, True
