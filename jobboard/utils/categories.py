from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jobboard.db.models import VacancyDisabilityModel


def dedupe_categories(categories: Iterable[str]) -> list[str]:
    """
    Убирает повторы, сохраняя порядок первого появления.

    Сравнение регистрозависимое: "Visual" и "visual" — разные категории.
    """
    return list(dict.fromkeys(categories))


def disability_categories(links: Iterable["VacancyDisabilityModel"]) -> list[str]:
    """Категории привязанных к вакансии видов инвалидности, без повторов."""
    return dedupe_categories(link.disability.category for link in links)
