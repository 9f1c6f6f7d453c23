from jobboard.services.vacancy import VacancyService

__all__ = ["VacancyService"]
