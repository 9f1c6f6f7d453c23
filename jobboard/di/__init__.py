"""
Инициализация DI контейнера Dishka.

Использование:
    from jobboard.di import container_factory

    container = container_factory()
    async with container() as request_container:
        service = await request_container.get(VacancyService)
        await service.create_vacancy(request)
    await container.close()
"""

from dishka import AsyncContainer, make_async_container

from jobboard.di.providers import DatabaseProvider, RepositoriesProvider, ServicesProvider

__all__ = [
    "DatabaseProvider",
    "RepositoriesProvider",
    "ServicesProvider",
    "container_factory",
]


def container_factory() -> AsyncContainer:
    """
    Создаёт DI контейнер со всеми провайдерами.

    Returns:
        AsyncContainer: Готовый контейнер для внедрения зависимостей
    """
    return make_async_container(
        DatabaseProvider(),
        RepositoriesProvider(),
        ServicesProvider(),
    )
