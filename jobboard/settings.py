from pathlib import Path

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class DBSettings(BaseModel):
    """
    Настройки подключения к базе данных PostgreSQL.

    Использует BaseModel (не BaseSettings), чтобы переменные загружались
    через родительский AppSettings с правильным префиксом DB__
    """

    USER: str
    PASS: str
    HOST: str
    PORT: int = 5432
    NAME: str
    ECHO: bool = False

    @property
    def db_url(self) -> str:
        return f"postgresql+asyncpg://{self.USER}:{self.PASS}@{self.HOST}:{self.PORT}/{self.NAME}"


class PaginationSettings(BaseModel):
    """
    Настройки постраничной выдачи вакансий.

    Переменные загружаются через AppSettings с префиксом PAGINATION__
    """

    DEFAULT_PER_PAGE: int = 10
    MAX_PER_PAGE: int = 100


class AppSettings(BaseSettings):
    """
    Главные настройки приложения.

    Загружает все переменные из .env файла.
    Вложенные модели используют двойное подчеркивание (__) как разделитель.

    Пример переменных окружения:
    - LOG_LEVEL=DEBUG
    - DB__USER=postgres
    - DB__PASS=secret
    - DB__HOST=localhost
    - DB__NAME=jobboard
    - PAGINATION__MAX_PER_PAGE=50
    """

    BASE_DIR: Path = Path(__file__).resolve().parent
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    DB: DBSettings
    # PAGINATION имеет значения по умолчанию, необязателен в .env
    PAGINATION: PaginationSettings = PaginationSettings()

    model_config = SettingsConfigDict(
        env_file=f"/{BASE_DIR}/.env",
        extra="ignore",
        env_nested_delimiter="__",
    )


app_settings = AppSettings()
