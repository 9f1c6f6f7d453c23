import logging
import logging.config
from pathlib import Path

from jobboard.settings import app_settings

PATH_LOGS = f"{Path(__file__).resolve().parent}/logs"

# логгеры драйвера и ORM, шумные на уровне INFO
SQL_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "asyncpg")


def sql_loggers_config(debug: bool) -> dict:
    """
    Уровни логгеров SQLAlchemy и asyncpg.

    В режиме DEBUG sqlalchemy.engine пишет каждый запрос с параметрами (INFO),
    иначе SQL-логгеры видны только с WARNING.
    """
    if not debug:
        return {name: {"level": "WARNING"} for name in SQL_LOGGERS}
    return {
        "sqlalchemy.engine": {"level": "INFO"},
        "sqlalchemy.pool": {"level": "INFO"},
        "asyncpg": {"level": "DEBUG"},
    }


def setup_logging(
    root_log_level: str | int = logging.INFO,
    log_dir: str = PATH_LOGS,
    debug: bool | None = None,
):
    """
    Настраивает логирование приложения.

    Args:
        root_log_level: Уровень корневого логгера и вывода в stdout
        log_dir: Каталог для app.log и errors.log
        debug: Включить логирование SQL (по умолчанию app_settings.DEBUG)
    """
    if debug is None:
        debug = app_settings.DEBUG
    Path(log_dir).mkdir(parents=True, exist_ok=True)

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s [%(levelname)-8s] %(name)40s:%(lineno)-3d - %(message)s"
            }
        },
        "handlers": {
            "console_stdout": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
                "level": root_log_level,
                "formatter": "default",
            },
            "general_file": {
                "class": "logging.handlers.RotatingFileHandler",
                "filename": f"{log_dir}/app.log",
                "maxBytes": 10485760,  # 10MB
                "backupCount": 5,
                "formatter": "default",
            },
            "error_file": {
                "class": "logging.handlers.RotatingFileHandler",
                "filename": f"{log_dir}/errors.log",
                "maxBytes": 10485760,
                "backupCount": 5,
                "level": "ERROR",
                "formatter": "default",
            },
        },
        "loggers": sql_loggers_config(debug),
        "root": {
            "level": root_log_level,
            "handlers": ["console_stdout", "general_file", "error_file"],
        },
    }

    logging.config.dictConfig(config)
    logging.info("Logging configured with dictConfig: debug=%s", debug)
