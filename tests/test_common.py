import logging
from pathlib import Path

import pytest

from jobboard.common import SQL_LOGGERS, setup_logging, sql_loggers_config
from jobboard.settings import AppSettings, DBSettings


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    sql_levels = {name: logging.getLogger(name).level for name in SQL_LOGGERS}
    yield
    for name, sql_level in sql_levels.items():
        logging.getLogger(name).setLevel(sql_level)
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


@pytest.mark.usefixtures("restore_root_logger")
def test_setup_logging_writes_files(tmp_path: Path):
    setup_logging("DEBUG", log_dir=str(tmp_path / "logs"))

    logging.getLogger("jobboard.test").error("something failed")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "something failed" in (tmp_path / "logs" / "app.log").read_text()
    assert "something failed" in (tmp_path / "logs" / "errors.log").read_text()


@pytest.mark.usefixtures("restore_root_logger")
def test_setup_logging_quiets_sqlalchemy(tmp_path: Path):
    setup_logging("DEBUG", log_dir=str(tmp_path), debug=False)

    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
    assert logging.getLogger("asyncpg").level == logging.WARNING


@pytest.mark.usefixtures("restore_root_logger")
def test_setup_logging_debug_shows_sql(tmp_path: Path):
    """В режиме DEBUG запросы SQLAlchemy попадают в лог."""
    setup_logging("INFO", log_dir=str(tmp_path), debug=True)

    assert logging.getLogger("sqlalchemy.engine").isEnabledFor(logging.INFO)
    assert logging.getLogger("asyncpg").level == logging.DEBUG


def test_sql_loggers_follow_debug_setting():
    assert set(sql_loggers_config(debug=False)) == set(SQL_LOGGERS)
    assert sql_loggers_config(debug=False)["sqlalchemy.engine"] == {"level": "WARNING"}
    assert sql_loggers_config(debug=True)["sqlalchemy.engine"] == {"level": "INFO"}


def test_db_url():
    settings = DBSettings(USER="app", PASS="secret", HOST="db", NAME="jobs")

    assert settings.db_url == "postgresql+asyncpg://app:secret@db:5432/jobs"


def test_nested_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DB__PORT", "6543")
    monkeypatch.setenv("PAGINATION__MAX_PER_PAGE", "50")

    settings = AppSettings()

    assert settings.DB.PORT == 6543
    assert settings.PAGINATION.MAX_PER_PAGE == 50
    assert settings.PAGINATION.DEFAULT_PER_PAGE == 10
