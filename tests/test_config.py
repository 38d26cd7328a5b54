import datetime

import pydantic
import pytest

from app.config import Settings
from app.utils import logger as logger_module


def test_plain_postgres_url_uses_asyncpg_driver():
    settings = Settings(TWITTER_DATABASE_URL="postgresql://user:pw@db:5432/twitter")

    assert settings.database_url == "postgresql+asyncpg://user:pw@db:5432/twitter"


def test_page_limits_are_validated():
    with pytest.raises(pydantic.ValidationError):
        Settings(DEFAULT_PAGE_LIMIT=0)
    with pytest.raises(pydantic.ValidationError):
        Settings(DEFAULT_PAGE_LIMIT=50, MAX_PAGE_LIMIT=20)


def test_cleanup_old_logs_keeps_recent_directories(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "LOG_DIR", tmp_path)
    today = datetime.date.today()
    old_dir = tmp_path / (today - datetime.timedelta(days=30)).isoformat()
    new_dir = tmp_path / today.isoformat()
    other_dir = tmp_path / "archive"
    for directory in (old_dir, new_dir, other_dir):
        directory.mkdir()
        (directory / "twitter_api.log").write_text("line\n")

    deleted = logger_module.cleanup_old_logs(keep_days=7)

    assert deleted == 1
    assert not old_dir.exists()
    assert new_dir.exists()
    assert other_dir.exists()
