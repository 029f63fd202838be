import pytest

from config import LOG_LEVEL_VAR, NAME_VAR


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so values written later by load_dotenv get rolled back too
    for var in (NAME_VAR, LOG_LEVEL_VAR):
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    return monkeypatch
