import pytest

from structurer.config import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    for name in ("OPENAI_API_KEY", "MODEL_NAME", "DEFAULT_WORD_COUNT", "DEFAULT_LANGUAGE",
                 "GENERATION_TEMPERATURE", "REWRITE_TEMPERATURE", "SUMMARY_TEMPERATURE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
