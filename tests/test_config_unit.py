from structurer.config import get_settings
from structurer.templates import ARTICLE_STRUCTURES, clamp_word_count, get_structure

import pytest


def test_settings_defaults() -> None:
    cfg = get_settings()
    assert cfg.model_name == "gpt-4o-mini"
    assert cfg.default_word_count == 500
    assert cfg.default_language == "English"
    assert cfg.openai_api_key == ""


def test_settings_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("DEFAULT_WORD_COUNT", "800")
    monkeypatch.setenv("GENERATION_TEMPERATURE", "0.9")
    cfg = get_settings()
    assert cfg.openai_api_key == "sk-test"
    assert cfg.default_word_count == 800
    assert cfg.generation_temperature == 0.9


def test_structure_catalog_order_and_lookup() -> None:
    labels = [opt.label for opt in ARTICLE_STRUCTURES]
    assert len(labels) == 6
    assert labels[0] == "基本敘事結構"
    assert labels[-1] == "BAB 結構"
    assert get_structure("對比結構").prompt.startswith('Reformat the text to follow a "Contrast Structure"')
    with pytest.raises(KeyError):
        get_structure("missing")


def test_clamp_word_count_bounds() -> None:
    assert clamp_word_count(100) == 100
    assert clamp_word_count(2000) == 2000
    assert clamp_word_count(-5) == 100
