from structurer.prompt_factory import (
    ARTICLE_SCHEMA,
    make_article_prompt,
    make_rewrite_prompt,
    make_summary_prompt,
)
from structurer.templates import ARTICLE_STRUCTURES


def test_article_schema_requires_exactly_three_text_fields() -> None:
    item = ARTICLE_SCHEMA["properties"]["paragraphs"]["items"]
    assert set(item["properties"]) == {"title", "explanation", "content"}
    assert sorted(item["required"]) == ["content", "explanation", "title"]
    assert all(p["type"] == "string" for p in item["properties"].values())
    assert item["additionalProperties"] is False


def test_article_prompt_passes_structure_verbatim() -> None:
    template = ARTICLE_STRUCTURES[4].prompt
    ps = make_article_prompt("raw notes", template, 1200, "English")
    assert f"2. Structure: {template}" in ps.user
    assert "raw notes" in ps.user
    assert "approximately 1200 words" in ps.user
    assert ps.temperature == 0.6


def test_rewrite_prompt_contents() -> None:
    ps = make_rewrite_prompt("Body text", "Simplify", "Chinese")
    assert "Body text" in ps.user
    assert "Instruction: Simplify" in ps.user
    assert "must be in Chinese" in ps.user


def test_summary_prompt_limits_length(monkeypatch) -> None:
    monkeypatch.setenv("SUMMARY_TEMPERATURE", "0.1")
    ps = make_summary_prompt("Some notes")
    assert "no more than 10 words" in ps.user
    assert "Some notes" in ps.user
    assert ps.temperature == 0.1
