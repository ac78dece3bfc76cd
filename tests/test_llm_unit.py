from types import SimpleNamespace

import httpx
import pytest
from openai import APIConnectionError

from structurer import llm


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.kwargs = None

    def create(self, **kwargs):
        self.kwargs = kwargs
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _install(monkeypatch, completions: FakeCompletions) -> None:
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    monkeypatch.setattr(llm, "_client_instance", client)


def test_generate_text_strips_and_uses_configured_model(monkeypatch) -> None:
    monkeypatch.setenv("MODEL_NAME", "gpt-test")
    completions = FakeCompletions(content="  Label here \n")
    _install(monkeypatch, completions)
    assert llm.generate_text("sys", "user", temperature=0.2) == "Label here"
    assert completions.kwargs["model"] == "gpt-test"
    assert completions.kwargs["temperature"] == 0.2
    assert completions.kwargs["messages"][1] == {"role": "user", "content": "user"}


def test_generate_text_handles_empty_content(monkeypatch) -> None:
    _install(monkeypatch, FakeCompletions(content=None))
    assert llm.generate_text("sys", "user") == ""


def test_generate_json_sends_schema_and_strips_fences(monkeypatch) -> None:
    completions = FakeCompletions(content='```json\n{"paragraphs": []}\n```')
    _install(monkeypatch, completions)
    raw = llm.generate_json("sys", "user", schema={"type": "object"}, schema_name="article")
    assert raw == '{"paragraphs": []}'
    fmt = completions.kwargs["response_format"]
    assert fmt["type"] == "json_schema"
    assert fmt["json_schema"]["name"] == "article"
    assert fmt["json_schema"]["schema"] == {"type": "object"}


def test_api_errors_are_wrapped(monkeypatch) -> None:
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    _install(monkeypatch, FakeCompletions(error=APIConnectionError(request=request)))
    with pytest.raises(llm.LLMError, match="OpenAI API error"):
        llm.generate_text("sys", "user")


def test_missing_api_key_raises(monkeypatch) -> None:
    monkeypatch.setattr(llm, "_client_instance", None)
    with pytest.raises(RuntimeError, match="OPENAI_API_KEY"):
        llm.generate_text("sys", "user")


def test_generate_json_keeps_fences_inside_values(monkeypatch) -> None:
    payload = '{"paragraphs": [{"title": "T", "explanation": "E", "content": "Wrap code in ```python blocks``` like this."}]}'
    _install(monkeypatch, FakeCompletions(content=f"```json\n{payload}\n```"))
    assert llm.generate_json("sys", "user", schema={"type": "object"}) == payload

    _install(monkeypatch, FakeCompletions(content=payload))
    assert llm.generate_json("sys", "user", schema={"type": "object"}) == payload


def test_generated_paragraph_content_survives_fences(monkeypatch) -> None:
    from structurer import service

    content = "Wrap code in ```python blocks``` like this."
    payload = '{"paragraphs": [{"title": "T", "explanation": "E", "content": "%s"}]}' % content
    _install(monkeypatch, FakeCompletions(content=payload))
    assert service.generate_article("notes", "narrative", 500, "English")[0].content == content
