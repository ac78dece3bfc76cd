from structurer import actions, session
from structurer import state as reducers
from structurer.models import GeneratedParagraph


def test_regeneration_drops_editor_values_of_replaced_paragraphs(monkeypatch) -> None:
    draft, _ = reducers.add_pending_reference(reducers.initial_state(), "notes")
    old_ids = [p.id for p in draft.paragraphs]
    fake_state = {session.content_key(pid): "typed" for pid in old_ids}
    fake_state["new_reference"] = "keep"
    monkeypatch.setattr(session.st, "session_state", fake_state)

    generate = lambda *args: [GeneratedParagraph(title="A", explanation="e", content="c")]
    updated = actions.apply_structure(draft, "x", generate=generate)
    session.forget_replaced_paragraphs(draft, updated)

    assert not any(session.content_key(pid) in fake_state for pid in old_ids)
    assert fake_state["new_reference"] == "keep"


def test_failed_regeneration_keeps_editor_values(monkeypatch) -> None:
    draft = reducers.initial_state()
    fake_state = {session.content_key(p.id): "typed" for p in draft.paragraphs}
    monkeypatch.setattr(session.st, "session_state", fake_state)

    def generate(*args):
        raise RuntimeError("down")

    updated = actions.apply_structure(draft, "x", generate=generate)
    session.forget_replaced_paragraphs(draft, updated)

    assert len(fake_state) == 3


def test_apply_text_edits_pulls_widget_values(monkeypatch) -> None:
    draft = reducers.initial_state()
    pid = draft.paragraphs[1].id
    monkeypatch.setattr(session.st, "session_state", {session.content_key(pid): "edited"})
    after = session.apply_text_edits(draft)
    assert after.paragraph(pid).content == "edited"
    assert draft.paragraph(pid).content == ""
