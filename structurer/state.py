# structurer/state.py
"""
Pure state transitions for the drafting session.

Every function takes the current ``DraftState`` and returns a new one; nothing
is mutated in place, so the Streamlit layer can hold a single state object and
swap it after each event.
"""
from __future__ import annotations
from typing import List, Optional

from .models import (
    DraftState, Paragraph, Reference, GeneratedParagraph, GenerationSettings,
    PENDING, FULFILLED, failed,
)
from .templates import DEFAULT_SKELETON, NEW_PARAGRAPH, EMPTY_SUMMARY, REFERENCE_SEPARATOR, clamp_word_count


def initial_state(word_count: int = 500, language: str = "English") -> DraftState:
    paragraphs = [Paragraph(**p) for p in DEFAULT_SKELETON]
    return DraftState(
        paragraphs=paragraphs,
        selected_id=paragraphs[0].id,
        settings=GenerationSettings(word_count=clamp_word_count(word_count), language=language),
    )


def _rewrites_with(state: DraftState, paragraph_id: str, status) -> dict:
    rewrites = dict(state.rewrites)
    rewrites[paragraph_id] = status
    return rewrites


# ---------- settings ----------

def set_word_count(state: DraftState, word_count: int) -> DraftState:
    settings = state.settings.model_copy(update={"word_count": clamp_word_count(word_count)})
    return state.model_copy(update={"settings": settings})


def set_language(state: DraftState, language: str) -> DraftState:
    settings = state.settings.model_copy(update={"language": language})
    return state.model_copy(update={"settings": settings})


# ---------- regeneration ----------

def start_generation(state: DraftState) -> DraftState:
    return state.model_copy(update={"generation": PENDING})


def apply_generated(state: DraftState, generated: List[GeneratedParagraph]) -> DraftState:
    paragraphs = [Paragraph(title=g.title, explanation=g.explanation, content=g.content) for g in generated]
    return state.model_copy(update={
        "paragraphs": paragraphs,
        "selected_id": paragraphs[0].id if paragraphs else None,
        "rewrites": {},
        "generation": FULFILLED,
    })


def fail_generation(state: DraftState, message: str) -> DraftState:
    return state.model_copy(update={"generation": failed(message)})


# ---------- paragraphs ----------

def select_paragraph(state: DraftState, paragraph_id: Optional[str]) -> DraftState:
    if paragraph_id is not None and state.paragraph(paragraph_id) is None:
        return state
    return state.model_copy(update={"selected_id": paragraph_id})


def update_content(state: DraftState, paragraph_id: str, content: str) -> DraftState:
    paragraphs = [
        p.model_copy(update={"content": content}) if p.id == paragraph_id else p
        for p in state.paragraphs
    ]
    return state.model_copy(update={"paragraphs": paragraphs})


def add_paragraph(state: DraftState) -> DraftState:
    new = Paragraph(**NEW_PARAGRAPH)
    return state.model_copy(update={"paragraphs": [*state.paragraphs, new], "selected_id": new.id})


def delete_paragraph(state: DraftState, paragraph_id: str) -> DraftState:
    rewrites = {k: v for k, v in state.rewrites.items() if k != paragraph_id}
    update = {
        "paragraphs": [p for p in state.paragraphs if p.id != paragraph_id],
        "rewrites": rewrites,
    }
    if state.selected_id == paragraph_id:
        update["selected_id"] = None
    return state.model_copy(update=update)


# ---------- rewrite ----------

def start_rewrite(state: DraftState, paragraph_id: str) -> DraftState:
    return state.model_copy(update={"rewrites": _rewrites_with(state, paragraph_id, PENDING)})


def finish_rewrite(state: DraftState, paragraph_id: str, content: str) -> DraftState:
    if state.paragraph(paragraph_id) is None:
        # deleted while the rewrite was in flight
        return state
    state = update_content(state, paragraph_id, content)
    return state.model_copy(update={"rewrites": _rewrites_with(state, paragraph_id, FULFILLED)})


def fail_rewrite(state: DraftState, paragraph_id: str, message: str) -> DraftState:
    return state.model_copy(update={"rewrites": _rewrites_with(state, paragraph_id, failed(message))})


# ---------- references ----------

def add_pending_reference(state: DraftState, content: str) -> tuple[DraftState, Reference]:
    ref = Reference(original_content=content)
    new_state = state.model_copy(update={
        "references": [ref, *state.references],
        "adding_reference": True,
    })
    return new_state, ref


def _settle_reference(state: DraftState, reference_id: str, **fields) -> DraftState:
    refs = [
        Reference.model_validate({**r.model_dump(), **fields, "is_loading": False})
        if r.id == reference_id and r.is_loading else r
        for r in state.references
    ]
    return state.model_copy(update={"references": refs, "adding_reference": False})


def resolve_reference(state: DraftState, reference_id: str, summary: str) -> DraftState:
    return _settle_reference(state, reference_id, summary=summary.strip() or EMPTY_SUMMARY)


def fail_reference(state: DraftState, reference_id: str, message: str) -> DraftState:
    return _settle_reference(state, reference_id, error=message)


def delete_reference(state: DraftState, reference_id: str) -> DraftState:
    return state.model_copy(update={"references": [r for r in state.references if r.id != reference_id]})


def combined_reference_text(state: DraftState, separator: str = REFERENCE_SEPARATOR) -> str:
    return separator.join(r.original_content for r in state.references)
