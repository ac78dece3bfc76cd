# structurer/session.py
import streamlit as st

from .config import get_settings
from .models import DraftState
from . import state as reducers

DRAFT_KEY = "draft"


def init_state():
    ss = st.session_state
    if DRAFT_KEY not in ss:
        cfg = get_settings()
        ss[DRAFT_KEY] = reducers.initial_state(cfg.default_word_count, cfg.default_language)
    ss.setdefault("new_reference", "")
    ss.setdefault("export_title", "")


def get_draft() -> DraftState:
    return st.session_state[DRAFT_KEY]


def commit(draft: DraftState, rerun: bool = False):
    st.session_state[DRAFT_KEY] = draft
    if rerun:
        st.rerun()


def content_key(paragraph_id: str) -> str:
    return f"content_{paragraph_id}"


def reset_content_widget(paragraph_id: str):
    """Drop the cached editor value so the next run shows the stored content."""
    st.session_state.pop(content_key(paragraph_id), None)


def forget_replaced_paragraphs(before: DraftState, after: DraftState):
    """Drop editor widget values for paragraphs that are no longer in the draft."""
    kept = {p.id for p in after.paragraphs}
    for p in before.paragraphs:
        if p.id not in kept:
            reset_content_widget(p.id)


def apply_text_edits(draft: DraftState) -> DraftState:
    """Pull edited paragraph bodies from the widgets into the draft (autosave)."""
    for p in draft.paragraphs:
        edited = st.session_state.get(content_key(p.id))
        if edited is not None and edited != p.content:
            draft = reducers.update_content(draft, p.id, edited)
    return draft
