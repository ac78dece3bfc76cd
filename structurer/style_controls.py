# structurer/style_controls.py
import streamlit as st

from . import actions
from . import state as reducers
from .models import DraftState
from .session import commit, forget_replaced_paragraphs
from .templates import (
    ARTICLE_STRUCTURES, LANGUAGES,
    WORD_COUNT_MIN, WORD_COUNT_MAX, WORD_COUNT_STEP,
)


def render_style_controls(draft: DraftState):
    busy = draft.is_generating

    st.subheader("Generation Settings")
    word_count = st.slider("Word count", min_value=WORD_COUNT_MIN, max_value=WORD_COUNT_MAX,
                           step=WORD_COUNT_STEP, value=draft.settings.word_count, disabled=busy)
    labels = list(LANGUAGES.keys())
    current = next((k for k, v in LANGUAGES.items() if v == draft.settings.language), labels[0])
    lang_label = st.radio("Language", labels, index=labels.index(current), horizontal=True, disabled=busy)

    if word_count != draft.settings.word_count:
        draft = reducers.set_word_count(draft, word_count)
    if LANGUAGES[lang_label] != draft.settings.language:
        draft = reducers.set_language(draft, LANGUAGES[lang_label])
    commit(draft)

    st.subheader("Article Structures")
    if draft.error:
        st.error(draft.error)
    st.caption("Select a structure to generate a new draft or rewrite your existing article.")

    for i, option in enumerate(ARTICLE_STRUCTURES):
        if st.button(option.label, key=f"struct_{i}", disabled=busy, use_container_width=True):
            with st.spinner("AI is crafting the article..."):
                updated = actions.apply_structure(draft, option.prompt)
            forget_replaced_paragraphs(draft, updated)
            commit(updated, rerun=True)
