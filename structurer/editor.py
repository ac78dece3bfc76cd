# structurer/editor.py
import streamlit as st

from . import actions
from . import state as reducers
from .models import DraftState
from .session import commit, content_key, reset_content_widget


def _rewrite(draft: DraftState, paragraph_id: str, instruction: str):
    with st.spinner("Rewriting..."):
        draft = actions.modify_paragraph(draft, paragraph_id, instruction)
    if draft.rewrite_status(paragraph_id).state == "fulfilled":
        reset_content_widget(paragraph_id)
    commit(draft, rerun=True)


def render_editor(draft: DraftState):
    st.subheader("Article Draft")
    st.caption("Edits are **auto-saved** as you type. Select a paragraph to rewrite it with an instruction.")

    if not draft.paragraphs:
        st.info("No paragraphs yet. Apply a structure or add a paragraph.")

    for idx, p in enumerate(draft.paragraphs, start=1):
        selected = p.id == draft.selected_id
        status = draft.rewrite_status(p.id)
        marker = "●" if selected else "○"
        with st.expander(f"{marker} {idx}. {p.title or 'Untitled'}", expanded=selected):
            if p.explanation:
                st.caption(p.explanation)

            st.text_area("Content", value=p.content, key=content_key(p.id), height=160,
                         placeholder="Start writing...", disabled=status.is_pending)

            r1, r2 = st.columns([1, 1])
            if not selected and r1.button("Select", key=f"sel_{p.id}"):
                commit(reducers.select_paragraph(draft, p.id), rerun=True)
            if r2.button("🗑 Delete", key=f"del_{p.id}"):
                reset_content_widget(p.id)
                commit(reducers.delete_paragraph(draft, p.id), rerun=True)

            if selected:
                instruction = st.text_area(
                    "Rewrite instruction", key=f"instr_{p.id}", height=68,
                    placeholder="e.g., 'Make this more persuasive' or 'Simplify the language...'",
                    disabled=status.is_pending,
                )
                label = "Rewriting..." if status.is_pending else "✨ Rewrite"
                if st.button(label, key=f"rw_{p.id}", disabled=status.is_pending or not instruction.strip()):
                    _rewrite(draft, p.id, instruction)
                if status.error:
                    st.error(status.error)

    if st.button("✚ Add Paragraph"):
        commit(reducers.add_paragraph(draft), rerun=True)
