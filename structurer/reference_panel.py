# structurer/reference_panel.py
import streamlit as st

from . import actions
from . import state as reducers
from .models import DraftState, Reference
from .session import DRAFT_KEY, commit


def _render_reference(ref: Reference, draft: DraftState):
    with st.container(border=True):
        if ref.status == "pending":
            st.caption("⏳ Summarizing...")
        elif ref.status == "failed":
            st.error(f"Error: {ref.error}")
        else:
            st.markdown(f"**{ref.summary}**")
        st.caption(ref.original_content[:240] + ("…" if len(ref.original_content) > 240 else ""))
        if st.button("🗑", key=f"refdel_{ref.id}", help="Delete reference"):
            commit(reducers.delete_reference(draft, ref.id), rerun=True)


def _add_clicked():
    # Runs before the script body so the pending row is in the list first.
    draft, ref_id = actions.submit_reference(st.session_state[DRAFT_KEY], st.session_state.get("new_reference", ""))
    if ref_id is not None:
        st.session_state["pending_reference_id"] = ref_id
        st.session_state["new_reference"] = ""
    st.session_state[DRAFT_KEY] = draft


def render_reference_panel(draft: DraftState):
    st.subheader("Reference Materials")
    st.caption("Add notes, articles, or any raw text here. Each entry is summarized and all of them are used as context.")

    busy = draft.adding_reference
    st.text_area("New reference", key="new_reference", height=120, label_visibility="collapsed",
                 placeholder="Paste your content here to add it as a reference...", disabled=busy)
    st.button("Summarizing..." if busy else "Add Reference", on_click=_add_clicked,
              disabled=busy, use_container_width=True)

    st.markdown("**Collected References**")
    if not draft.references:
        st.caption("Your references will appear here.")
    for ref in draft.references:
        _render_reference(ref, draft)

    pending_id = st.session_state.pop("pending_reference_id", None)
    if pending_id is not None:
        # The pending row is already on screen; resolve it and redraw.
        commit(actions.resolve_reference(draft, pending_id), rerun=True)
