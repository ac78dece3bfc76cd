# app.py — Article Structurer: references in, structured draft out

from dotenv import load_dotenv
import streamlit as st

# -----------------------------------------------------------------------------
# Env & defaults
# -----------------------------------------------------------------------------
load_dotenv()

# -----------------------------------------------------------------------------
# Local modules
# -----------------------------------------------------------------------------
from structurer.config import get_settings, configure_logging
from structurer.session import init_state, get_draft, commit, apply_text_edits
from structurer.editor import render_editor
from structurer.reference_panel import render_reference_panel
from structurer.style_controls import render_style_controls
from structurer.export import EXPORT_FORMATS, export_draft, to_html

configure_logging(get_settings().log_level)

# ---------------- Page config ----------------
st.set_page_config(page_title="AI Article Structurer", layout="wide")

# ---------------- Minimal CSS ----------------
st.markdown("""
<style>
    .stTextArea textarea {
        font-size: 14px;
    }
    [data-testid="stHorizontalBlock"] {
        gap: 0.75rem;
    }
</style>
""", unsafe_allow_html=True)

st.title("📝 AI Article Structurer")

# ---------------- Session state ----------------
init_state()
commit(apply_text_edits(get_draft()))

# =============================================================================
# MAIN UI
# =============================================================================

col_refs, col_editor, col_controls = st.columns([4, 5, 3])

with col_refs:
    render_reference_panel(get_draft())

with col_editor:
    tab_edit, tab_preview = st.tabs(["📝 Editor", "👁️ Preview"])
    with tab_edit:
        render_editor(get_draft())
    with tab_preview:
        draft = get_draft()
        if any(p.content.strip() for p in draft.paragraphs):
            st.html(f'<div class="preview-container">{to_html(draft.paragraphs, st.session_state["export_title"])}</div>')
        else:
            st.info("Generate or write some content to see a preview")

with col_controls:
    render_style_controls(get_draft())

    st.subheader("Export")
    st.text_input("Title (optional)", key="export_title")
    export_fmt = st.selectbox("Format", list(EXPORT_FORMATS), label_visibility="collapsed")
    export_name = st.text_input("Filename", "article", label_visibility="collapsed")
    ext, mime = EXPORT_FORMATS[export_fmt]
    st.download_button(
        "📥 Export",
        data=export_draft(get_draft().paragraphs, export_fmt, st.session_state["export_title"] or None),
        file_name=f"{export_name or 'article'}{ext}",
        mime=mime,
        use_container_width=True,
    )
