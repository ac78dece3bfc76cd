# structurer/actions.py
"""
Request orchestration for UI events.

Each action moves the state into its busy form, calls one collaborator, and
settles the state with the result or the error message. Collaborators are
injectable so tests (and the UI) can swap them.
"""
from __future__ import annotations
import logging
from typing import Callable, List, Optional, Tuple

from . import service
from . import state as reducers
from .models import DraftState, GeneratedParagraph

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "An unknown error occurred."

GenerateFn = Callable[[str, str, int, str], List[GeneratedParagraph]]
RewriteFn = Callable[[str, str, str], str]
SummarizeFn = Callable[[str], str]


def error_message(exc: BaseException, fallback: str = UNKNOWN_ERROR) -> str:
    return str(exc).strip() or fallback


def apply_structure(state: DraftState, structure_prompt: str,
                    generate: GenerateFn = service.generate_article) -> DraftState:
    """Regenerate the whole article from the pooled references."""
    if state.is_generating:
        return state

    state = reducers.start_generation(state)
    text = reducers.combined_reference_text(state)
    try:
        generated = generate(text, structure_prompt, state.settings.word_count, state.settings.language)
    except Exception as e:
        logger.exception("Article generation failed")
        return reducers.fail_generation(state, error_message(e))
    return reducers.apply_generated(state, generated)


def modify_paragraph(state: DraftState, paragraph_id: str, instruction: str,
                     rewrite: RewriteFn = service.modify_paragraph) -> DraftState:
    """Rewrite one paragraph's content by instruction."""
    if not instruction.strip():
        return state
    if state.rewrite_status(paragraph_id).is_pending:
        return state

    paragraph = state.paragraph(paragraph_id)
    if paragraph is None:
        # deleted or replaced before the rewrite was triggered
        logger.warning("Rewrite requested for unknown paragraph %s", paragraph_id)
        return state

    state = reducers.start_rewrite(state, paragraph_id)
    try:
        content = rewrite(paragraph.content, instruction, state.settings.language)
    except Exception as e:
        logger.exception("Rewrite failed for paragraph %s", paragraph_id)
        return reducers.fail_rewrite(state, paragraph_id, error_message(e))
    return reducers.finish_rewrite(state, paragraph_id, content)


def submit_reference(state: DraftState, text: str) -> Tuple[DraftState, Optional[str]]:
    """Add a pending reference row. Returns the new state and its id (None if nothing was added)."""
    if not text.strip() or state.adding_reference:
        return state, None
    state, ref = reducers.add_pending_reference(state, text)
    return state, ref.id


def resolve_reference(state: DraftState, reference_id: str,
                      summarize: SummarizeFn = service.summarize_text) -> DraftState:
    ref = state.reference(reference_id)
    if ref is None or not ref.is_loading:
        return state.model_copy(update={"adding_reference": False})
    try:
        summary = summarize(ref.original_content)
    except Exception as e:
        logger.exception("Summarization failed for reference %s", reference_id)
        return reducers.fail_reference(state, reference_id, error_message(e))
    return reducers.resolve_reference(state, reference_id, summary)


def add_reference(state: DraftState, text: str,
                  summarize: SummarizeFn = service.summarize_text) -> DraftState:
    state, reference_id = submit_reference(state, text)
    if reference_id is None:
        return state
    return resolve_reference(state, reference_id, summarize)
