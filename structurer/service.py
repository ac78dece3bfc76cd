# structurer/service.py
"""
The three calls the drafting UI makes to the text-generation service:
full-article generation, single-paragraph rewrite and reference summarization.

Each one applies its local guard (blank input) before touching the network.
"""
from __future__ import annotations
import json
import logging
from typing import List

from structurer.llm import generate_text, generate_json
from structurer.models import GeneratedParagraph
from structurer.prompt_factory import (
    ARTICLE_SCHEMA,
    make_article_prompt,
    make_rewrite_prompt,
    make_summary_prompt,
)
from structurer.templates import DEFAULT_SKELETON, EMPTY_SUMMARY

logger = logging.getLogger(__name__)


class ArticleGenerationError(RuntimeError):
    pass


def _coerce_item(item) -> GeneratedParagraph:
    # Only the array shape is checked; odd items are kept rather than rejected.
    if not isinstance(item, dict):
        return GeneratedParagraph(title="", explanation="", content=str(item))
    return GeneratedParagraph(
        title=str(item.get("title") or ""),
        explanation=str(item.get("explanation") or ""),
        content=str(item.get("content") or ""),
    )


def parse_article(raw: str) -> List[GeneratedParagraph]:
    """Parse the model's JSON into paragraphs.

    Accepts a bare array or the schema's ``{"paragraphs": [...]}`` wrapper.
    """
    try:
        result = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("Failed to parse generation response: %s; raw=%r", e, raw[:2000])
        raise ArticleGenerationError("Failed to parse the structured article from the AI response.") from e

    if isinstance(result, dict) and "paragraphs" in result:
        result = result["paragraphs"]
    if not isinstance(result, list):
        logger.warning("Parsed JSON is not an array: %r", result)
        raise ArticleGenerationError("API did not return a valid array structure.")

    return [_coerce_item(item) for item in result]


def generate_article(text: str, structure_prompt: str, word_count: int, language: str) -> List[GeneratedParagraph]:
    if not text.strip():
        return [GeneratedParagraph(**p) for p in DEFAULT_SKELETON]

    ps = make_article_prompt(text, structure_prompt, word_count, language)
    raw = generate_json(ps.system, ps.user, schema=ARTICLE_SCHEMA, schema_name="article", temperature=ps.temperature)
    paragraphs = parse_article(raw)
    logger.info("Generated %d paragraphs (%d words requested, %s)", len(paragraphs), word_count, language)
    return paragraphs


def modify_paragraph(content: str, instruction: str, language: str) -> str:
    if not content.strip() or not instruction.strip():
        return content

    ps = make_rewrite_prompt(content, instruction, language)
    return generate_text(ps.system, ps.user, temperature=ps.temperature).strip()


def summarize_text(text: str) -> str:
    if not text.strip():
        return EMPTY_SUMMARY

    ps = make_summary_prompt(text)
    return generate_text(ps.system, ps.user, temperature=ps.temperature).strip()
