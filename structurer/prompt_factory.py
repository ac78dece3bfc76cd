# structurer/prompt_factory.py
from __future__ import annotations
from typing import Any, Dict
from structurer.models import PromptSpec
from structurer.config import get_settings

# ---------- schema ----------

PARAGRAPH_ITEM_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "title": {
            "type": "string",
            "description": "A concise title for the paragraph.",
        },
        "explanation": {
            "type": "string",
            "description": "A brief, one-sentence explanation of this paragraph's purpose or focus.",
        },
        "content": {
            "type": "string",
            "description": "The full, rewritten content for this paragraph.",
        },
    },
    "required": ["title", "explanation", "content"],
    "additionalProperties": False,
}

# Structured outputs need an object at the root; the array sits under "paragraphs".
ARTICLE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "paragraphs": {"type": "array", "items": PARAGRAPH_ITEM_SCHEMA},
    },
    "required": ["paragraphs"],
    "additionalProperties": False,
}

# ---------- main factories ----------

def make_article_prompt(text: str, structure_prompt: str, word_count: int, language: str) -> PromptSpec:
    """
    Build the full-article restructuring prompt (system+user).
    """
    system = (
        "You are an editor who restructures raw notes into a well-organized article. "
        "You always answer with JSON that matches the requested schema."
    )
    user = f"""
Original Text:
---
{text}
---

Instructions:
1. Content: Use the Original Text as the primary source of information.
2. Structure: {structure_prompt}
3. Language: The entire output must be in {language}.
4. Length: The total length of the article should be approximately {word_count} words.

Rewrite the original text following all instructions.
The output must be structured as an array of paragraphs, each with a title, a one-sentence explanation of its purpose, and the rewritten content.
Do not include any introductory or concluding remarks outside of the JSON structure.
""".strip()
    return PromptSpec(system=system, user=user, temperature=get_settings().generation_temperature)

def make_rewrite_prompt(content: str, instruction: str, language: str) -> PromptSpec:
    system = "You rewrite a single paragraph of an article exactly as instructed."
    user = f"""
Original Paragraph Content:
---
{content}
---

Instruction: {instruction}
Language: The rewritten paragraph must be in {language}.

Rewrite the paragraph based on the instruction and language requirement.
Only return the rewritten paragraph content as a single block of text.
Do not add any extra titles, explanations, or formatting.
Do not use markdown.
""".strip()
    return PromptSpec(system=system, user=user, temperature=get_settings().rewrite_temperature)

def make_summary_prompt(text: str) -> PromptSpec:
    system = "You label reference notes with short descriptive titles."
    user = f"""
Summarize the following text into a short, descriptive title of no more than 10 words.
This title will be used to label the text in a list.
Do not add any introductory phrases like "This text is about..." or "Summary:".
Just return the title.

Text:
---
{text}
---
""".strip()
    return PromptSpec(system=system, user=user, temperature=get_settings().summary_temperature)
