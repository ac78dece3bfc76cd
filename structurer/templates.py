# structurer/templates.py
"""
Structure templates and generation defaults for article drafts.
Instruction text is passed to the model verbatim as the structure directive.
"""
from typing import List, Dict
from .models import StructureOption

ARTICLE_STRUCTURES: List[StructureOption] = [
    StructureOption(
        label="基本敘事結構",
        prompt=(
            "Restructure the text into a basic narrative with an introduction, a development/body, and a conclusion. "
            "The introduction should grab the reader's attention. The body should elaborate on the main points. "
            "The conclusion should summarize and leave a lasting impression."
        ),
    ),
    StructureOption(
        label="問題－分析－解決方案",
        prompt=(
            'Restructure the text to follow a "Problem-Analysis-Solution" format. '
            "The first paragraph should clearly state a problem. "
            "The second should analyze the causes and effects of this problem. "
            "The third should propose a concrete solution."
        ),
    ),
    StructureOption(
        label="故事化結構",
        prompt=(
            'Rewrite the text using a "Storytelling Structure". Start with a relatable story or anecdote. '
            "Introduce a conflict or turning point in the middle. "
            "End with a key takeaway or moral from the story."
        ),
    ),
    StructureOption(
        label="資訊型結構",
        prompt=(
            'Organize the text into an "Informational Structure". '
            "The first paragraph must provide necessary background context. "
            "The middle paragraph should detail the key facts or main points clearly. "
            "The final paragraph should offer a forward-looking perspective or discuss future implications."
        ),
    ),
    StructureOption(
        label="對比結構",
        prompt=(
            'Reformat the text to follow a "Contrast Structure". '
            "The first paragraph should describe the current situation or a common problem. "
            "The second paragraph should paint a picture of an ideal, improved state. "
            "The third paragraph must outline the steps or bridge needed to get from the current state to the ideal state."
        ),
    ),
    StructureOption(
        label="BAB 結構",
        prompt=(
            "Before (undesired state); P2 = After (ideal outcome + quantified); "
            "P3 = Bridge (the single key step/tool)."
        ),
    ),
]

# Returned for an empty reference pool, and used as the initial draft.
DEFAULT_SKELETON: List[Dict[str, str]] = [
    {"title": "Introduction", "content": "",
     "explanation": "Introduce the main topic and grab the reader's attention."},
    {"title": "Development", "content": "",
     "explanation": "Elaborate on the main points, providing details and evidence."},
    {"title": "Conclusion", "content": "",
     "explanation": "Summarize the key points and provide a concluding thought."},
]

NEW_PARAGRAPH = {"title": "New Paragraph", "content": "", "explanation": "Add your content here."}

# label shown in the UI -> language name used in prompts
LANGUAGES: Dict[str, str] = {
    "English": "English",
    "中文": "Chinese",
}

WORD_COUNT_MIN = 100
WORD_COUNT_MAX = 2000
WORD_COUNT_STEP = 50

REFERENCE_SEPARATOR = "\n\n---\n\n"
EMPTY_SUMMARY = "Empty Content"


def get_structure(label: str) -> StructureOption:
    """Look up a template by its label."""
    for opt in ARTICLE_STRUCTURES:
        if opt.label == label:
            return opt
    raise KeyError(f"Unknown structure template: {label}")


def clamp_word_count(value: int) -> int:
    """Clamp to the supported range and snap to the slider step."""
    value = max(WORD_COUNT_MIN, min(WORD_COUNT_MAX, int(value)))
    steps = int((value - WORD_COUNT_MIN) / WORD_COUNT_STEP + 0.5)
    return WORD_COUNT_MIN + steps * WORD_COUNT_STEP
