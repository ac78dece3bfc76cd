# structurer/export.py
import io
from typing import List, Optional

import markdown
from docx import Document

from .models import Paragraph


def to_markdown(paragraphs: List[Paragraph], title: Optional[str] = None) -> str:
    parts = []
    if title:
        parts.append(f"# {title}")
    for p in paragraphs:
        if p.title:
            parts.append(f"## {p.title}")
        if p.content.strip():
            parts.append(p.content.strip())
    return "\n\n".join(parts).strip()


def to_html(paragraphs: List[Paragraph], title: Optional[str] = None) -> str:
    return markdown.markdown(
        to_markdown(paragraphs, title),
        extensions=['extra', 'nl2br', 'sane_lists'],
        output_format='html5'
    )


def to_docx(paragraphs: List[Paragraph], title: Optional[str] = None) -> bytes:
    buf = io.BytesIO()
    doc = Document()
    if title:
        doc.add_heading(title, level=1)
    for p in paragraphs:
        if p.title:
            doc.add_heading(p.title, level=2)
        for block in p.content.split("\n\n"):
            if block.strip():
                doc.add_paragraph(block.strip())
    doc.save(buf)
    return buf.getvalue()


EXPORT_FORMATS = {
    "Markdown": (".md", "text/markdown"),
    "HTML": (".html", "text/html"),
    "Word": (".docx", "application/vnd.openxmlformats-officedocument.wordprocessingml.document"),
}


def export_draft(paragraphs: List[Paragraph], fmt: str, title: Optional[str] = None) -> bytes:
    """Render the draft in one of EXPORT_FORMATS and return the file bytes."""
    if fmt == "Markdown":
        return to_markdown(paragraphs, title).encode("utf-8")
    if fmt == "HTML":
        return to_html(paragraphs, title).encode("utf-8")
    if fmt == "Word":
        return to_docx(paragraphs, title)
    raise ValueError(f"Unsupported export format: {fmt}")
