# structurer/models.py
from __future__ import annotations
import uuid
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Dict, Optional, Literal

def new_id() -> str:
    return uuid.uuid4().hex

class StructureOption(BaseModel):
    label: str
    prompt: str

class GeneratedParagraph(BaseModel):
    """One item of the generation response: exactly these three text fields."""
    title: str
    explanation: str
    content: str

class Paragraph(BaseModel):
    id: str = Field(default_factory=new_id)
    title: str
    content: str = ""
    explanation: str = ""

class Reference(BaseModel):
    id: str = Field(default_factory=new_id)
    original_content: str
    summary: str = ""
    is_loading: bool = True
    error: Optional[str] = None

    @model_validator(mode="after")
    def _one_state(self) -> "Reference":
        # pending, fulfilled (summary) or failed (error): exactly one
        held = [self.is_loading, bool(self.summary), self.error is not None]
        if sum(held) != 1:
            raise ValueError(
                "Reference must be exactly one of loading, summarized or failed "
                f"(is_loading={self.is_loading}, summary={self.summary!r}, error={self.error!r})"
            )
        return self

    @property
    def status(self) -> str:
        if self.is_loading:
            return "pending"
        if self.error is not None:
            return "failed"
        return "fulfilled"

class OpStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    state: Literal["idle", "pending", "fulfilled", "failed"] = "idle"
    message: Optional[str] = None

    @property
    def is_pending(self) -> bool:
        return self.state == "pending"

    @property
    def error(self) -> Optional[str]:
        return self.message if self.state == "failed" else None

IDLE = OpStatus()
PENDING = OpStatus(state="pending")
FULFILLED = OpStatus(state="fulfilled")

def failed(message: str) -> OpStatus:
    return OpStatus(state="failed", message=message)

class GenerationSettings(BaseModel):
    word_count: int = 500
    language: str = "English"

class DraftState(BaseModel):
    paragraphs: List[Paragraph] = []
    references: List[Reference] = []
    selected_id: Optional[str] = None
    settings: GenerationSettings = Field(default_factory=GenerationSettings)
    generation: OpStatus = Field(default_factory=OpStatus)  # failure message is the global error
    rewrites: Dict[str, OpStatus] = {}
    adding_reference: bool = False

    def paragraph(self, paragraph_id: str) -> Optional[Paragraph]:
        return next((p for p in self.paragraphs if p.id == paragraph_id), None)

    def reference(self, reference_id: str) -> Optional[Reference]:
        return next((r for r in self.references if r.id == reference_id), None)

    def rewrite_status(self, paragraph_id: str) -> OpStatus:
        return self.rewrites.get(paragraph_id, IDLE)

    @property
    def is_generating(self) -> bool:
        return self.generation.is_pending

    @property
    def error(self) -> Optional[str]:
        return self.generation.error

class PromptSpec(BaseModel):
    system: str
    user: str
    temperature: float = 0.3
