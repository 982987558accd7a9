"""Transcript data models"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, computed_field


class RetrievalConfig(BaseModel):
    """Per-request retrieval options"""

    model_config = ConfigDict(frozen=True)

    lang: Optional[str] = Field(None, description="Requested language code (e.g., 'en')")


class TranscriptEntry(BaseModel):
    """A single caption fragment with timing"""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Unescaped caption text")
    duration: float = Field(..., description="Duration in seconds")
    offset: float = Field(..., description="Start time in seconds")
    lang: Optional[str] = Field(None, description="Language code of the entry")

    @computed_field
    @property
    def end(self) -> float:
        """End time calculated from offset + duration"""
        return self.offset + self.duration


class Transcript(BaseModel):
    """Complete transcript for one video"""

    video_id: str = Field(..., description="YouTube video ID")
    language: Optional[str] = Field(None, description="Language code (e.g., 'en', 'es')")
    entries: List[TranscriptEntry] = Field(default_factory=list, description="Entries in document order")

    @computed_field
    @property
    def full_text(self) -> str:
        """Complete transcript text joined from all entries"""
        return " ".join(entry.text for entry in self.entries)

    @computed_field
    @property
    def word_count(self) -> int:
        """Approximate word count"""
        return len(self.full_text.split())

    @computed_field
    @property
    def character_count(self) -> int:
        """Total character count"""
        return len(self.full_text)
