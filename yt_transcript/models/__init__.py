"""Data models for YouTube transcript retrieval"""

from .transcript import RetrievalConfig, TranscriptEntry, Transcript
from .captions import (
    CaptionTrack,
    PlayerCaptionsTracklistRenderer,
    CaptionsContainer,
    InnerTubeResponse,
)

__all__ = [
    "RetrievalConfig",
    "TranscriptEntry",
    "Transcript",
    "CaptionTrack",
    "PlayerCaptionsTracklistRenderer",
    "CaptionsContainer",
    "InnerTubeResponse",
]
