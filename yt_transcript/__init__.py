"""Fetch YouTube video transcripts from the watch page or the InnerTube player endpoint"""

from .api import TranscriptFetcher, fetch_transcript
from .errors import (
    ErrorKind,
    TranscriptError,
    InvalidVideoIdError,
    TooManyRequestsError,
    VideoUnavailableError,
    TranscriptsDisabledError,
    NoTranscriptAvailableError,
    LanguageNotAvailableError,
    EmptyTranscriptError,
    NetworkError,
    TranscriptParsingError,
)
from .models import RetrievalConfig, TranscriptEntry, Transcript, CaptionTrack

__version__ = "1.0.0"

__all__ = [
    "TranscriptFetcher",
    "fetch_transcript",
    "ErrorKind",
    "TranscriptError",
    "InvalidVideoIdError",
    "TooManyRequestsError",
    "VideoUnavailableError",
    "TranscriptsDisabledError",
    "NoTranscriptAvailableError",
    "LanguageNotAvailableError",
    "EmptyTranscriptError",
    "NetworkError",
    "TranscriptParsingError",
    "RetrievalConfig",
    "TranscriptEntry",
    "Transcript",
    "CaptionTrack",
]
