"""Error taxonomy for transcript retrieval.

Every failure that leaves :class:`~yt_transcript.api.TranscriptFetcher` is one
of the subclasses below. Each carries an :class:`ErrorKind` so callers can
branch on the kind without importing every class, plus the context needed to
explain the failure (video id, requested language, available languages).
"""

from enum import Enum
from typing import List, Optional

PREFIX = "[yt-transcript]"


class ErrorKind(str, Enum):
    """The closed set of retrieval failures"""

    INVALID_VIDEO_ID = "InvalidVideoId"
    TOO_MANY_REQUESTS = "TooManyRequests"
    VIDEO_UNAVAILABLE = "VideoUnavailable"
    DISABLED = "Disabled"
    NOT_AVAILABLE = "NotAvailable"
    NOT_AVAILABLE_LANGUAGE = "NotAvailableLanguage"
    EMPTY_TRANSCRIPT = "EmptyTranscript"
    NETWORK_ERROR = "NetworkError"
    PARSING_ERROR = "ParsingError"


class TranscriptError(Exception):
    """Base class for all transcript retrieval errors"""

    kind: ErrorKind

    def __init__(self, message: str, video_id: Optional[str] = None):
        self.video_id = video_id
        self.message = message
        super().__init__(f"{PREFIX} {message}")


class InvalidVideoIdError(TranscriptError):
    kind = ErrorKind.INVALID_VIDEO_ID

    def __init__(self, video_input: str):
        self.video_input = video_input
        super().__init__(f"Impossible to retrieve Youtube video ID from: {video_input!r}")


class TooManyRequestsError(TranscriptError):
    kind = ErrorKind.TOO_MANY_REQUESTS

    def __init__(self, video_id: Optional[str] = None):
        super().__init__(
            "YouTube is receiving too many requests from this IP and now requires "
            "solving a captcha to continue",
            video_id,
        )


class VideoUnavailableError(TranscriptError):
    kind = ErrorKind.VIDEO_UNAVAILABLE

    def __init__(self, video_id: str):
        super().__init__(f"The video is no longer available ({video_id})", video_id)


class TranscriptsDisabledError(TranscriptError):
    kind = ErrorKind.DISABLED

    def __init__(self, video_id: str):
        super().__init__(f"Transcript is disabled on this video ({video_id})", video_id)


class NoTranscriptAvailableError(TranscriptError):
    kind = ErrorKind.NOT_AVAILABLE

    def __init__(self, video_id: str):
        super().__init__(f"No transcripts are available for this video ({video_id})", video_id)


class LanguageNotAvailableError(TranscriptError):
    kind = ErrorKind.NOT_AVAILABLE_LANGUAGE

    def __init__(self, lang: str, available_langs: List[str], video_id: str):
        self.lang = lang
        self.available_langs = list(available_langs)
        super().__init__(
            f"No transcripts are available in {lang} for this video ({video_id}). "
            f"Available languages: {', '.join(self.available_langs)}",
            video_id,
        )


class EmptyTranscriptError(TranscriptError):
    kind = ErrorKind.EMPTY_TRANSCRIPT

    def __init__(self, video_id: str, method: str):
        self.method = method
        super().__init__(
            f"The transcript file URL returns an empty response using {method} ({video_id})",
            video_id,
        )


class NetworkError(TranscriptError):
    kind = ErrorKind.NETWORK_ERROR

    def __init__(self, detail: str, video_id: Optional[str] = None):
        self.detail = detail
        super().__init__(f"Network error: {detail}", video_id)


class TranscriptParsingError(TranscriptError):
    kind = ErrorKind.PARSING_ERROR

    def __init__(self, detail: str, video_id: Optional[str] = None):
        self.detail = detail
        super().__init__(f"Parsing error: {detail}", video_id)


__all__ = [
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
]
