"""Caption track selection"""

from typing import List, Optional, Sequence

from ..errors import LanguageNotAvailableError, NoTranscriptAvailableError
from ..models import CaptionTrack


def select_track(
    tracks: Sequence[CaptionTrack], lang: Optional[str], video_id: str
) -> CaptionTrack:
    """Pick the caption track to download

    The first track is the platform's default. A requested language must match
    a track's language code exactly; "en" does not match "en-US".

    Raises:
        NoTranscriptAvailableError: If the video has no tracks
        LanguageNotAvailableError: If no track has the requested language
    """
    if not tracks:
        raise NoTranscriptAvailableError(video_id)

    if lang is None:
        return tracks[0]

    for track in tracks:
        if track.language_code == lang:
            return track

    raise LanguageNotAvailableError(lang, available_languages(tracks), video_id)


def available_languages(tracks: Sequence[CaptionTrack]) -> List[str]:
    """Language codes of ``tracks`` in platform order"""
    return [track.language_code for track in tracks]
