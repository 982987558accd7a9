"""Transcript retrieval: identifier resolution, track sources and parsing"""

from .video_id import extract_video_id
from .track_selector import select_track, available_languages
from .timedtext import parse_timedtext
from .http_client import HttpClient
from .track_sources import TrackListSource, HtmlScrapeSource, InnerTubeSource, extract_json_fragment
from .transcript_fetcher import TranscriptFetcher, fetch_transcript

__all__ = [
    "extract_video_id",
    "select_track",
    "available_languages",
    "parse_timedtext",
    "HttpClient",
    "TrackListSource",
    "HtmlScrapeSource",
    "InnerTubeSource",
    "extract_json_fragment",
    "TranscriptFetcher",
    "fetch_transcript",
]
