"""Caption track list acquisition

Two sources expose the same track list: the watch page, which embeds the
captions JSON inside its HTML, and the private player endpoint used by the
web client. Both hand back ``CaptionTrack`` lists; everything after that is
shared by ``TranscriptFetcher``.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..config import config as settings
from ..errors import (
    TooManyRequestsError,
    TranscriptParsingError,
    TranscriptsDisabledError,
    VideoUnavailableError,
)
from ..models import CaptionsContainer, CaptionTrack, InnerTubeResponse, RetrievalConfig
from .http_client import HttpClient, decode_body

logger = logging.getLogger(__name__)

CAPTCHA_MARKER = 'class="g-recaptcha"'
PLAYABILITY_MARKER = '"playabilityStatus":'
CAPTIONS_MARKER = '"captions":'
VIDEO_DETAILS_MARKER = ',"videoDetails'

ModelT = TypeVar("ModelT", bound=BaseModel)


def extract_json_fragment(document: str, start_marker: str, end_marker: str) -> Optional[str]:
    """Return the text between ``start_marker`` and the following ``end_marker``

    Returns None if ``start_marker`` does not occur. If ``end_marker`` does not
    follow, the fragment runs to the next ``start_marker`` or the end of the
    document.
    """
    parts = document.split(start_marker, 2)
    if len(parts) < 2:
        return None
    return parts[1].split(end_marker, 1)[0]


def browser_headers(user_agent: str, lang: Optional[str]) -> Dict[str, str]:
    headers = {"User-Agent": user_agent}
    if lang:
        headers["Accept-Language"] = lang
    return headers


def parse_json_model(model: Type[ModelT], data: str, video_id: str) -> ModelT:
    """Validate ``data`` against ``model``

    Raises:
        TranscriptParsingError: If ``data`` is not JSON or has the wrong shape
    """
    try:
        return model.model_validate_json(data)
    except ValidationError as e:
        raise TranscriptParsingError(f"Failed to parse captions JSON: {e}", video_id) from e


class TrackListSource(ABC):
    """A way of obtaining a video's caption tracks"""

    method: str = ""

    def __init__(
        self,
        http: HttpClient,
        user_agent: Optional[str] = None,
        base_url: Optional[str] = None,
    ):
        self.http = http
        self.user_agent = user_agent or settings.user_agent
        self.base_url = (base_url or settings.base_url).rstrip("/")

    def watch_url(self, video_id: str) -> str:
        return f"{self.base_url}/watch?v={video_id}"

    @abstractmethod
    def fetch_tracks(self, video_id: str, config: RetrievalConfig) -> List[CaptionTrack]:
        """Return the video's caption tracks in platform order"""


class HtmlScrapeSource(TrackListSource):
    """Reads the captions JSON embedded in the watch page"""

    method = "HTML scraping"

    def fetch_tracks(self, video_id: str, config: RetrievalConfig) -> List[CaptionTrack]:
        """Scrape the caption tracks from the watch page

        Raises:
            TooManyRequestsError: If the page is a captcha challenge
            VideoUnavailableError: If the page has no playability status
            TranscriptsDisabledError: If the page has no captions block
            TranscriptParsingError: If the page or captions JSON cannot be decoded
        """
        response = self.http.get(
            self.watch_url(video_id),
            headers=browser_headers(self.user_agent, config.lang),
            video_id=video_id,
        )
        html = decode_body(response, "HTML response", video_id)

        if CAPTCHA_MARKER in html:
            raise TooManyRequestsError(video_id)

        if PLAYABILITY_MARKER not in html:
            raise VideoUnavailableError(video_id)

        fragment = extract_json_fragment(html, CAPTIONS_MARKER, VIDEO_DETAILS_MARKER)
        if fragment is None:
            raise TranscriptsDisabledError(video_id)

        captions = parse_json_model(CaptionsContainer, fragment, video_id)
        return captions.player_captions_tracklist_renderer.caption_tracks


class InnerTubeSource(TrackListSource):
    """Asks the web client's private player endpoint for the caption tracks"""

    method = "InnerTube API"

    def __init__(
        self,
        http: HttpClient,
        user_agent: Optional[str] = None,
        base_url: Optional[str] = None,
        client_name: Optional[str] = None,
        client_version: Optional[str] = None,
    ):
        super().__init__(http, user_agent, base_url)
        self.client_name = client_name or settings.innertube_client_name
        self.client_version = client_version or settings.innertube_client_version

    @property
    def player_url(self) -> str:
        return f"{self.base_url}/youtubei/v1/player"

    def build_payload(self, video_id: str) -> Dict[str, object]:
        return {
            "context": {
                "client": {
                    "clientName": self.client_name,
                    "clientVersion": self.client_version,
                    "userAgent": self.user_agent,
                }
            },
            "videoId": video_id,
        }

    def build_headers(self, video_id: str, lang: Optional[str]) -> Dict[str, str]:
        # The endpoint only answers requests that look same-origin
        headers = {
            "Content-Type": "application/json",
            "Origin": self.base_url,
            "Referer": self.watch_url(video_id),
        }
        if lang:
            headers["Accept-Language"] = lang
        return headers

    def fetch_tracks(self, video_id: str, config: RetrievalConfig) -> List[CaptionTrack]:
        """Request the caption tracks from the player endpoint

        Raises:
            TranscriptsDisabledError: If the response has no captions section
            TranscriptParsingError: If the response cannot be decoded
        """
        response = self.http.post_json(
            self.player_url,
            self.build_payload(video_id),
            headers=self.build_headers(video_id, config.lang),
            video_id=video_id,
        )
        body = decode_body(response, "InnerTube response", video_id)
        player = parse_json_model(InnerTubeResponse, body, video_id)

        if player.captions is None:
            raise TranscriptsDisabledError(video_id)

        return player.captions.player_captions_tracklist_renderer.caption_tracks
