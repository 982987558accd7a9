"""Transcript retrieval pipeline"""

import logging
from typing import List, Optional

import requests

from ..config import config as settings
from ..errors import EmptyTranscriptError, NoTranscriptAvailableError
from ..models import CaptionTrack, RetrievalConfig, TranscriptEntry
from .http_client import HttpClient, decode_body
from .timedtext import parse_timedtext
from .track_selector import available_languages, select_track
from .track_sources import HtmlScrapeSource, InnerTubeSource, TrackListSource, browser_headers
from .video_id import extract_video_id

logger = logging.getLogger(__name__)


class TranscriptFetcher:
    """Fetcher for YouTube video transcripts

    Scrapes the watch page first. If that yields an empty transcript, asks the
    InnerTube player endpoint instead. Every other failure is raised as is.
    """

    def __init__(
        self,
        http: Optional[HttpClient] = None,
        user_agent: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client_name: Optional[str] = None,
        client_version: Optional[str] = None,
    ):
        """Initialize transcript fetcher

        Args:
            http: HTTP client. If not provided, one is created with ``timeout``.
            user_agent: Browser User-Agent sent to the platform. If not provided, uses config.
            base_url: Platform origin. If not provided, uses config.
            timeout: Request timeout in seconds. If not provided, uses config.
            client_name: InnerTube client name. If not provided, uses config.
            client_version: InnerTube client version. If not provided, uses config.

        Raises:
            ValueError: If the configuration or the timeout is invalid
        """
        settings.validate()

        self._owns_http = http is None
        self.http = http or HttpClient(timeout=timeout)
        self.user_agent = user_agent or settings.user_agent
        self.html_source = HtmlScrapeSource(self.http, self.user_agent, base_url)
        self.innertube_source = InnerTubeSource(
            self.http,
            self.user_agent,
            base_url,
            client_name=client_name,
            client_version=client_version,
        )

    def close(self) -> None:
        """Release the HTTP session if this fetcher created it"""
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "TranscriptFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def fetch_transcript(
        self, video: str, config: Optional[RetrievalConfig] = None
    ) -> List[TranscriptEntry]:
        """Fetch transcript for a video

        Args:
            video: Video ID or URL
            config: Retrieval options (language preference)

        Returns:
            Transcript entries in chronological order

        Raises:
            TranscriptError: One of its subclasses, for any failure
        """
        config = config or RetrievalConfig()
        try:
            return self.fetch_with(self.html_source, video, config)
        except EmptyTranscriptError as e:
            logger.warning(
                "%s returned an empty transcript for %s, falling back to %s",
                e.method,
                e.video_id,
                self.innertube_source.method,
            )
            return self.fetch_with(self.innertube_source, video, config)

    def fetch_with(
        self, source: TrackListSource, video: str, config: RetrievalConfig
    ) -> List[TranscriptEntry]:
        """Fetch transcript using a single track list source

        Raises:
            EmptyTranscriptError: If the selected track has no entries
        """
        video_id = extract_video_id(video)
        logger.debug("Fetching transcript for %s using %s", video_id, source.method)

        tracks = source.fetch_tracks(video_id, config)
        track = select_track(tracks, config.lang, video_id)
        logger.debug("Selected %s track for %s", track.language_code, video_id)

        entries = self.download_track(track, video_id, config)
        if not entries:
            raise EmptyTranscriptError(video_id, source.method)

        logger.info("Fetched %d entries for %s using %s", len(entries), video_id, source.method)
        return entries

    def download_track(
        self, track: CaptionTrack, video_id: str, config: RetrievalConfig
    ) -> List[TranscriptEntry]:
        """Download and parse one caption track

        Raises:
            NoTranscriptAvailableError: If the track document request fails
        """
        response = self.http.get(
            track.base_url,
            headers=browser_headers(self.user_agent, config.lang),
            video_id=video_id,
        )
        if response.status_code != requests.codes.ok:
            logger.debug("Track document for %s returned HTTP %s", video_id, response.status_code)
            raise NoTranscriptAvailableError(video_id)

        document = decode_body(response, "XML transcript", video_id)
        return parse_timedtext(document, config.lang, track.language_code)

    def list_languages(self, video: str) -> List[str]:
        """List the caption languages offered on the watch page

        Args:
            video: Video ID or URL

        Returns:
            Language codes in platform order
        """
        video_id = extract_video_id(video)
        return available_languages(self.html_source.fetch_tracks(video_id, RetrievalConfig()))


def fetch_transcript(video: str, lang: Optional[str] = None) -> List[TranscriptEntry]:
    """Fetch the transcript of ``video`` (ID or URL), optionally in ``lang``"""
    with TranscriptFetcher() as fetcher:
        return fetcher.fetch_transcript(video, RetrievalConfig(lang=lang))
