"""Shared fixtures for all tests."""

import json
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

VIDEO_ID = "dQw4w9WgXcQ"
EN_TRACK_URL = f"https://www.youtube.com/api/timedtext?v={VIDEO_ID}&lang=en"
DE_TRACK_URL = f"https://www.youtube.com/api/timedtext?v={VIDEO_ID}&lang=de"


# ── Sample data factories ──────────────────────────────────────────


@pytest.fixture
def video_id():
    return VIDEO_ID


@pytest.fixture
def caption_tracks_json():
    """Caption track list as the platform serves it."""
    return [
        {
            "baseUrl": EN_TRACK_URL,
            "name": {"simpleText": "English"},
            "vssId": ".en",
            "languageCode": "en",
            "isTranslatable": True,
        },
        {
            "baseUrl": DE_TRACK_URL,
            "name": {"simpleText": "German"},
            "vssId": ".de",
            "languageCode": "de",
            "isTranslatable": True,
        },
    ]


@pytest.fixture
def captions_json(caption_tracks_json):
    return {
        "playerCaptionsTracklistRenderer": {
            "captionTracks": caption_tracks_json,
            "audioTracks": [{"captionTrackIndices": [0, 1]}],
            "defaultAudioTrackIndex": 0,
        }
    }


@pytest.fixture
def watch_page(captions_json):
    """Watch page HTML with an embedded player response."""
    return (
        "<!DOCTYPE html><html><head><title>Test Video - YouTube</title></head><body>"
        '<script>var ytInitialPlayerResponse = {"responseContext":{"serviceTrackingParams":[]},'
        '"playabilityStatus":{"status":"OK","playableInEmbed":true},'
        f'"captions":{json.dumps(captions_json, separators=(",", ":"))},'
        f'"videoDetails":{{"videoId":"{VIDEO_ID}","title":"Test Video"}}}};</script>'
        "</body></html>"
    )


@pytest.fixture
def watch_page_without_captions():
    return (
        "<html><body><script>var ytInitialPlayerResponse = "
        '{"playabilityStatus":{"status":"OK"},'
        f'"videoDetails":{{"videoId":"{VIDEO_ID}"}}}};</script></body></html>'
    )


@pytest.fixture
def innertube_body(captions_json):
    return json.dumps({
        "responseContext": {},
        "playabilityStatus": {"status": "OK"},
        "captions": captions_json,
        "videoDetails": {"videoId": VIDEO_ID},
    })


@pytest.fixture
def timedtext_xml():
    """Timed-text document with three fragments."""
    return (
        '<?xml version="1.0" encoding="utf-8" ?><transcript>'
        '<text start="0.5" dur="2.1">Hello world.</text>'
        '<text start="2.6" dur="3.0">It&#39;s a &quot;test&quot;.</text>'
        '<text start="5.6" dur="1.5">Rock &amp; roll</text>'
        "</transcript>"
    )


@pytest.fixture
def make_response():
    """Build a fake ``requests.Response``."""

    def _make(body="", status_code=200):
        resp = MagicMock()
        resp.status_code = status_code
        resp.content = body.encode("utf-8") if isinstance(body, str) else body
        return resp

    return _make


@pytest.fixture
def fake_http(make_response):
    """A mocked HttpClient serving pages by URL.

    Assign ``fake_http.pages[url] = body`` (or ``(body, status)``) and
    ``fake_http.player_body`` for the InnerTube endpoint.
    """
    http = MagicMock()
    http.pages = {}
    http.player_body = "{}"

    def _get(url, headers=None, video_id=None):
        page = http.pages.get(url, ("", 404))
        if isinstance(page, tuple):
            return make_response(*page)
        return make_response(page)

    def _post_json(url, payload, headers=None, video_id=None):
        return make_response(http.player_body)

    http.get.side_effect = _get
    http.post_json.side_effect = _post_json
    return http
