"""Video identifier extraction"""

import re

from ..errors import InvalidVideoIdError

VIDEO_ID_LENGTH = 11

# watch?v=, /v/, /e/, /embed/, /shorts/, nested paths and youtu.be short links
VIDEO_ID_PATTERN = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?|shorts)/|.*[?&]v=)|youtu\.be/)"
    r"([a-z0-9_-]{11})(?![a-z0-9_-])",
    re.IGNORECASE,
)


def extract_video_id(video_input: str) -> str:
    """Extract the 11-character video ID from an ID or URL

    Args:
        video_input: Video ID or any supported YouTube URL

    Returns:
        Video ID (11 characters)

    Raises:
        InvalidVideoIdError: If no video ID can be derived
    """
    # Anything exactly 11 characters long is taken as an ID as-is
    if len(video_input) == VIDEO_ID_LENGTH:
        return video_input

    match = VIDEO_ID_PATTERN.search(video_input)
    if match:
        return match.group(1)

    raise InvalidVideoIdError(video_input)
