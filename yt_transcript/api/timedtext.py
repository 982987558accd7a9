"""Timed-text (XML caption document) parsing"""

import re
from typing import List, Optional

from ..models import TranscriptEntry

TEXT_PATTERN = re.compile(r'<text start="([^"]*)" dur="([^"]*)">([^<]*)</text>')

# Plain decimal, optionally signed or with an exponent
NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

# Applied in order, one pass each
HTML_ENTITIES = (
    ("&#39;", "'"),
    ("&amp;", "&"),
    ("&quot;", '"'),
)


def parse_seconds(value: str) -> float:
    """Parse a numeric attribute, defaulting to 0.0"""
    if not NUMBER_PATTERN.fullmatch(value):
        return 0.0
    return float(value)


def unescape_text(text: str) -> str:
    for entity, char in HTML_ENTITIES:
        text = text.replace(entity, char)
    return text


def parse_timedtext(
    document: str, lang: Optional[str], fallback_lang: str
) -> List[TranscriptEntry]:
    """Parse a timed-text document into transcript entries

    Fragments that do not match ``<text start=".." dur="..">..</text>`` are
    ignored, so a malformed document yields an empty list rather than an error.

    Args:
        document: Timed-text XML body
        lang: Language requested by the caller, if any
        fallback_lang: Language code of the downloaded track

    Returns:
        Entries in document order
    """
    entry_lang = lang if lang is not None else fallback_lang
    return [
        TranscriptEntry(
            text=unescape_text(text),
            duration=parse_seconds(dur),
            offset=parse_seconds(start),
            lang=entry_lang,
        )
        for start, dur, text in TEXT_PATTERN.findall(document)
    ]
