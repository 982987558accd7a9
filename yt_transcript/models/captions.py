"""Shapes of the captions JSON served by the watch page and the player endpoint"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class CaptionTrack(BaseModel):
    """One caption stream of a video, in one language"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    base_url: str = Field(..., alias="baseUrl", description="Timed-text document URL")
    language_code: str = Field(..., alias="languageCode", description="Language code of the track")


class PlayerCaptionsTracklistRenderer(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    caption_tracks: List[CaptionTrack] = Field(..., alias="captionTracks")


class CaptionsContainer(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    player_captions_tracklist_renderer: PlayerCaptionsTracklistRenderer = Field(
        ..., alias="playerCaptionsTracklistRenderer"
    )


class InnerTubeResponse(BaseModel):
    """The subset of the player endpoint response we read"""

    captions: Optional[CaptionsContainer] = None
