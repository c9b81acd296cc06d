"""Track models for MediaInfo probe results."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

# A single MediaInfo track: field name -> str/number, keyed by "@type"
RawTrack = dict[str, Any]

# MediaInfo JSON output: {"media": {"@ref": ..., "track": [RawTrack, ...]}}
ProbeResult = dict[str, Any]


class TrackType(str, Enum):
    """Track discriminator values found under "@type"."""

    GENERAL = "General"
    VIDEO = "Video"
    AUDIO = "Audio"
    TEXT = "Text"
    MENU = "Menu"
    OTHER = "Other"


class SelectedTracks(BaseModel):
    """First General, Video and Audio track of a probe result."""

    general: RawTrack | None = None
    video: RawTrack | None = None
    audio: RawTrack | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def has_media(self) -> bool:
        """Check if a General or Video track was found."""
        return self.general is not None or self.video is not None

    def by_priority(self) -> list[RawTrack]:
        """Return the present tracks in General > Video > Audio order."""
        return [t for t in (self.general, self.video, self.audio) if t is not None]
