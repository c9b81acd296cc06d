"""Normalized metadata record."""

from pydantic import BaseModel, ConfigDict, field_validator

# Sentinel shown for any value that could not be determined
UNKNOWN = "unknown"


class DisplayRow(BaseModel):
    """One labelled line of the metadata display."""

    key: str
    label: str
    value: str
    badge: str | None = None

    model_config = ConfigDict(frozen=True)


class NormalizedMetadata(BaseModel):
    """Canonical, display-ready metadata for one analyzed file.

    Every field holds either a meaningful value or the "unknown" sentinel,
    so consumers never have to deal with missing values. Instances are
    immutable: a new analysis produces a new record.
    """

    name: str
    updated_date: str = UNKNOWN
    size: str = UNKNOWN
    resolution: str = UNKNOWN
    resolution_label: str = UNKNOWN
    bit_rate: str = UNKNOWN
    bit_rate_mode: str = UNKNOWN
    frame_rate: str = UNKNOWN
    duration: str = UNKNOWN
    container: str = UNKNOWN
    video_codec: str = UNKNOWN
    audio_codec: str = UNKNOWN

    model_config = ConfigDict(frozen=True)

    @field_validator("*")
    @classmethod
    def _not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("metadata fields must not be empty")
        return value

    def rows(self) -> list[DisplayRow]:
        """Return the display rows in their fixed order.

        The resolution row carries the resolution class as badge; the bit
        rate row carries the rate mode only when it is known.
        """
        mode_badge = self.bit_rate_mode if self.bit_rate_mode != UNKNOWN else None
        return [
            DisplayRow(key="name", label="File name", value=self.name),
            DisplayRow(key="updated_date", label="Modified", value=self.updated_date),
            DisplayRow(key="duration", label="Duration", value=self.duration),
            DisplayRow(key="size", label="Size", value=self.size),
            DisplayRow(
                key="resolution",
                label="Resolution",
                value=self.resolution,
                badge=self.resolution_label,
            ),
            DisplayRow(key="bit_rate", label="Bit rate", value=self.bit_rate, badge=mode_badge),
            DisplayRow(key="frame_rate", label="Frame rate", value=self.frame_rate),
            DisplayRow(key="container", label="Container", value=self.container),
            DisplayRow(key="video_codec", label="Video codec", value=self.video_codec),
            DisplayRow(key="audio_codec", label="Audio codec", value=self.audio_codec),
        ]
