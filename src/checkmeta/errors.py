"""Exceptions raised by checkmeta."""


class CheckMetaError(Exception):
    """Base class for analysis errors."""

    pass


class NoMediaTrackError(CheckMetaError):
    """Probing succeeded but found neither a General nor a Video track."""

    def __init__(self, message: str | None = None):
        super().__init__(
            message
            or "Could not read video information. The file format may not be supported."
        )


class ProbeFailureError(CheckMetaError):
    """The probing engine failed (corrupt file, unsupported container, read error)."""

    def __init__(self, message: str, engine: str | None = None):
        self.engine = engine
        super().__init__(f"Analysis failed: {message}")
