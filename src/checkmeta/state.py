"""Display state for the current analysis.

The viewer owns a single DisplayState value. Every transition replaces it
as a whole: starting an analysis clears the previous metadata, a success
sets metadata and clears the error, a failure clears metadata and sets the
error. Results from an analysis that has since been superseded by a newer
one are dropped.
"""

import logging
from itertools import count

from pydantic import BaseModel, ConfigDict

from checkmeta.analyze import analyze_file
from checkmeta.errors import CheckMetaError
from checkmeta.models import NormalizedMetadata
from checkmeta.probes import BaseProbe

logger = logging.getLogger(__name__)


class DisplayState(BaseModel):
    """What the presentation layer currently shows."""

    metadata: NormalizedMetadata | None = None
    error: str | None = None
    analyzing: bool = False

    model_config = ConfigDict(frozen=True)


class MetadataViewer:
    """Holds the current DisplayState and runs analyses against it."""

    def __init__(self, probe: BaseProbe | None = None, date_format: str | None = None):
        self.probe = probe
        self.date_format = date_format
        self._state = DisplayState()
        self._tickets = count(1)
        self._current = 0

    @property
    def state(self) -> DisplayState:
        return self._state

    def begin(self) -> int:
        """Start a new analysis and return its ticket.

        Any analysis begun earlier is superseded.
        """
        self._current = next(self._tickets)
        self._state = DisplayState(analyzing=True)
        return self._current

    def complete(self, ticket: int, metadata: NormalizedMetadata) -> bool:
        """Show the metadata of a finished analysis.

        Returns:
            False if the ticket was superseded and the result dropped
        """
        return self._commit(ticket, DisplayState(metadata=metadata))

    def fail(self, ticket: int, error: Exception | str) -> bool:
        """Show the error of a failed analysis.

        Returns:
            False if the ticket was superseded and the error dropped
        """
        return self._commit(ticket, DisplayState(error=str(error)))

    def _commit(self, ticket: int, state: DisplayState) -> bool:
        if ticket != self._current:
            logger.debug(f"Dropping result of superseded analysis #{ticket}")
            return False
        self._state = state
        return True

    def analyze(self, path: str) -> DisplayState:
        """Analyze a file and replace the display state with the outcome."""
        ticket = self.begin()
        try:
            metadata = analyze_file(path, probe=self.probe, date_format=self.date_format)
        except (CheckMetaError, OSError) as e:
            logger.error(f"Analysis of {path} failed: {e}")
            self.fail(ticket, e)
        else:
            self.complete(ticket, metadata)
        return self._state
