"""Base probe class."""

from abc import ABC, abstractmethod
from typing import ClassVar

from checkmeta.models import ProbeResult
from checkmeta.utils.chunked import ChunkReader, SizeAccessor


class BaseProbe(ABC):
    """Abstract base class for media probing engines.

    A probe turns a byte source into MediaInfo-shaped JSON
    (``{"media": {"track": [...]}}``). It only sees the source through a
    size accessor and a chunk reader, so it can be swapped for a stub in
    tests or for another engine without touching normalization.

    Attributes:
        name: Human-readable name of the probe
        priority: Lower numbers are preferred (default: 100)
    """

    name: ClassVar[str] = "base"
    priority: ClassVar[int] = 100

    @classmethod
    @abstractmethod
    def is_available(cls) -> bool:
        """Check if this probe is available.

        Returns:
            True if all dependencies are available
        """
        pass

    @abstractmethod
    def analyze(self, size: SizeAccessor, read_chunk: ChunkReader) -> ProbeResult:
        """Probe a byte source.

        Args:
            size: Returns the total byte length of the source
            read_chunk: Reads (length, offset) byte ranges from the source

        Returns:
            MediaInfo JSON result as a dict

        Raises:
            ProbeFailureError: If the engine cannot read the source
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, priority={self.priority})"
