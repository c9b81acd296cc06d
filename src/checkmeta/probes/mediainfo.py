"""MediaInfo probe backed by pymediainfo."""

import json
import logging
from typing import Any, ClassVar

from pymediainfo import MediaInfo

from checkmeta.errors import ProbeFailureError
from checkmeta.models import ProbeResult
from checkmeta.probes.base import BaseProbe
from checkmeta.utils.chunked import ChunkedReader, ChunkReader, SizeAccessor

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 64 * 1024
DEFAULT_PARSE_SPEED = 0.5


class MediaInfoProbe(BaseProbe):
    """Probe files with libmediainfo through pymediainfo.

    The source is wrapped in a ChunkedReader and handed to
    ``MediaInfo.parse`` as a file-like object, so libmediainfo pulls data
    in ``buffer_size`` chunks and seeks wherever it needs to. The complete
    field set is requested so that Duration_String3 and the
    Format_Information fields are present.
    """

    name: ClassVar[str] = "pymediainfo"
    priority: ClassVar[int] = 10

    def __init__(
        self,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        parse_speed: float = DEFAULT_PARSE_SPEED,
    ):
        self.buffer_size = buffer_size
        self.parse_speed = parse_speed

    @classmethod
    def is_available(cls) -> bool:
        """Check if the libmediainfo shared library can be loaded."""
        return bool(MediaInfo.can_parse())

    def analyze(self, size: SizeAccessor, read_chunk: ChunkReader) -> ProbeResult:
        """Run libmediainfo over the source and return its JSON output."""
        stream = ChunkedReader(size, read_chunk)
        logger.debug("Probing %d bytes with %s", stream.size, self.name)
        try:
            output = MediaInfo.parse(
                stream,
                output="JSON",
                full=True,
                parse_speed=self.parse_speed,
                buffer_size=self.buffer_size,
            )
        except Exception as e:
            raise ProbeFailureError(str(e) or e.__class__.__name__, engine=self.name) from e
        finally:
            stream.close()

        return self._decode(output)

    def _decode(self, output: Any) -> ProbeResult:
        """Decode MediaInfo's JSON text output."""
        if not output:
            raise ProbeFailureError("MediaInfo returned no output", engine=self.name)
        try:
            data = json.loads(output)
        except json.JSONDecodeError as e:
            raise ProbeFailureError(f"Invalid MediaInfo output: {e}", engine=self.name) from e
        if not isinstance(data, dict):
            raise ProbeFailureError("Unexpected MediaInfo output", engine=self.name)
        return data
