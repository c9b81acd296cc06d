"""Core analysis functions."""

import json
import logging
import os
from datetime import datetime

from checkmeta.config import get_config
from checkmeta.errors import ProbeFailureError
from checkmeta.models import FileInfo, NormalizedMetadata, ProbeResult
from checkmeta.normalize import assemble
from checkmeta.probes import BaseProbe, get_default_probe
from checkmeta.utils.chunked import ChunkReader, FileSource, SizeAccessor

logger = logging.getLogger(__name__)


def get_file_info(path: str) -> FileInfo:
    """Get basic file information.

    Args:
        path: Path to the file

    Returns:
        FileInfo object with file details
    """
    stat = os.stat(path)

    return FileInfo(
        path=os.path.abspath(path),
        filename=os.path.basename(path),
        extension=os.path.splitext(path)[1].lower(),
        size_bytes=stat.st_size,
        modified=datetime.fromtimestamp(stat.st_mtime),
    )


def _default_probe() -> BaseProbe:
    config = get_config()
    return get_default_probe(
        buffer_size=config.probe.chunk_size,
        parse_speed=config.probe.parse_speed,
    )


def probe_source(
    size: SizeAccessor,
    read_chunk: ChunkReader,
    probe: BaseProbe | None = None,
) -> ProbeResult:
    """Run a probe over a byte source.

    Any engine error is wrapped in ProbeFailureError with the original
    message.
    """
    probe = probe or _default_probe()
    try:
        result = probe.analyze(size, read_chunk)
    except ProbeFailureError:
        raise
    except Exception as e:
        logger.error(f"{probe.name} failed: {e}")
        raise ProbeFailureError(str(e) or e.__class__.__name__, engine=probe.name) from e

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("MediaInfo result:\n%s", json.dumps(result, indent=2, ensure_ascii=False))
    return result


def analyze_source(
    size: SizeAccessor,
    read_chunk: ChunkReader,
    file_info: FileInfo,
    probe: BaseProbe | None = None,
    date_format: str | None = None,
) -> NormalizedMetadata:
    """Probe a byte source and normalize the result.

    Args:
        size: Returns the total byte length of the source
        read_chunk: Reads (length, offset) byte ranges from the source
        file_info: Name, size and modification time shown in the record
        probe: Probe to use (default: highest priority available)
        date_format: strftime pattern for the modification time

    Returns:
        NormalizedMetadata for the source

    Raises:
        ProbeFailureError: If probing fails
        NoMediaTrackError: If the result has neither a General nor a Video track
    """
    result = probe_source(size, read_chunk, probe)
    return assemble(
        result,
        file_info,
        date_format=date_format or get_config().display.date_format,
    )


def probe_file(path: str, probe: BaseProbe | None = None) -> ProbeResult:
    """Return the raw probe result for a local file.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"File not found: {path}")

    with FileSource(path) as source:
        return probe_source(source.size, source.read_chunk, probe)


def analyze_file(
    path: str,
    probe: BaseProbe | None = None,
    date_format: str | None = None,
) -> NormalizedMetadata:
    """Analyze a video file and return its normalized metadata.

    This is the main entry point for video analysis. It:
    1. Gets basic file information
    2. Probes the file in chunks (the file is never read whole)
    3. Selects the General/Video/Audio tracks and normalizes each field

    Args:
        path: Path to the video file
        probe: Probe to use (default: highest priority available)
        date_format: strftime pattern for the modification time

    Returns:
        NormalizedMetadata object

    Raises:
        FileNotFoundError: If the file does not exist
        ProbeFailureError: If probing fails
        NoMediaTrackError: If no General or Video track was found
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"File not found: {path}")

    file_info = get_file_info(path)

    with FileSource(path) as source:
        return analyze_source(
            source.size,
            source.read_chunk,
            file_info,
            probe=probe,
            date_format=date_format,
        )
