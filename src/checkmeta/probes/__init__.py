"""Media probing engines for checkmeta."""

from checkmeta.errors import ProbeFailureError
from checkmeta.probes.base import BaseProbe
from checkmeta.probes.mediainfo import MediaInfoProbe

# All probe classes (priority decides the default)
_PROBES: list[type[BaseProbe]] = [
    MediaInfoProbe,
]


def get_available_probes() -> list[type[BaseProbe]]:
    """Get probe classes that are available on this system.

    Returns:
        Probe classes sorted by priority (lowest first).
    """
    available = [probe_cls for probe_cls in _PROBES if probe_cls.is_available()]
    available.sort(key=lambda cls: cls.priority)
    return available


def get_probe_status() -> dict[str, bool]:
    """Get availability status of all probes.

    Returns:
        Dict mapping probe names to availability status.
    """
    return {probe_cls.name: probe_cls.is_available() for probe_cls in _PROBES}


def get_default_probe(**options) -> BaseProbe:
    """Instantiate the highest priority available probe.

    Raises:
        ProbeFailureError: If no probe is available
    """
    available = get_available_probes()
    if not available:
        raise ProbeFailureError(
            "libmediainfo not found. Install MediaInfo (e.g. apt install libmediainfo0v5)"
        )
    return available[0](**options)


__all__ = [
    "BaseProbe",
    "MediaInfoProbe",
    "get_available_probes",
    "get_probe_status",
    "get_default_probe",
]
