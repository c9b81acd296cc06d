"""JSON output formatter."""

import json
from typing import Any

from checkmeta.models import NormalizedMetadata, ProbeResult


def format_json(metadata: NormalizedMetadata, indent: int = 2) -> str:
    """Format metadata as JSON string.

    Args:
        metadata: NormalizedMetadata object
        indent: JSON indentation level

    Returns:
        JSON formatted string
    """
    return json.dumps(to_dict(metadata), indent=indent, ensure_ascii=False)


def format_rows_json(metadata: NormalizedMetadata, indent: int = 2) -> str:
    """Format the display rows (label, value, badge) as a JSON array."""
    data = [row.model_dump(mode="json") for row in metadata.rows()]
    return json.dumps(data, indent=indent, ensure_ascii=False)


def format_probe_json(probe: ProbeResult, indent: int = 2) -> str:
    """Format a raw probe result as JSON string."""
    return json.dumps(probe, indent=indent, ensure_ascii=False, default=str)


def to_dict(metadata: NormalizedMetadata) -> dict[str, Any]:
    """Convert metadata to dictionary.

    Args:
        metadata: NormalizedMetadata object

    Returns:
        Dictionary representation
    """
    return metadata.model_dump(mode="json")
