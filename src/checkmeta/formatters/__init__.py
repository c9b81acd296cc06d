"""Output formatters for checkmeta."""

from .default import format_default
from .json import format_json, format_probe_json, format_rows_json, to_dict
from .quiet import format_quiet

__all__ = [
    "format_default",
    "format_json",
    "format_rows_json",
    "format_probe_json",
    "format_quiet",
    "to_dict",
]
