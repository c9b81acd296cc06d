"""Default output formatter - labelled metadata rows."""

from checkmeta.models import NormalizedMetadata

LABEL_WIDTH = 14


def format_default(metadata: NormalizedMetadata) -> str:
    """Format metadata as labelled rows.

    Rows follow the fixed display order. Badges (resolution class, bit
    rate mode) are shown in brackets after the value.
    """
    lines = []

    lines.append("=" * 70)
    lines.append(f"File: {metadata.name}")
    lines.append("=" * 70)

    for row in metadata.rows():
        label = f"{row.label}:".ljust(LABEL_WIDTH)
        value = f"{row.value} [{row.badge}]" if row.badge else row.value
        lines.append(f"  {label}{value}")

    lines.append("=" * 70)

    return "\n".join(lines)
