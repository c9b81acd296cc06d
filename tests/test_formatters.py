"""Tests for output formatters."""

import json

from checkmeta.formatters import (
    format_default,
    format_json,
    format_probe_json,
    format_quiet,
    format_rows_json,
    to_dict,
)
from checkmeta.models import NormalizedMetadata
from checkmeta.normalize import assemble


def test_format_default(mp4_probe, file_info):
    output = format_default(assemble(mp4_probe, file_info))
    lines = output.splitlines()

    assert lines[0] == "=" * 70
    assert lines[1] == "File: clip.mp4"
    assert "  Resolution:   1920 x 1080 [FullHD]" in lines
    assert "  Bit rate:     2.86 Mbps [VBR]" in lines
    assert "  Duration:     00:02:15" in lines
    assert "  Video codec:  Advanced Video Coding（H.264） [High]" in lines
    assert lines[-1] == "=" * 70


def test_format_default_row_order(mp4_probe, file_info):
    output = format_default(assemble(mp4_probe, file_info))
    labels = [line.split(":")[0].strip() for line in output.splitlines() if line.startswith("  ")]
    assert labels == [
        "File name",
        "Modified",
        "Duration",
        "Size",
        "Resolution",
        "Bit rate",
        "Frame rate",
        "Container",
        "Video codec",
        "Audio codec",
    ]


def test_format_default_hides_unknown_mode():
    output = format_default(NormalizedMetadata(name="a.mp4"))
    assert "  Bit rate:     unknown" in output.splitlines()


def test_format_json(mp4_probe, file_info):
    metadata = assemble(mp4_probe, file_info)
    data = json.loads(format_json(metadata))
    assert data == to_dict(metadata)
    assert data["video_codec"] == "Advanced Video Coding（H.264） [High]"
    assert "（H.264）" in format_json(metadata)


def test_format_rows_json(mp4_probe, file_info):
    rows = json.loads(format_rows_json(assemble(mp4_probe, file_info)))
    assert len(rows) == 10
    assert rows[4] == {
        "key": "resolution",
        "label": "Resolution",
        "value": "1920 x 1080",
        "badge": "FullHD",
    }


def test_format_probe_json(mp4_probe):
    assert json.loads(format_probe_json(mp4_probe)) == mp4_probe


def test_format_quiet(mp4_probe, file_info):
    assert format_quiet(assemble(mp4_probe, file_info)) == (
        "clip.mp4 | 00:02:15 | 1920 x 1080 (FullHD) | 2.86 Mbps"
        " | Advanced Video Coding（H.264） [High] | Advanced Audio Coding（MPEG-4 AAC）"
    )


def test_format_quiet_unknown():
    assert format_quiet(NormalizedMetadata(name="a.mp4")) == (
        "a.mp4 | unknown | unknown | unknown | unknown | unknown"
    )
