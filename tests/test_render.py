"""Tests for the render module."""

from transmission_core.render import render_record, HEADER_WIDTH, RECORD_WIDTH


def test_render_record_layout():
    line = render_record(12, 6, "3,4", [3, "7"], raw='<element id="x"/>')
    assert line == "12 6 3,4".ljust(HEADER_WIDTH) + "3 7".ljust(RECORD_WIDTH - HEADER_WIDTH) + '  # <element id="x"/>'


def test_render_record_without_fields():
    line = render_record(0, 1, "0,0", [])
    assert line.startswith("0 1 0,0 ")
    assert line.endswith("  # ")
    assert line.index("#") == RECORD_WIDTH + 2


def test_missing_field_renders_empty():
    # an absent attribute leaves its column blank
    line = render_record(0, 5, "0,0", [0, None])
    assert line[:RECORD_WIDTH].split() == ["0", "5", "0,0", "0"]


def test_long_header_is_not_truncated():
    line = render_record(123456, 13, "-1234.5,6789.25", [0, 1])
    assert line.startswith("123456 13 -1234.5,6789.25 ")
