"""Unit tests for seeip log processors."""

import pytest

from seeip.logging.formatters import add_library_info, truncate_large_values


@pytest.mark.unit
def test_truncate_large_values():
    processor = truncate_large_values(max_length=10)

    event = processor(None, "info", {"body": "x" * 25, "status_code": 503})

    assert event["body"] == "x" * 10 + "...[truncated, 25 chars total]"
    assert event["status_code"] == 503


@pytest.mark.unit
def test_truncate_leaves_short_values():
    processor = truncate_large_values()

    event = processor(None, "info", {"event": "fetch_success"})

    assert event == {"event": "fetch_success"}


@pytest.mark.unit
def test_add_library_info():
    processor = add_library_info("seeip", "1.0.0")

    event = processor(None, "info", {"event": "ip_retrieved"})

    assert event["library"] == "seeip"
    assert event["library_version"] == "1.0.0"
