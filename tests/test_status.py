"""Tests for status.py (Details contract and StatusResult)."""

from __future__ import annotations

from whatsup.core.transport import TransportError
from whatsup.errors.classify import unable_to_make_client_request
from whatsup.providers.slack import decode_slack
from whatsup.providers.statuspageio import decode_statuspageio
from whatsup.status import Details, StatusResult


class TestDetails:
    """Tests for the Details protocol."""

    def test_both_providers_satisfy_details(self, slack_payload, statuspage_payload):
        """Every provider record reads through the same four properties."""
        for details in (decode_slack(slack_payload), decode_statuspageio(statuspage_payload)):
            assert isinstance(details, Details)
            assert isinstance(details.indicator, str)
            assert isinstance(details.name, str)
            assert details.updated_at.tzinfo is not None
            assert details.url.startswith("https://")

    def test_plain_object_is_not_details(self):
        """Objects without the properties are not Details."""
        assert not isinstance(object(), Details)


class TestStatusResult:
    """Tests for StatusResult."""

    def test_ok(self, slack_payload):
        """ok() carries details only."""
        details = decode_slack(slack_payload)

        result = StatusResult.ok(details)

        assert result.success is True
        assert result.details is details
        assert result.error is None

    def test_fail(self):
        """fail() carries the error only."""
        error = unable_to_make_client_request(TransportError("down"))

        result = StatusResult.fail(error)

        assert result.success is False
        assert result.details is None
        assert result.error is error

    def test_unpacks(self, statuspage_payload):
        """Results unpack as (details, error)."""
        details = decode_statuspageio(statuspage_payload)

        got_details, got_error = StatusResult.ok(details)

        assert got_details is details
        assert got_error is None
