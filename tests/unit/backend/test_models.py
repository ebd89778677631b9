"""
Tests for backend payload models.
"""

import pytest
from pydantic import ValidationError

from faucetbot.backend.models import DripRequest, DripResponse


class TestDripResponse:
    @pytest.mark.parametrize(
        "payload",
        [{"hash": ""}, {"hash": None}, {}, {"error": "Faucet is empty"}],
    )
    def test_missing_or_empty_hash_is_failure(self, payload):
        assert DripResponse.model_validate(payload).is_success is False

    def test_non_empty_hash_is_success(self):
        assert DripResponse.model_validate({"hash": "0x1234"}).is_success is True

    def test_extra_fields_are_ignored(self):
        response = DripResponse.model_validate({"hash": "0x1", "block": 42})
        assert response.hash == "0x1"


class TestDripRequest:
    def test_parachain_id_defaults_to_empty(self):
        request = DripRequest(address="5Grw", amount=1.0, sender="@a:matrix.org")
        assert request.model_dump()["parachain_id"] == ""

    def test_amount_must_be_positive(self):
        with pytest.raises(ValidationError):
            DripRequest(address="5Grw", amount=0, sender="@a:matrix.org")
