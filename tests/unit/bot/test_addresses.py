"""
Tests for receiver parsing and address validation.
"""

import pytest

from faucetbot.bot.addresses import Receiver, is_valid_address, parse_receiver

# Well-known development account (//Alice), generic Substrate prefix
ALICE = "5GrwvaEF5zXb26Fz9rcQpDWS57CtERHpNehXCPcNoHGKutQY"


class TestParseReceiver:
    def test_plain_address(self):
        assert parse_receiver(ALICE) == Receiver(address=ALICE, parachain_id="")

    def test_address_with_parachain_id(self):
        assert parse_receiver(f"{ALICE}:2000") == Receiver(address=ALICE, parachain_id="2000")

    def test_surrounding_whitespace_is_stripped(self):
        assert parse_receiver(f"  {ALICE}:1000 \n").parachain_id == "1000"

    def test_trailing_colon_means_no_parachain(self):
        assert parse_receiver(f"{ALICE}:").parachain_id == ""

    def test_only_first_two_segments_are_used(self):
        assert parse_receiver(f"{ALICE}:2000:extra") == Receiver(address=ALICE, parachain_id="2000")


class TestIsValidAddress:
    def test_known_ss58_address_is_valid(self):
        assert is_valid_address(ALICE) is True
    @pytest.mark.parametrize(
        "address",
        [
            "",
            "5ABC",
            "not-an-address",
            "0OIl",  # characters outside the base58 alphabet
            ALICE[:-1] + ("Z" if ALICE[-1] != "Z" else "Y"),  # broken checksum
        ],
    )
    def test_invalid_addresses_are_rejected(self, address):
        assert is_valid_address(address) is False

    def test_hex_public_key_is_valid(self):
        assert is_valid_address("0x" + "d4" * 32) is True

    def test_malformed_hex_is_rejected(self):
        assert is_valid_address("0xnothex") is False
