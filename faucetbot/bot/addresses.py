"""
Receiver parsing and address validation for !drip.

The receiver argument has the form ``<address>[:<parachainId>]``. Addresses
are validated by SS58 decoding; nothing else about them is checked here,
the backend decides whether the network accepts them.
"""

from __future__ import annotations

from dataclasses import dataclass

from scalecodec.utils.ss58 import ss58_decode


@dataclass(frozen=True)
class Receiver:
    """Where a drip should go."""

    address: str
    parachain_id: str = ""


def parse_receiver(argument: str) -> Receiver:
    """
    Split ``address[:parachainId]`` into its parts.

    Only the first two ``:``-separated segments are used; anything after a
    second colon is ignored.
    """
    segments = argument.strip().split(":")
    parachain_id = segments[1] if len(segments) > 1 else ""
    return Receiver(address=segments[0], parachain_id=parachain_id)


def is_valid_address(address: str) -> bool:
    """Return True if the address decodes as SS58 (or is a hex-encoded public key)."""
    try:
        if address.startswith("0x"):
            # ss58_decode passes hex keys through untouched
            bytes.fromhex(address[2:])
        else:
            ss58_decode(address)
    except (ValueError, IndexError):
        return False
    return True
