"""
Reply text for chat commands.

Pure functions only; the dispatcher decides when to send what.
"""

from __future__ import annotations

from decimal import Decimal

from faucetbot.backend.models import DripResponse

COMMAND_PREFIX = "!"

BALANCE_ERROR = "An error occured, please check the server logs."
UNEXPECTED_ERROR = "An unexpected error occured, please check the server logs"


def format_amount(value: Decimal | float | int) -> str:
    """
    Render a number without exponent notation or trailing zeros.

    >>> format_amount(Decimal("5.000"))
    '5'
    >>> format_amount(0.5)
    '0.5'
    """
    number = value if isinstance(value, Decimal) else Decimal(str(value))
    return format(number.normalize(), "f")


def to_units(base_units: Decimal, decimals: int) -> Decimal:
    """Convert an amount in base units to whole units."""
    return base_units / (Decimal(10) ** decimals)


def format_balance(balance: Decimal, decimals: int, unit: str) -> str:
    """Reply for !balance, given the raw balance in base units."""
    return f"The faucet has {format_amount(to_units(balance, decimals))} {unit}s remaining."


def format_drip_response(
    response: DripResponse, sender: str, amount: float, unit: str
) -> str:
    """Reply for a !drip the backend answered (successfully or not)."""
    if response.is_success:
        return f"Sent {sender} {format_amount(amount)} {unit}s. Extrinsic hash: {response.hash}"
    return response.error or UNEXPECTED_ERROR


def incompatible_address_message(sender: str) -> str:
    return f"{sender} provided an incompatible address."


def invalid_amount_message(sender: str) -> str:
    return f"{sender} provided an invalid amount."


def help_message(unit: str, message: str = "") -> str:
    """
    The command list, optionally led by ``message`` (e.g. "Unknown command").
    """
    lead = f"{message} - " if message else ""
    return (
        f"{lead}The following commands are supported:\n"
        f"!balance - Get the faucet's balance.\n"
        f"!drip <Address>[:ParachainId] - Send {unit}s to <Address>, if the optional suffix "
        f"`:SomeParachainId` is given a teleport will be issued.\n"
        f"!help - Print this message"
    )
