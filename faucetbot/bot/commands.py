"""
CommandDispatcher - routes chat messages to faucet commands.

Supported commands:
  !balance                               remaining faucet balance
  !drip <address>[:parachainId] [amount]  request tokens (amount: trusted senders only)
  !help                                  command list

Any other word starting with "!" gets the command list prefixed with
"Unknown command". Messages not starting with "!" are ignored.

The dispatcher keeps no state between messages. Backend failures are caught
here and turned into chat replies; nothing raised by a command escapes
dispatch().
"""

from __future__ import annotations

import math
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from faucetbot.backend.client import FaucetBackendClient
from faucetbot.backend.models import DripRequest
from faucetbot.bot.addresses import is_valid_address, parse_receiver
from faucetbot.bot.formatting import (
    BALANCE_ERROR,
    COMMAND_PREFIX,
    UNEXPECTED_ERROR,
    format_balance,
    format_drip_response,
    help_message,
    incompatible_address_message,
    invalid_amount_message,
)
from faucetbot.config.logging import get_logger
from faucetbot.config.settings import Settings
from faucetbot.errors import BackendError

logger = get_logger(__name__)

# Senders on this homeserver may pass a third !drip argument to override the amount
TRUSTED_SENDER_SUFFIX = ":matrix.parity.io"

TEXT_MSGTYPE = "m.text"

SendMessage = Callable[[str, str], Awaitable[None]]


@dataclass(frozen=True)
class ChatMessage:
    """The parts of a Matrix room message the dispatcher looks at."""

    room_id: str
    sender: str | None
    body: str
    msgtype: str = TEXT_MSGTYPE


class CommandDispatcher:
    """
    Filters incoming messages and runs the matching command.

    Args:
        settings: Application settings (bot id, ignore list, drip amount, units)
        backend: Faucet backend client
        send_message: Coroutine ``(room_id, text)`` that posts a reply
    """

    def __init__(
        self,
        settings: Settings,
        backend: FaucetBackendClient,
        send_message: SendMessage,
    ) -> None:
        self._settings = settings
        self._backend = backend
        self._send = send_message
        self._ignore_list = settings.ignore_list

    def should_handle(self, message: ChatMessage) -> bool:
        """
        Gate applied before any parsing.

        Ignores:
        - Anything but plain text messages
        - Messages without a sender, and the bot's own messages
        - Senders on the ignore list (logged)
        """
        if message.msgtype != TEXT_MSGTYPE:
            return False
        if not message.sender or message.sender == self._settings.matrix_bot_user_id:
            return False
        if message.sender in self._ignore_list:
            logger.warning(f"Ignored request from an ignored account: {message.sender}")
            return False
        return True

    async def dispatch(self, message: ChatMessage) -> None:
        """Handle one room message."""
        if not self.should_handle(message):
            return

        words = message.body.split()
        if not words:
            return
        action, args = words[0], words[1:]
        if not action.startswith(COMMAND_PREFIX):
            return

        logger.debug(f"Processing request from {message.sender}")

        if action == "!balance":
            await self._balance(message.room_id)
        elif action == "!drip":
            await self._drip(message.room_id, message.sender, args)
        elif action == "!help":
            await self._send(message.room_id, help_message(self._settings.network_unit))
        else:
            await self._send(
                message.room_id,
                help_message(self._settings.network_unit, "Unknown command"),
            )

    async def _balance(self, room_id: str) -> None:
        try:
            response = await self._backend.get_balance()
        except BackendError as e:
            logger.error(f"An error occured when checking the balance: {e}")
            await self._send(room_id, BALANCE_ERROR)
            return

        await self._send(
            room_id,
            format_balance(
                response.balance,
                self._settings.network_decimals,
                self._settings.network_unit,
            ),
        )

    async def _drip(self, room_id: str, sender: str, args: list[str]) -> None:
        if not args:
            logger.warning("Address not provided, skipping")
            return

        receiver = parse_receiver(args[0])
        logger.debug(
            f"Processed receiver to address {receiver.address} "
            f"and parachain id {receiver.parachain_id!r}"
        )

        if not is_valid_address(receiver.address):
            await self._send(room_id, incompatible_address_message(sender))
            return

        amount = self._settings.drip_amount
        if sender.endswith(TRUSTED_SENDER_SUFFIX) and len(args) > 1:
            override = _parse_amount(args[1])
            if override is None:
                await self._send(room_id, invalid_amount_message(sender))
                return
            amount = override

        request = DripRequest(
            address=receiver.address,
            amount=amount,
            parachain_id=receiver.parachain_id,
            sender=sender,
        )
        try:
            response = await self._backend.drip(request)
        except BackendError as e:
            logger.error(f"An error occured when dripping to {receiver.address}: {e}")
            await self._send(room_id, str(e) or UNEXPECTED_ERROR)
            return

        if not response.is_success:
            logger.warning(f"Drip to {receiver.address} failed: {response.error or 'no hash returned'}")
        await self._send(
            room_id,
            format_drip_response(response, sender, amount, self._settings.network_unit),
        )


def _parse_amount(text: str) -> float | None:
    """Parse an override amount; None unless it is a finite positive number."""
    try:
        amount = float(text)
    except ValueError:
        return None
    if not math.isfinite(amount) or amount <= 0:
        return None
    return amount
