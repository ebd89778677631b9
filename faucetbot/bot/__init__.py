"""
Matrix Bot Layer.

Handles Matrix events, command parsing and dispatch, address validation and
reply formatting for the faucet bot.
"""

from faucetbot.bot.client import FaucetBot
from faucetbot.bot.commands import ChatMessage, CommandDispatcher

__all__ = ["ChatMessage", "CommandDispatcher", "FaucetBot"]
