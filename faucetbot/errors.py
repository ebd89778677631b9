"""
Exception hierarchy for faucetbot.

Startup problems (ConfigurationError, MatrixConnectionError) are fatal and
stop the process. BackendError is recoverable: the command dispatcher turns
it into a chat reply.
"""


class FaucetBotError(Exception):
    """Base class for all faucetbot errors."""


class ConfigurationError(FaucetBotError):
    """Required settings are missing or could not be parsed."""


class BackendError(FaucetBotError):
    """The faucet backend could not be reached or returned an unusable answer."""


class MatrixConnectionError(FaucetBotError):
    """The Matrix homeserver rejected the bot's initial sync."""
