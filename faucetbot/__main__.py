"""
faucetbot entry point.

Configuration comes from the environment (and .env); there are no
command-line flags. Run with ``python -m faucetbot`` or ``faucet-bot``.
"""

import asyncio
import sys

from faucetbot import __version__
from faucetbot.backend import FaucetBackendClient
from faucetbot.config.logging import get_logger, setup_logging
from faucetbot.config.settings import Settings, load_settings
from faucetbot.errors import ConfigurationError, FaucetBotError


def log_startup(settings: Settings) -> None:
    """Log the effective configuration. Secrets are reported as set/unset only."""
    logger = get_logger(__name__)

    logger.info(f"faucetbot {__version__}")
    logger.info(f"Matrix homeserver: {settings.matrix_homeserver}")
    logger.info(f"Matrix bot user: {settings.matrix_bot_user_id}")
    logger.info(f"Matrix access token: {'Set' if settings.matrix_access_token.get_secret_value() else 'Not set'}")
    logger.info(f"Backend URL: {settings.backend_url}")
    logger.info(f"Drip amount: {settings.drip_amount} {settings.network_unit}")
    logger.info(f"Network decimals: {settings.network_decimals}")

    ignore_list = sorted(settings.ignore_list)
    if ignore_list:
        logger.info(f"Ignore list: ({len(ignore_list)} entries)")
        for account in ignore_list:
            logger.info(f" '{account}'")


async def run_bot(settings: Settings) -> None:
    """Run the bot until cancelled, closing both clients on the way out."""
    from faucetbot.bot import FaucetBot

    async with FaucetBackendClient(settings.backend_url) as backend:
        bot = FaucetBot(settings, backend)
        try:
            await bot.run()
        finally:
            await bot.close()


def main() -> int:
    """Main entry point."""
    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    setup_logging(settings)
    logger = get_logger(__name__)
    log_startup(settings)

    try:
        asyncio.run(run_bot(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted, exiting")
    except FaucetBotError as e:
        logger.error(f"Faucet bot stopped: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
