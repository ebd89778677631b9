"""
FaucetBot - matrix-nio client wrapper.

Manages the bot's Matrix side:
- Logs in with an existing access token (no password login)
- Auto-joins rooms the bot is invited to
- Hands text messages to the CommandDispatcher, one asyncio task per message,
  so a slow backend never stalls the sync loop
- Sends plain-text replies, logging (never raising) send failures
"""

from __future__ import annotations

import asyncio

from nio import (
    AsyncClient,
    AsyncClientConfig,
    InviteMemberEvent,
    JoinError,
    MatrixRoom,
    RoomMessageText,
    RoomSendError,
    SyncError,
)

from faucetbot.backend.client import FaucetBackendClient
from faucetbot.bot.commands import ChatMessage, CommandDispatcher
from faucetbot.config.logging import get_logger
from faucetbot.config.settings import Settings
from faucetbot.errors import MatrixConnectionError

logger = get_logger(__name__)

# Seconds before a single homeserver request is abandoned
MATRIX_REQUEST_TIMEOUT = 10
# Milliseconds the homeserver may hold a /sync long-poll open
SYNC_TIMEOUT_MS = 30000
# First sync fetches room state only, no timeline backlog
FIRST_SYNC_FILTER = {"room": {"timeline": {"limit": 0}}}


class FaucetBot:
    """
    Matrix bot relaying faucet commands to the backend.

    Args:
        settings: Application settings (homeserver, credentials, faucet config)
        backend: Faucet backend client shared by all commands
        client: Pre-built nio client; created from settings when omitted
    """

    def __init__(
        self,
        settings: Settings,
        backend: FaucetBackendClient,
        client: AsyncClient | None = None,
    ) -> None:
        self.settings = settings
        if client is None:
            client = AsyncClient(
                settings.matrix_homeserver,
                settings.matrix_bot_user_id,
                config=AsyncClientConfig(request_timeout=MATRIX_REQUEST_TIMEOUT),
            )
        client.user_id = settings.matrix_bot_user_id
        client.access_token = settings.matrix_access_token.get_secret_value()
        self.client = client
        self.dispatcher = CommandDispatcher(settings, backend, self.send_message)
        self._tasks: set[asyncio.Task] = set()

    async def run(self) -> None:
        """
        Connect and process events until cancelled.

        The first sync only establishes the timeline position: messages sent
        while the bot was offline are not answered. Invites are handled from
        the start so pending ones are accepted on the first sync.

        Raises:
            MatrixConnectionError: If the homeserver rejects the initial sync
        """
        self.client.add_event_callback(self.on_invite, InviteMemberEvent)

        logger.info(f"Connecting to {self.settings.matrix_homeserver} as {self.settings.matrix_bot_user_id}")
        response = await self.client.sync(
            timeout=SYNC_TIMEOUT_MS, sync_filter=FIRST_SYNC_FILTER, full_state=True
        )
        if isinstance(response, SyncError):
            raise MatrixConnectionError(f"Initial sync failed: {response.message}")
        logger.info("Initial sync done, listening for commands")

        self.client.add_event_callback(self.on_message, RoomMessageText)
        await self.client.sync_forever(timeout=SYNC_TIMEOUT_MS)

    async def close(self) -> None:
        """Cancel in-flight commands and close the Matrix connection."""
        logger.info("Shutting down faucet bot...")
        for task in list(self._tasks):
            task.cancel()
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)
        await self.client.close()

    async def on_message(self, room: MatrixRoom, event: RoomMessageText) -> None:
        """nio callback for text messages; schedules dispatch and returns immediately."""
        message = ChatMessage(
            room_id=room.room_id,
            sender=event.sender,
            body=event.body,
            msgtype=event.source.get("content", {}).get("msgtype", "m.text"),
        )
        task = asyncio.create_task(self.dispatcher.dispatch(message))
        self._tasks.add(task)
        task.add_done_callback(self._task_done)

    def _task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error("Command handler crashed", exc_info=task.exception())

    async def on_invite(self, room: MatrixRoom, event: InviteMemberEvent) -> None:
        """Join rooms the bot itself is invited to."""
        if event.membership != "invite" or event.state_key != self.settings.matrix_bot_user_id:
            return

        try:
            response = await self.client.join(room.room_id)
        except Exception as e:
            logger.error(f"Auto-join error for {room.room_id}: {e}")
            return

        if isinstance(response, JoinError):
            logger.error(f"Auto-join error for {room.room_id}: {response.message}")
        else:
            logger.info(f"Auto-joined {room.room_id}.")

    async def send_message(self, room_id: str, text: str) -> None:
        """Post a plain-text message. Failures are logged, not raised or retried."""
        try:
            response = await self.client.room_send(
                room_id,
                message_type="m.room.message",
                content={"msgtype": "m.text", "body": text},
            )
        except Exception as e:
            logger.error(f"Failed to send message to {room_id}: {e}")
            return

        if isinstance(response, RoomSendError):
            logger.error(f"Failed to send message to {room_id}: {response.message}")
