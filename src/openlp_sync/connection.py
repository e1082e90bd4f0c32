"""Websocket connection with host failover."""

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

import websockets
from loguru import logger
from websockets.exceptions import ConnectionClosed, WebSocketException

from openlp_sync.config import RETRY_DELAY, WS_PORT
from openlp_sync.protocols import ChannelProtocol

Connector = Callable[[str], Awaitable[ChannelProtocol]]
MessageHandler = Callable[[str | bytes], Awaitable[Any]]


class ConnectionManager:
    """Open the OpenLP websocket on the first reachable host.

    Hosts are tried in order. When all of them fail, wait ``retry_delay``
    seconds and start again from the first one. Connect failures are logged,
    never raised.
    """

    def __init__(
        self,
        hostnames: Sequence[str],
        *,
        port: int = WS_PORT,
        retry_delay: float = RETRY_DELAY,
        connector: Connector | None = None,
    ) -> None:
        if not hostnames:
            msg = "At least one OpenLP host is required"
            raise ValueError(msg)
        self.hostnames = list(hostnames)
        self.port = port
        self.retry_delay = retry_delay
        self.connector: Connector = connector or websockets.connect  # type: ignore[assignment]

        # Set once a connection succeeds; snapshot queries go to the same host.
        self.hostname: str | None = None
        self.channel: ChannelProtocol | None = None

    def uri(self, hostname: str) -> str:
        return f"ws://{hostname}:{self.port}"

    async def connect(self) -> ChannelProtocol:
        """Connect to the first reachable host, retrying forever."""
        while True:
            for hostname in self.hostnames:
                try:
                    channel = await self.connector(self.uri(hostname))
                except (OSError, WebSocketException) as e:
                    logger.warning("Failed to connect to {}: {!r}", hostname, e)
                    continue
                self.hostname = hostname
                self.channel = channel
                logger.info("Connected to {}", hostname)
                return channel

            logger.info("No OpenLP host reachable, retrying in {}s", self.retry_delay)
            await asyncio.sleep(self.retry_delay)

    async def run(
        self,
        handler: MessageHandler,
        *,
        on_connect: Callable[[str], None] | None = None,
        reconnect: bool = False,
    ) -> None:
        """Connect, then await ``handler`` for each message, one at a time.

        Returns when the channel closes, unless ``reconnect`` is set, in which
        case the failover loop starts over. Handler errors propagate.
        """
        while True:
            channel = await self.connect()
            if on_connect is not None and self.hostname is not None:
                on_connect(self.hostname)
            try:
                async for message in channel:
                    await handler(message)
            except ConnectionClosed as e:
                logger.info("Connection to {} lost: {}", self.hostname, e)
            else:
                logger.info("Connection to {} closed", self.hostname)
            finally:
                await self.close()

            if not reconnect:
                return

    async def close(self) -> None:
        if self.channel is not None:
            channel, self.channel = self.channel, None
            await channel.close()
