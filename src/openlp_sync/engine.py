"""Synchronize the live model from OpenLP program state notifications."""

import asyncio
import inspect
from collections.abc import Callable
from typing import Any

from loguru import logger

from openlp_sync.api import FetchError
from openlp_sync.connection import ConnectionManager
from openlp_sync.models.service import Item, Service, Slide
from openlp_sync.models.state import (
    DisplayMode,
    PayloadDecodeError,
    ProgramState,
    decode_program_state,
)
from openlp_sync.protocols import ApiProtocol

# Dispatch order within one notification.
EVENT_KINDS: tuple[str, ...] = ("mode", "service", "item", "slide")

Handler = Callable[[Any], Any]


class SyncEngine:
    """Owns the synchronized state of one OpenLP connection.

    ``handle_message`` is the only writer. Each notification is diffed against
    the last one: the service is re-fetched when its revision changes, the live
    item when its id changes. Events are dispatched after all state is
    committed, in ``EVENT_KINDS`` order, so a handler never sees a torn state.

    Note: the live item is kept apart from the service. OpenLP can put an item
    live without adding it to the service.
    """

    def __init__(self, api: ApiProtocol) -> None:
        self.api = api
        self._handlers: dict[str, list[Handler]] = {kind: [] for kind in EVENT_KINDS}

        self._mode: DisplayMode | None = None
        self._service: Service | None = None
        self._item: Item | None = None
        self._slide: Slide | None = None
        self._state: ProgramState | None = None
        self._last_position: tuple[int, str, int] | None = None
        self._last_slide_id: tuple[str, int] | None = None

    @property
    def mode(self) -> DisplayMode | None:
        return self._mode

    @property
    def service(self) -> Service | None:
        return self._service

    @property
    def item(self) -> Item | None:
        return self._item

    @property
    def slide(self) -> Slide | None:
        return self._slide

    @property
    def state(self) -> ProgramState | None:
        """The last notification that was applied."""
        return self._state

    @property
    def last_slide_id(self) -> tuple[str, int] | None:
        return self._last_slide_id

    @property
    def hostname(self) -> str | None:
        return self.api.hostname

    def on(self, kind: str, handler: Handler) -> "SyncEngine":
        """Subscribe to ``mode``, ``service``, ``item`` or ``slide`` events.

        Handlers may be plain functions or coroutine functions.
        """
        if kind not in self._handlers:
            msg = f"unknown event kind: {kind!r}, expected one of {EVENT_KINDS!r}"
            raise ValueError(msg)
        self._handlers[kind].append(handler)
        return self

    async def handle_message(self, raw: str | bytes) -> None:
        """Decode one websocket message and apply it."""
        await self.apply(decode_program_state(raw))

    async def apply(self, state: ProgramState) -> None:
        """Apply one notification.

        Fetch errors propagate. Nothing is committed unless every fetch for
        the notification succeeded, so the next notification retries.
        """
        dirty: dict[str, Any] = {}

        mode = state.mode
        if mode != self._mode:
            dirty["mode"] = mode

        if state.position_key == self._last_position:
            # Only the display mode can differ on a positional duplicate.
            logger.debug("Positional duplicate: {}", state.position_key)
            self._mode = mode
            self._state = state
            await self._dispatch(dirty)
            return

        service = self._service
        if service is None or service.id != state.service:
            descriptors = await asyncio.to_thread(self.api.service_items)
            service = Service(
                self, state.service, [Item(self, service_item=d) for d in descriptors]
            )
            dirty["service"] = service

        item = self._item
        slide = self._slide
        slide_id = self._last_slide_id
        if state.item:
            if item is None or item.id != state.item:
                live = await asyncio.to_thread(self.api.live_item)
                item = Item(self, live_item=live)
                dirty["item"] = item

            if state.slide_id != self._last_slide_id:
                slide_id = state.slide_id
                slide = item.slide_at(state.slide)
                dirty["slide"] = slide
        else:
            # Nothing is live: the previous item and slide stop being active.
            if item is not None:
                dirty["item"] = item = None
            if slide_id is not None:
                dirty["slide"] = slide = slide_id = None

        self._mode = mode
        self._service = service
        self._item = item
        self._slide = slide
        self._last_slide_id = slide_id
        self._last_position = state.position_key
        self._state = state

        await self._dispatch(dirty)

    async def _dispatch(self, dirty: dict[str, Any]) -> None:
        for kind in EVENT_KINDS:
            if kind not in dirty:
                continue
            for handler in self._handlers[kind]:
                result = handler(dirty[kind])
                if inspect.isawaitable(result):
                    await result

    def _on_connect(self, hostname: str) -> None:
        self.api.hostname = hostname

    async def _handle_message_logged(self, raw: str | bytes) -> None:
        try:
            await self.handle_message(raw)
        except (PayloadDecodeError, FetchError):
            logger.exception("Failed to apply notification, keeping previous state")

    async def run(
        self,
        connection: ConnectionManager,
        *,
        reconnect: bool = False,
        strict: bool = True,
    ) -> None:
        """Connect and synchronize until the connection closes.

        With ``strict`` off, decode and fetch errors are logged and the
        notification is skipped instead of ending the run.
        """
        handler = self.handle_message if strict else self._handle_message_logged
        await connection.run(handler, on_connect=self._on_connect, reconnect=reconnect)
