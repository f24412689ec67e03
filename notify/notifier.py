"""
Notification batching.

Producers queue short text events without ever waiting. A single loop
owns the pending batch: every ``interval`` seconds it joins whatever
accumulated into one message and hands it to the sink.
"""
from __future__ import annotations

import asyncio
from typing import List, Protocol

from loguru import logger


class NotificationError(Exception):
    """Raised by a sink when a message could not be delivered."""


class NotificationSink(Protocol):
    async def send(self, text: str) -> None:
        ...


class Notifier:
    def __init__(self, sink: NotificationSink | None = None, *, interval: float = 60.0) -> None:
        self.sink = sink
        self.interval = interval
        self._queue: asyncio.Queue[str] = asyncio.Queue()
        self._batch: List[str] = []

    @property
    def available(self) -> bool:
        return self.sink is not None

    def publish(self, text: str) -> None:
        logger.info(text)
        self._queue.put_nowait(text)

    def info(self, message: str) -> None:
        self.publish(f"[info] {message}")

    def error(self, message: str) -> None:
        self.publish(f"[error] {message}")

    def _drain(self) -> None:
        while True:
            try:
                self._batch.append(self._queue.get_nowait())
            except asyncio.QueueEmpty:
                return

    async def tick(self) -> None:
        """Flush everything received so far as a single message."""
        self._drain()
        if not self._batch:
            return
        if self.sink is None:
            # No sink configured: drop instead of growing forever.
            self._batch.clear()
            return
        message = "\n".join(self._batch)
        logger.info("sending notification batch")
        try:
            await self.sink.send(message)
        except NotificationError as exc:
            logger.warning("failed send notification: {}", exc)
            return
        self._batch.clear()
        logger.info("notification batch sent")

    async def run(self) -> None:
        loop = asyncio.get_running_loop()
        next_tick = loop.time() + self.interval
        while True:
            remaining = next_tick - loop.time()
            if remaining <= 0:
                await self.tick()
                next_tick = loop.time() + self.interval
                continue
            try:
                message = await asyncio.wait_for(self._queue.get(), timeout=remaining)
            except asyncio.TimeoutError:
                continue
            self._batch.append(message)
