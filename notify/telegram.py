"""
Telegram Bot API sink for notification batches.
"""
from __future__ import annotations

import asyncio
from typing import Any, Dict, Optional

import aiohttp
from loguru import logger

from .notifier import NotificationError


class TelegramSink:
    API_URL = "https://api.telegram.org/bot{token}/{method}"

    def __init__(self, token: str, chat_id: int, *, session: aiohttp.ClientSession) -> None:
        self.token = token
        self.chat_id = chat_id
        self._session = session

    @classmethod
    async def connect(cls, token: Optional[str], chat_id: Optional[int], *, timeout: float = 10.0) -> "TelegramSink":
        """Create the sink and check the token with ``getMe``."""
        if not token:
            raise NotificationError("telegram token is not configured")
        if chat_id is None:
            raise NotificationError("telegram chat id is not configured")
        session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=timeout))
        sink = cls(token, chat_id, session=session)
        try:
            me = await sink._call("getMe", {})
        except NotificationError:
            await session.close()
            raise
        logger.info("telegram bot initialized as @{}", me.get("username", "?"))
        return sink

    async def _call(self, method: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        url = self.API_URL.format(token=self.token, method=method)
        try:
            async with self._session.post(url, json=payload) as response:
                data = await response.json(content_type=None)
                status = response.status
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
            raise NotificationError(f"{method}: {exc}") from exc
        if not isinstance(data, dict) or not data.get("ok"):
            description = data.get("description") if isinstance(data, dict) else None
            raise NotificationError(f"{method}: {description or f'HTTP {status}'}")
        result = data.get("result")
        return result if isinstance(result, dict) else {}

    async def send(self, text: str) -> None:
        await self._call(
            "sendMessage",
            {"chat_id": self.chat_id, "text": text, "disable_web_page_preview": True},
        )

    async def close(self) -> None:
        await self._session.close()
