from __future__ import annotations

from typing import Dict, List

import redis.asyncio as aioredis
from redis.exceptions import RedisError


class StoreError(Exception):
    """Raised when the translation store cannot be reached or queried."""


class TranslationStore:
    """Redis hashes keyed by target language, each mapping word -> translation."""

    def __init__(self, client: aioredis.Redis) -> None:
        self.client = client

    @classmethod
    def from_url(cls, url: str) -> "TranslationStore":
        return cls(aioredis.from_url(url, decode_responses=True))

    async def get(self, lang: str, word: str) -> str | None:
        try:
            return await self.client.hget(lang, word)
        except RedisError as exc:
            raise StoreError(f"hget {lang}/{word}: {exc}") from exc

    async def set(self, lang: str, word: str, value: str) -> None:
        try:
            await self.client.hset(lang, word, value)
        except RedisError as exc:
            raise StoreError(f"hset {lang}/{word}: {exc}") from exc

    async def delete(self, lang: str, word: str) -> None:
        try:
            await self.client.hdel(lang, word)
        except RedisError as exc:
            raise StoreError(f"hdel {lang}/{word}: {exc}") from exc

    async def languages(self) -> List[str]:
        try:
            return [key async for key in self.client.scan_iter(match="*")]
        except RedisError as exc:
            raise StoreError(f"scan: {exc}") from exc

    async def entries(self, lang: str) -> Dict[str, str]:
        try:
            return await self.client.hgetall(lang)
        except RedisError as exc:
            raise StoreError(f"hgetall {lang}: {exc}") from exc

    async def close(self) -> None:
        await self.client.aclose()
