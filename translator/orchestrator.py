from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from loguru import logger

from utils.cache import StoreError

from .base import BaseTranslator
from .errors import EngineError
from .registry import EngineRegistry

if TYPE_CHECKING:
    from notify.notifier import Notifier


class TranslationCache(Protocol):
    async def get(self, lang: str, word: str) -> str | None:
        ...

    async def set(self, lang: str, word: str, value: str) -> None:
        ...


class TranslationOrchestrator:
    """Read-through cache in front of an ordered list of engines."""

    def __init__(
        self,
        translator: BaseTranslator,
        store: TranslationCache,
        registry: EngineRegistry,
        notifier: "Notifier | None" = None,
    ) -> None:
        self.translator = translator
        self.store = store
        self.registry = registry
        self.notifier = notifier

    async def resolve(self, word: str, target_lang: str) -> str:
        """Return a translation for an already normalized, non-empty word and language."""
        try:
            cached = await self.store.get(target_lang, word)
        except StoreError as exc:
            logger.warning("cache read failed, treating as miss: {}", exc)
            cached = None
        if cached is not None:
            return cached
        return await self._fetch(word, target_lang)

    async def _fetch(self, word: str, target_lang: str) -> str:
        last_error: EngineError | None = None
        for engine in self.registry.engines:
            try:
                translated = await self.translator.translate(word, target_lang, engine)
            except EngineError as exc:
                logger.debug("engine {} failed for {!r}: {}", engine, word, exc)
                last_error = exc
                continue
            await self._remember(word, target_lang, translated)
            return translated
        self._on_translation_error(word, target_lang, last_error)
        return word

    async def _remember(self, word: str, target_lang: str, translated: str) -> None:
        try:
            await self.store.set(target_lang, word, translated)
        except StoreError as exc:
            logger.warning("failed to cache translation of {!r}: {}", word, exc)

    def _on_translation_error(self, word: str, target_lang: str, cause: EngineError | None) -> None:
        reason = "failed to translate in all engines"
        if cause is not None:
            reason = f"{reason} (last: {cause})"
        logger.error("{} (to {}) {}", word, target_lang, reason)
        if self.notifier is not None:
            self.notifier.error(f"{word} (to {target_lang}) {reason}")
