from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


def normalize_term(value: str) -> str:
    return value.strip().lower()


@dataclass(slots=True, frozen=True)
class TranslationRequest:
    word: str
    target_lang: str

    @classmethod
    def from_raw(cls, word: str, target_lang: str) -> "TranslationRequest":
        return cls(word=normalize_term(word), target_lang=normalize_term(target_lang))

    @property
    def is_valid(self) -> bool:
        # A leading dash would reach the translate command as an option.
        return bool(self.word) and bool(self.target_lang) and not self.word.startswith("-")


class BaseTranslator(ABC):
    name: str = "base"

    def __init__(self, *, timeout: float | None = None) -> None:
        self.timeout = timeout

    @abstractmethod
    async def translate(self, word: str, target_lang: str, engine: str) -> str:
        """Translate one word with the named engine or raise ``EngineError``."""
