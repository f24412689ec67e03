from __future__ import annotations


class TranslationError(Exception):
    """Base error for translation backends."""


class EngineError(TranslationError):
    def __init__(self, engine: str, message: str) -> None:
        super().__init__(message)
        self.engine = engine

    def __str__(self) -> str:
        return f"{self.engine}: {self.args[0]}"


class DiscoveryError(TranslationError):
    """Raised when the supported engine list cannot be obtained."""
