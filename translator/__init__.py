"""
Translation backends and the cache-aware resolver.

The shell translator drives an external translate-shell style command;
the registry keeps the ordered engine list it is asked to use.
"""
from .base import BaseTranslator, TranslationRequest, normalize_term
from .errors import DiscoveryError, EngineError, TranslationError
from .orchestrator import TranslationOrchestrator
from .registry import EngineRegistry, parse_engine_list, promote_engine
from .shell import ShellTranslator

__all__ = [
    "BaseTranslator",
    "TranslationRequest",
    "normalize_term",
    "DiscoveryError",
    "EngineError",
    "TranslationError",
    "TranslationOrchestrator",
    "EngineRegistry",
    "parse_engine_list",
    "promote_engine",
    "ShellTranslator",
]
