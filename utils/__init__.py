from .cache import StoreError, TranslationStore
from .janitor import SweepReport, sweep
from .text import has_non_printable

__all__ = [
    "StoreError",
    "TranslationStore",
    "SweepReport",
    "sweep",
    "has_non_printable",
]
