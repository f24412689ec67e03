from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, Protocol

from loguru import logger

from .cache import StoreError
from .text import has_non_printable

if TYPE_CHECKING:
    from notify.notifier import Notifier


class SweepableStore(Protocol):
    async def languages(self) -> list[str]:
        ...

    async def entries(self, lang: str) -> Dict[str, str]:
        ...

    async def delete(self, lang: str, word: str) -> None:
        ...


@dataclass(slots=True)
class SweepReport:
    empty: Dict[str, int] = field(default_factory=dict)
    non_printable: Dict[str, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(self.empty.values()) + sum(self.non_printable.values())


def format_summary(label: str, stats: Dict[str, int]) -> str:
    lines = [f"[info] removed {sum(stats.values())} {label} translations"]
    lines.extend(f"{lang}: {count} removes" for lang, count in stats.items())
    return "\n".join(lines)


async def remove_matching(store: SweepableStore, predicate: Callable[[str], bool]) -> Dict[str, int]:
    """Delete every cached value matching ``predicate``; return removals per language."""
    stats: Dict[str, int] = {}
    try:
        languages = await store.languages()
    except StoreError as exc:
        logger.warning("cache sweep skipped: {}", exc)
        return stats
    for lang in languages:
        logger.debug("cleaning for {}", lang)
        try:
            entries = await store.entries(lang)
        except StoreError as exc:
            logger.warning("cache sweep skipped {}: {}", lang, exc)
            continue
        for word, value in entries.items():
            if not predicate(value):
                continue
            try:
                await store.delete(lang, word)
            except StoreError as exc:
                logger.warning("failed to remove {}/{!r}: {}", lang, word, exc)
                continue
            stats[lang] = stats.get(lang, 0) + 1
    return stats


async def sweep(store: SweepableStore, notifier: "Notifier | None" = None) -> SweepReport:
    report = SweepReport()
    report.empty = await remove_matching(store, lambda value: value == "")
    if report.empty and notifier is not None:
        notifier.publish(format_summary("trashed (empty)", report.empty))
    report.non_printable = await remove_matching(store, has_non_printable)
    if report.non_printable and notifier is not None:
        notifier.publish(format_summary("non-printable", report.non_printable))
    return report
