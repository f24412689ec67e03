"""
Engine Registry

Holds the ordered list of engines the resolver walks through. The list
starts as a single built-in default and is replaced once, after the
external tool reports what it supports.
"""
from __future__ import annotations

import re
from typing import TYPE_CHECKING, Awaitable, Callable, List, Sequence, Tuple

from loguru import logger

from .errors import DiscoveryError, EngineError

if TYPE_CHECKING:
    from notify.notifier import Notifier


EngineLister = Callable[[], Awaitable[str]]

_WORD_TOKEN = re.compile(r"\w+", re.ASCII)


def parse_engine_list(output: str) -> List[str]:
    engines: List[str] = []
    for line in output.splitlines():
        match = _WORD_TOKEN.search(line)
        if match:
            engines.append(match.group(0))
    return engines


def promote_engine(engines: Sequence[str], preferred: str) -> List[str]:
    """Move the first occurrence of ``preferred`` to the front, keeping the rest in order."""
    ordered = list(engines)
    try:
        index = ordered.index(preferred)
    except ValueError:
        return ordered
    if index > 0:
        ordered.insert(0, ordered.pop(index))
    return ordered


class EngineRegistry:
    def __init__(
        self,
        lister: EngineLister,
        *,
        default_engine: str = "google",
        preferred_engine: str = "google",
    ) -> None:
        self._lister = lister
        self.preferred_engine = preferred_engine
        # Readers grab the current tuple; discovery swaps in a new one.
        self._engines: Tuple[str, ...] = (default_engine,)

    @property
    def engines(self) -> Tuple[str, ...]:
        return self._engines

    async def discover(self) -> List[str]:
        try:
            output = await self._lister()
        except EngineError as exc:
            raise DiscoveryError(str(exc)) from exc
        engines = parse_engine_list(output)
        if not engines:
            raise DiscoveryError("engine list is empty")
        return promote_engine(engines, self.preferred_engine)

    async def refresh(self, notifier: "Notifier | None" = None) -> Tuple[str, ...]:
        """Run discovery once; keep the current list when it fails."""
        try:
            engines = await self.discover()
        except DiscoveryError as exc:
            logger.error("failed get engines list: {}", exc)
            if notifier is not None:
                notifier.error(f"failed get engines list: {exc}")
            return self._engines
        self._engines = tuple(engines)
        logger.info("supported engines: {}", ", ".join(engines))
        if notifier is not None:
            notifier.info("supported engines: " + ", ".join(engines))
        return self._engines
