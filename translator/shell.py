"""
Shell Translator

Runs the external translate-shell style command once per attempt:
``<command> -e <engine> -b :<lang> <word>``.
"""
from __future__ import annotations

import asyncio
import contextlib
from typing import List

from loguru import logger

from .base import BaseTranslator, normalize_term
from .errors import EngineError


class ShellTranslator(BaseTranslator):
    """Translator backed by an external command line tool.

    Features:
    - Engine and target language are passed as arguments, the word as payload
    - stdout is the translation, stderr is only logged
    - Optional per-invocation timeout, treated like any other failure
    """

    name = "shell"

    def __init__(self, command: str, *, timeout: float | None = None) -> None:
        super().__init__(timeout=timeout)
        self.command = command

    def build_args(self, word: str, target_lang: str, engine: str) -> List[str]:
        return ["-e", engine, "-b", f":{target_lang}", word]

    async def translate(self, word: str, target_lang: str, engine: str) -> str:
        try:
            process = await asyncio.create_subprocess_exec(
                self.command,
                *self.build_args(word, target_lang, engine),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise EngineError(engine, f"failed to launch {self.command}: {exc}") from exc

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError as exc:
            with contextlib.suppress(ProcessLookupError):
                process.kill()
            await process.wait()
            raise EngineError(engine, f"timed out after {self.timeout}s") from exc

        if stderr:
            logger.debug("{} stderr: {}", engine, stderr.decode("utf-8", errors="replace").strip())
        if process.returncode != 0:
            logger.warning("failed to translate {!r} with {}: exit code {}", word, engine, process.returncode)
            raise EngineError(engine, f"exit code {process.returncode}")

        answer = normalize_term(stdout.decode("utf-8", errors="replace"))
        if not answer:
            raise EngineError(engine, "empty reply from API")
        return answer

    async def list_engines(self) -> str:
        """Return the raw output of ``<command> -S`` (stdout and stderr combined)."""
        try:
            process = await asyncio.create_subprocess_exec(
                self.command,
                "-S",
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
            )
        except OSError as exc:
            raise EngineError("discovery", f"failed to launch {self.command}: {exc}") from exc
        output, _ = await process.communicate()
        if process.returncode != 0:
            raise EngineError("discovery", f"exit code {process.returncode}")
        return output.decode("utf-8", errors="replace")
