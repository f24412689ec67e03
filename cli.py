from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from config import SETTINGS, parse_duration
from server import run as run_server
from translator import EngineRegistry, ShellTranslator, TranslationOrchestrator, TranslationRequest
from utils.cache import TranslationStore
from utils.janitor import sweep as sweep_store
from utils.logging_config import configure_logging

app = typer.Typer(add_completion=False)
console = Console()


def _run_async(coro):
    return asyncio.run(coro)


def _registry(translator: ShellTranslator) -> EngineRegistry:
    return EngineRegistry(
        translator.list_engines,
        default_engine=SETTINGS.engine.default_engine,
        preferred_engine=SETTINGS.engine.preferred_engine,
    )


@app.callback()
def main(
    redis_url: str = typer.Option(SETTINGS.redis_url, "--redis-url", envvar="REDIS_URL", help="Redis database"),
    command: str = typer.Option(SETTINGS.engine.command, "--command", envvar="COMMAND", help="Command to run"),
    log_file: Path | None = typer.Option(None, "--log-file", help="Also write debug logs to this file"),
) -> None:
    configure_logging(log_file)
    SETTINGS.redis_url = redis_url
    SETTINGS.engine.command = command


@app.command(help="Serve GET /translate/{word}/to/{lang}")
def serve(
    listen: str = typer.Option(SETTINGS.listen, "--listen", envvar="LISTEN", help="Address to listen"),
    tg_token: str | None = typer.Option(SETTINGS.notifications.tg_token, "--tg-token", envvar="TG_TOKEN"),
    tg_chat_id: int | None = typer.Option(SETTINGS.notifications.tg_chat_id, "--tg-chat-id", envvar="TG_CHAT_ID"),
    notification_interval: str = typer.Option(
        "1m",
        "--notification-interval",
        envvar="NOTIFICATION_INTERVAL",
        help="Merge notifications to one message during this time",
    ),
) -> None:
    SETTINGS.listen = listen
    SETTINGS.notifications.tg_token = tg_token
    SETTINGS.notifications.tg_chat_id = tg_chat_id
    SETTINGS.notifications.interval = parse_duration(notification_interval)
    run_server(SETTINGS)


@app.command(help="Ask the translate command which engines it supports")
def engines() -> None:
    translator = ShellTranslator(SETTINGS.engine.command, timeout=SETTINGS.engine.timeout)
    found = _run_async(_registry(translator).refresh())
    for position, engine in enumerate(found, start=1):
        console.print(f"{position:>3}. {engine}")


@app.command(help="Remove empty and non-printable cached translations")
def sweep() -> None:
    async def runner():
        store = TranslationStore.from_url(SETTINGS.redis_url)
        try:
            return await sweep_store(store)
        finally:
            await store.close()

    report = _run_async(runner())
    if not report.total:
        console.print("Nothing to remove")
        return
    table = Table("language", "empty", "non-printable")
    for lang in sorted(set(report.empty) | set(report.non_printable)):
        table.add_row(lang, str(report.empty.get(lang, 0)), str(report.non_printable.get(lang, 0)))
    console.print(table)
    console.print(f"Removed {report.total} translations")


@app.command(help="Translate one word through the cache and engine fallback")
def translate(word: str = typer.Argument(...), lang: str = typer.Argument(...)) -> None:
    query = TranslationRequest.from_raw(word, lang)
    if not query.is_valid:
        raise typer.BadParameter("word and language must not be empty")

    async def runner():
        store = TranslationStore.from_url(SETTINGS.redis_url)
        translator = ShellTranslator(SETTINGS.engine.command, timeout=SETTINGS.engine.timeout)
        registry = _registry(translator)
        await registry.refresh()
        try:
            return await TranslationOrchestrator(translator, store, registry).resolve(query.word, query.target_lang)
        finally:
            await store.close()

    console.print(_run_async(runner()))


if __name__ == "__main__":
    app()
