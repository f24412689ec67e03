from __future__ import annotations

import asyncio
from typing import AsyncIterator

from aiohttp import web
from loguru import logger

from config import SETTINGS, AppSettings, NotificationSettings, parse_listen
from notify import NotificationError, Notifier, TelegramSink
from translator import EngineRegistry, ShellTranslator, TranslationOrchestrator, TranslationRequest
from utils.cache import TranslationStore
from utils.janitor import sweep


TRANSLATE_ROUTE = "/translate/{word}/to/{lang}"

ORCHESTRATOR_KEY = web.AppKey("orchestrator", TranslationOrchestrator)


async def translate_handler(request: web.Request) -> web.Response:
    query = TranslationRequest.from_raw(request.match_info["word"], request.match_info["lang"])
    if not query.is_valid:
        return web.Response(text="")
    orchestrator = request.app[ORCHESTRATOR_KEY]
    return web.Response(text=await orchestrator.resolve(query.word, query.target_lang))


def create_app(orchestrator: TranslationOrchestrator | None = None) -> web.Application:
    app = web.Application()
    if orchestrator is not None:
        app[ORCHESTRATOR_KEY] = orchestrator
    app.router.add_get(TRANSLATE_ROUTE, translate_handler)
    return app


async def connect_sink(settings: NotificationSettings) -> TelegramSink | None:
    logger.info("initializing telegram bot...")
    try:
        return await TelegramSink.connect(settings.tg_token, settings.tg_chat_id)
    except NotificationError as exc:
        logger.warning("failed initialize telegram notifications: {}", exc)
        return None


def build_app(settings: AppSettings = SETTINGS) -> web.Application:
    """Full service: routes plus store, notifier and the startup background jobs."""
    store = TranslationStore.from_url(settings.redis_url)
    notifier = Notifier(interval=settings.notifications.interval)
    translator = ShellTranslator(settings.engine.command, timeout=settings.engine.timeout)
    registry = EngineRegistry(
        translator.list_engines,
        default_engine=settings.engine.default_engine,
        preferred_engine=settings.engine.preferred_engine,
    )
    app = create_app(TranslationOrchestrator(translator, store, registry, notifier))

    async def services(app: web.Application) -> AsyncIterator[None]:
        notifier.sink = await connect_sink(settings.notifications)

        tasks = [
            asyncio.create_task(notifier.run()),
            asyncio.create_task(registry.refresh(notifier)),
            asyncio.create_task(sweep(store, notifier)),
        ]
        notifier.info("transcache backend started")
        yield

        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        if notifier.sink is not None:
            await notifier.sink.close()
        await store.close()

    app.cleanup_ctx.append(services)
    return app


def run(settings: AppSettings = SETTINGS) -> None:
    host, port = parse_listen(settings.listen)
    logger.info("listening on {}:{}", host, port)
    web.run_app(build_app(settings), host=host, port=port, print=None)
