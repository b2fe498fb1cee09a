"""
webhook.py
----------
Serverless webhook entry point (WSGI, e.g. Vercel's Python runtime).

POST   -> the body is a Telegram update, dispatched through the bot handlers.
          Replies 200 "OK", or 500 "ERROR" if dispatching raised.
other  -> 200 "Bot running" liveness answer.

Configuration is read once at import; a missing bot token stops the process
before any request is served. Each POST builds and initializes a fresh bot
application, which includes a getMe round trip to the Bot API.
"""

import asyncio
from typing import Awaitable, Callable, Optional

from flask import Flask, request
from telegram import Update

from config import Settings
from main import build_application
from utils.logger import get_logger, set_level

logger = get_logger(__name__)

UpdateProcessor = Callable[[dict], Awaitable[None]]


def make_processor(settings: Settings) -> UpdateProcessor:
    """
    Build the coroutine that dispatches one raw update.

    Every call runs on its own event loop, so the application is created,
    initialized and shut down inside it. Initializing costs one getMe call
    to the Bot API per request, since nothing survives between invocations.
    Handler errors, which the
    application would otherwise only log, are re-raised to the caller.
    """
    async def process(payload: dict) -> None:
        application = build_application(settings, webhook=True)
        failures: list[BaseException] = []

        async def collect_error(update: object, context) -> None:
            failures.append(context.error)

        application.add_error_handler(collect_error)
        async with application:
            update = Update.de_json(payload, application.bot)
            await application.process_update(update)

        if failures:
            raise failures[0]

    return process


def create_app(settings: Optional[Settings] = None, processor: Optional[UpdateProcessor] = None) -> Flask:
    """
    Create the Flask application serving the webhook.

    Args:
        settings: Runtime configuration; read from the environment if omitted.
        processor: Coroutine function handling a raw update payload.
    """
    settings = settings or Settings.from_env()
    set_level(settings.log_level)
    processor = processor or make_processor(settings)

    flask_app = Flask(__name__)

    @flask_app.route("/", methods=["GET", "POST", "HEAD"])
    @flask_app.route("/api/telegram", methods=["GET", "POST", "HEAD"])
    def telegram_webhook():
        if request.method != "POST":
            return "Bot running", 200

        try:
            payload = request.get_json(force=True)
            asyncio.run(processor(payload))
        except Exception:
            logger.exception("Failed to process webhook update")
            return "ERROR", 500

        return "OK", 200

    return flask_app


app = create_app()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=8000)
