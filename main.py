"""
main.py
-------
Entry point for the Wishbox Telegram bot.

Responsibilities:
    - Build the Telegram application with all handlers and shared services.
    - Register the command menu on startup.
    - Run long polling for local development (production uses webhook.py).
"""

from telegram import BotCommand, BotCommandScopeChat
from telegram.ext import (
    Application,
    CallbackQueryHandler,
    CommandHandler,
    MessageHandler,
    filters,
)

from config import Settings
from handlers.callback_handler import handle_callback
from handlers.export_handler import export_csv_command, export_excel_command
from handlers.review_handler import all_command, favorites_command, selected_command
from handlers.start_handler import myid_command, start_command
from handlers.submission_handler import handle_message
from repositories.submission_repo import SubmissionRepository
from services.export_service import ExportService
from services.submission_service import SubmissionService
from utils.logger import get_logger, set_level

logger = get_logger(__name__)


async def set_bot_commands(application: Application) -> None:
    """Register bot command menus in Telegram on startup."""
    await application.bot.set_my_commands([
        BotCommand("start", "🚀 Как отправить заявку"),
        BotCommand("myid", "🆔 ID этого чата"),
    ])

    settings: Settings = application.bot_data["settings"]
    if settings.manager_chat_id is not None:
        await application.bot.set_my_commands(
            [
                BotCommand("all", "📋 Все заявки"),
                BotCommand("favorites", "⭐ Избранное"),
                BotCommand("selected", "🏁 Отобранные"),
                BotCommand("export", "📄 Выгрузить CSV"),
                BotCommand("export_excel", "📊 Выгрузить Excel"),
            ],
            scope=BotCommandScopeChat(settings.manager_chat_id),
        )
    logger.info("Bot commands menu registered successfully.")


def build_application(settings: Settings, webhook: bool = False) -> Application:
    """
    Build the Telegram application and register every handler.

    Args:
        settings: Runtime configuration, stored in `bot_data["settings"]`.
        webhook: Build without an Updater; updates are fed in by the caller.
    """
    builder = Application.builder().token(settings.bot_token)
    if webhook:
        builder = builder.updater(None)
    else:
        builder = builder.post_init(set_bot_commands)
    app = builder.build()

    submission_service = SubmissionService(SubmissionRepository(settings.submissions_path))
    app.bot_data["settings"] = settings
    app.bot_data["submission_service"] = submission_service
    app.bot_data["export_service"] = ExportService(submission_service)

    # ── Commands ──────────────────────────────────────────
    app.add_handler(CommandHandler("start", start_command))
    app.add_handler(CommandHandler("myid", myid_command))
    app.add_handler(CommandHandler("all", all_command))
    app.add_handler(CommandHandler("favorites", favorites_command))
    app.add_handler(CommandHandler("selected", selected_command))
    app.add_handler(CommandHandler("export", export_csv_command))
    app.add_handler(CommandHandler("export_excel", export_excel_command))

    # ── Buttons ───────────────────────────────────────────
    app.add_handler(CallbackQueryHandler(handle_callback))

    # ── Submissions (catch-all) ───────────────────────────
    app.add_handler(MessageHandler(
        (filters.TEXT | filters.CAPTION | filters.PHOTO) & ~filters.COMMAND, handle_message
    ))

    return app


def main() -> None:
    """Initialize and run the bot with long polling."""
    settings = Settings.from_env()
    set_level(settings.log_level)

    if settings.manager_chat_id is None:
        logger.warning("MANAGER_CHAT_ID is not set: submissions are stored but not forwarded.")

    app = build_application(settings)

    logger.info("🚀 Wishbox bot is running! Press Ctrl+C to stop.")
    app.run_polling(drop_pending_updates=True, allowed_updates=["message", "callback_query"])
    logger.info("Wishbox bot stopped.")


if __name__ == "__main__":
    main()
