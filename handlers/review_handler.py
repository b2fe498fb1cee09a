"""
handlers/review_handler.py
--------------------------
Manager commands that open a view of the stored submissions:
/all, /favorites and /selected.
"""

from telegram import Update
from telegram.ext import ContextTypes

from models.submission import View
from security.auth import manager_only
from services import card_service
from services.submission_service import SubmissionService
from utils.logger import get_logger

logger = get_logger(__name__)

EMPTY_TEXT = {
    View.ALL: "❌ Заявок нет",
    View.FAVORITES: "⭐ Нет избранных",
    View.SELECTED: "🏁 Нет отобранных",
}


async def _show_view(update: Update, context: ContextTypes.DEFAULT_TYPE, view: View) -> None:
    service: SubmissionService = context.bot_data["submission_service"]
    page = service.first_page(view)

    if page is None:
        await update.message.reply_text(EMPTY_TEXT[view])
        return

    logger.info(f"Showing view '{view.value}': {page.total} item(s)")
    card = card_service.render(page.submission, page.index, page.total)
    await card_service.send_card(context.bot, update.effective_chat.id, card)


@manager_only
async def all_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /all command - page through every submission."""
    await _show_view(update, context, View.ALL)


@manager_only
async def favorites_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /favorites command - page through favorite submissions."""
    await _show_view(update, context, View.FAVORITES)


@manager_only
async def selected_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /selected command - page through selected submissions."""
    await _show_view(update, context, View.SELECTED)
