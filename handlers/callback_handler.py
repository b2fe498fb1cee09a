"""
handlers/callback_handler.py
----------------------------
Handles inline button presses on review cards.

Callback data is 'action:value':
    fav:<id>, sel:<id>   toggle a flag and refresh the keyboard in place
    next:<i>, prev:<i>   replace the card with its neighbour (1-based index)
    noop                 page counter, acknowledged only
"""

from telegram import Update
from telegram.ext import ContextTypes

from security.auth import manager_only
from services import card_service
from services.submission_service import TOGGLE_FIELDS, SubmissionService
from utils.logger import get_logger

logger = get_logger(__name__)

DONE_TEXT = "Готово"
NOT_FOUND_TEXT = "Не найдено"


@manager_only
async def handle_callback(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Dispatch a button press to navigation or flag toggling."""
    query = update.callback_query
    action, value = card_service.parse_callback_data(query.data)
    service: SubmissionService = context.bot_data["submission_service"]

    if action == "noop":
        await query.answer()
        return

    if action in ("next", "prev"):
        if value is None:
            logger.warning(f"Malformed navigation payload: {query.data!r}")
            await query.answer()
            return

        page = service.navigate(action, value)
        if page is None:
            await query.answer(NOT_FOUND_TEXT)
            return

        chat_id = query.message.chat.id
        await query.delete_message()
        card = card_service.render(page.submission, page.index, page.total)
        await card_service.send_card(context.bot, chat_id, card)
        await query.answer()
        return

    if action in TOGGLE_FIELDS:
        if value is None:
            logger.warning(f"Malformed toggle payload: {query.data!r}")
            await query.answer()
            return

        page = service.toggle(action, value)
        if page is None:
            await query.answer(NOT_FOUND_TEXT)
            return

        await query.edit_message_reply_markup(
            reply_markup=card_service.build_keyboard(page.submission, page.index, page.total)
        )
        await query.answer(DONE_TEXT)
        return

    logger.warning(f"Unknown callback payload: {query.data!r}")
    await query.answer()
