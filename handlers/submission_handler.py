"""
handlers/submission_handler.py
------------------------------
Receives messages from users, records qualifying ones as submissions and
forwards them to the manager as review cards.
"""

from telegram import Update
from telegram.ext import ContextTypes

from security.auth import get_settings
from services import card_service
from services.submission_service import SubmissionService
from utils.logger import get_logger

logger = get_logger(__name__)


async def handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle any non-command message.
    Text starting with the marker, or any photo, becomes a submission.
    """
    message = update.message
    if message is None:
        return

    text = message.caption or message.text or ""
    photo = message.photo[-1].file_id if message.photo else None

    service: SubmissionService = context.bot_data["submission_service"]
    if not service.is_submission(text, photo):
        return

    submission = service.record(text, photo)

    manager_chat_id = get_settings(context).manager_chat_id
    if manager_chat_id is None:
        logger.warning(f"MANAGER_CHAT_ID is not set; submission #{submission.id} was not forwarded")
        return

    await card_service.send_card(context.bot, manager_chat_id, card_service.render(submission))
