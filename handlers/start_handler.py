"""
handlers/start_handler.py
--------------------------
Handles /start and /myid commands.
Explains how to send a submission and shows the chat id for configuration.
"""

from telegram import Update
from telegram.ext import ContextTypes

from config import SUBMISSION_MARKER
from utils.logger import get_logger

logger = get_logger(__name__)

START_TEXT = (
    "Привет! 👋\n"
    f"Чтобы отправить заявку, начните сообщение с {SUBMISSION_MARKER} "
    "или пришлите фото с подписью."
)


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command - explain how submissions work."""
    user = update.effective_user
    if user:
        logger.info(f"User {user.id} ({user.first_name}) started the bot.")
    await update.message.reply_text(START_TEXT)


async def myid_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /myid command - show the chat id to put into MANAGER_CHAT_ID."""
    chat = update.effective_chat
    await update.message.reply_text(
        f"🆔 ID этого чата: `{chat.id}`\n"
        f"Укажите его в `MANAGER_CHAT_ID`, чтобы получать заявки сюда.",
        parse_mode="Markdown",
    )
