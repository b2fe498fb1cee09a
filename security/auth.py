"""
security/auth.py
-----------------
Access control for manager-only handlers.
Blocks commands and button presses that do not come from the manager chat.
"""

from functools import wraps
from typing import Callable

from telegram import Update
from telegram.ext import ContextTypes

from config import Settings
from utils.logger import get_logger

logger = get_logger(__name__)

DENIED_TEXT = "⛔ Эта команда доступна только менеджеру."


def get_settings(context: ContextTypes.DEFAULT_TYPE) -> Settings:
    return context.bot_data["settings"]


def manager_only(func: Callable):
    """
    Decorator that restricts a handler to the manager chat.

    Usage:
        @manager_only
        async def my_handler(update, context):
            ...

    Behavior:
        - If MANAGER_CHAT_ID is not configured, everyone is allowed (dev mode).
        - Otherwise only updates from that chat reach the handler.
        - Refused attempts are logged and answered briefly.
    """
    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        manager_chat_id = get_settings(context).manager_chat_id
        chat = update.effective_chat

        if manager_chat_id is None or (chat is not None and chat.id == manager_chat_id):
            return await func(update, context, *args, **kwargs)

        user = update.effective_user
        logger.warning(
            f"🚫 Manager-only access attempt: chat_id={chat.id if chat else None}, "
            f"user_id={user.id if user else None}"
        )
        if update.callback_query is not None:
            await update.callback_query.answer(DENIED_TEXT)
        elif update.effective_message is not None:
            await update.effective_message.reply_text(DENIED_TEXT)

    return wrapper
