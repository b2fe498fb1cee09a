"""
services/card_service.py
------------------------
Renders submissions as review cards: message content plus the inline
keyboard with favorite/selected toggles and optional page navigation.
"""

from typing import Optional

from telegram import Bot, InlineKeyboardButton, InlineKeyboardMarkup, Message

from models.card import Card, PhotoCard, TextCard
from models.submission import Submission

FAVORITE_ON = "⭐ Убрать"
FAVORITE_OFF = "⭐ В избранное"
SELECTED_ON = "🏁 Убрать"
SELECTED_OFF = "🏁 В отбор"
PREV_LABEL = "← Назад"
NEXT_LABEL = "Вперёд →"


def callback_data(action: str, value: Optional[int] = None) -> str:
    """Encode a button payload as 'action:value' (or just 'action')."""
    return action if value is None else f"{action}:{value}"


def parse_callback_data(data: str) -> tuple[str, Optional[int]]:
    """
    Split 'action:value' into its parts.

    Returns:
        (action, value) where value is None when absent or not an integer.
    """
    action, _, raw = (data or "").partition(":")
    try:
        value = int(raw) if raw else None
    except ValueError:
        value = None
    return action, value


def build_keyboard(
    submission: Submission, index: Optional[int] = None, total: Optional[int] = None
) -> InlineKeyboardMarkup:
    """
    Build the inline keyboard for a submission card.

    The toggle row is always present. The navigation row is added only when
    both `index` (1-based) and `total` are given.
    """
    rows = [
        [
            InlineKeyboardButton(
                FAVORITE_ON if submission.favorite else FAVORITE_OFF,
                callback_data=callback_data("fav", submission.id),
            ),
            InlineKeyboardButton(
                SELECTED_ON if submission.selected else SELECTED_OFF,
                callback_data=callback_data("sel", submission.id),
            ),
        ]
    ]

    if index and total:
        rows.append(
            [
                InlineKeyboardButton(PREV_LABEL, callback_data=callback_data("prev", index)),
                InlineKeyboardButton(f"{index}/{total}", callback_data=callback_data("noop")),
                InlineKeyboardButton(NEXT_LABEL, callback_data=callback_data("next", index)),
            ]
        )

    return InlineKeyboardMarkup(rows)


def render(
    submission: Submission, index: Optional[int] = None, total: Optional[int] = None
) -> Card:
    """Turn a submission into a text or photo card."""
    keyboard = build_keyboard(submission, index, total)
    if submission.photo:
        return PhotoCard(photo=submission.photo, caption=submission.text or None, keyboard=keyboard)
    return TextCard(text=submission.text, keyboard=keyboard)


async def send_card(bot: Bot, chat_id: int, card: Card) -> Message:
    """Deliver a card to a chat with its keyboard attached."""
    if isinstance(card, PhotoCard):
        return await bot.send_photo(
            chat_id=chat_id,
            photo=card.photo,
            caption=card.caption,
            reply_markup=card.keyboard,
        )
    return await bot.send_message(
        chat_id=chat_id,
        text=card.text,
        reply_markup=card.keyboard,
    )
