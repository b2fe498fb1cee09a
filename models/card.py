"""
models/card.py
--------------
Reply payload for a rendered submission: either a text message or a photo
with a caption, each carrying the inline keyboard to attach.
"""

from dataclasses import dataclass
from typing import Optional, Union

from telegram import InlineKeyboardMarkup


@dataclass(frozen=True)
class TextCard:
    text: str
    keyboard: InlineKeyboardMarkup


@dataclass(frozen=True)
class PhotoCard:
    photo: str
    caption: Optional[str]
    keyboard: InlineKeyboardMarkup


Card = Union[TextCard, PhotoCard]
