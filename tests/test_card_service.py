import asyncio
from unittest.mock import AsyncMock, MagicMock

from models.card import PhotoCard, TextCard
from models.submission import Submission
from services import card_service
from tests.conftest import callback_rows, label_rows


def test_keyboard_without_navigation():
    markup = card_service.build_keyboard(Submission(id=1, text="🎄 I want X"))

    assert callback_rows(markup) == [["fav:1", "sel:1"]]
    assert label_rows(markup) == [["⭐ В избранное", "🏁 В отбор"]]


def test_keyboard_labels_follow_flags():
    markup = card_service.build_keyboard(Submission(id=7, text="x", favorite=True, selected=True))

    assert label_rows(markup)[0] == ["⭐ Убрать", "🏁 Убрать"]


def test_keyboard_with_navigation():
    markup = card_service.build_keyboard(Submission(id=5, text="x"), 2, 4)

    assert callback_rows(markup) == [["fav:5", "sel:5"], ["prev:2", "noop", "next:2"]]
    assert label_rows(markup)[1] == ["← Назад", "2/4", "Вперёд →"]


def test_navigation_needs_both_index_and_total():
    assert len(card_service.build_keyboard(Submission(id=1, text="x"), 1, None).inline_keyboard) == 1
    assert len(card_service.build_keyboard(Submission(id=1, text="x"), None, 3).inline_keyboard) == 1


def test_render_picks_payload_kind():
    text_card = card_service.render(Submission(id=1, text="🎄 hi"))
    photo_card = card_service.render(Submission(id=2, text="caption", photo="AgAD"), 1, 1)

    assert isinstance(text_card, TextCard)
    assert text_card.text == "🎄 hi"
    assert isinstance(photo_card, PhotoCard)
    assert (photo_card.photo, photo_card.caption) == ("AgAD", "caption")


def test_bare_photo_has_no_caption():
    card = card_service.render(Submission(id=3, text="", photo="AgAD"))
    assert card.caption is None


def test_parse_callback_data():
    assert card_service.parse_callback_data("fav:12") == ("fav", 12)
    assert card_service.parse_callback_data("noop") == ("noop", None)
    assert card_service.parse_callback_data("next:abc") == ("next", None)
    assert card_service.parse_callback_data("") == ("", None)


def test_send_card_dispatches_on_variant():
    bot = MagicMock()
    bot.send_message = AsyncMock()
    bot.send_photo = AsyncMock()

    asyncio.run(card_service.send_card(bot, 10, card_service.render(Submission(id=1, text="🎄 a"))))
    asyncio.run(card_service.send_card(bot, 10, card_service.render(Submission(id=2, text="b", photo="P"))))

    assert bot.send_message.await_args.kwargs["text"] == "🎄 a"
    assert bot.send_photo.await_args.kwargs["photo"] == "P"
    assert bot.send_photo.await_args.kwargs["caption"] == "b"
