import os
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

# webhook.py reads its configuration at import time
os.environ.setdefault("TELEGRAM_BOT_TOKEN", "123456:TEST-TOKEN")

from config import Settings  # noqa: E402
from repositories.submission_repo import SubmissionRepository  # noqa: E402
from services.export_service import ExportService  # noqa: E402
from services.submission_service import SubmissionService  # noqa: E402

MANAGER_CHAT_ID = 777
USER_CHAT_ID = 42


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "submissions.json"


@pytest.fixture
def repo(store_path):
    return SubmissionRepository(store_path)


@pytest.fixture
def service(repo):
    return SubmissionService(repo)


@pytest.fixture
def settings(store_path):
    return Settings(bot_token="123456:TEST-TOKEN", manager_chat_id=MANAGER_CHAT_ID, submissions_path=store_path)


@pytest.fixture
def context(settings, service):
    bot = MagicMock()
    bot.send_message = AsyncMock()
    bot.send_photo = AsyncMock()
    return SimpleNamespace(
        bot=bot,
        args=[],
        bot_data={
            "settings": settings,
            "submission_service": service,
            "export_service": ExportService(service),
        },
    )


def make_message_update(text=None, caption=None, photo_ids=(), chat_id=USER_CHAT_ID):
    message = SimpleNamespace(
        text=text,
        caption=caption,
        photo=[SimpleNamespace(file_id=file_id) for file_id in photo_ids],
        reply_text=AsyncMock(),
        reply_document=AsyncMock(),
    )
    chat = SimpleNamespace(id=chat_id)
    return SimpleNamespace(
        message=message,
        effective_message=message,
        effective_chat=chat,
        effective_user=SimpleNamespace(id=chat_id, first_name="Test"),
        callback_query=None,
    )


def make_callback_update(data, chat_id=MANAGER_CHAT_ID):
    chat = SimpleNamespace(id=chat_id)
    query = SimpleNamespace(
        data=data,
        message=SimpleNamespace(chat=chat),
        answer=AsyncMock(),
        delete_message=AsyncMock(),
        edit_message_reply_markup=AsyncMock(),
    )
    return SimpleNamespace(
        message=None,
        effective_message=query.message,
        effective_chat=chat,
        effective_user=SimpleNamespace(id=chat_id, first_name="Manager"),
        callback_query=query,
    )


def callback_rows(markup):
    """Keyboard as rows of callback_data strings."""
    return [[button.callback_data for button in row] for row in markup.inline_keyboard]


def label_rows(markup):
    return [[button.text for button in row] for row in markup.inline_keyboard]
