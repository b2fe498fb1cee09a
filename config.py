"""
config.py
---------
Central configuration module. Loads environment variables from the .env
file and exposes them through a single typed Settings object that is built
once at process start and handed to the components that need it.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


# ── Defaults ──────────────────────────────────────────────
DEFAULT_SUBMISSIONS_PATH = "submissions.json"
DEFAULT_LOG_LEVEL = "INFO"

# Text prefix that turns a plain message into a submission.
SUBMISSION_MARKER = "🎄"


def _parse_chat_id(raw: Optional[str]) -> Optional[int]:
    """Parse a Telegram chat id, which may be negative for groups."""
    if not raw:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


@dataclass(frozen=True)
class Settings:
    """
    Runtime configuration of the bot.

    Attributes:
        bot_token: Telegram bot credential.
        manager_chat_id: Chat that receives submissions and reviews them.
            None disables notifications and leaves manager commands open.
        submissions_path: Location of the JSON submissions store.
        log_level: Name of the root logging level.
    """
    bot_token: str
    manager_chat_id: Optional[int] = None
    submissions_path: Path = Path(DEFAULT_SUBMISSIONS_PATH)
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, env_path: Optional[str] = ".env") -> "Settings":
        """
        Build settings from the process environment.

        Args:
            env_path: Optional .env file loaded before reading variables.
                Values already present in the environment win.

        Raises:
            RuntimeError: If TELEGRAM_BOT_TOKEN is missing.
        """
        if env_path is not None:
            load_dotenv(env_path)

        token = os.getenv("TELEGRAM_BOT_TOKEN", "").strip()
        if not token:
            raise RuntimeError(
                "TELEGRAM_BOT_TOKEN is not defined. Add it to the environment or the .env file."
            )

        return cls(
            bot_token=token,
            manager_chat_id=_parse_chat_id(os.getenv("MANAGER_CHAT_ID")),
            submissions_path=Path(
                os.getenv("SUBMISSIONS_PATH", DEFAULT_SUBMISSIONS_PATH)
            ).expanduser(),
            log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
