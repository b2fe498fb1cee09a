"""
repositories/submission_repo.py
-------------------------------
Data access layer for submissions.
The whole store is one JSON document that is read and rewritten wholesale.
"""

import json
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from models.submission import SubmissionStore
from utils.logger import get_logger

logger = get_logger(__name__)


class SubmissionRepository:
    """Repository for the JSON submissions document."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    # ── READ ──────────────────────────────────────────────

    def load(self) -> SubmissionStore:
        """
        Read the persisted document.

        Returns:
            The stored document, or an empty one if the file is missing
            or cannot be parsed.
        """
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
            return SubmissionStore.from_dict(data)
        except FileNotFoundError:
            return SubmissionStore()
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning(f"Unreadable submissions file {self.path}, starting empty: {e}")
            return SubmissionStore()

    # ── WRITE ─────────────────────────────────────────────

    def save(self, store: SubmissionStore) -> None:
        """
        Overwrite the persisted document.

        The payload is written to a temporary file next to the target and
        then renamed over it, so readers never see a half-written file.

        Raises:
            OSError: If the file cannot be written.
        """
        directory = self.path.parent
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=directory, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(store.to_dict(), fh, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except Exception as e:
            logger.error(f"Failed to save submissions to {self.path}: {e}")
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    @contextmanager
    def transaction(self) -> Iterator[SubmissionStore]:
        """
        Load the store, let the caller mutate it, then save it.

        Nothing is written if the block raises.

        Usage:
            with repo.transaction() as store:
                store.find(3).favorite = True
        """
        with self._lock:
            store = self.load()
            yield store
            self.save(store)
