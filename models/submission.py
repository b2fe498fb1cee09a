"""
models/submission.py
--------------------
Domain models for user submissions and the document that stores them.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


def _to_millis(value: datetime) -> int:
    return int(value.timestamp() * 1000)


def _from_millis(value) -> datetime:
    if value is None:
        return datetime.now(timezone.utc)
    return datetime.fromtimestamp(int(value) / 1000, tz=timezone.utc)


@dataclass
class Submission:
    """
    A message forwarded to the manager for review.

    Attributes:
        id: Unique, monotonically assigned number.
        text: Message text or photo caption (may be empty for bare photos).
        photo: Telegram file_id of the attached photo, if any.
        favorite: Marked as favorite by the manager.
        selected: Marked as selected by the manager.
        created_at: When the submission was recorded.
    """
    id: int
    text: str
    photo: Optional[str] = None
    favorite: bool = False
    selected: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "photo": self.photo,
            "favorite": self.favorite,
            "selected": self.selected,
            "createdAt": _to_millis(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Submission":
        return cls(
            id=int(data["id"]),
            text=data.get("text") or "",
            photo=data.get("photo") or None,
            favorite=bool(data.get("favorite", False)),
            selected=bool(data.get("selected", False)),
            created_at=_from_millis(data.get("createdAt")),
        )

    def __str__(self) -> str:
        flags = ("⭐" if self.favorite else "") + ("🏁" if self.selected else "")
        kind = "photo" if self.photo else "text"
        return f"#{self.id} ({kind}) {flags}".rstrip()


class View(str, Enum):
    """Filter applied by the manager's review commands."""
    ALL = "all"
    FAVORITES = "favorites"
    SELECTED = "selected"

    def matches(self, submission: Submission) -> bool:
        if self is View.FAVORITES:
            return submission.favorite
        if self is View.SELECTED:
            return submission.selected
        return True


@dataclass
class SubmissionStore:
    """
    The whole persisted document: submissions in id order plus the id counter.

    `last_id` is pre-incremented for every new submission and never reused.
    """
    submissions: list[Submission] = field(default_factory=list)
    last_id: int = 0

    def next_id(self) -> int:
        self.last_id += 1
        return self.last_id

    def find(self, submission_id: int) -> Optional[Submission]:
        for submission in self.submissions:
            if submission.id == submission_id:
                return submission
        return None

    def position_of(self, submission_id: int) -> int:
        """Zero-based position of a submission, or -1 when absent."""
        for position, submission in enumerate(self.submissions):
            if submission.id == submission_id:
                return position
        return -1

    def filter(self, view: View) -> list[Submission]:
        return [s for s in self.submissions if view.matches(s)]

    def to_dict(self) -> dict:
        return {
            "submissions": [s.to_dict() for s in self.submissions],
            "lastId": self.last_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SubmissionStore":
        return cls(
            submissions=[Submission.from_dict(item) for item in data.get("submissions", [])],
            last_id=int(data.get("lastId", 0)),
        )


@dataclass(frozen=True)
class Page:
    """A submission shown at a 1-based position within a list of `total`."""
    submission: Submission
    index: int
    total: int
