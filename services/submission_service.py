"""
services/submission_service.py
------------------------------
Business logic for recording submissions and reviewing them.
Orchestrates between the handlers and the SubmissionRepository.
"""

from typing import Optional

from config import SUBMISSION_MARKER
from models.submission import Page, Submission, View
from repositories.submission_repo import SubmissionRepository
from utils.logger import get_logger

logger = get_logger(__name__)

# Callback actions that toggle a flag, mapped to the Submission attribute.
TOGGLE_FIELDS = {"fav": "favorite", "sel": "selected"}


class SubmissionService:
    """
    Handles all business logic related to submissions.

    Responsibilities:
        - Decide whether an inbound message is a submission and record it.
        - Produce filtered views for the review commands.
        - Toggle the favorite/selected flags.
        - Resolve pagination over the stored list.
    """

    def __init__(self, repo: SubmissionRepository):
        self.repo = repo

    @staticmethod
    def is_submission(text: str, photo: Optional[str]) -> bool:
        """A message qualifies if it starts with the marker or carries a photo."""
        return bool(photo) or (text or "").startswith(SUBMISSION_MARKER)

    def record(self, text: str, photo: Optional[str] = None) -> Submission:
        """
        Store a new submission with both flags cleared.

        Args:
            text: Message text or photo caption.
            photo: Telegram file_id of the attached photo.

        Returns:
            The stored Submission with its id assigned.
        """
        with self.repo.transaction() as store:
            submission = Submission(id=store.next_id(), text=text or "", photo=photo or None)
            store.submissions.append(submission)

        logger.info(f"Recorded submission {submission}")
        return submission

    def first_page(self, view: View) -> Optional[Page]:
        """First item of a view as page 1 of N, or None if the view is empty."""
        items = self.repo.load().filter(view)
        if not items:
            return None
        return Page(items[0], 1, len(items))

    def list_view(self, view: View) -> list[Submission]:
        return self.repo.load().filter(view)

    def toggle(self, action: str, submission_id: int) -> Optional[Page]:
        """
        Flip the flag named by `action` ('fav' or 'sel').

        Returns:
            The updated submission positioned within the full list,
            or None if no submission has this id.

        Raises:
            ValueError: For an unknown action.
        """
        field_name = TOGGLE_FIELDS.get(action)
        if field_name is None:
            raise ValueError(f"Unknown toggle action: {action}")

        # An unknown id must not rewrite the file
        if self.repo.load().position_of(submission_id) < 0:
            logger.warning(f"Toggle '{action}' for missing submission #{submission_id}")
            return None

        # Submissions are never deleted, so the id is still present here
        with self.repo.transaction() as store:
            position = store.position_of(submission_id)
            submission = store.submissions[position]
            setattr(submission, field_name, not getattr(submission, field_name))
            total = len(store.submissions)

        logger.info(f"Submission #{submission_id}: {field_name} -> {getattr(submission, field_name)}")
        return Page(submission, position + 1, total)

    def navigate(self, direction: str, index: int) -> Optional[Page]:
        """
        Move one step from the 1-based `index`, wrapping around the full list.

        Args:
            direction: 'next' or 'prev'.
            index: 1-based position shown on the current card.

        Returns:
            The page to display, or None when the store is empty.
        """
        if direction not in ("next", "prev"):
            raise ValueError(f"Unknown navigation direction: {direction}")

        items = self.repo.load().submissions
        total = len(items)
        if not total:
            return None

        current = index - 1
        step = 1 if direction == "next" else -1
        new_index = (current + step) % total
        logger.info(f"Navigate '{direction}' from {index}/{total} to {new_index + 1}/{total}")
        return Page(items[new_index], new_index + 1, total)
