import logging

import pytest

from models.submission import View


@pytest.mark.parametrize(
    "text, photo, expected",
    [
        ("🎄 I want X", None, True),
        ("", "AgAD", True),
        ("just a caption", "AgAD", True),
        ("hello", None, False),
        (" 🎄 leading space", None, False),
        ("", None, False),
    ],
)
def test_is_submission(service, text, photo, expected):
    assert service.is_submission(text, photo) is expected


def test_record_assigns_monotonic_ids(service, repo):
    for n in range(5):
        service.record(f"🎄 wish {n}")

    store = repo.load()
    assert store.last_id == 5
    assert [s.id for s in store.submissions] == [1, 2, 3, 4, 5]


def test_record_starts_with_flags_cleared(service):
    submission = service.record("🎄 I want X")

    assert submission.id == 1
    assert submission.favorite is False
    assert submission.selected is False
    assert submission.photo is None


def test_toggle_twice_restores_value_and_leaves_others(service, repo):
    for n in range(3):
        service.record(f"🎄 {n}")

    first = service.toggle("fav", 2)
    assert first.submission.favorite is True
    second = service.toggle("fav", 2)
    assert second.submission.favorite is False

    store = repo.load()
    assert [s.favorite for s in store.submissions] == [False, False, False]
    assert [s.selected for s in store.submissions] == [False, False, False]


def test_toggle_reports_position_in_full_list(service):
    for n in range(4):
        service.record(f"🎄 {n}")

    page = service.toggle("sel", 3)

    assert (page.index, page.total) == (3, 4)
    assert page.submission.selected is True


def test_toggle_unknown_id_changes_nothing(service, repo, store_path):
    service.record("🎄 only")
    before = store_path.read_text(encoding="utf-8")

    assert service.toggle("fav", 99) is None
    assert store_path.read_text(encoding="utf-8") == before
    assert repo.load().submissions[0].favorite is False


def test_toggle_rejects_unknown_action(service):
    service.record("🎄 only")
    with pytest.raises(ValueError):
        service.toggle("zap", 1)


def test_first_page_of_favorites(service):
    for n in range(1, 7):
        service.record(f"🎄 {n}")
    service.toggle("fav", 2)
    service.toggle("fav", 5)

    page = service.first_page(View.FAVORITES)

    assert page.submission.id == 2
    assert (page.index, page.total) == (1, 2)


def test_first_page_of_empty_view(service):
    service.record("🎄 one")
    assert service.first_page(View.SELECTED) is None


def test_navigate_wraps_both_ways(service):
    for n in range(3):
        service.record(f"🎄 {n}")

    assert service.navigate("next", 3).index == 1
    assert service.navigate("prev", 1).index == 3
    middle = service.navigate("next", 1)
    assert (middle.index, middle.total, middle.submission.id) == (2, 3, 2)


def test_navigate_uses_unfiltered_list(service):
    for n in range(4):
        service.record(f"🎄 {n}")
    service.toggle("fav", 1)
    service.toggle("fav", 4)

    page = service.navigate("next", 1)

    assert page.submission.id == 2
    assert page.total == 4


def test_navigate_empty_store(service):
    assert service.navigate("next", 1) is None


def test_toggle_unknown_id_does_not_rewrite_file(service, store_path):
    service.record("🎄 only")
    before = store_path.stat()

    assert service.toggle("sel", 42) is None
    after = store_path.stat()
    # saving replaces the file, which would give it a new inode
    assert (after.st_ino, after.st_mtime_ns) == (before.st_ino, before.st_mtime_ns)


def test_toggle_on_corrupt_store_keeps_file(service, store_path):
    store_path.write_text("{corrupt", encoding="utf-8")

    assert service.toggle("fav", 1) is None
    assert store_path.read_text(encoding="utf-8") == "{corrupt"


def test_navigate_is_logged(service, caplog):
    for n in range(2):
        service.record(f"🎄 {n}")

    with caplog.at_level(logging.INFO, logger="services.submission_service"):
        service.navigate("next", 2)

    assert "Navigate 'next' from 2/2 to 1/2" in caplog.text
