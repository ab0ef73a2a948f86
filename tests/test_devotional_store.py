"""Tests for the devotional storage accessor."""
from __future__ import annotations

from datetime import datetime

import pytest
from sqlalchemy.exc import OperationalError

from app.db import db
from app.errors import StorageError, ValidationError
from app.models import Devotional, DevotionalStatus


def test_create_then_get_returns_active_record(store) -> None:
    devotional_id = store.create("John 3:16", "For God so loved...")

    devotional = store.get_active(devotional_id)

    assert devotional is not None
    assert devotional.verse == "John 3:16"
    assert devotional.content == "For God so loved..."
    assert devotional.created_at is not None
    assert devotional.updated_at is None
    assert devotional.deleted_at is None
    assert devotional.status is DevotionalStatus.ACTIVE


def test_create_assigns_increasing_ids(store) -> None:
    first = store.create("Psalm 23:1", "The Lord is my shepherd.")
    second = store.create("Psalm 23:2", "He makes me lie down in green pastures.")

    assert second > first


@pytest.mark.parametrize(
    "verse, content",
    [("", "content"), ("Psalm 1:1", ""), (None, "content"), ("Psalm 1:1", None)],
)
def test_create_rejects_missing_fields(store, verse, content) -> None:
    with pytest.raises(ValidationError) as excinfo:
        store.create(verse, content)

    assert excinfo.value.message == "Verse and content are required."
    assert Devotional.query.count() == 0


def test_get_active_returns_none_for_unknown_id(store) -> None:
    assert store.get_active(999) is None


def test_list_active_is_empty_without_rows(store) -> None:
    assert store.list_active() == []


def test_list_active_orders_newest_first(store) -> None:
    older = store.create("Genesis 1:1", "In the beginning.")
    newer = store.create("Revelation 22:21", "The grace of the Lord Jesus.")
    db.session.get(Devotional, older).created_at = datetime(2024, 1, 1, 8, 0, 0)
    db.session.get(Devotional, newer).created_at = datetime(2024, 1, 2, 8, 0, 0)
    db.session.commit()

    assert [d.id for d in store.list_active()] == [newer, older]


def test_list_active_breaks_timestamp_ties_by_id(store) -> None:
    ids = [store.create(f"Proverbs 3:{n}", "Trust in the Lord.") for n in range(5, 8)]

    assert [d.id for d in store.list_active()] == sorted(ids, reverse=True)


def test_soft_delete_hides_record(store) -> None:
    kept = store.create("Romans 8:28", "All things work together.")
    removed = store.create("Romans 12:2", "Be transformed.")

    assert store.soft_delete(removed) is True

    assert store.get_active(removed) is None
    assert [d.id for d in store.list_active()] == [kept]


def test_soft_delete_keeps_row_in_storage(store) -> None:
    devotional_id = store.create("Isaiah 40:31", "Those who hope in the Lord.")

    store.soft_delete(devotional_id)

    row = db.session.get(Devotional, devotional_id)
    assert row is not None
    assert row.deleted_at is not None
    assert row.status is DevotionalStatus.DELETED
    assert Devotional.query.filter(Devotional.status == DevotionalStatus.DELETED.value).count() == 1


def test_soft_delete_twice_reports_no_change(store) -> None:
    devotional_id = store.create("Micah 6:8", "Act justly, love mercy.")
    store.soft_delete(devotional_id)
    first_deleted_at = db.session.get(Devotional, devotional_id).deleted_at

    assert store.soft_delete(devotional_id) is False

    db.session.expire_all()
    assert db.session.get(Devotional, devotional_id).deleted_at == first_deleted_at


def test_soft_delete_unknown_id_reports_no_change(store) -> None:
    assert store.soft_delete(12345) is False


def test_database_fault_becomes_storage_error(store, monkeypatch) -> None:
    def broken_query():
        raise OperationalError("SELECT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(Devotional, "active", staticmethod(broken_query))

    with pytest.raises(StorageError) as excinfo:
        store.list_active()
    assert excinfo.value.message == "Failed to retrieve devotionals."

    with pytest.raises(StorageError) as excinfo:
        store.get_active(1)
    assert excinfo.value.message == "Failed to retrieve the devotional."

    with pytest.raises(StorageError) as excinfo:
        store.soft_delete(1)
    assert excinfo.value.message == "Failed to delete devotional."


def test_failed_insert_becomes_storage_error(store, monkeypatch) -> None:
    def broken_commit():
        raise OperationalError("INSERT", {}, Exception("database is locked"))

    monkeypatch.setattr(db.session, "commit", broken_commit)

    with pytest.raises(StorageError) as excinfo:
        store.create("Joshua 1:9", "Be strong and courageous.")
    assert excinfo.value.message == "Failed to create devotional."
