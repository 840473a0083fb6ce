"""Tests for the in-memory operations: add/incr, note, del, ls, show."""

from __future__ import annotations

import pytest

from bucketlist.errors import NotFound
from bucketlist.items import Item
from bucketlist.ops import add_or_increment, annotate, delete, get_item, list_items

T0 = 1_700_000_000


@pytest.fixture
def items():
    return {
        "low": Item(priority=0.05, last_touched=T0, active=False),
        "mid": Item(priority=1.0, last_touched=T0),
        "high": Item(priority=3.0, last_touched=T0, note="soon"),
        "edge": Item(priority=0.1, last_touched=T0),
    }


class TestAddOrIncrement:
    def test_creates_new(self):
        items: dict[str, Item] = {}
        result = add_or_increment(items, "gym", now=T0)
        assert result["status"] == "added"
        assert items["gym"] == Item(priority=1.0, last_touched=T0, active=True, note="")

    def test_raises_existing(self, items):
        result = add_or_increment(items, "low", now=T0 + 99)
        assert result["status"] == "raised"
        assert items["low"].priority == pytest.approx(1.05)
        assert items["low"].last_touched == T0 + 99
        assert items["low"].active is True

    def test_keeps_note(self, items):
        add_or_increment(items, "high", now=T0)
        assert items["high"].note == "soon"
        assert items["high"].priority == 4.0

    def test_new_item_appended_last(self, items):
        add_or_increment(items, "new", now=T0)
        assert list(items)[-1] == "new"

    def test_result_carries_record(self):
        result = add_or_increment({}, "gym", now=T0)
        assert result["item"] == {"name": "gym", "prio": 1.0, "last": T0, "active": True, "note": ""}


class TestAnnotate:
    def test_replaces_note(self, items):
        annotate(items, "high", "next month")
        assert items["high"].note == "next month"

    def test_empty_note_clears(self, items):
        annotate(items, "high", "")
        assert items["high"].note == ""

    def test_missing_raises(self, items):
        with pytest.raises(NotFound) as exc:
            annotate(items, "nope", "x")
        assert exc.value.name == "nope"
        assert "nope" in str(exc.value)


class TestDelete:
    def test_removes(self, items):
        result = delete(items, "mid")
        assert "mid" not in items
        assert result["item"]["prio"] == 1.0

    def test_missing_raises(self, items):
        with pytest.raises(NotFound):
            delete(items, "nope")

    def test_second_delete_fails(self, items):
        delete(items, "mid")
        with pytest.raises(NotFound):
            delete(items, "mid")


class TestGetItem:
    def test_found(self, items):
        assert get_item(items, "high")["note"] == "soon"

    def test_missing(self, items):
        with pytest.raises(NotFound):
            get_item(items, "nope")


class TestListItems:
    def test_active_only_descending(self, items):
        names = [name for name, _ in list_items(items)]
        assert names == ["high", "mid"]

    def test_all_descending(self, items):
        names = [name for name, _ in list_items(items, show_inactive=True)]
        assert names == ["high", "mid", "edge", "low"]

    def test_does_not_reorder_collection(self, items):
        before = list(items)
        list_items(items, show_inactive=True)
        assert list(items) == before

    def test_does_not_touch_active(self, items):
        items["mid"].active = False
        list_items(items)
        assert items["mid"].active is False

    def test_ties_keep_insertion_order(self):
        items = {n: Item(priority=2.0, last_touched=T0) for n in ("b", "a", "c")}
        assert [n for n, _ in list_items(items)] == ["b", "a", "c"]

    def test_custom_threshold(self, items):
        names = [name for name, _ in list_items(items, threshold=2.0)]
        assert names == ["high"]

    def test_empty(self):
        assert list_items({}) == []


class TestActiveAfterTouch:
    def test_new_item_below_high_threshold(self):
        items: dict[str, Item] = {}
        add_or_increment(items, "gym", now=T0, threshold=5.0)
        assert items["gym"].active is False

    def test_raised_item_tracks_threshold(self):
        items = {"gym": Item(priority=1.5, last_touched=T0, active=False)}
        add_or_increment(items, "gym", now=T0, threshold=3.0)
        assert items["gym"].active is False
        add_or_increment(items, "gym", now=T0, threshold=3.0)
        assert items["gym"].active is True
