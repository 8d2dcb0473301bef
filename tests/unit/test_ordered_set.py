from __future__ import annotations

from geneos_toolkit.models import OrderedSet


def test_add_keeps_first_seen_position() -> None:
    items: OrderedSet[str] = OrderedSet()

    assert items.add("b") is True
    assert items.add("a") is True
    assert items.add("b") is False

    assert items.to_tuple() == ("b", "a")
    assert "a" in items
    assert "c" not in items
    assert len(items) == 2


def test_sort_is_stable_for_equal_keys() -> None:
    items = OrderedSet(["ccc", "bb", "aa", "d"])

    items.sort(key=len)

    assert list(items) == ["d", "bb", "aa", "ccc"]
