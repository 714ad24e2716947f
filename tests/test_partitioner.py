from app.services.checkout import partition_by_seller
from fakes import line


def test_groups_by_seller_in_first_seen_order():
    lines = [line(1, "B", 5), line(2, "A", 10), line(3, "B", 7)]
    parts = partition_by_seller(lines)
    assert list(parts) == ["B", "A"]
    assert [l.item_id for l in parts["B"]] == [1, 3]


def test_every_line_lands_in_exactly_one_partition():
    lines = [line(i, f"S{i % 3}", i) for i in range(1, 10)]
    parts = partition_by_seller(lines)
    flattened = sorted(l.item_id for group in parts.values() for l in group)
    assert flattened == list(range(1, 10))
    assert all(l.seller_id == seller for seller, group in parts.items() for l in group)


def test_lines_without_seller_dropped(caplog):
    caplog.set_level("WARNING")
    parts = partition_by_seller([line(1, None, 5), line(2, "", 5), line(3, "A", 5)])
    assert list(parts) == ["A"]
    assert "Skipped 2 cart line(s)" in caplog.text


def test_empty_input():
    assert partition_by_seller([]) == {}
