from churnpipe.mergesort import merge_sort_desc
from churnpipe.parser import Solicitud


def make(cid, tenure):
    return Solicitud(cid, tenure, 0.0, 0.0, "No")


def test_sorts_descending_in_place():
    records = [make("a", 3), make("b", 72), make("c", 0), make("d", 45), make("e", 12)]
    original = list(records)
    assert merge_sort_desc(records) is None
    tenures = [r.tenure for r in records]
    assert all(x >= y for x, y in zip(tenures, tenures[1:]))
    assert sorted(records, key=lambda r: r.customer_id) == sorted(original, key=lambda r: r.customer_id)


def test_equal_tenures_keep_original_order():
    records = [make("a", 5), make("b", 9), make("c", 5), make("d", 9), make("e", 5)]
    merge_sort_desc(records)
    assert [r.customer_id for r in records] == ["b", "d", "a", "c", "e"]


def test_empty_and_single():
    empty = []
    merge_sort_desc(empty)
    assert empty == []
    single = [make("a", 1)]
    merge_sort_desc(single)
    assert single == [make("a", 1)]


def test_already_sorted_is_unchanged():
    records = [make(str(t), t) for t in range(20, 0, -1)]
    expected = list(records)
    merge_sort_desc(records)
    assert records == expected