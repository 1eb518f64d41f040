import random
import pytest

from prefixmatch.index import PrefixIndex, Match, sort_cmp, find_cmp


def _sample() -> PrefixIndex[int]:
    idx = PrefixIndex()
    idx.insert("file", 0)
    idx.insert("file_name", 1)
    idx.insert("file::name", 2)
    idx.insert("file::no", 3)
    idx.reorder()
    return idx


# ---- comparators ----

@pytest.mark.parametrize("a,b,expected", [
    ("abc", "abd", -1),
    ("abd", "abc", 1),
    ("file", "file::", -1),     # shorter first
    ("file::", "file", 1),
    ("same", "same", 0),
    ("", "", 0),
    ("", "a", -1),
    ("é", "z", 1),              # code point order, not bytes
])
def test_sort_cmp(a, b, expected):
    assert sort_cmp(a, b) == expected


@pytest.mark.parametrize("a,b,expected", [
    ("file::name", "file::", 0),  # extension
    ("file", "file::", 0),        # ancestor also counts as equal
    ("anything", "", 0),
    ("file_name", "file::", 1),
    ("abc", "abd", -1),
])
def test_find_cmp(a, b, expected):
    assert find_cmp(a, b) == expected


def test_sort_cmp_agrees_with_str_ordering():
    rng = random.Random(7)
    words = ["".join(rng.choice("ab:_") for _ in range(rng.randint(0, 5))) for _ in range(200)]
    for a, b in zip(words, reversed(words)):
        assert sort_cmp(a, b) == (a > b) - (a < b)


# ---- insert / reorder ----

def test_reorder_sorts_sample():
    idx = _sample()
    assert list(idx.find("")) == [
        ("file", 0),
        ("file::name", 2),
        ("file::no", 3),
        ("file_name", 1),
    ]


def test_insert_does_not_sort():
    idx = PrefixIndex()
    idx.insert("b", 1)
    idx.insert("a", 2)
    assert [k for k, _ in idx._items] == ["b", "a"]
    assert len(idx) == 2


def test_reorder_is_idempotent():
    rng = random.Random(1)
    idx = PrefixIndex()
    for i in range(300):
        idx.insert("".join(rng.choice("xyz") for _ in range(rng.randint(1, 6))), i)
    idx.reorder()
    first = [k for k, _ in idx._items]
    idx.reorder()
    assert [k for k, _ in idx._items] == first
    assert all(sort_cmp(a, b) <= 0 for a, b in zip(first, first[1:]))


def test_duplicate_keys_are_kept():
    idx = PrefixIndex()
    idx.insert("dup", "x")
    idx.insert("dup", "y")
    idx.insert("dupe", "z")
    idx.reorder()
    hits = list(idx.find("dup"))
    assert len(hits) == 3
    assert sorted(m for k, m in hits if k == "dup") == ["x", "y"]


# ---- find ----

def test_find_scoped_prefix():
    idx = _sample()
    assert list(idx.find("file::")) == [("file::name", 2), ("file::no", 3)]


def test_find_empty_prefix_returns_everything():
    idx = _sample()
    m = idx.find("")
    assert len(m) == 4
    assert (m.start, m.stop) == (0, 4)


def test_find_no_match_is_empty():
    idx = _sample()
    m = idx.find("zzz")
    assert not m
    assert list(m) == []


def test_find_on_empty_index():
    idx = PrefixIndex()
    idx.reorder()
    assert list(idx.find("")) == []
    assert list(idx.find("a")) == []


def test_find_exact_key_is_included():
    idx = _sample()
    assert list(idx.find("file::no")) == [("file::no", 3)]


def test_find_ancestor_probe_stops_on_ancestor():
    # Bisection over [0, 1, a, aa, ab] first probes "a", which "ab" extends.
    # Neither neighbour starts with "ab", so the walk never reaches "ab".
    idx = PrefixIndex()
    for i, key in enumerate(["ab", "aa", "a", "1", "0"]):
        idx.insert(key, i)
    idx.reorder()
    m = idx.find("ab")
    assert (m.start, m.stop) == (2, 3)
    assert list(m) == [("a", 2)]


def test_find_ancestor_probe_next_to_block_still_expands():
    # Probe lands on the ancestor "a", but its right neighbours start with "ab";
    # the ancestor stays in the span since the probe position is always kept.
    idx = PrefixIndex()
    for i, key in enumerate(["0", "1", "a", "ab", "abc"]):
        idx.insert(key, i)
    idx.reorder()
    assert list(idx.find("ab").keys()) == ["a", "ab", "abc"]


def test_find_matches_brute_force_without_ancestors():
    rng = random.Random(42)
    keys = ["".join(rng.choice("abc") for _ in range(rng.randint(1, 6))) for _ in range(400)]
    idx = PrefixIndex()
    for i, k in enumerate(keys):
        idx.insert(k, i)
    idx.reorder()
    ordered = [k for k, _ in idx._items]

    for _ in range(300):
        prefix = "".join(rng.choice("abc") for _ in range(rng.randint(1, 4)))
        if any(prefix.startswith(k) and k != prefix for k in keys):
            continue  # a strict ancestor can capture the probe
        m = idx.find(prefix)
        got = [k for k, _ in m]
        assert got == [k for k in ordered if k.startswith(prefix)]
        outside = ordered[:m.start] + ordered[m.stop:]
        assert not any(k.startswith(prefix) for k in outside)


# ---- Match view ----

def test_match_is_restartable_and_lazy():
    idx = _sample()
    m = idx.find("file::")
    assert isinstance(m, Match)
    assert list(m) == list(m)
    assert list(m.keys()) == ["file::name", "file::no"]
    assert m.range == range(1, 3)

    # entries are read on iteration, not captured by find()
    idx._items[2] = ("file::now", 30)
    assert list(m) == [("file::name", 2), ("file::now", 30)]


def test_match_returns_metadata_by_reference():
    meta = {"kind": "fn"}
    idx = PrefixIndex()
    idx.insert("run", meta)
    idx.reorder()
    (_, got), = idx.find("ru")
    assert got is meta
