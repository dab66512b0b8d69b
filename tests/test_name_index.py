"""
Tests for NameIndex: id assignment and prefix hinting.
"""

import pytest

from movie_match.name_index import NameIndex

NAMES = [
    "Bacon, Kevin",
    "Damon, Matt",
    "bacon, Kyra",
    "Caine, Michael",
    "Adams, Amy",
    "Baker, Joe",
    "Cage, Nicolas",
    "Baldwin, Alec",
    "Banderas, Antonio",
    "Bale, Christian",
]


@pytest.fixture
def index():
    idx = NameIndex()
    for name in NAMES:
        idx.insert(name)
    idx.sort()
    return idx


class TestIdAssignment:
    def test_insert_if_absent(self):
        idx = NameIndex()

        assert idx.insert("Bacon, Kevin") == (True, 0)
        assert idx.insert("Weaver, Sigourney") == (True, 1)
        assert idx.insert("Bacon, Kevin") == (False, 0)
        assert len(idx) == 2

    def test_retrieve(self, index):
        assert index.retrieve("Damon, Matt") == 1
        assert index.retrieve("Damon, Mat") is None
        assert "Adams, Amy" in index
        assert "adams, amy" not in index  # lookup is exact

    def test_name_by_id(self, index):
        assert index.name(0) == "Bacon, Kevin"
        assert index.names == NAMES

    def test_reserve_and_clear(self, index):
        index.reserve(1000)
        index.clear()

        assert len(index) == 0
        assert index.retrieve("Bacon, Kevin") is None
        assert index.sorted_names == []


class TestSortedNames:
    def test_case_insensitive_order(self, index):
        assert index.sorted_names == [
            "Adams, Amy",
            "Bacon, Kevin",
            "bacon, Kyra",
            "Baker, Joe",
            "Baldwin, Alec",
            "Bale, Christian",
            "Banderas, Antonio",
            "Cage, Nicolas",
            "Caine, Michael",
            "Damon, Matt",
        ]

    def test_sort_reflects_later_inserts(self, index):
        index.insert("Aaron, Hank")
        assert index.sorted_names[0] == "Adams, Amy"

        index.sort()
        assert index.sorted_names[0] == "Aaron, Hank"


class TestHintRange:
    def test_widened_range(self, index):
        """Prefix 'bacon,' matches two names; two more on each side, clamped."""
        assert index.hint_range("Bacon, K") == (0, 5)
        assert index.hint("Bacon, K") == [
            "Adams, Amy",
            "Bacon, Kevin",
            "bacon, Kyra",
            "Baker, Joe",
            "Baldwin, Alec",
        ]

    def test_clamped_at_end(self, index):
        assert index.hint_range("Cai") == (6, 10)
        assert index.hint("cai") == [
            "Banderas, Antonio",
            "Cage, Nicolas",
            "Caine, Michael",
            "Damon, Matt",
        ]

    def test_max_suggestions(self, index):
        assert index.hint("Bacon", max_suggestions=2) == ["Adams, Amy", "Bacon, Kevin"]

    def test_no_match_still_near(self, index):
        """A prefix past every name yields the last entries."""
        assert index.hint("Zz") == ["Caine, Michael", "Damon, Matt"]

    def test_empty_index(self):
        idx = NameIndex()
        idx.sort()
        assert idx.hint_range("anything") == (0, 0)
        assert idx.hint("anything") == []

    @pytest.mark.parametrize("query", ["B", "ba", "Bal", "BACON", "Bale, Chris", "c", "Dam", "x"])
    def test_range_contains_every_match(self, index, query):
        """Every name sharing the truncated, folded prefix is inside the range."""
        lo, hi = index.hint_range(query)
        key = query[: index.hint_length].casefold()

        for i, name in enumerate(index.sorted_names):
            if name[: index.hint_length].casefold().startswith(key):
                assert lo <= i < hi

    def test_accented_names_inside_range(self):
        """Names continuing past 'z' (é, ž, ...) still match their prefix."""
        idx = NameIndex()
        for name in ["Bja", "Bjb", "Bjé1", "Bjé2", "Bjé3", "Bjé4", "Zed"]:
            idx.insert(name)
        idx.sort()

        assert idx.hint("Bj")[:6] == ["Bja", "Bjb", "Bjé1", "Bjé2", "Bjé3", "Bjé4"]

    @pytest.mark.parametrize("query", ["Bj", "bjö", "Ž", "Žiž", "Ł"])
    def test_non_ascii_range_contains_every_match(self, query):
        idx = NameIndex(hint_margin=0)
        for name in ["Björk", "Bjørn, Ole", "Bjöström, Ulf", "Žižek, Slavoj", "Łódź, Ola", "Zappa, Frank", "Anders"]:
            idx.insert(name)
        idx.sort()

        lo, hi = idx.hint_range(query)
        key = query[: idx.hint_length].casefold()
        matches = [i for i, k in enumerate(idx.sorted_names) if k.casefold().startswith(key)]

        assert matches
        assert all(lo <= i < hi for i in matches)

    def test_custom_settings(self):
        idx = NameIndex(hint_length=3, hint_margin=0)
        for name in NAMES:
            idx.insert(name)
        idx.sort()

        # 'Bale, Christian' truncates to 'bal': Baldwin and Bale match
        assert idx.hint("Bale, Christian") == ["Baldwin, Alec", "Bale, Christian"]
