"""Tests for multi-key ordering."""

import pytest

from normstore.core import SortDirection, order
from normstore.core.ordering import sort_ids, sort_plan

PEOPLE = [
    {"id": "ann", "last": "Smith", "age": 31},
    {"id": "bob", "last": "Jones", "age": 45},
    {"id": "cat", "last": "Smith", "age": 27},
    {"id": "dan", "last": "Jones", "age": 45},
    {"id": "eve", "last": "Adams", "age": 31},
]


class TestSortPlan:
    def test_plain_tokens_become_directions(self):
        plan = sort_plan(["a", "b"], ["asc", "desc"])

        assert plan == [("a", SortDirection.ASC), ("b", SortDirection.DESC)]

    def test_enum_directions_pass_through(self):
        assert sort_plan(["a"], [SortDirection.DESC]) == [("a", SortDirection.DESC)]

    def test_length_mismatch_raises(self):
        with pytest.raises(ValueError, match="one direction per key"):
            sort_plan(["a", "b"], ["asc"])

    def test_unknown_token_raises(self):
        with pytest.raises(ValueError, match="Unknown sort direction"):
            sort_plan(["a"], ["up"])


class TestMultiKeyOrder:
    def test_second_key_breaks_ties(self, make_state):
        state = make_state(PEOPLE)

        new_state = order(state, ["last", "age"], ["asc", "asc"])

        assert list(new_state.items) == ["eve", "bob", "dan", "cat", "ann"]

    def test_directions_apply_per_key(self, make_state):
        state = make_state(PEOPLE)

        new_state = order(state, ["age", "last"], ["desc", "asc"])

        assert list(new_state.items) == ["bob", "dan", "eve", "ann", "cat"]

    def test_full_ties_keep_current_order(self, make_state):
        state = make_state(PEOPLE)

        new_state = order(state, ["age"], ["desc"])

        # bob/dan and ann/eve tie on age and keep their input order
        assert list(new_state.items) == ["bob", "dan", "ann", "eve", "cat"]

    def test_strings_sort_lexicographically(self, make_state):
        state = make_state([{"id": i, "name": n} for i, n in enumerate(["b", "B", "a", "ab"])])

        new_state = order(state, ["name"], ["asc"])

        assert [new_state.items_by_id[i]["name"] for i in new_state.items] == ["B", "a", "ab", "b"]

    def test_no_keys_keeps_order(self, state):
        new_state = order(state, [], [])

        assert list(new_state.items) == [0, 1, 2]
        assert new_state.items_by_id is state.items_by_id


class TestMissingFields:
    records = [
        {"id": 1, "score": 5},
        {"id": 2},
        {"id": 3, "score": 9},
        {"id": 4},
    ]

    def test_missing_sorts_last_ascending(self, make_state):
        new_state = order(make_state(self.records), ["score"], ["asc"])

        assert list(new_state.items) == [1, 3, 2, 4]

    def test_missing_sorts_last_descending(self, make_state):
        new_state = order(make_state(self.records), ["score"], ["desc"])

        assert list(new_state.items) == [3, 1, 2, 4]

    def test_none_sorts_last_ascending(self, make_state):
        state = make_state([{"id": 1, "due": 3}, {"id": 2, "due": None}, {"id": 3, "due": 1}])

        new_state = order(state, ["due"], ["asc"])

        assert list(new_state.items) == [3, 1, 2]

    def test_none_sorts_last_descending(self, make_state):
        state = make_state([{"id": 1, "due": None}, {"id": 2, "due": "b"}, {"id": 3, "due": "a"}])

        new_state = order(state, ["due"], ["desc"])

        assert list(new_state.items) == [2, 3, 1]

    def test_none_ties_with_missing(self, make_state):
        state = make_state([{"id": 1}, {"id": 2, "due": None}, {"id": 3, "due": 0}])

        assert list(order(state, ["due"], ["asc"]).items) == [3, 1, 2]


def test_sort_ids_with_plain_resolver():
    lookup = {"x": {"n": 2}, "y": {"n": 1}, "z": {"n": 3}}

    assert sort_ids(["x", "y", "z"], lookup.get, sort_plan(["n"], ["asc"])) == ["y", "x", "z"]
