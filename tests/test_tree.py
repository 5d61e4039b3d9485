import pytest

from xlsx_locales.errors import InvalidKeyError
from xlsx_locales.tree import (
    Leaf,
    Node,
    count_leaves,
    flatten,
    from_plain,
    split_key,
    to_plain,
    unflatten,
    with_path,
)


NESTED = {
    "greeting": {"hello": "Hello", "bye": ""},
    "menu": {"file": {"open": "Open", "close": "Close"}, "count": 3},
    "title": "App",
}


class TestFlatten:
    def test_nested_tree_flattens_depth_first(self):
        flat = flatten(from_plain(NESTED))
        assert list(flat.items()) == [
            ("greeting.hello", "Hello"),
            ("greeting.bye", ""),
            ("menu.file.open", "Open"),
            ("menu.file.close", "Close"),
            ("menu.count", 3),
            ("title", "App"),
        ]

    def test_prefix_is_prepended(self):
        flat = flatten(from_plain({"a": {"b": "x"}}), prefix="root")
        assert flat == {"root.a.b": "x"}

    def test_every_leaf_is_kept(self):
        tree = from_plain(NESTED)
        assert len(flatten(tree)) == count_leaves(tree) == 6

    def test_arrays_and_nulls_are_leaves(self):
        flat = flatten(from_plain({"days": ["Mon", "Tue"], "missing": None}))
        assert flat == {"days": ["Mon", "Tue"], "missing": None}

    def test_empty_node_contributes_nothing(self):
        assert flatten(from_plain({"empty": {}, "a": "x"})) == {"a": "x"}

    def test_dotted_segment_is_rejected(self):
        with pytest.raises(InvalidKeyError):
            flatten(from_plain({"a.b": "x"}))

    def test_empty_segment_is_rejected(self):
        with pytest.raises(InvalidKeyError):
            flatten(from_plain({"a": {"": "x"}}))


class TestWithPath:
    def test_creates_intermediate_nodes(self):
        tree = with_path(Node(), "a.b.c", "x")
        assert to_plain(tree) == {"a": {"b": {"c": "x"}}}

    def test_does_not_mutate_input(self):
        original = from_plain({"a": {"b": "x"}})
        updated = with_path(original, "a.c", "y")
        assert to_plain(original) == {"a": {"b": "x"}}
        assert to_plain(updated) == {"a": {"b": "x", "c": "y"}}

    def test_final_segment_is_overwritten(self):
        tree = with_path(from_plain({"a": {"b": "old"}}), "a.b", "new")
        assert to_plain(tree) == {"a": {"b": "new"}}

    def test_intermediate_leaf_is_replaced(self):
        tree = with_path(from_plain({"a": "leaf"}), "a.b", "x")
        assert to_plain(tree) == {"a": {"b": "x"}}

    def test_node_at_final_segment_is_replaced_by_leaf(self):
        tree = with_path(from_plain({"a": {"b": "x"}}), "a", "flat")
        assert tree.children["a"] == Leaf("flat")

    def test_existing_segments_keep_their_position(self):
        tree = with_path(from_plain({"a": "1", "b": "2"}), "a", "3")
        assert list(tree.children) == ["a", "b"]

    @pytest.mark.parametrize("key", ["", "a..b", ".a", "a."])
    def test_empty_segments_are_rejected(self, key):
        with pytest.raises(InvalidKeyError):
            with_path(Node(), key, "x")


class TestRoundTrip:
    def test_unflatten_inverts_flatten(self):
        tree = from_plain(NESTED)
        assert unflatten(flatten(tree)) == tree

    def test_flatten_inverts_unflatten(self):
        flat = {"x.y": "1", "x.z": "2", "w": "3"}
        assert flatten(unflatten(flat)) == flat

    def test_unflatten_accepts_pairs(self):
        tree = unflatten([("a.b", "1"), ("a.c", "2")])
        assert to_plain(tree) == {"a": {"b": "1", "c": "2"}}

    def test_split_key(self):
        assert split_key("a.b.c") == ["a", "b", "c"]
