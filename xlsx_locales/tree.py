#!/usr/bin/env python3
"""
Locale trees and the flat-key convention.

A locale tree is either a Leaf holding a translated value or a Node holding
ordered child trees. Flat keys join the path segments with dots, so
`{"greeting": {"hello": "Hi"}}` flattens to `{"greeting.hello": "Hi"}`.
Segments may not contain dots and may not be empty.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Tuple, Union

from .errors import InvalidKeyError

SEPARATOR = "."


@dataclass(frozen=True)
class Leaf:
	value: Any = ""


@dataclass(frozen=True)
class Node:
	children: Dict[str, "Tree"] = field(default_factory=dict)


Tree = Union[Leaf, Node]


def split_key(key: str) -> List[str]:
	"""
	Split a flat key into its path segments

	Args:
		key (str): Dotted key such as "menu.file.open"

	Returns:
		List of segments

	Raises:
		InvalidKeyError: if the key or any of its segments is empty
	"""
	if not isinstance(key, str) or key == "":
		raise InvalidKeyError(f"Invalid key: {key!r}")
	segments = key.split(SEPARATOR)
	if any(s == "" for s in segments):
		raise InvalidKeyError(f"Invalid key {key!r}: empty path segment")
	return segments


def _check_segment(segment: str, prefix: str) -> None:
	if segment == "":
		raise InvalidKeyError(f"Empty segment under {prefix or '<root>'!r}")
	if SEPARATOR in segment:
		location = f"{prefix}{SEPARATOR}{segment}" if prefix else segment
		raise InvalidKeyError(f"Segment {segment!r} contains '{SEPARATOR}' (at {location!r}); dotted segments are not supported")


def flatten(tree: Tree, prefix: str = "") -> Dict[str, Any]:
	"""
	Flatten a tree into dotted key -> leaf value pairs, depth-first

	Args:
		tree: Node (or Leaf) to flatten
		prefix (str): Key prefix for every emitted entry

	Returns:
		Dict keyed by flat key, in traversal order
	"""
	result: Dict[str, Any] = {}
	if isinstance(tree, Leaf):
		if not prefix:
			raise InvalidKeyError("A leaf needs a key to be flattened")
		result[prefix] = tree.value
		return result
	_flatten_into(tree, prefix, result)
	return result


def _flatten_into(node: Node, prefix: str, result: Dict[str, Any]) -> None:
	for segment, child in node.children.items():
		_check_segment(segment, prefix)
		new_key = f"{prefix}{SEPARATOR}{segment}" if prefix else segment
		if isinstance(child, Node):
			_flatten_into(child, new_key, result)
		else:
			result[new_key] = child.value


def with_path(tree: Node, key: str, value: Any) -> Node:
	"""
	Return a copy of `tree` with `value` stored at `key`.

	Intermediate nodes are created as needed. A leaf sitting where an
	intermediate node is needed gets replaced, and the final segment is
	always overwritten. The input tree is left untouched.
	"""
	return _assign(tree, split_key(key), value)


def _assign(tree: Tree, segments: List[str], value: Any) -> Node:
	head, rest = segments[0], segments[1:]
	children = dict(tree.children) if isinstance(tree, Node) else {}
	if rest:
		children[head] = _assign(children.get(head, Node()), rest, value)
	else:
		children[head] = Leaf(value)
	return Node(children)


def unflatten(pairs: Union[Dict[str, Any], Iterable[Tuple[str, Any]]]) -> Node:
	items = pairs.items() if isinstance(pairs, dict) else pairs
	tree = Node()
	for key, value in items:
		tree = with_path(tree, key, value)
	return tree


def from_plain(data: Any) -> Tree:
	"""Build a tree from parsed JSON data; dicts become nodes, everything else leaves"""
	if isinstance(data, dict):
		return Node({str(k): from_plain(v) for k, v in data.items()})
	return Leaf(data)


def to_plain(tree: Tree) -> Any:
	if isinstance(tree, Node):
		return {k: to_plain(v) for k, v in tree.children.items()}
	return tree.value


def count_leaves(tree: Tree) -> int:
	if isinstance(tree, Leaf):
		return 1
	return sum(count_leaves(child) for child in tree.children.values())
