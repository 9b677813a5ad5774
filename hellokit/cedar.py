"""Byte-keyed trie with integer values, prefix matching and prefix prediction."""

import argparse
import json
import os
import sys
from dataclasses import dataclass, field


class NoPathError(LookupError):
    """No node is reached by the given key."""


class NoValueError(LookupError):
    """The node exists but holds no value."""


@dataclass
class _Node:
    parent: int
    label: int
    value: int | None = None
    children: dict[int, int] = field(default_factory=dict)


def _to_bytes(key) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    return bytes(key)


def _check_value(value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"trie values must be integers, got {value!r}")


class Trie:
    """Trie over the bytes of its keys; nodes are addressed by integer ids.

    Node 0 is the root. Keys are str (stored as UTF-8) or bytes.
    Predictions are returned in byte-wise lexicographic order.
    """

    def __init__(self):
        self._nodes: list[_Node] = [_Node(-1, -1)]

    def __len__(self) -> int:
        return sum(1 for node in self._nodes if node.value is not None)

    def _check_id(self, node_id: int) -> _Node:
        if not 0 <= node_id < len(self._nodes):
            raise NoPathError(f"no node with id {node_id}")
        return self._nodes[node_id]

    def insert(self, key, value) -> int:
        """Store value under key, replacing any earlier value; return the key's node id."""
        _check_value(value)
        node = 0
        for byte in _to_bytes(key):
            child = self._nodes[node].children.get(byte)
            if child is None:
                child = len(self._nodes)
                self._nodes.append(_Node(node, byte))
                self._nodes[node].children[byte] = child
            node = child
        self._nodes[node].value = value
        return node

    def delete(self, key) -> None:
        """Remove the value stored under key."""
        node = self._nodes[self.jump(key)]
        if node.value is None:
            raise NoValueError(f"no value for key {key!r}")
        node.value = None

    def jump(self, key, start=0) -> int:
        """Follow key from node start; return the node reached."""
        node = start
        self._check_id(node)
        for byte in _to_bytes(key):
            child = self._nodes[node].children.get(byte)
            if child is None:
                raise NoPathError(f"no path for key {key!r}")
            node = child
        return node

    def key(self, node_id) -> bytes:
        """Return the key leading from the root to node_id."""
        self._check_id(node_id)
        labels = []
        node = node_id
        while node > 0:
            current = self._nodes[node]
            labels.append(current.label)
            node = current.parent
        return bytes(reversed(labels))

    def value(self, node_id) -> int:
        node = self._check_id(node_id)
        if node.value is None:
            raise NoValueError(f"no value at node {node_id}")
        return node.value

    def prefix_match(self, key, limit=0) -> list[int]:
        """Ids of the stored keys that are non-empty prefixes of key, shortest first."""
        ids = []
        node = 0
        for byte in _to_bytes(key):
            child = self._nodes[node].children.get(byte)
            if child is None:
                break
            node = child
            if self._nodes[node].value is not None:
                ids.append(node)
                if limit > 0 and len(ids) >= limit:
                    break
        return ids

    def prefix_predict(self, key, limit=0) -> list[int]:
        """Ids of the stored keys that start with key, in lexicographic order."""
        try:
            root = self.jump(key)
        except NoPathError:
            return []
        ids = []
        stack = [root]
        while stack:
            node = stack.pop()
            current = self._nodes[node]
            if current.value is not None:
                ids.append(node)
                if limit > 0 and len(ids) >= limit:
                    break
            stack.extend(current.children[b] for b in sorted(current.children, reverse=True))
        return ids

    def save_to_file(self, path) -> None:
        """Write the trie, node ids included, to a JSON file."""
        document = {"nodes": [[n.parent, n.label, n.value] for n in self._nodes]}
        with open(os.fspath(path), "w", encoding="utf-8") as fp:
            json.dump(document, fp)

    @classmethod
    def load_from_file(cls, path) -> "Trie":
        """Read a trie written by save_to_file; raise ValueError if it is malformed."""
        with open(os.fspath(path), encoding="utf-8") as fp:
            document = json.load(fp)
        if not isinstance(document, dict) or not isinstance(document.get("nodes"), list):
            raise ValueError("trie file has no node list")
        rows = document["nodes"]
        if not rows or rows[0][:2] != [-1, -1]:
            raise ValueError("trie file has no root node")
        trie = cls()
        trie._nodes = []
        for index, row in enumerate(rows):
            if not isinstance(row, list) or len(row) != 3:
                raise ValueError(f"malformed node {index}")
            parent, label, value = row
            if value is not None:
                try:
                    _check_value(value)
                except TypeError as exc:
                    raise ValueError(str(exc)) from None
            node = _Node(parent, label, value)
            if index > 0:
                if not isinstance(parent, int) or not 0 <= parent < index:
                    raise ValueError(f"node {index} has an invalid parent")
                if not isinstance(label, int) or not 0 <= label <= 255:
                    raise ValueError(f"node {index} has an invalid label")
                siblings = trie._nodes[parent].children
                if label in siblings:
                    raise ValueError(f"node {index} duplicates a sibling label")
                siblings[label] = index
            trie._nodes.append(node)
        return trie


_WORDS = ("a", "aa", "ab", "ac", "abc", "abd", "abcd", "abde", "abdf", "abcdef", "abcde")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Show the stored prefixes of a key.")
    parser.add_argument("key", nargs="?", default="abcdefg")
    args = parser.parse_args(argv)
    trie = Trie()
    for index, word in enumerate(_WORDS):
        trie.insert(word, index)
    for index, node in enumerate(trie.prefix_match(args.key)):
        key = trie.key(node).decode("utf-8", errors="replace")
        print(f"i={index}, key=[{key}] val=[{trie.value(node)}] id=[{node}]")
    return 0


if __name__ == "__main__":
    sys.exit(main())