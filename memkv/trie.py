"""Character trie supporting prefix search of stored keys."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class _Node:
    children: dict[str, "_Node"] = field(default_factory=dict)
    is_end: bool = False


class Trie:
    """A set of string keys organised for prefix lookup."""

    def __init__(self) -> None:
        self._root = _Node()

    def _find(self, text: str) -> _Node | None:
        node = self._root
        for ch in text:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def insert(self, key: str) -> None:
        """Add ``key``; inserting an existing key has no effect."""
        node = self._root
        for ch in key:
            node = node.children.setdefault(ch, _Node())
        node.is_end = True

    def search_prefix(self, prefix: str) -> list[str]:
        """Return all keys starting with ``prefix`` in character order."""
        start = self._find(prefix)
        if start is None:
            return []
        result: list[str] = []
        stack = [(start, prefix)]
        while stack:
            node, text = stack.pop()
            if node.is_end:
                result.append(text)
            for ch in sorted(node.children, reverse=True):
                stack.append((node.children[ch], text + ch))
        return result

    def contains(self, key: str) -> bool:
        """Return whether ``key`` was inserted."""
        node = self._find(key)
        return node is not None and node.is_end

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def remove(self, key: str) -> bool:
        """Remove ``key`` and prune unused nodes; return whether it was present."""
        if not key or not self.contains(key):
            return False
        path = [self._root]
        for ch in key:
            path.append(path[-1].children[ch])
        path[-1].is_end = False
        for parent, ch, child in reversed(list(zip(path, key, path[1:]))):
            if child.is_end or child.children:
                break
            del parent.children[ch]
        return True