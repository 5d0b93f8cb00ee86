"""Huffman code tree built from character frequencies.

The tree is serialised as ``((c,freq)(c,freq)...)\\n``: the leaves listed
breadth first. Rebuilding from those frequencies gives back the same tree,
because nodes are always merged in the same deterministic order.
"""

import re
from dataclasses import dataclass
from typing import Optional

_INTERNAL = "\0"
_FREQ = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


@dataclass(eq=False)
class HuffmanNode:
    """A node of the code tree; internal nodes carry the NUL character."""

    freq: int
    char: str = _INTERNAL
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    def is_leaf(self):
        """Return True if the node has no children."""
        return self.left is None and self.right is None


class _NodeHeap:
    """Binary heap whose top is the node with the lowest frequency.

    Sift-up and sift-down follow a fixed hole-moving scheme so that nodes of
    equal frequency always come out in the same order, which keeps the tree
    shape identical between compression and decompression.
    """

    def __init__(self):
        self._items = []

    def __len__(self):
        return len(self._items)

    @staticmethod
    def _before(a, b):
        # True when ``b`` should sit above ``a`` in the heap.
        return a.freq > b.freq

    def _sift_up(self, hole, top, value):
        items = self._items
        parent = (hole - 1) // 2
        while hole > top and self._before(items[parent], value):
            items[hole] = items[parent]
            hole = parent
            parent = (hole - 1) // 2
        items[hole] = value

    def push(self, node):
        self._items.append(node)
        self._sift_up(len(self._items) - 1, 0, node)

    def pop(self):
        items = self._items
        top = items[0]
        last = items.pop()
        if not items:
            return top
        length = len(items)
        hole = 0
        child = 0
        while child < (length - 1) // 2:
            child = 2 * (child + 1)
            if self._before(items[child], items[child - 1]):
                child -= 1
            items[hole] = items[child]
            hole = child
        if length % 2 == 0 and child == (length - 2) // 2:
            child = 2 * (child + 1)
            items[hole] = items[child - 1]
            hole = child - 1
        self._sift_up(hole, 0, last)
        return top


class HuffmanTree:
    """A Huffman code tree with encoding and decoding lookups."""

    def __init__(self, root):
        self.root = root
        self._codes = None

    @classmethod
    def from_frequencies(cls, frequencies):
        """Build a tree from a mapping of character to count.

        Characters with a count of zero or less are ignored. An empty
        mapping gives a tree without a root.
        """
        heap = _NodeHeap()
        for char in sorted(frequencies, key=ord):
            count = frequencies[char]
            if count > 0:
                heap.push(HuffmanNode(count, char))
        if not heap:
            return cls(None)
        while len(heap) > 1:
            left = heap.pop()
            right = heap.pop()
            heap.push(HuffmanNode(left.freq + right.freq, _INTERNAL, left, right))
        return cls(heap.pop())

    @classmethod
    def from_text(cls, text):
        """Build a tree from the character counts of ``text``."""
        counts = {}
        for char in text:
            counts[char] = counts.get(char, 0) + 1
        return cls.from_frequencies(counts)

    @classmethod
    def from_encoded(cls, encoded_tree):
        """Rebuild a tree from ``(c,freq)(c,freq)...``.

        The outer parentheses and the trailing newline of :meth:`encoded`
        must already be removed. Raises ValueError on malformed input.
        """
        frequencies = {}
        pos = 0
        length = len(encoded_tree)
        while pos < length:
            if encoded_tree[pos] != "(":
                raise ValueError("Invalid Tree Encode")
            if pos + 1 >= length:
                raise ValueError("Invalid Tree Encode: truncated entry")
            char = encoded_tree[pos + 1]
            start = pos + 3
            end = encoded_tree.find(")", start)
            if end == -1 or start > length:
                raise ValueError("Invalid Tree Encode: truncated entry")
            match = _FREQ.match(encoded_tree[start:end])
            if match is None:
                raise ValueError(f"Invalid Tree Encode: bad frequency at {start}")
            frequencies[char] = int(match.group(1))
            pos = end + 1
        return cls.from_frequencies(frequencies)

    def encoded(self):
        """Serialise the leaves breadth first as ``((c,f)...)\\n``.

        Returns an empty string for a tree without a root. Leaves holding
        the NUL character are left out.
        """
        if self.root is None:
            return ""
        leaves = []
        queue = [self.root]
        for node in queue:
            if node.is_leaf():
                leaves.append(node)
            else:
                queue.extend(c for c in (node.left, node.right) if c is not None)
        body = "".join(
            f"({leaf.char},{leaf.freq})" for leaf in leaves if leaf.char != _INTERNAL
        )
        return f"({body})\n"

    def _code_table(self):
        if self._codes is None:
            codes = {}
            stack = [(self.root, "")] if self.root is not None else []
            while stack:
                node, path = stack.pop()
                codes.setdefault(node.char, path)
                if node.right is not None:
                    stack.append((node.right, path + "1"))
                if node.left is not None:
                    stack.append((node.left, path + "0"))
            self._codes = codes
        return self._codes

    def encoding_of(self, char):
        """Return the code of ``char`` as a string of ``0`` and ``1``.

        The first node holding ``char`` in depth-first, left-first order
        wins. An unknown character, or NUL, gives an empty code.
        """
        return self._code_table().get(char, "")

    def char_from_encoding(self, bits):
        """Return the leaf character reached by ``bits``, or None.

        ``bits`` is a string of ``0``/``1`` or an iterable of booleans.
        None is returned for empty input, for a path that leaves the tree
        and for a path that stops on an internal node.
        """
        node = self.root
        steps = 0
        for bit in bits:
            if node is None:
                return None
            node = node.right if bit in ("1", 1) else node.left
            steps += 1
        if node is None or steps == 0 or not node.is_leaf():
            return None
        return node.char