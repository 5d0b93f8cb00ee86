"""Huffman coding of text into a self-describing string.

The compressed form has three parts: the encoded tree line
``((c,freq)...)\\n``, the number of code bits followed by ``\\n``, and the
code bits as ``0``/``1`` characters. Bits beyond the stated count are
ignored on decompression, so padding may follow.
"""

import re

from xmlsqueeze.huffman_tree import HuffmanTree

_TREE_END = ")\n"
_BIT_COUNT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def compress(text):
    """Return the compressed form of ``text``."""
    tree = HuffmanTree.from_text(text)
    bits = "".join(tree.encoding_of(char) for char in text)
    return f"{tree.encoded()}{len(bits)}\n{bits}"


def decompress(data):
    """Decode the output of :func:`compress`.

    Raises ValueError if ``data`` is empty, lacks the tree line or bit
    count, describes no tree, holds no code bits, or holds fewer bits
    than its count states.
    """
    if not data:
        raise ValueError("Defected file.")
    tree_end = data.find(_TREE_END)
    if tree_end == -1:
        raise ValueError("Defected file: missing tree line")
    after_tree = tree_end + len(_TREE_END)
    match = _BIT_COUNT.match(data, after_tree)
    if match is None:
        raise ValueError("Defected file: missing bit count")
    bit_count = int(match.group(1))

    tree = HuffmanTree.from_encoded(data[1:tree_end])
    if tree.root is None:
        raise ValueError("Defected file: empty tree")

    count_end = data.find("\n", after_tree)
    if count_end == -1 or count_end + 1 >= len(data):
        raise ValueError("Defected file: no compressed bits")
    bits = data[count_end + 1 :]
    if bit_count > len(bits):
        raise ValueError(
            f"Defected file: {bit_count} bits stated, {len(bits)} present"
        )

    out = []
    code = []
    for bit in bits[:bit_count] if bit_count > 0 else "":
        code.append(bit)
        char = tree.char_from_encoding(code)
        if char is not None and char != "\0":
            out.append(char)
            code.clear()
    return "".join(out)