"""Compression pipelines and the on-disk format of compressed files.

A compressed file holds the Huffman tree line and the bit-count line as
UTF-8 text, followed by the code bits packed eight to a byte, most
significant bit first, with the last byte padded with zero bits.
"""

from pathlib import Path

from xmlsqueeze import huffman
from xmlsqueeze.closing_tags import restore_closing_tags, strip_closing_tags
from xmlsqueeze.minify import minify
from xmlsqueeze.tag_mapping import map_tags, unmap_tags


def _header_end(data, tree_end_marker, newline):
    """Return the index just past the bit-count line, or raise ValueError."""
    tree_end = data.find(tree_end_marker)
    if tree_end == -1:
        raise ValueError("Defected file: missing tree line")
    count_end = data.find(newline, tree_end + len(tree_end_marker))
    if count_end == -1:
        raise ValueError("Defected file: missing bit count line")
    return count_end + 1


def _pack_bits(bits):
    if bits.strip("01"):
        raise ValueError("compressed bits may hold only '0' and '1'")
    padded = bits + "0" * (-len(bits) % 8)
    if not padded:
        return b""
    return int(padded, 2).to_bytes(len(padded) // 8, "big")


def _unpack_bits(payload):
    return "".join(f"{byte:08b}" for byte in payload)


def save_compressed(data, path):
    """Write the output of :func:`huffman.compress` to ``path``.

    Returns the number of bytes written. Raises ValueError if ``data``
    lacks the header lines or holds characters other than ``0``/``1`` in
    its bit block; errors from writing the file propagate.
    """
    split = _header_end(data, ")\n", "\n")
    header, bits = data[:split], data[split:]
    content = header.encode("utf-8") + _pack_bits(bits)
    Path(path).write_bytes(content)
    return len(content)


def read_compressed(path):
    """Read a file written by :func:`save_compressed`.

    Returns the header lines followed by the stored bits as ``0``/``1``
    characters, padding bits included. Raises ValueError if the file has
    no header.
    """
    raw = Path(path).read_bytes()
    split = _header_end(raw, b")\n", b"\n")
    return raw[:split].decode("utf-8") + _unpack_bits(raw[split:])


def compress_social_network_xml(text, path):
    """Minify, drop closing tags, map tags, Huffman-code and save ``text``.

    Returns the number of bytes written.
    """
    stripped = strip_closing_tags(minify(text))
    return save_compressed(huffman.compress(map_tags(stripped)), path)


def compress_xml(text, path):
    """Minify, map tags with an embedded map, Huffman-code and save ``text``.

    Returns the number of bytes written.
    """
    mapped = map_tags(minify(text), add_map_table=True)
    return save_compressed(huffman.compress(mapped), path)


def compress_file(text, path):
    """Huffman-code ``text`` and save it; returns the bytes written."""
    return save_compressed(huffman.compress(text), path)


def decompress_social_network_xml(path):
    """Reverse :func:`compress_social_network_xml`; returns minified XML."""
    decoded = huffman.decompress(read_compressed(path))
    return restore_closing_tags(unmap_tags(decoded))


def decompress_xml(path):
    """Reverse :func:`compress_xml`; returns the minified XML."""
    return unmap_tags(huffman.decompress(read_compressed(path)))


def decompress_json(path):
    """Decode a Huffman-coded JSON file."""
    return huffman.decompress(read_compressed(path))


def decompress_file(path):
    """Reverse :func:`compress_file`."""
    return huffman.decompress(read_compressed(path))


def minify_xml(text):
    """Return ``text`` with insignificant XML whitespace removed."""
    return minify(text)