"""Compress XML documents by minifying, tag mapping, closing-tag removal and Huffman coding."""

__version__ = "0.1.0"
__all__ = [
    "closing_tags",
    "huffman",
    "huffman_tree",
    "minify",
    "system",
    "tag_map",
    "tag_mapping",
    "tag_tree",
]