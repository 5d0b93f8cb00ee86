"""Replace tag names with small integers and back again.

Compressed output may start with a ``<TagMap>name,name,...</TagMap>`` block
giving the numbering. Without it, the fixed social network numbering in
:data:`DEFAULT_TAG_MAP_BLOCK` is assumed.
"""

import re

from xmlsqueeze.minify import minify
from xmlsqueeze.tag_map import TagMap

DEFAULT_TAG_MAP_BLOCK = (
    "<TagMap>users,user,id,name,posts,post,body,topics,topic,"
    "followers,follower</TagMap>"
)

_OPEN = "<TagMap>"
_CLOSE = "</TagMap>"
_INDEX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _rewrite_tags(text, start, convert):
    """Return ``text[start:]`` with every tag name passed through ``convert``."""
    out = []
    pos = start
    while True:
        lt = text.find("<", pos)
        if lt == -1:
            out.append(text[pos:])
            return "".join(out)
        out.append(text[pos:lt])
        name_start = lt + 1
        closing = text.startswith("/", name_start)
        if closing:
            name_start += 1
        gt = text.find(">", name_start)
        if gt == -1:
            raise ValueError(f"unterminated tag at position {lt}")
        out.append("</" if closing else "<")
        out.append(convert(text[name_start:gt]))
        out.append(">")
        pos = gt + 1


def collect_tags(text):
    """Return a TagMap of every distinct tag name in order of first use."""
    mapping = TagMap()
    for segment in text.split("<"):
        segment = segment.lstrip(" \t\n\r")
        end = segment.find(">")
        if end == -1:
            continue
        name = segment[1:end] if segment.startswith("/") else segment[:end]
        if name not in mapping:
            mapping.add(name)
    return mapping


def map_tags(text, add_map_table=False):
    """Replace each tag name with its number.

    With ``add_map_table`` the numbering is taken from the document itself
    and prepended as a ``<TagMap>`` block; otherwise the default social
    network numbering is used. Raises KeyError for a tag that has no number
    and ValueError for an unterminated tag.
    """
    if add_map_table:
        mapping = collect_tags(text)
        prefix = mapping.to_block()
    else:
        mapping = TagMap.from_block(DEFAULT_TAG_MAP_BLOCK)
        prefix = ""
    return prefix + _rewrite_tags(text, 0, lambda name: str(mapping.value_of(name)))


def find_tag_map_block(text):
    """Return the minified ``<TagMap>`` block that opens ``text``.

    Returns :data:`DEFAULT_TAG_MAP_BLOCK` when the document has no block.
    Raises ValueError when the block is incomplete or not at the start.
    """
    minified = minify(text)
    start = minified.find(_OPEN)
    end = minified.find(_CLOSE)
    if start == -1 and end == -1:
        return DEFAULT_TAG_MAP_BLOCK
    if start != 0 or end == -1:
        raise ValueError("Defected file.")
    return minified[: end + len(_CLOSE)]


def _parse_index(name):
    match = _INDEX.match(name)
    if match is None:
        raise ValueError(f"invalid mapped tag: {name!r}")
    return int(match.group(1))


def unmap_tags(text):
    """Restore tag names in a document produced by :func:`map_tags`.

    Raises ValueError for a malformed document and IndexError for a tag
    number that the map does not hold.
    """
    mapping = TagMap.from_block(find_tag_map_block(text))
    close = text.find(_CLOSE)
    start = 0 if close == -1 else close + len(_CLOSE)
    return _rewrite_tags(text, start, lambda name: mapping.key_of(_parse_index(name)))