# xmlsqueeze

A small library for shrinking XML documents. It chains several simple
steps. Each step can also be used on its own:

- **Minifying** (`xmlsqueeze.minify`): `minify(text)` removes tabs,
  newlines, vertical tabs and form feeds. It also drops the spaces right
  after `<` or `>` and the spaces right before `<`. Spaces inside a value
  stay. `is_skip_char`, `skip_from_beginning` and `skip_from_end` expose
  the individual passes.
- **Tag mapping** (`xmlsqueeze.tag_mapping`): `map_tags(text,
  add_map_table=False)` replaces tag names with numbers. With
  `add_map_table=True`, the numbering comes from the document in order of
  first use and is written first as a `<TagMap>name,...</TagMap>` block.
  Without it, the fixed numbering in `DEFAULT_TAG_MAP_BLOCK` is used, and a
  tag missing from that numbering raises `KeyError`. `unmap_tags(text)`
  reverses the mapping. `collect_tags` and `find_tag_map_block` are the
  helpers behind these two.
- **Tag table** (`xmlsqueeze.tag_map.TagMap`): an ordered name-to-number
  table. It provides `add`, `value_of`, `key_of`, `in`, `len()`, iteration,
  `to_block()` and `TagMap.from_block(block)`.
- **Closing-tag removal** (`xmlsqueeze.closing_tags`):
  `strip_closing_tags(text)` drops every `</...>` tag.
  `restore_closing_tags(text, tree=None)` puts them back using a tag
  hierarchy built from `xmlsqueeze.tag_tree.TagNode`. The default hierarchy
  is `social_network_tree()`.
- **Huffman coding** (`xmlsqueeze.huffman`, `xmlsqueeze.huffman_tree`):
  `compress(text)` returns a string made of three parts: the leaf table
  line `((c,freq)...)`, a line with the bit count, and the code bits as
  `0`/`1` characters. `decompress(data)` reverses it. `HuffmanTree` can be
  built with `from_text`, `from_frequencies` or `from_encoded`. It offers
  `encoded()`, `encoding_of(char)` and `char_from_encoding(bits)`.

## Social network documents

Two parts of the library assume documents with this tag hierarchy: the
default tag numbering and the default tree used for closing-tag
restoration.

```
users > user > id, name, posts, followers
posts > post > body, topics > topic
followers > follower > id
```

## Usage

`xmlsqueeze.system` joins the steps together and writes compressed files.
The `compress_*` functions return the number of bytes written. Errors from
writing the file propagate.

```python
from xmlsqueeze import system

with open("users.xml") as fh:
    xml = fh.read()

# Social network documents: minify, drop closing tags, map tags, Huffman
system.compress_social_network_xml(xml, "users.sncxml")
restored = system.decompress_social_network_xml("users.sncxml")

# Any well-formed XML: minify, map tags with an embedded table, Huffman
system.compress_xml(xml, "users.cxml")
restored = system.decompress_xml("users.cxml")

# Arbitrary text: Huffman only
system.compress_file("some text", "notes.cfile")
text = system.decompress_file("notes.cfile")

# Minify only
print(system.minify_xml("<a>  hello  </a>"))   # <a>hello</a>
```

The decompressed XML is the minified document, not the original layout.

Each step can also be called directly:

```python
from xmlsqueeze.minify import minify
from xmlsqueeze.tag_mapping import map_tags, unmap_tags
from xmlsqueeze.huffman import compress, decompress

packed = compress(map_tags(minify(xml), True))
assert unmap_tags(decompress(packed)) == minify(xml)
```

## Compressed file layout

`save_compressed(data, path)` writes the output of `huffman.compress` to a
file. `read_compressed(path)` reads such a file back. The file starts with
the two header lines, the leaf table and the bit count, as UTF-8 text.
After the header come the code bits, packed eight to a byte, most
significant bit first. The last byte is padded with zero bits.
`read_compressed` returns the padding bits too. `decompress` ignores any
bits beyond the stated count.

## What it does not do

- There is no command-line tool; the package is a library only.
- JSON files can only be decoded, with `system.decompress_json`. There is
  no JSON minifier and no JSON compression function.
- Huffman coding needs at least two distinct characters in the input.
  With an empty text, `save_compressed` raises `ValueError`. With a single
  repeated character no code bits are produced, so decompressing raises
  `ValueError`.
- Closing-tag restoration only works for documents whose nesting matches
  the tree it is given.

## Running the tests

```
pip install -e .[test]
pytest
```