import pytest

from xmlsqueeze.huffman_tree import HuffmanNode, HuffmanTree

SAMPLE = "This is a test string for Huffman Tree implementation."


@pytest.fixture
def tree():
    return HuffmanTree.from_text(SAMPLE)


def test_tree_root_counts_every_character(tree):
    assert tree.root.freq == len(SAMPLE)


def test_encoding_of_s_is_non_empty_and_binary(tree):
    code = tree.encoding_of("s")
    assert len(code) > 0
    assert set(code) <= {"0", "1"}


def test_space_round_trips_through_encoding(tree):
    assert tree.char_from_encoding(tree.encoding_of(" ")) == " "


def test_every_character_round_trips(tree):
    for char in set(SAMPLE):
        assert tree.char_from_encoding(tree.encoding_of(char)) == char


def test_codes_are_prefix_free(tree):
    codes = [tree.encoding_of(c) for c in set(SAMPLE)]
    for a in codes:
        for b in codes:
            if a is not b and a != b:
                assert not b.startswith(a)


def test_rebuild_from_encoded_gives_same_tree(tree):
    encoded = tree.encoded()
    end = encoded.find(")\n")
    rebuilt = HuffmanTree.from_encoded(encoded[1:end])
    assert rebuilt.encoded() == encoded
    for char in set(SAMPLE):
        assert rebuilt.encoding_of(char) == tree.encoding_of(char)


def test_encoded_two_characters_with_different_counts():
    tree = HuffmanTree.from_text("aab")
    assert tree.encoded() == "((b,1)(a,2))\n"
    assert tree.encoding_of("b") == "0"
    assert tree.encoding_of("a") == "1"


def test_encoded_two_characters_with_equal_counts():
    tree = HuffmanTree.from_text("ab")
    assert tree.encoded() == "((a,1)(b,1))\n"
    assert tree.encoding_of("a") == "0"
    assert tree.encoding_of("b") == "1"


def test_single_character_tree_has_empty_code():
    tree = HuffmanTree.from_text("aaa")
    assert tree.encoded() == "((a,3))\n"
    assert tree.encoding_of("a") == ""
    assert tree.root.is_leaf() is True


def test_empty_text_gives_empty_encoding():
    tree = HuffmanTree.from_text("")
    assert tree.root is None
    assert tree.encoded() == ""
    assert tree.encoding_of("a") == ""


def test_unknown_character_has_empty_code(tree):
    assert tree.encoding_of("z") == ""


def test_char_from_encoding_accepts_booleans():
    tree = HuffmanTree.from_text("aab")
    assert tree.char_from_encoding([True]) == "a"
    assert tree.char_from_encoding([False]) == "b"


def test_char_from_encoding_empty_is_none(tree):
    assert tree.char_from_encoding("") is None


def test_char_from_encoding_past_leaf_is_none():
    tree = HuffmanTree.from_text("aab")
    assert tree.char_from_encoding("00") is None


def test_char_from_encoding_internal_prefix_is_none(tree):
    long_code = max((tree.encoding_of(c) for c in set(SAMPLE)), key=len)
    assert tree.char_from_encoding(long_code[:-1]) is None


def test_from_frequencies_matches_from_text():
    counts = {"x": 3, "y": 1, "z": 2, "w": 0}
    by_counts = HuffmanTree.from_frequencies(counts)
    by_text = HuffmanTree.from_text("xxxyzz")
    assert by_counts.encoded() == by_text.encoded()
    assert "w" not in by_counts.encoded()


def test_from_encoded_skips_zero_counts():
    tree = HuffmanTree.from_encoded("(a,2)(b,0)(c,1)")
    assert tree.encoded() == "((c,1)(a,2))\n"


def test_from_encoded_rejects_missing_paren():
    with pytest.raises(ValueError):
        HuffmanTree.from_encoded("x")


def test_from_encoded_rejects_truncated_entry():
    with pytest.raises(ValueError):
        HuffmanTree.from_encoded("(a,1")


def test_from_encoded_rejects_bad_frequency():
    with pytest.raises(ValueError):
        HuffmanTree.from_encoded("(a,x)")


def test_from_encoded_handles_punctuation_characters():
    tree = HuffmanTree.from_encoded("(),2)((,1)(,,1)")
    assert tree.root.freq == 4
    for char in "(),":
        assert tree.char_from_encoding(tree.encoding_of(char)) == char


def test_node_is_leaf():
    leaf = HuffmanNode(1, "a")
    parent = HuffmanNode(2, "\0", leaf, HuffmanNode(1, "b"))
    assert leaf.is_leaf() is True
    assert parent.is_leaf() is False