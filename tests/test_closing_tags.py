import pytest

from xmlsqueeze.closing_tags import restore_closing_tags, strip_closing_tags
from xmlsqueeze.tag_tree import TagNode

FULL = (
    "<users><user><id>1</id><name>Ahmed Ali</name><posts><post><body>"
    "Lorem ipsum dolor sit ametffsjkn &alt; </body><topics><topic>economy"
    "</topic></topics></post></posts><followers><follower><id>2</id>"
    "</follower></followers></user></users>"
)

STRIPPED = (
    "<users><user><id>1<name>Ahmed Ali<posts><post><body>"
    "Lorem ipsum dolor sit ametffsjkn &alt; <topics><topic>economy"
    "<followers><follower><id>2"
)


def test_strip_closing_tags_source_case():
    assert strip_closing_tags(FULL) == STRIPPED


def test_restore_closing_tags_source_case():
    assert restore_closing_tags(STRIPPED) == FULL


def test_round_trip():
    assert restore_closing_tags(strip_closing_tags(FULL)) == FULL


def test_strip_docstring_example():
    text = "<tag0><tag1><tag2>d1</tag2><tag2>d2</tag2></tag1></tag0>"
    assert strip_closing_tags(text) == "<tag0><tag1><tag2>d1<tag2>d2"


def test_restore_with_custom_tree():
    root = TagNode("tag0")
    root.add_child("tag1").add_child("tag2")
    restored = restore_closing_tags("<tag0><tag1><tag2>d1<tag2>d2", root)
    assert restored == "<tag0><tag1><tag2>d1</tag2><tag2>d2</tag2></tag1></tag0>"


def test_restore_several_users():
    restored = restore_closing_tags("<users><user><id>1<user><id>2")
    assert restored == (
        "<users><user><id>1</id></user><user><id>2</id></user></users>"
    )


def test_strip_text_without_tags_is_unchanged():
    assert strip_closing_tags("plain text") == "plain text"


def test_strip_unterminated_closing_tag():
    with pytest.raises(ValueError):
        strip_closing_tags("<a>x</a")


def test_strip_trailing_lt():
    with pytest.raises(ValueError):
        strip_closing_tags("<a>x<")


def test_restore_unterminated_tag():
    with pytest.raises(ValueError):
        restore_closing_tags("<users><user")