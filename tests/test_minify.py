import pytest

from xmlsqueeze.minify import is_skip_char, minify, skip_from_beginning, skip_from_end

INPUT = "\n".join(
    [
        "      <users>",
        "        <user>",
        "                  <id>        1       </id>",
        "            <name>  Ahmed  Ali  </name>",
        "            <posts>",
        "                <post>",
        "                    <body>  Lorem ipsum dolor sit ametffsjkn</body>",
        "                    <topics>",
        "                        <topic>     economy</topic>",
        "                    </topics>",
        "                </post>",
        "            </posts>",
        "            <followers>",
        "                <follower>",
        "                    <id>2           </id>",
        "                </follower>",
        "            </followers>",
        "        </user>",
        "    </users>     ",
    ]
)

EXPECTED_BEGINNING = (
    "<users><user><id>1       </id><name>Ahmed  Ali  </name><posts><post>"
    "<body>Lorem ipsum dolor sit ametffsjkn</body><topics><topic>economy</topic>"
    "</topics></post></posts><followers><follower><id>2           </id>"
    "</follower></followers></user></users>"
)

AFTER_MINIFYING = (
    "<users><user><id>1</id><name>Ahmed  Ali</name><posts><post>"
    "<body>Lorem ipsum dolor sit ametffsjkn</body><topics><topic>economy</topic>"
    "</topics></post></posts><followers><follower><id>2</id>"
    "</follower></followers></user></users>"
)


@pytest.mark.parametrize("char", [" ", "\t", "\v", "\n", "\f"])
def test_skip_chars(char):
    assert is_skip_char(char) is True


@pytest.mark.parametrize("char", ["p", "a", "0", "3", "8"])
def test_non_skip_chars(char):
    assert is_skip_char(char) is False


def test_skip_from_beginning():
    assert skip_from_beginning(INPUT) == EXPECTED_BEGINNING


def test_skip_from_end():
    assert skip_from_end(EXPECTED_BEGINNING) == AFTER_MINIFYING


def test_minify():
    assert minify(INPUT) == AFTER_MINIFYING


def test_minify_empty():
    assert minify("") == ""


def test_minify_is_idempotent():
    assert minify(minify(INPUT)) == AFTER_MINIFYING


def test_minify_rejects_none():
    with pytest.raises(TypeError):
        minify(None)