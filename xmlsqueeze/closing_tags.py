"""Drop closing tags from a document and put them back again.

Closing tags can be restored only when it is known which tags may nest
inside which; that knowledge comes from a :class:`TagNode` tree, by default
the fixed layout of the social network document format.
"""

from xmlsqueeze.tag_tree import social_network_tree


def strip_closing_tags(text):
    """Return ``text`` with every ``</...>`` tag removed.

    Raises ValueError if the text ends with ``<`` or a closing tag is not
    terminated by ``>``.
    """
    if text.endswith("<"):
        raise ValueError("unterminated tag at end of text")
    out = []
    pos = 0
    while True:
        lt = text.find("</", pos)
        if lt == -1:
            out.append(text[pos:])
            return "".join(out)
        gt = text.find(">", lt)
        if gt == -1:
            raise ValueError(f"unterminated closing tag at position {lt}")
        out.append(text[pos:lt])
        pos = gt + 1


def _closing(node):
    return f"</{node.value}>"


def restore_closing_tags(text, tree=None):
    """Insert the closing tags that :func:`strip_closing_tags` removed.

    Each new tag closes open tags until the innermost open tag accepts it
    as a child in ``tree``. When no tag is open, the tree's root is opened.
    Tags still open at the end are closed innermost first. Raises
    ValueError for a tag that is not terminated by ``>``.
    """
    root = social_network_tree() if tree is None else tree
    stack = []
    out = []

    def needs_closing(name):
        if not stack:
            stack.append(root)
            return False
        child = stack[-1].child(name)
        if child is not None:
            stack.append(child)
            return False
        return True

    pos = 0
    while True:
        lt = text.find("<", pos)
        if lt == -1:
            out.append(text[pos:])
            break
        out.append(text[pos:lt])
        gt = text.find(">", lt)
        if gt == -1:
            raise ValueError(f"unterminated tag at position {lt}")
        tag = text[lt : gt + 1]
        name = tag[1:-1]
        while needs_closing(name):
            out.append(_closing(stack.pop()))
        out.append(tag)
        pos = gt + 1

    out.extend(_closing(node) for node in reversed(stack))
    return "".join(out)