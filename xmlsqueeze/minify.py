"""Whitespace minifier for well-formed XML text."""

SKIP_CHARS = frozenset(" \n\t\v\f")


def is_skip_char(char):
    """Return True if ``char`` is whitespace that minifying removes."""
    return char in SKIP_CHARS


def _require_text(text):
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")


def skip_from_beginning(text):
    """Drop all skip characters except spaces that follow a value character.

    Spaces directly after ``<`` or ``>`` (or at the very start) are dropped,
    as are tabs, newlines and form feeds everywhere. Spaces after any other
    character are kept; trailing spaces before a tag remain for
    :func:`skip_from_end` to remove.
    """
    _require_text(text)
    out = []
    skip_spaces = True
    for char in text:
        if is_skip_char(char):
            if char == " " and not skip_spaces:
                out.append(char)
        else:
            out.append(char)
            skip_spaces = char in "<>"
    return "".join(out)


def skip_from_end(text):
    """Remove runs of spaces that directly precede a ``<``."""
    _require_text(text)
    kept = []
    skip_spaces = True
    for char in reversed(text):
        if char == " " and skip_spaces:
            continue
        kept.append(char)
        skip_spaces = char == "<"
    return "".join(reversed(kept))


def minify(text):
    """Strip insignificant whitespace from an XML document."""
    return skip_from_end(skip_from_beginning(text))