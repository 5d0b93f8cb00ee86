"""Ordered mapping of tag names to small integers."""

from xmlsqueeze.minify import minify

_OPEN = "<TagMap>"
_CLOSE = "</TagMap>"


class TagMap:
    """Maps each tag name to its position in insertion order."""

    def __init__(self, keys=None):
        self._keys = list(keys) if keys is not None else []

    @classmethod
    def from_block(cls, block):
        """Build a map from a ``<TagMap>a,b,c</TagMap>`` block.

        Raises ValueError if either the opening or closing marker is missing.
        """
        text = minify(block)
        start = text.find(_OPEN)
        if start == -1 or text.find(_CLOSE) == -1:
            raise ValueError("Defected TagMap block")
        text = text[:start] + text[start + len(_OPEN):]
        text = text[: -len(_CLOSE)]
        if not text:
            return cls()
        tokens = text.split(",")
        if text.endswith(","):
            tokens.pop()
        return cls(token.strip(" ") for token in tokens)

    def add(self, key):
        """Append ``key`` and return the value it maps to."""
        self._keys.append(key)
        return len(self._keys) - 1

    def value_of(self, key):
        """Return the value of the first occurrence of ``key``.

        Raises KeyError if the key is not mapped.
        """
        try:
            return self._keys.index(key)
        except ValueError:
            raise KeyError(key) from None

    def key_of(self, value):
        """Return the key mapped to ``value``; IndexError if out of range."""
        if not 0 <= value < len(self._keys):
            raise IndexError(f"no tag mapped to {value}")
        return self._keys[value]

    def __contains__(self, key):
        return key in self._keys

    def __len__(self):
        return len(self._keys)

    def __iter__(self):
        return iter(self._keys)

    def to_block(self):
        """Render the map as a ``<TagMap>`` block; ValueError if empty."""
        if not self._keys:
            raise ValueError("No values are being mapped")
        return _OPEN + ",".join(self._keys) + _CLOSE