"""URL path encoding for disk-based dependency locations.

Filesystem paths come from callers as raw strings (spaces, quotes, ``#``...)
and must be percent-encoded before they can appear in an ``href`` or ``src``
attribute. ``/`` is kept as a literal separator so the same function works on
single segments and on already-joined paths.
"""

import re
from collections.abc import Iterable
from urllib.parse import quote

# quote() leaves A-Z a-z 0-9 and "_.-~" untouched; safe="" makes it encode
# every reserved character, "/" included, which is then restored below.
_ENCODED_SLASH = re.compile("%2[Ff]")


def _encode_one(path: str) -> str:
    return _ENCODED_SLASH.sub("/", quote(path, safe=""))


def url_encode_path(x: "str | Iterable[str]") -> "str | list[str]":
    """Percent-encode *x*, preserving ``/`` separators.

    Accepts a single path or an iterable of paths; returns a ``str`` or a
    ``list[str]`` accordingly. Input is not checked for existing escapes, so
    ``"a%20b"`` becomes ``"a%2520b"``.

    >>> url_encode_path("foo bar/baz")
    'foo%20bar/baz'
    >>> url_encode_path(["x y.css", "a&b.js"])
    ['x%20y.css', 'a%26b.js']
    """
    if isinstance(x, str):
        return _encode_one(x)
    return [_encode_one(p) for p in x]


def identity_encode(x: "str | Iterable[str]") -> "str | list[str]":
    """Return *x* unchanged (as a list for non-string iterables)."""
    if isinstance(x, str):
        return x
    return list(x)
