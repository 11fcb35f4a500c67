"""Unit tests for URL path encoding.

Covers:
  1. Spaces and reserved characters are percent-encoded.
  2. "/" separators are preserved.
  3. Unreserved characters pass through untouched.
  4. Existing escapes are re-encoded (no double-encoding detection).
  5. Iterable input returns a list.
"""

from htmldeps.encoding import identity_encode, url_encode_path


# ---------------------------------------------------------------------------
# Single paths
# ---------------------------------------------------------------------------


def test_spaces_encoded_separators_kept() -> None:
    """Spaces become %20 while "/" stays a separator."""
    assert url_encode_path("foo bar/baz") == "foo%20bar/baz"


def test_reserved_characters_encoded() -> None:
    """Query, fragment and sub-delimiter characters are all encoded."""
    assert url_encode_path("a&b=c?d#e") == "a%26b%3Dc%3Fd%23e"
    assert url_encode_path("it's \"quoted\"") == "it%27s%20%22quoted%22"


def test_unreserved_characters_untouched() -> None:
    """Letters, digits and -._~ are never encoded."""
    assert url_encode_path("Az09-._~") == "Az09-._~"


def test_absolute_path_keeps_leading_slash() -> None:
    """A leading "/" survives encoding."""
    assert url_encode_path("/opt/my lib/") == "/opt/my%20lib/"


def test_existing_escapes_are_reencoded() -> None:
    """"%" itself is encoded, so pre-encoded input gets double-encoded."""
    assert url_encode_path("a%20b") == "a%2520b"


def test_non_ascii_encoded_as_utf8() -> None:
    """Non-ASCII characters are encoded from their UTF-8 bytes."""
    assert url_encode_path("café.css") == "caf%C3%A9.css"


# ---------------------------------------------------------------------------
# Iterable input
# ---------------------------------------------------------------------------


def test_list_input_returns_list() -> None:
    """Each element of an iterable is encoded independently."""
    assert url_encode_path(["x y.css", "a&b.js"]) == ["x%20y.css", "a%26b.js"]


def test_identity_encode_passes_through() -> None:
    """identity_encode returns strings unchanged and iterables as lists."""
    assert identity_encode("foo bar/baz") == "foo bar/baz"
    assert identity_encode(("a b", "c")) == ["a b", "c"]
