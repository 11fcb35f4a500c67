"""Unit tests for HtmlDependency construction and the attach helpers.

Covers:
  1. src normalisation: single path, mapping, pair list, unlabelled entries.
  2. InvalidDescriptor on empty src, unknown kinds, empty names and
     colliding attachment identifiers.
  3. Version normalisation through str().
  4. Immutability and functional src updates.
  5. Attachment identifiers (named vs positional).
  6. Getting / setting dependencies on content objects.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from htmldeps.errors import InvalidDescriptor
from htmldeps.models.attach import attach_dependencies, html_dependencies, set_html_dependencies
from htmldeps.models.dependency import Attachment, HtmlDependency, html_dependency


class _Version:
    """Stand-in for a richer version type."""

    def __init__(self, *parts: int) -> None:
        self.parts = parts

    def __str__(self) -> str:
        return ".".join(str(p) for p in self.parts)


class _Content:
    """A plain content object that can carry attributes."""


# ---------------------------------------------------------------------------
# src normalisation
# ---------------------------------------------------------------------------


def test_single_string_src_is_file() -> None:
    """An unlabelled single location is a filesystem directory."""
    dep = html_dependency("jquery", "3.7.1", "/opt/lib/jquery")
    assert dep.src == (("file", "/opt/lib/jquery"),)


def test_path_object_src_is_file() -> None:
    """pathlib.Path locations are converted to strings."""
    dep = html_dependency("jquery", "3.7.1", Path("/opt/lib/jquery"))
    assert dep.src == (("file", "/opt/lib/jquery"),)


def test_mapping_src_keeps_order() -> None:
    """A mapping keeps its insertion order."""
    dep = html_dependency("d3", "7", {"href": "https://cdn/d3", "file": "/opt/d3"})
    assert dep.src == (("href", "https://cdn/d3"), ("file", "/opt/d3"))


def test_empty_label_defaults_to_file() -> None:
    """Empty or None kind labels become "file"."""
    dep = html_dependency("d3", "7", {"": "/opt/d3", "href": "https://cdn/d3"})
    assert dep.src[0] == ("file", "/opt/d3")

    dep = html_dependency("d3", "7", [(None, "/opt/d3")])
    assert dep.src == (("file", "/opt/d3"),)


def test_pair_list_allows_duplicate_kinds() -> None:
    """Repeated kinds are kept in order; the first one shadows the rest."""
    dep = html_dependency("d3", "7", [("file", "/first"), ("file", "/second")])
    assert dep.src == (("file", "/first"), ("file", "/second"))
    assert dep.source("file") == "/first"


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("src", [None, {}, [], ()])
def test_empty_src_is_invalid(src) -> None:
    """A dependency without any location fails fast."""
    with pytest.raises(InvalidDescriptor) as exc_info:
        html_dependency("jquery", "3.7.1", src)
    assert "jquery 3.7.1" in str(exc_info.value)


def test_unknown_kind_is_invalid() -> None:
    """Only "file" and "href" are accepted as kinds."""
    with pytest.raises(InvalidDescriptor) as exc_info:
        html_dependency("jquery", "3.7.1", {"ftp": "ftp://example.com/jq"})
    assert "ftp" in str(exc_info.value)


def test_empty_name_is_invalid() -> None:
    """The dependency name must be non-empty."""
    with pytest.raises(InvalidDescriptor):
        html_dependency("", "1.0", "/opt/lib")


def test_colliding_attachment_ids_are_invalid() -> None:
    """Two attachments may not share an identifier within one dependency."""
    with pytest.raises(InvalidDescriptor):
        html_dependency("x", "1", "/lib", attachment=[("logo", "a.png"), ("logo", "b.png")])

    # A name equal to another entry's position collides too.
    with pytest.raises(InvalidDescriptor):
        html_dependency("x", "1", "/lib", attachment=[("2", "a.png"), "b.png"])


def test_invalid_descriptor_is_value_error() -> None:
    """InvalidDescriptor can be caught as a plain ValueError."""
    with pytest.raises(ValueError):
        html_dependency("x", "1", {})


# ---------------------------------------------------------------------------
# Version, optional fields, immutability
# ---------------------------------------------------------------------------


def test_version_normalised_to_string() -> None:
    """Numbers and richer version objects become their string form."""
    assert html_dependency("x", 1.5, "/lib").version == "1.5"
    assert html_dependency("x", _Version(3, 7, 1), "/lib").version == "3.7.1"


def test_single_strings_become_tuples() -> None:
    """script / stylesheet / head accept one string or a sequence."""
    dep = html_dependency(
        "x", "1", "/lib",
        script="a.js",
        stylesheet=["a.css", "b.css"],
        head="<style></style>",
    )
    assert dep.script == ("a.js",)
    assert dep.stylesheet == ("a.css", "b.css")
    assert dep.head == ("<style></style>",)
    assert dep.meta == ()
    assert dep.attachment == ()


def test_dependency_is_frozen() -> None:
    """Fields cannot be reassigned after construction."""
    dep = html_dependency("x", "1", "/lib")
    with pytest.raises(ValidationError):
        dep.name = "y"


def test_with_source_returns_new_descriptor() -> None:
    """with_source replaces the first entry of a kind without touching the original."""
    dep = html_dependency("x", "1", {"file": "/lib", "href": "https://cdn/x"})
    updated = dep.with_source("file", "/staged/x-1")

    assert updated.src == (("file", "/staged/x-1"), ("href", "https://cdn/x"))
    assert dep.src == (("file", "/lib"), ("href", "https://cdn/x"))


def test_with_source_appends_missing_kind() -> None:
    """A kind that is not declared yet is appended."""
    dep = html_dependency("x", "1", {"href": "https://cdn/x"})
    assert dep.with_source("file", "/lib").src == (("href", "https://cdn/x"), ("file", "/lib"))


def test_label_names_dependency() -> None:
    """label is "<name> <version>"."""
    assert html_dependency("jquery", "3.7.1", "/lib").label == "jquery 3.7.1"


# ---------------------------------------------------------------------------
# Attachments
# ---------------------------------------------------------------------------


def test_attachment_shapes() -> None:
    """Attachments accept plain paths, pairs, mappings and Attachment objects."""
    dep = html_dependency(
        "x", "1", "/lib",
        attachment=["a.json", ("logo", "logo.png"), Attachment(path="c.txt", name="notes")],
    )
    assert [a.identifier(i) for i, a in enumerate(dep.attachment, start=1)] == ["1", "logo", "notes"]

    dep = html_dependency("x", "1", "/lib", attachment={"data": "data.json", "img": "a.png"})
    assert [(a.name, a.path) for a in dep.attachment] == [("data", "data.json"), ("img", "a.png")]


def test_unnamed_attachment_identifier_is_position() -> None:
    """Without a name, the 1-based position is the identifier."""
    assert Attachment(path="a.json").identifier(3) == "3"
    assert Attachment(path="a.json", name="data").identifier(3) == "data"


# ---------------------------------------------------------------------------
# Attaching dependencies to content objects
# ---------------------------------------------------------------------------


def test_no_dependencies_by_default() -> None:
    """Objects without attached dependencies report an empty list."""
    assert html_dependencies(_Content()) == []


def test_single_dependency_wrapped_in_list() -> None:
    """Setting a single dependency stores a one-element list."""
    content = _Content()
    dep = html_dependency("x", "1", "/lib")
    set_html_dependencies(content, dep)
    assert html_dependencies(content) == [dep]


def test_setting_replaces_whole_list() -> None:
    """A second set replaces the first; nothing is merged."""
    content = _Content()
    a = html_dependency("a", "1", "/a")
    b = html_dependency("b", "1", "/b")
    c = html_dependency("c", "1", "/c")

    set_html_dependencies(content, [a, b])
    set_html_dependencies(content, [c])
    assert html_dependencies(content) == [c]


def test_attach_returns_object() -> None:
    """attach_dependencies returns the same object, now carrying the list."""
    content = _Content()
    dep = html_dependency("x", "1", "/lib")
    assert attach_dependencies(content, [dep]) is content
    assert html_dependencies(content) == [dep]


def test_same_descriptor_on_two_objects() -> None:
    """One descriptor may be shared by several content objects."""
    dep = html_dependency("x", "1", "/lib")
    first = attach_dependencies(_Content(), dep)
    second = attach_dependencies(_Content(), dep)
    assert html_dependencies(first)[0] is html_dependencies(second)[0]


def test_attach_to_builtin_raises_type_error() -> None:
    """Objects that cannot carry attributes are rejected."""
    with pytest.raises(TypeError):
        set_html_dependencies("plain string", html_dependency("x", "1", "/lib"))


def test_model_accepts_direct_construction() -> None:
    """HtmlDependency can also be built directly from normalised values."""
    dep = HtmlDependency(name="x", version="1", src=(("href", "https://cdn/x"),))
    assert dep.source("href") == "https://cdn/x"
    assert dep.source("file") is None
    assert not dep.has_source("file")


def test_direct_construction_reports_invalid_descriptor() -> None:
    """Building HtmlDependency directly fails with InvalidDescriptor, not a raw ValidationError."""
    with pytest.raises(InvalidDescriptor) as exc_info:
        HtmlDependency(name="x", version="1", src=(("dir", "/x"),))
    assert "x 1" in str(exc_info.value)

    with pytest.raises(InvalidDescriptor):
        HtmlDependency(name="x", version="1", src=())


# ---------------------------------------------------------------------------
# meta
# ---------------------------------------------------------------------------


def test_meta_stored_as_ordered_pairs() -> None:
    """A meta mapping is stored as (name, content) pairs in insertion order."""
    dep = html_dependency("x", "1", "/lib", meta={"b": "2", "a": "1"})
    assert dep.meta == (("b", "2"), ("a", "1"))
    assert dict(dep.meta) == {"b": "2", "a": "1"}


def test_meta_cannot_be_mutated_in_place() -> None:
    """meta is immutable, so a shared descriptor cannot be changed through it."""
    source = {"a": "b"}
    dep = html_dependency("x", "1", "/lib", meta=source)

    with pytest.raises(TypeError):
        dep.meta["injected"] = "yes"  # type: ignore[index]
    source["later"] = "no"

    assert dep.meta == (("a", "b"),)
