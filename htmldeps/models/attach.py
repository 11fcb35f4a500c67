"""Get and set the HTML dependencies carried by arbitrary content objects.

The document framework that walks a tree of content objects and collects
their dependencies lives elsewhere; this module only defines where the list
is stored. Setting always replaces the whole list; nothing is merged.
"""

from typing import Any, TypeVar

from htmldeps.models.dependency import HtmlDependency

T = TypeVar("T")

_ATTRIBUTE = "html_dependencies"


def html_dependencies(obj: Any) -> list[HtmlDependency]:
    """Return the dependencies attached to *obj* (empty when none)."""
    return list(getattr(obj, _ATTRIBUTE, None) or [])


def set_html_dependencies(obj: Any, value: "HtmlDependency | list[HtmlDependency] | None") -> None:
    """Replace the dependencies attached to *obj* with *value*.

    Raises:
        TypeError: If *obj* cannot carry attributes (``str``, ``int``...).
    """
    if value is None:
        deps: list[HtmlDependency] = []
    elif isinstance(value, HtmlDependency):
        deps = [value]
    else:
        deps = list(value)
    try:
        setattr(obj, _ATTRIBUTE, deps)
    except AttributeError as exc:
        raise TypeError(
            f"cannot attach HTML dependencies to {type(obj).__name__} objects"
        ) from exc


def attach_dependencies(obj: T, value: "HtmlDependency | list[HtmlDependency] | None") -> T:
    """Set the dependencies of *obj* and return *obj*, for use in expressions."""
    set_html_dependencies(obj, value)
    return obj
