"""Pydantic models for HTML dependency declarations.

An HTML dependency is a bundle of CSS / JavaScript / attachments that lives in
a directory on disk, at a URL, or both. Locations are stored as an ordered
tuple of ``(kind, location)`` pairs rather than a mapping so that insertion
order survives and a kind may legally appear more than once (the first entry
of a kind shadows the later ones).

Descriptors are frozen. Staging operations (copying to an output directory,
making paths relative) return updated copies instead of mutating the original,
so one descriptor can safely be attached to several content objects.
"""

import os
from collections.abc import Iterable, Mapping
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from htmldeps.errors import InvalidDescriptor

SourceKind = Literal["file", "href"]

# Kinds understood by the resolver, in no particular order.
SOURCE_KINDS: frozenset[str] = frozenset({"file", "href"})


class Attachment(BaseModel):
    """A file exposed to page JavaScript through ``<link rel="attachment">``."""

    model_config = ConfigDict(frozen=True)

    path: str
    """Path relative to the dependency's resolved location."""

    name: Optional[str] = None
    """Identifier used in the element id; the 1-based position when unset."""

    def identifier(self, position: int) -> str:
        return self.name if self.name else str(position)


class HtmlDependency(BaseModel):
    """A declared, versioned bundle of web assets.

    Prefer :func:`html_dependency` for construction: it accepts the loose
    input shapes (single path, mapping, pair list). Both entry points report
    problems as :class:`~htmldeps.errors.InvalidDescriptor`.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    """Library name, e.g. ``jquery``."""

    version: str
    """Library version; any value is normalised through ``str()``."""

    src: tuple[tuple[SourceKind, str], ...]
    """Ordered ``(kind, location)`` pairs; ``file`` is a directory, ``href`` a URL."""

    meta: tuple[tuple[str, str], ...] = ()
    """Ordered ``(name, content)`` pairs for ``<meta>`` tags; a mapping is accepted."""

    script: tuple[str, ...] = ()
    stylesheet: tuple[str, ...] = ()

    head: tuple[str, ...] = ()
    """Raw markup fragments inserted into the head verbatim."""

    attachment: tuple[Attachment, ...] = ()

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise InvalidDescriptor(
                f"ERROR: invalid dependency {data.get('name')} {data.get('version')}: {exc}"
            ) from exc

    @field_validator("version", mode="before")
    @classmethod
    def _version_as_string(cls, v: Any) -> str:
        return str(v)

    @field_validator("meta", mode="before")
    @classmethod
    def _meta_as_pairs(cls, v: Any) -> Any:
        if v is None:
            return ()
        if isinstance(v, Mapping):
            return tuple(v.items())
        return v

    @field_validator("src")
    @classmethod
    def _require_source(cls, v: tuple) -> tuple:
        if not v:
            raise ValueError("src must contain at least one location")
        return v

    @model_validator(mode="after")
    def _unique_attachment_ids(self) -> "HtmlDependency":
        seen: set[str] = set()
        for position, item in enumerate(self.attachment, start=1):
            ident = item.identifier(position)
            if ident in seen:
                raise ValueError(f"duplicate attachment identifier '{ident}'")
            seen.add(ident)
        return self

    @property
    def label(self) -> str:
        """``"<name> <version>"``, the form used in error messages."""
        return f"{self.name} {self.version}"

    def source(self, kind: str) -> Optional[str]:
        """Return the first location declared for *kind*, or ``None``."""
        for k, location in self.src:
            if k == kind:
                return location
        return None

    def has_source(self, kind: str) -> bool:
        return any(k == kind for k, _ in self.src)

    def with_source(self, kind: SourceKind, location: str) -> "HtmlDependency":
        """Return a copy whose first *kind* entry points at *location*.

        The entry keeps its position; when *kind* is absent it is appended.
        """
        pairs = list(self.src)
        for i, (k, _) in enumerate(pairs):
            if k == kind:
                pairs[i] = (kind, location)
                break
        else:
            pairs.append((kind, location))
        return self.replace_src(pairs)

    def replace_src(self, pairs: Iterable[tuple[str, str]]) -> "HtmlDependency":
        """Return a copy with ``src`` replaced wholesale by *pairs*."""
        return self.model_copy(update={"src": tuple(pairs)})


# ---------------------------------------------------------------------------
# Construction helpers
# ---------------------------------------------------------------------------


def _as_location(value: Any) -> Any:
    return os.fspath(value) if isinstance(value, os.PathLike) else value


def _normalize_src(src: Any) -> tuple[tuple[str, Any], ...]:
    if src is None:
        return ()
    if isinstance(src, (str, os.PathLike)):
        return (("file", _as_location(src)),)

    if isinstance(src, Mapping):
        items = list(src.items())
    else:
        items = []
        for item in src:
            if isinstance(item, (str, os.PathLike)):
                items.append(("", item))
            else:
                kind, location = item
                items.append((kind, location))

    # Unlabelled entries are filesystem directories.
    return tuple((kind or "file", _as_location(location)) for kind, location in items)


def _as_tuple(value: Any) -> tuple:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def _normalize_attachments(value: Any) -> tuple[Attachment, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (Attachment(path=value),)
    if isinstance(value, Mapping):
        return tuple(Attachment(name=name or None, path=path) for name, path in value.items())

    result = []
    for item in value:
        if isinstance(item, Attachment):
            result.append(item)
        elif isinstance(item, str):
            result.append(Attachment(path=item))
        elif isinstance(item, Mapping):
            result.append(Attachment(**item))
        else:
            name, path = item
            result.append(Attachment(name=name or None, path=path))
    return tuple(result)


def html_dependency(
    name: str,
    version: Any,
    src: Any,
    meta: Optional[Mapping[str, str]] = None,
    script: "str | Iterable[str] | None" = None,
    stylesheet: "str | Iterable[str] | None" = None,
    head: "str | Iterable[str] | None" = None,
    attachment: Any = None,
) -> HtmlDependency:
    """Define an HTML dependency.

    Args:
        name: Library name.
        version: Library version; normalised with ``str()``.
        src: Where the library lives. A single string is a directory on disk;
            a mapping (or a list of ``(kind, location)`` pairs) may name
            several places, e.g. ``{"file": "/opt/lib/d3", "href": "https://cdn/d3"}``.
            Empty kind labels mean ``file``.
        meta: ``<meta>`` tags as name -> content.
        script: Script path(s), relative to the resolved location.
        stylesheet: Stylesheet path(s), relative to the resolved location.
        head: Raw HTML line(s) to insert into the document head.
        attachment: Files exposed as ``<link rel="attachment">``. A list of
            paths, ``(name, path)`` pairs, or a mapping name -> path.
            Unnamed entries are identified by their 1-based position.

    Raises:
        InvalidDescriptor: If ``src`` is empty or uses an unknown kind, the
            name is empty, or attachment identifiers collide.
    """
    pairs = _normalize_src(src)
    if not pairs:
        raise InvalidDescriptor(f"ERROR: dependency {name} {version} has no src")
    for kind, _ in pairs:
        if kind not in SOURCE_KINDS:
            raise InvalidDescriptor(
                f"ERROR: dependency {name} {version} has unsupported src kind '{kind}'"
            )

    try:
        return HtmlDependency(
            name=name,
            version=version,
            src=pairs,
            meta=meta,
            script=_as_tuple(script),
            stylesheet=_as_tuple(stylesheet),
            head=_as_tuple(head),
            attachment=_normalize_attachments(attachment),
        )
    except ValidationError as exc:
        raise InvalidDescriptor(f"ERROR: invalid dependency {name} {version}: {exc}") from exc
