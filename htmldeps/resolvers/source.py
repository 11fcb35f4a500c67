"""SourceResolver: pick which declared location of a dependency to use.

A dependency may be available on disk (``file``), at a URL (``href``), or
both. The resolver walks a preference order and returns the first kind the
dependency declares, together with that kind's first location.

Tie-breaks (first match wins, never an error):
  - Preference: only the first preferred kind that is present is used.
  - Duplicates: if a kind is declared twice, the earlier entry shadows the
    later one. Callers may rely on this to override a location.

The default preference is ``DEFAULT_SRC_TYPE`` (``("href", "file")``). The
library never reads ``HTMLDEPS_SRC_TYPE`` itself; the command line passes it
in explicitly.
"""

from collections.abc import Iterable
from typing import Optional

from pydantic import BaseModel, ConfigDict

from htmldeps.config import DEFAULT_SRC_TYPE
from htmldeps.errors import NoUsableSource, UnknownSourceKind
from htmldeps.models.dependency import SOURCE_KINDS, HtmlDependency, SourceKind
from htmldeps.utils.logging import get_logger

logger = get_logger("htmldeps.resolvers.source")


class ResolvedSource(BaseModel):
    """The location chosen for one dependency."""

    model_config = ConfigDict(frozen=True)

    kind: SourceKind
    location: str
    """Declared location with a single trailing ``/`` removed."""


def strip_trailing_slash(path: str) -> str:
    """Drop one trailing ``/`` from *path*."""
    return path[:-1] if path.endswith("/") else path


def normalize_src_type(src_type: "str | Iterable[str]") -> tuple[str, ...]:
    """Turn *src_type* into a tuple of kinds, rejecting unknown labels."""
    kinds = (src_type,) if isinstance(src_type, str) else tuple(src_type)
    unknown = [k for k in kinds if k not in SOURCE_KINDS]
    if unknown:
        raise UnknownSourceKind(
            f"ERROR: unknown source kind(s) {unknown}; expected any of {sorted(SOURCE_KINDS)}"
        )
    return kinds


class SourceResolver:
    """Resolve dependencies to a single usable location.

    Usage::

        resolver = SourceResolver(src_type=["file"])
        resolved = resolver.resolve(dep)

    Args:
        src_type: Kinds to accept, most preferred first. Defaults to
            ``("href", "file")``.
    """

    def __init__(self, src_type: "Optional[Iterable[str]]" = None) -> None:
        self.src_type = normalize_src_type(
            DEFAULT_SRC_TYPE if src_type is None else src_type
        )

    def resolve(self, dependency: HtmlDependency) -> ResolvedSource:
        """Return the preferred location of *dependency*.

        Raises:
            NoUsableSource: If *dependency* declares none of the accepted kinds.
        """
        for kind in self.src_type:
            location = dependency.source(kind)
            if location is not None:
                return ResolvedSource(kind=kind, location=strip_trailing_slash(location))

        logger.error(
            "dependency_no_usable_source",
            dependency=dependency.label,
            declared=[k for k, _ in dependency.src],
            accepted=list(self.src_type),
        )
        raise NoUsableSource(
            f"ERROR: dependency {dependency.label} does not have a usable source"
        )


def resolve_source(
    dependency: HtmlDependency,
    src_type: "Optional[Iterable[str]]" = None,
) -> ResolvedSource:
    """Module-level shortcut for ``SourceResolver(src_type).resolve(dependency)``."""
    return SourceResolver(src_type).resolve(dependency)
