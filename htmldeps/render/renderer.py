"""DependencyRenderer: turn a list of dependencies into ``<head>`` markup.

Output per dependency, in input order:
  1. ``<meta>`` tags
  2. stylesheet ``<link>`` tags
  3. ``<script>`` tags
  4. attachment ``<link rel="attachment">`` tags
  5. raw ``head`` fragments, verbatim

Everything a caller declares (names, meta values, attachment identifiers,
URLs) is escaped except the raw ``head`` fragments, which are trusted markup.

Disk locations are URL-encoded with ``encode_func``; ``href`` locations are
assumed to be valid URLs already and are used verbatim. Asset paths are
always passed through ``encode_func``.

A dependency without a usable source aborts the whole render.
"""

from collections.abc import Callable, Iterable
from typing import Optional

from htmldeps.encoding import url_encode_path
from htmldeps.models.dependency import HtmlDependency
from htmldeps.render.html import HTML, html_escape
from htmldeps.resolvers.source import SourceResolver, strip_trailing_slash
from htmldeps.utils.logging import get_logger

logger = get_logger("htmldeps.render.renderer")

EncodeFunc = Callable[[str], str]
HrefFilter = Callable[..., str]

CSS_MIME = "text/css"
JS_MIME = "text/javascript"


def identity_href(path: str, mime: Optional[str] = None) -> str:
    """Default ``href_filter``: leave the encoded URL untouched."""
    return path


class DependencyRenderer:
    """Render HTML dependencies for inclusion in a document head.

    Args:
        src_type: Source kinds to accept, most preferred first. Defaults to
            ``("href", "file")``.
        encode_func: Encodes disk locations and asset paths. Defaults to
            :func:`~htmldeps.encoding.url_encode_path`.
        href_filter: Called as ``href_filter(url, mime=...)`` on every final,
            already-encoded stylesheet and script URL (attachments get no
            ``mime``). Lets callers swap in e.g. data URIs. Defaults to
            identity.
    """

    def __init__(
        self,
        src_type: Optional[Iterable[str]] = None,
        encode_func: Optional[EncodeFunc] = None,
        href_filter: Optional[HrefFilter] = None,
    ) -> None:
        self.resolver = SourceResolver(src_type)
        self.encode_func: EncodeFunc = encode_func or url_encode_path
        self.href_filter: HrefFilter = href_filter or identity_href

    def render(self, dependencies: Iterable[HtmlDependency]) -> HTML:
        """Return the markup for *dependencies*, one tag per line.

        Raises:
            NoUsableSource: If any dependency has none of the accepted kinds.
        """
        lines: list[str] = []
        for dep in dependencies:
            lines.extend(self.render_one(dep))
        return HTML("\n".join(lines))

    def render_one(self, dep: HtmlDependency) -> list[str]:
        """Return the markup lines for a single dependency."""
        resolved = self.resolver.resolve(dep)
        if resolved.kind == "file":
            src_path = self.encode_func(resolved.location)
        else:
            src_path = resolved.location
        src_path = strip_trailing_slash(src_path)

        lines: list[str] = []

        for name, content in dep.meta:
            lines.append(
                f'<meta name="{html_escape(name)}" content="{html_escape(content)}" />'
            )

        for sheet in dep.stylesheet:
            href = self.href_filter(self._join(src_path, sheet), mime=CSS_MIME)
            lines.append(f'<link href="{html_escape(href)}" rel="stylesheet" />')

        for script in dep.script:
            src = self.href_filter(self._join(src_path, script), mime=JS_MIME)
            lines.append(f'<script src="{html_escape(src)}"></script>')

        for position, item in enumerate(dep.attachment, start=1):
            href = self.href_filter(self._join(src_path, item.path))
            lines.append(
                f'<link id="{html_escape(dep.name)}-{html_escape(item.identifier(position))}-attachment"'
                f' rel="attachment" href="{html_escape(href)}"/>'
            )

        lines.extend(dep.head)

        logger.debug(
            "dependency_rendered",
            dependency=dep.label,
            kind=resolved.kind,
            tags=len(lines),
        )
        return lines

    def _join(self, src_path: str, relative: str) -> str:
        return f"{src_path}/{self.encode_func(relative)}"


def render_dependencies(
    dependencies: Iterable[HtmlDependency],
    src_type: Optional[Iterable[str]] = None,
    encode_func: Optional[EncodeFunc] = None,
    href_filter: Optional[HrefFilter] = None,
) -> HTML:
    """Shortcut for ``DependencyRenderer(...).render(dependencies)``."""
    renderer = DependencyRenderer(
        src_type=src_type,
        encode_func=encode_func,
        href_filter=href_filter,
    )
    return renderer.render(dependencies)
