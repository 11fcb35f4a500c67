"""htmldeps: declare HTML dependencies and render the markup that includes them.

An HTML dependency is a named, versioned bundle of CSS, JavaScript, meta tags
and attachments that lives in a directory on disk, at a URL, or both.
Components declare the dependencies they need; at render time each one is
resolved to a usable location and emitted as ``<head>`` markup.

Basic usage:
    >>> from htmldeps import html_dependency, render_dependencies
    >>> dep = html_dependency("d3", "7.8.5", {"href": "https://cdn.example/d3/7.8.5/"},
    ...                       script="d3.min.js")
    >>> print(render_dependencies([dep]))
    <script src="https://cdn.example/d3/7.8.5/d3.min.js"></script>

Disk-based dependencies can be staged next to a static HTML file with
:func:`copy_dependency_to_dir` and :func:`make_dependency_relative`.
"""

from htmldeps.encoding import identity_encode, url_encode_path
from htmldeps.errors import (
    DependencyError,
    InvalidDescriptor,
    NoUsableSource,
    NotADescendant,
    NotDiskBased,
    UnknownSourceKind,
)
from htmldeps.models.attach import attach_dependencies, html_dependencies, set_html_dependencies
from htmldeps.models.dependency import Attachment, HtmlDependency, html_dependency
from htmldeps.render.data_uri import data_uri_filter, make_data_uri
from htmldeps.render.html import HTML, html_escape
from htmldeps.render.renderer import DependencyRenderer, render_dependencies
from htmldeps.resolvers.source import ResolvedSource, SourceResolver, resolve_source
from htmldeps.staging.copy import copy_dependency_to_dir
from htmldeps.staging.relative import make_dependency_relative, relative_to

__all__ = [
    "Attachment",
    "DependencyError",
    "DependencyRenderer",
    "HTML",
    "HtmlDependency",
    "InvalidDescriptor",
    "NoUsableSource",
    "NotADescendant",
    "NotDiskBased",
    "ResolvedSource",
    "SourceResolver",
    "UnknownSourceKind",
    "attach_dependencies",
    "copy_dependency_to_dir",
    "data_uri_filter",
    "html_dependencies",
    "html_dependency",
    "html_escape",
    "identity_encode",
    "make_data_uri",
    "make_dependency_relative",
    "relative_to",
    "render_dependencies",
    "resolve_source",
    "set_html_dependencies",
    "url_encode_path",
]
