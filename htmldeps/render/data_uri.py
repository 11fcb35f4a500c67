"""Inline dependency files as ``data:`` URIs for self-contained documents.

Use :func:`data_uri_filter` as the renderer's ``href_filter`` together with
:func:`~htmldeps.encoding.identity_encode`: the filter reads the file at the
joined path, which must still be a raw filesystem path, not a URL-encoded one.
"""

import base64
import mimetypes
from pathlib import Path
from typing import Optional

_FALLBACK_MIME = "application/octet-stream"


def guess_mime(path: "str | Path") -> str:
    mime, _ = mimetypes.guess_type(str(path))
    return mime or _FALLBACK_MIME


def make_data_uri(path: "str | Path", mime: Optional[str] = None) -> str:
    """Return the contents of *path* as a base64 ``data:`` URI.

    Raises:
        FileNotFoundError: If *path* does not exist.
    """
    payload = base64.b64encode(Path(path).read_bytes()).decode("ascii")
    return f"data:{mime or guess_mime(path)};base64,{payload}"


def data_uri_filter(path: str, mime: Optional[str] = None) -> str:
    """``href_filter`` that replaces every asset URL with a data URI."""
    return make_data_uri(path, mime)
