"""Escaping primitive and the pre-escaped markup marker."""

import html


class HTML(str):
    """A string of markup that is already escaped and must not be escaped again.

    >>> HTML("<b>") + HTML("</b>")
    <b></b>
    """

    def __add__(self, other: str) -> str:
        # HTML + HTML stays HTML; HTML + plain str is just a str.
        res = str.__add__(self, other)
        return HTML(res) if isinstance(other, HTML) else res

    def __repr__(self) -> str:
        return self.as_string()

    def _repr_html_(self) -> str:
        return self.as_string()

    def as_string(self) -> str:
        return str.__str__(self)


def html_escape(text: str) -> str:
    """Escape ``& < > " '`` for use in element content or attribute values."""
    return html.escape(str(text), quote=True)
