"""HTML-related utility helpers."""

from __future__ import annotations

from html import escape as _html_escape


def escape_html(text: str, *, quote: bool = True) -> str:
    """Escape HTML special characters in literal text.

    Parameters
    ----------
    text : str
        Raw text taken from the source document
    quote : bool, default True
        Also escape ``"`` and ``'``. When False only ``&``, ``<`` and ``>``
        are replaced.

    Returns
    -------
    str
        Text that is safe to place in element content

    Examples
    --------
    >>> escape_html('<a href="x">')
    '&lt;a href=&quot;x&quot;&gt;'
    >>> escape_html('"quoted"', quote=False)
    '"quoted"'

    """
    return _html_escape(text, quote=quote)


def start_tag(name: str, attributes: dict[str, str] | None = None) -> str:
    """Build an opening tag from pre-validated attribute values.

    Attribute values are inserted as given; callers escape or restrict them.
    """
    if not attributes:
        return f"<{name}>"
    rendered = " ".join(f'{key}="{value}"' for key, value in attributes.items())
    return f"<{name} {rendered}>"
