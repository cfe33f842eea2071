"""
Input sanitizers and output escapers for SEO fields.

Sanitizers run when admin forms are saved; escapers run when tags are
rendered. Stored values are never escaped, rendered values are never
sanitized.
"""

import html
import re

ALLOWED_PROTOCOLS: tuple[str, ...] = (
    "http",
    "https",
    "ftp",
    "ftps",
    "mailto",
    "news",
    "irc",
    "gopher",
    "nntp",
    "feed",
    "telnet",
    "mms",
    "rtsp",
    "sms",
    "svn",
    "tel",
    "fax",
    "xmpp",
    "webcal",
    "urn",
)

_SCRIPT_STYLE_RE = re.compile(r"<(script|style)[^>]*?>.*?</\1>", re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"<[^>]*>")
_LINEBREAK_RE = re.compile(r"[\r\n\t ]+")
_OCTET_RE = re.compile(r"%[a-fA-F0-9]{2}")
_URL_DISALLOWED_RE = re.compile(r"[^a-zA-Z0-9\-~+_.?#=!&;,/:%@$|*'()\[\]\x80-\uffff]")
_SCHEME_RE = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.\-]*):")


# --- Sanitizers (save time) ---


def strip_all_tags(text: str) -> str:
    """Remove HTML tags, dropping <script>/<style> bodies entirely."""
    text = _SCRIPT_STYLE_RE.sub("", text)
    return _TAG_RE.sub("", text)


def _sanitize_text(text: str, keep_newlines: bool) -> str:
    filtered = text
    if "<" in filtered:
        filtered = strip_all_tags(filtered)
        # A lone '<' that never opened a tag is kept as an entity
        filtered = filtered.replace("<", "&lt;")

    if keep_newlines:
        filtered = re.sub(r"[\t ]+", " ", filtered)
        filtered = "\n".join(line.strip() for line in filtered.splitlines())
    else:
        filtered = _LINEBREAK_RE.sub(" ", filtered)

    filtered = filtered.strip()

    # Percent-encoded octets can smuggle markup past the tag stripper
    while _OCTET_RE.search(filtered):
        filtered = _OCTET_RE.sub("", filtered)
    return filtered.strip()


def sanitize_text_field(value: str | None) -> str:
    """Single-line text: strip tags, collapse whitespace and line breaks."""
    if not value:
        return ""
    return _sanitize_text(str(value), keep_newlines=False)


def sanitize_textarea_field(value: str | None) -> str:
    """Multi-line text: strip tags but keep line breaks."""
    if not value:
        return ""
    return _sanitize_text(str(value), keep_newlines=True)


def sanitize_url(value: str | None) -> str:
    """
    Clean a URL for storage.

    Drops characters that are never valid in a URL, prefixes bare hosts with
    http:// and rejects disallowed protocols (returns ""). The scheme is
    otherwise left alone: http:// stays http://.
    """
    if not value:
        return ""

    url = str(value).strip().replace(" ", "%20")
    url = _URL_DISALLOWED_RE.sub("", url)
    if not url:
        return ""

    if ":" not in url and not url.startswith(("/", "#", "?")):
        url = "http://" + url

    match = _SCHEME_RE.match(url)
    if match and match.group(1).lower() not in ALLOWED_PROTOCOLS:
        return ""
    return url


# --- Escapers (render time) ---


def escape_attr(value: str | None) -> str:
    """Escape text for use inside a double-quoted HTML attribute."""
    if not value:
        return ""
    return html.escape(str(value), quote=True)


def escape_url(value: str | None) -> str:
    """Clean a URL and escape it for use inside an HTML attribute."""
    url = sanitize_url(value)
    if not url:
        return ""
    return url.replace("&", "&#038;").replace("'", "&#039;")


def escape_textarea(value: str | None) -> str:
    """Escape text for use as <textarea> content."""
    if not value:
        return ""
    return html.escape(str(value), quote=False)
