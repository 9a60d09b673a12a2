"""HTML to IRC text conversion.

Turns the restricted HTML found in feeds, search results and page
titles into a single line of plain text, keeping bold and underline
as IRC formatting markers.  Everything is a sequence of regex
substitutions; no HTML parser is involved, so malformed markup
degrades to tag stripping instead of raising.
"""

from __future__ import annotations

import re
from enum import StrEnum

from chatbot_text.entities import decode_entities
from chatbot_text.formatting import WHITESPACE, FormattingToken
from chatbot_text.logging import logger


class LinkPolicy(StrEnum):
    """How ``<a href=...>`` elements are rendered by :func:`normalize`."""

    KEEP = "keep"
    STRIP = "strip"
    REVERSE = "reverse"
    BOLD = "bold"
    UNDERLINE = "underline"
    EMIT_INLINE = "emit_inline"


_ANCHOR_MARKERS: dict[LinkPolicy, FormattingToken] = {
    LinkPolicy.REVERSE: FormattingToken.REVERSE,
    LinkPolicy.BOLD: FormattingToken.BOLD,
    LinkPolicy.UNDERLINE: FormattingToken.UNDERLINE,
}


# ---------------------------------------------------------------------------
# Regex patterns
# ---------------------------------------------------------------------------

_SCRIPT_RE = re.compile(r"<script(?:\s+[^>]*)?>.*?</script>", re.IGNORECASE | re.DOTALL)
_STYLE_RE = re.compile(r"<style(?:\s+[^>]*)?>.*?</style>", re.IGNORECASE | re.DOTALL)

_BOLD_TAG_RE = re.compile(r"</?(?:b|strong)(?:\s+[^>]*)?>", re.IGNORECASE)
_UNDERLINE_TAG_RE = re.compile(r"</?(?:i|em|u)(?:\s+[^>]*)?>", re.IGNORECASE)

# An anchor element carrying an href, capturing the inner text
_HREF_ANCHOR_RE = re.compile(
    r"<a\s+(?:[^>]*\s+)?href\s*=[^>]*>(.*?)</a\s*>", re.IGNORECASE | re.DOTALL
)

# A whole anchor element; the href is captured double-quoted, single-quoted
# or bare, followed by the inner text.  Nested anchors are not supported.
_ANCHOR_ELEMENT_RE = re.compile(
    r"<a\s+(?:[^>]*\s+)?href\s*=\s*"
    r"(?:\"([^\"]*)\"|'([^']*)'|([^\"'>\s][^\s>]*))"
    r"(?:\s+[^>]*)?>(.*?)</a\s*>",
    re.IGNORECASE | re.DOTALL,
)

_BREAK_TAG_RE = re.compile(r"</?(?:p|br)(?:\s+[^>]*)?\s*/?\s*>", re.IGNORECASE)

_SUP_RE = re.compile(r"<sup>(.*?)</sup>", re.IGNORECASE)
_SUB_RE = re.compile(r"<sub>(.*?)</sub>", re.IGNORECASE)
_SINGLE_CHAR_BRACES_RE = re.compile(r"([\^_])\{(.)\}")

_ANY_TAG_RE = re.compile(r"<[^>]+>")

_B = FormattingToken.BOLD.value
_U = FormattingToken.UNDERLINE.value
_WS = WHITESPACE

_EMPTY_BOLD_RE = re.compile(f"{_B}({_WS}*){_B}")
_EMPTY_UNDERLINE_RE = re.compile(f"{_U}({_WS}*){_U}")
_SPACED_MARKER_RE = re.compile(f"{_WS}+([{_B}{_U}]){_WS}+")
_TRAILING_MARKER_RE = re.compile(f"{_WS}+([{_B}{_U}])\\Z")
_LEADING_MARKER_RE = re.compile(f"\\A([{_B}{_U}]){_WS}+")
_WS_RUN_RE = re.compile(f"{_WS}+")

# Entities decoded by rip_tags, applied in order
_RIP_ENTITIES: tuple[tuple[str, str], ...] = (
    ("&amp;", "&"),
    ("&quot;", '"'),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&ellip;", "..."),
    ("&apos;", "'"),
)


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------


def _coerce_link_policy(value: LinkPolicy | str | None) -> LinkPolicy | None:
    """Map a policy name to :class:`LinkPolicy`; unknown values warn and yield ``None``."""
    if value is None or isinstance(value, LinkPolicy):
        return value
    if isinstance(value, str):
        try:
            return LinkPolicy(value.lower())
        except ValueError:
            pass
    logger.warning("Unknown link_policy %r passed to normalize(); anchors left as-is", value)
    return None


def _inline_anchor(match: re.Match[str]) -> str:
    href = match.group(1) or match.group(2) or match.group(3) or ""
    text = match.group(4)
    logger.debug("Inlining anchor %r as %r", match.group(0), f"{text}: {href}")
    return f"{text}: {href}"


def _apply_link_policy(text: str, policy: LinkPolicy | None) -> str:
    if policy is not None and policy in _ANCHOR_MARKERS:
        marker = _ANCHOR_MARKERS[policy].value
        return _HREF_ANCHOR_RE.sub(lambda m: f"{marker}{m.group(1)}{marker}", text)
    if policy is LinkPolicy.EMIT_INLINE:
        return _ANCHOR_ELEMENT_RE.sub(_inline_anchor, text)
    return text


def normalize(text: str, *, link_policy: LinkPolicy | str | None = None) -> str:
    """Convert HTML to a single line of IRC-formatted text.

    Bold and strong become the bold marker; i, em and u become the
    underline marker.  Scripts and styles are dropped, paragraphs and
    line breaks become spaces, ``<sup>``/``<sub>`` become ``^{...}`` and
    ``_{...}``, every other tag is removed, entities are decoded and
    whitespace is squeezed.

    Parameters
    ----------
    text:
        HTML fragment to convert.
    link_policy:
        How anchors are rendered.  ``None``, :attr:`LinkPolicy.KEEP` and
        :attr:`LinkPolicy.STRIP` keep only the anchor text.  An unknown
        value logs a warning and is treated like ``None``.

    >>> normalize("<p>Hello <b>world</b></p>")
    'Hello \\x02world\\x02'
    """
    policy = _coerce_link_policy(link_policy)

    txt = _SCRIPT_RE.sub("", text)
    txt = _STYLE_RE.sub("", txt)

    txt = _BOLD_TAG_RE.sub(_B, txt)
    txt = _UNDERLINE_TAG_RE.sub(_U, txt)

    txt = _apply_link_policy(txt, policy)

    txt = _BREAK_TAG_RE.sub(" ", txt)
    txt = txt.replace("\n", " ").replace("\r", " ")

    txt = _SUP_RE.sub(r"^{\1}", txt)
    txt = _SUB_RE.sub(r"_{\1}", txt)
    txt = _SINGLE_CHAR_BRACES_RE.sub(r"\1\2", txt)

    txt = _ANY_TAG_RE.sub("", txt)

    # Decoded only now so that &nbsp; and friends take part in squeezing
    txt = decode_entities(txt)

    txt = _EMPTY_BOLD_RE.sub(r"\1", txt)
    txt = _EMPTY_UNDERLINE_RE.sub(r"\1", txt)

    txt = _SPACED_MARKER_RE.sub(r" \1", txt)
    txt = _TRAILING_MARKER_RE.sub(r"\1", txt, count=1)
    txt = _LEADING_MARKER_RE.sub(r"\1", txt, count=1)

    txt = _WS_RUN_RE.sub(" ", txt)
    return txt.strip(" ")


def normalize_with_change(
    text: str, *, link_policy: LinkPolicy | str | None = None
) -> tuple[str, bool]:
    """Like :func:`normalize`, also reporting whether the text changed."""
    result = normalize(text, link_policy=link_policy)
    return result, result != text


def rip_tags(text: str) -> str:
    """Strip all tags and the most common entities, with no formatting.

    >>> rip_tags("<a href='x'>hi</a> &amp; &lt;there&gt;")
    'hi & <there>'
    """
    txt = _ANY_TAG_RE.sub("", text)
    for entity, literal in _RIP_ENTITIES:
        txt = txt.replace(entity, literal)
    return txt.replace("\n", "")
