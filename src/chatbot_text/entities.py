"""HTML/XML character entity decoding."""

from __future__ import annotations

import re
from html import unescape

# Non-standard entities seen in scraped pages, decoded before the
# standard table.  &nbsp; becomes a plain space so later whitespace
# squeezing treats it like any other blank.
_EXTRA_ENTITIES = {
    "ellip": "...",
    "nbsp": " ",
}

_EXTRA_RE = re.compile(r"&(" + "|".join(_EXTRA_ENTITIES) + r");")


def decode_entities(text: str) -> str:
    """Decode named, decimal and hexadecimal character references.

    >>> decode_entities("Tom &amp; Jerry&ellip; &#8364;5")
    'Tom & Jerry... €5'
    """
    text = _EXTRA_RE.sub(lambda m: _EXTRA_ENTITIES[m.group(1)], text)
    return unescape(text)
