"""IRC inline formatting markers."""

from __future__ import annotations

from enum import StrEnum


class FormattingToken(StrEnum):
    """Control characters that toggle inline formatting in IRC clients."""

    BOLD = "\x02"
    UNDERLINE = "\x1f"
    REVERSE = "\x16"


# Python treats \x1c-\x1f as whitespace (str.isspace, re's \s), so
# whitespace handling next to markers must exclude them explicitly.
MARKER_CHARS = "".join(token.value for token in FormattingToken)
WHITESPACE = rf"[^\S{MARKER_CHARS}]"
