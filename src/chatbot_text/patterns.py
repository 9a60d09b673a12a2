"""Regex building blocks for natural-language lists.

Plugins match commands such as ``remind me in #foo, #bar and here``.
:func:`build_list_pattern` turns a pattern for one item into a pattern
for a comma/"and" separated list of items, and the module constants
cover the channel and nickname lists most plugins need.

All constants are compiled once at import time and never mutated.
"""

from __future__ import annotations

import re

DEFAULT_CHANNEL_PREFIXES = "#&+!"
DEFAULT_CHANNEL_MAX_LENGTH = 50

# Characters that may never appear in a channel name: NUL, BEL, CR, LF,
# space, comma and colon.
_CHANNEL_FORBIDDEN = r"\x00\x07\r\n ,:"


def _source(pattern: str | re.Pattern[str]) -> str:
    return pattern.pattern if isinstance(pattern, re.Pattern) else pattern


def build_list_pattern(
    item: str | re.Pattern[str],
    prefix: str | re.Pattern[str] = "",
) -> re.Pattern[str]:
    """Build a pattern matching one or more *item* separated list-style.

    Items may be separated by an optional comma, an optional ``and``
    and whitespace.  When *prefix* is given, each repetition after the
    first may also carry that prefix (``in #a and on #b``).

    >>> bool(build_list_pattern(r"\\d+").fullmatch("1, 2 and 3"))
    True
    """
    item_src = f"(?:{_source(item)})"
    prefix_src = _source(prefix)
    if not prefix_src:
        return re.compile(rf"{item_src}(?:,?(?:\s+and)?\s+{item_src})*")
    return re.compile(rf"{item_src}(?:,?(?:\s+and)?(?:\s+(?:{prefix_src}))?\s+{item_src})*")


def channel_pattern(
    prefixes: str = DEFAULT_CHANNEL_PREFIXES,
    max_length: int = DEFAULT_CHANNEL_MAX_LENGTH,
) -> re.Pattern[str]:
    """Pattern for a channel name: a prefix character plus the name body.

    A name longer than ``max_length`` does not match at all.
    """
    body = rf"[^{_CHANNEL_FORBIDDEN}]"
    return re.compile(rf"[{re.escape(prefixes)}]{body}{{1,{max_length - 1}}}(?!{body})")


IN_ON = re.compile(r"in|on")

GEN_CHAN = channel_pattern()
GEN_NICK = re.compile(r"[A-Za-z\[\]\\`_^{|}][A-Za-z0-9\[\]\\`_^{|}-]*")

# A list of channel names
CHAN_LIST = build_list_pattern(GEN_CHAN)

# "in #channel" / "on #channel" capturing the name, or a bare "here"
IN_CHAN = re.compile(rf"(?:{IN_ON.pattern})\s+({GEN_CHAN.pattern})|(here)")
# As above, also accepting "in private" / "in pvt"
IN_CHAN_PVT = re.compile(rf"{IN_CHAN.pattern}|in\s+(private|pvt)")

# Channel lists, with "anywhere"/"everywhere" as catch-alls
IN_CHAN_LIST_SFX = build_list_pattern(rf"{GEN_CHAN.pattern}|here", IN_ON)
IN_CHAN_LIST = re.compile(
    rf"(?:{IN_ON.pattern})\s+{IN_CHAN_LIST_SFX.pattern}|anywhere|everywhere"
)
IN_CHAN_LIST_PVT_SFX = build_list_pattern(rf"{GEN_CHAN.pattern}|here|private|pvt", IN_ON)
IN_CHAN_LIST_PVT = re.compile(
    rf"(?:{IN_ON.pattern})\s+{IN_CHAN_LIST_PVT_SFX.pattern}|anywhere|everywhere"
)

# A list of nicknames
NICK_LIST = build_list_pattern(GEN_NICK)
