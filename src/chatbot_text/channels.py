"""Channel-list parsing.

Converts the text captured by the ``IN_CHAN_LIST`` family of patterns
into a list of channel names.  The special words are mapped to
symbolic markers:

- ``anywhere`` / ``everywhere`` (as the whole input) → :attr:`ChannelMarker.ANY`
- ``private`` / ``pvt`` → :attr:`ChannelMarker.UNKNOWN`
- ``here`` → the channel the message was sent to, or
  :attr:`ChannelMarker.UNKNOWN` when it was not sent to a channel
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from chatbot_text.patterns import GEN_CHAN


class ChannelMarker(StrEnum):
    """Symbolic entries of a parsed channel list."""

    ANY = "*"
    UNKNOWN = "?"


ChannelToken = str | ChannelMarker


@dataclass(frozen=True)
class Channel:
    """A channel a message was addressed to."""

    name: str


@dataclass(frozen=True)
class User:
    """A user a message was addressed to (a private message)."""

    nick: str


MessageTarget = Channel | User

_CATCH_ALL = frozenset({"anywhere", "everywhere"})
_PRIVATE = frozenset({"private", "pvt"})


def _scan_pattern(chan_pattern: re.Pattern[str]) -> re.Pattern[str]:
    return re.compile(
        rf"(?:^|,?(?:\s+and)?\s+)(?:(?:in|on)\s+)?({chan_pattern.pattern}|(?:here|private|pvt)\b)"
    )


_DEFAULT_SCAN = _scan_pattern(GEN_CHAN)


def resolve_here(target: MessageTarget | None) -> ChannelToken:
    """Resolve the word ``here`` against the target of the current message."""
    if isinstance(target, Channel):
        return target.name
    return ChannelMarker.UNKNOWN


def parse_channel_list(
    text: str,
    target: MessageTarget | None = None,
    *,
    chan_pattern: re.Pattern[str] = GEN_CHAN,
) -> list[ChannelToken]:
    """Parse a channel list such as ``"in #foo, #bar and here"``.

    Parameters
    ----------
    text:
        The list as matched by ``IN_CHAN_LIST`` or a similar pattern.
    target:
        Where the message containing the list was sent; used to resolve
        ``here``.  ``None`` means no channel context.
    chan_pattern:
        Pattern recognising a channel name.

    Returns the tokens in input order with duplicates removed.
    """
    if text in _CATCH_ALL:
        return [ChannelMarker.ANY]

    scan = _DEFAULT_SCAN if chan_pattern is GEN_CHAN else _scan_pattern(chan_pattern)

    tokens: list[ChannelToken] = []
    for match in scan.finditer(text):
        word = match.group(1)
        token: ChannelToken
        if word in _PRIVATE:
            token = ChannelMarker.UNKNOWN
        elif word == "here":
            token = resolve_here(target)
        else:
            token = word
        if token not in tokens:
            tokens.append(token)
    return tokens
