"""Channel-list parsing tests.

Covers :func:`parse_channel_list` and :func:`resolve_here`.
"""

from __future__ import annotations

from chatbot_text.channels import (
    Channel,
    ChannelMarker,
    User,
    parse_channel_list,
    resolve_here,
)
from chatbot_text.patterns import channel_pattern


class TestParseChannelList:
    """
    REQUIREMENT: A matched channel list becomes an ordered, unique list of targets.

    WHO: Plugins whose commands take "in #a, #b and here" arguments
         (reminders, feed subscriptions, permission scopes)
    WHAT: 'anywhere'/'everywhere' as the whole input give the ANY marker;
          channel names are returned in input order without duplicates;
          'private'/'pvt' give the UNKNOWN marker; 'here' resolves to the
          current channel, or UNKNOWN outside a channel
    WHY: Every plugin needs the same interpretation of the same phrase,
         and duplicate targets would deliver messages twice
    """

    def test_anywhere_is_any_target(self) -> None:
        """
        When the list is 'anywhere'
        Then the result is the ANY marker alone
        """
        result = parse_channel_list("anywhere")

        assert result == [ChannelMarker.ANY], f"Got {result!r}"

    def test_everywhere_is_any_target(self) -> None:
        """
        When the list is 'everywhere'
        Then the result is the ANY marker alone
        """
        result = parse_channel_list("everywhere")

        assert result == [ChannelMarker.ANY], f"Got {result!r}"

    def test_catch_all_is_case_sensitive(self) -> None:
        """
        When the catch-all word is capitalised
        Then it is not recognised
        """
        result = parse_channel_list("Anywhere")

        assert ChannelMarker.ANY not in result, f"Got {result!r}"

    def test_prefixed_channels_in_input_order(self) -> None:
        """
        When channels are listed with 'in' and 'on' prefixes
        Then the names come back in input order
        """
        result = parse_channel_list("in #foo and on #bar")

        assert result == ["#foo", "#bar"], f"Got {result!r}"

    def test_repeated_channel_is_deduplicated(self) -> None:
        """
        When a channel is listed twice
        Then it appears once, at its first position
        """
        result = parse_channel_list("in #foo, #bar and on #foo")

        assert result == ["#foo", "#bar"], f"Got {result!r}"

    def test_private_is_unknown_target(self) -> None:
        """
        When the list is 'in private'
        Then the result is the UNKNOWN marker
        """
        result = parse_channel_list("in private")

        assert result == [ChannelMarker.UNKNOWN], f"Got {result!r}"

    def test_private_and_pvt_collapse_to_one_marker(self) -> None:
        """
        When both 'private' and 'pvt' are listed
        Then a single UNKNOWN marker is returned
        """
        result = parse_channel_list("in private and pvt")

        assert result == [ChannelMarker.UNKNOWN], f"Got {result!r}"

    def test_here_in_channel_is_channel_name(self, channel_target: Channel) -> None:
        """
        When 'here' is used in a channel message
        Then it resolves to that channel's name
        """
        result = parse_channel_list("here", channel_target)

        assert result == ["#home"], f"Got {result!r}"

    def test_here_in_private_message_is_unknown(self, user_target: User) -> None:
        """
        When 'here' is used in a private message
        Then it resolves to the UNKNOWN marker
        """
        result = parse_channel_list("here", user_target)

        assert result == [ChannelMarker.UNKNOWN], f"Got {result!r}"

    def test_here_without_context_is_unknown(self) -> None:
        """
        When no message target is given
        Then 'here' resolves to the UNKNOWN marker
        """
        result = parse_channel_list("in #a and here")

        assert result == ["#a", ChannelMarker.UNKNOWN], f"Got {result!r}"

    def test_here_matching_listed_channel_is_deduplicated(self, channel_target: Channel) -> None:
        """
        When 'here' resolves to a channel already listed
        Then the channel appears once, followed by the other targets
        """
        result = parse_channel_list("in #home, here and in private", channel_target)

        assert result == ["#home", ChannelMarker.UNKNOWN], f"Got {result!r}"

    def test_word_containing_here_is_not_here(self) -> None:
        """
        When a word merely ends in 'here'
        Then it is not taken for the 'here' keyword
        """
        result = parse_channel_list("in #a there")

        assert result == ["#a"], f"Got {result!r}"

    def test_custom_channel_pattern_limits_names(self) -> None:
        """
        When a pattern accepting only '#' channels is supplied
        Then '&' channels are ignored
        """
        text = "in #a and &b"

        default = parse_channel_list(text)
        hash_only = parse_channel_list(text, chan_pattern=channel_pattern("#"))

        assert default == ["#a", "&b"], f"Got {default!r}"
        assert hash_only == ["#a"], f"Got {hash_only!r}"

    def test_overlong_channel_name_is_not_truncated(self) -> None:
        """
        When a channel name is longer than the maximum length
        Then it is skipped rather than cut down to a shorter name
        """
        too_long = parse_channel_list("in #" + "x" * 60)
        mixed = parse_channel_list("in #" + "x" * 60 + ", #ok")

        assert too_long == [], f"Got {too_long!r}"
        assert mixed == ["#ok"], f"Got {mixed!r}"

    def test_text_without_channels_is_empty(self) -> None:
        """
        When nothing in the text looks like a target
        Then the result is empty
        """
        result = parse_channel_list("nothing useful")

        assert result == [], f"Got {result!r}"


class TestResolveHere:
    """
    REQUIREMENT: 'here' resolves only inside a channel.

    WHO: parse_channel_list and plugins handling 'here' themselves
    WHAT: a Channel target gives its name; a User target or no target
          gives the UNKNOWN marker
    WHY: Guessing a channel for a private message would post to the
         wrong audience
    """

    def test_channel_target_gives_name(self) -> None:
        """A channel target resolves to its name."""
        assert resolve_here(Channel(name="#dev")) == "#dev"

    def test_user_target_gives_unknown(self) -> None:
        """A user target resolves to UNKNOWN."""
        assert resolve_here(User(nick="bob")) is ChannelMarker.UNKNOWN

    def test_missing_target_gives_unknown(self) -> None:
        """No target resolves to UNKNOWN."""
        assert resolve_here(None) is ChannelMarker.UNKNOWN

    def test_markers_have_stable_symbols(self) -> None:
        """ANY is '*' and UNKNOWN is '?'."""
        assert ChannelMarker.ANY == "*"
        assert ChannelMarker.UNKNOWN == "?"
