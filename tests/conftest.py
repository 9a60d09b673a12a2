"""Global test configuration — shared fixtures.

This conftest provides:

1. **Message targets** — ``channel_target`` and ``user_target`` stand in
   for the conversation a parsed command arrived in.

2. **Logger guard** — ``restore_logger`` puts the package logger back to
   its import-time level and handlers after tests that reconfigure it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from chatbot_text.channels import Channel, User
from chatbot_text.logging import handler as stderr_handler
from chatbot_text.logging import logger

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def channel_target() -> Channel:
    """A message sent to #home."""
    return Channel(name="#home")


@pytest.fixture
def user_target() -> User:
    """A private message sent straight to the bot."""
    return User(nick="alice")


@pytest.fixture
def restore_logger() -> Iterator[None]:
    """Undo level and handler changes made to the package logger."""
    level = logger.level
    stderr_level = stderr_handler.level
    handlers = list(logger.handlers)
    yield
    for extra in logger.handlers[:]:
        if extra not in handlers:
            logger.removeHandler(extra)
            extra.close()
    logger.setLevel(level)
    stderr_handler.setLevel(stderr_level)
