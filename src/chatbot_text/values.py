"""Random picks and numeric clipping for plugin code."""

from __future__ import annotations

import math
import random
from numbers import Real
from typing import TYPE_CHECKING, TypeVar

from chatbot_text.errors import ActionableError

if TYPE_CHECKING:
    from collections.abc import Sequence

T = TypeVar("T")


def pick_one(items: Sequence[T]) -> T | None:
    """Return a random element of *items*, or ``None`` if it is empty.

    Works on any sequence, including ``range`` objects.
    """
    if not items:
        return None
    return items[random.randrange(len(items))]


def pick_in_range(
    first: float,
    last: float,
    *,
    exclude_end: bool = False,
) -> float | None:
    """Return a random number between *first* and *last*.

    Integer bounds give an integer in ``[first, last]`` (or
    ``[first, last)`` with *exclude_end*).  If either bound is a float
    the result is a uniform float, kept strictly below *last* with
    *exclude_end*.  An empty range gives ``None``.
    """
    if isinstance(first, int) and isinstance(last, int):
        span = last - first if exclude_end else last - first + 1
        if span <= 0:
            return None
        return first + random.randrange(span)

    if last < first or (exclude_end and last == first):
        return None
    if not exclude_end:
        return random.uniform(first, last)
    # Rounding can carry first + r * span up to last
    value = first + random.random() * (last - first)
    return value if value < last else math.nextafter(last, first)


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def clip(value: float, left: float, right: float = 0) -> float:
    """Force *value* between *left* and *right*, in either order.

    With the default ``right=0``, ``clip(x, 10)`` bounds *x* to
    ``[0, 10]`` and ``clip(x, -10)`` to ``[-10, 0]``.

    Raises :class:`~chatbot_text.errors.ActionableError` (INVALID_ARGUMENT)
    when a bound is not a real number.

    >>> clip(15, 10)
    10
    >>> clip(3, 10, 5)
    5
    """
    for name, bound in (("left", left), ("right", right)):
        if not _is_number(bound):
            raise ActionableError.invalid_argument("clip", name, bound, "a real number")

    low = min(left, right)
    high = max(left, right)
    if value < low:
        return low
    if value > high:
        return high
    return value
