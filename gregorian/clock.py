"""Current-year supplier for gregorian.

The U.S. parser fills in an omitted year with "this year". That is the only
place the package touches the clock, and it goes through this module so the
answer can be pinned for tests.

Resolution order for the year:
    1. An explicit ``current_year=`` argument (an int or a zero-argument
       callable) passed to the parser.
    2. The innermost active ``override_current_year(...)`` scope.
    3. The wall-clock year, read at call time.

Overrides are held in a ``contextvars.ContextVar``, so threads and asyncio
tasks do not observe each other's overrides.

Examples:
    >>> from gregorian.clock import current_year, override_current_year
    >>> with override_current_year(2020):
    ...     current_year()
    2020
"""

from __future__ import annotations

import contextlib
import datetime
import logging
from contextvars import ContextVar
from typing import Callable, Iterator, Union

logger = logging.getLogger(__name__)

YearSource = Callable[[], int]
YearLike = Union[int, YearSource]


def system_year() -> int:
    """Return the current year from the host clock."""
    return datetime.date.today().year


_year_source: ContextVar[YearSource] = ContextVar(
    "gregorian_year_source", default=system_year
)


def as_year_source(year: YearLike) -> YearSource:
    """Coerce an int or a zero-argument callable into a year source.

    Raises:
        TypeError: If year is neither an int nor callable.
    """
    if isinstance(year, bool):
        raise TypeError("year must be an int or a callable, got bool")
    if isinstance(year, int):
        fixed = year
        return lambda: fixed
    if callable(year):
        return year
    raise TypeError(f"year must be an int or a callable, got {type(year).__name__}")


def current_year(source: YearLike | None = None) -> int:
    """Return the year used when a U.S. date omits it.

    Args:
        source: Optional explicit year or year source. When None, the
            active override (or the system clock) is used.

    Returns:
        The current year as an integer.
    """
    if source is not None:
        return as_year_source(source)()
    return _year_source.get()()


@contextlib.contextmanager
def override_current_year(year: YearLike) -> Iterator[None]:
    """Pin the current year for the duration of a ``with`` block.

    The previous source is restored on exit, including when the block
    raises. Scopes nest.

    Args:
        year: A fixed year or a zero-argument callable returning one.
    """
    token = _year_source.set(as_year_source(year))
    logger.debug("current year overridden: %r", year)
    try:
        yield
    finally:
        _year_source.reset(token)
        logger.debug("current year override released")


__all__ = [
    "YearSource",
    "YearLike",
    "system_year",
    "as_year_source",
    "current_year",
    "override_current_year",
]
