"""
Timezone resolution and clock sources.

Resolving a zone name never fails: a ``ZoneResolver`` is configured with a
fallback zone and hands that back whenever the requested name cannot be
loaded. The fallback is logged so a mistyped zone name still leaves a trace.
"""

from __future__ import annotations

import logging
from typing import Protocol

import pendulum
from pendulum import DateTime
from pendulum.tz.timezone import FixedTimezone, Timezone

logger = logging.getLogger(__name__)


Zone = Timezone | FixedTimezone


class ZoneResolver:
    """
    Best-effort timezone lookup with an infallible contract.

    Args:
        fallback: Zone name returned for any name that cannot be resolved.
            The fallback itself must be a real zone; an invalid fallback
            raises ``pendulum.tz.exceptions.InvalidTimezone`` immediately.
    """

    def __init__(self, fallback: str = "UTC"):
        self.fallback_name = fallback
        self.fallback: Zone = pendulum.timezone(fallback)

    def resolve(self, name: str) -> Zone:
        """Return the zone called ``name``, or the fallback zone."""
        try:
            return pendulum.timezone(name)
        # InvalidTimezone is a ValueError; malformed keys raise ValueError
        # from zoneinfo directly.
        except (ValueError, KeyError, OSError) as exc:
            logger.warning(
                "Unknown timezone %r (%s), falling back to %s",
                name,
                exc,
                self.fallback_name,
            )
            return self.fallback

    def __repr__(self) -> str:
        return f"ZoneResolver(fallback={self.fallback_name!r})"


DEFAULT_RESOLVER = ZoneResolver()


class ClockSource(Protocol):
    """Protocol describing a source of the current wall-clock time."""

    def now(self, tz: Zone) -> DateTime:
        """Return the current instant expressed in ``tz``."""


class SystemClock:
    """Reads the process clock through pendulum."""

    def now(self, tz: Zone) -> DateTime:
        return pendulum.now(tz)


class FixedClock:
    """
    Clock frozen at a single instant.

    Useful for schedules evaluated against a known moment and for tests.
    """

    def __init__(self, instant: DateTime):
        self.instant = instant

    def now(self, tz: Zone) -> DateTime:
        return self.instant.in_timezone(tz)


SYSTEM_CLOCK = SystemClock()
