"""Post-delete polling until the remote service no longer knows the identity.

Deletes are acknowledged before the resource is actually gone and the API
offers no completion event, so the confirmer polls on a fixed interval within
a bounded wait. Cancellation is cooperative through an ``asyncio.Event``.
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from enum import Enum, StrEnum
from logging import getLogger
from typing import TYPE_CHECKING, Protocol

from podstate.config.deletion import DeletionPolicy

from .errors import NotFound, ReconcileError, TimedOutWarning

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

log = getLogger(__name__)


class Clock(Protocol):
    def monotonic(self) -> float: ...

    async def sleep(self, seconds: float) -> None: ...


class SystemClock:
    def monotonic(self) -> float:
        return time.monotonic()

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)


class _Answer(Enum):
    GONE = "gone"
    PRESENT = "present"
    # neither answered nor failed before the budget ran out or the wait was aborted
    UNANSWERED = "unanswered"


class DeletionOutcome(StrEnum):
    CONFIRMED = "confirmed"
    TIMED_OUT = "timed_out"


@dataclass(frozen=True, slots=True)
class DeletionResult:
    identity: str
    outcome: DeletionOutcome
    polls: int
    warning: TimedOutWarning | None = None

    @property
    def confirmed(self) -> bool:
        return self.outcome is DeletionOutcome.CONFIRMED


class DeletionConfirmer:
    """Bounded polling loop; see :meth:`await_gone`."""

    def __init__(
        self,
        policy: DeletionPolicy | None = None,
        *,
        clock: Clock | None = None,
    ) -> None:
        self._policy = policy or DeletionPolicy()
        self._clock = clock or SystemClock()

    @property
    def policy(self) -> DeletionPolicy:
        return self._policy

    async def await_gone(
        self,
        identity: str,
        probe: Callable[[], Awaitable[object]],
        *,
        abort: asyncio.Event | None = None,
    ) -> DeletionResult:
        """Poll ``probe`` until it raises :class:`NotFound` or the bound elapses.

        Any other fault raised by ``probe`` is logged and the wait continues.
        An ``abort`` signal ends the wait early with a timed-out result, also
        while a read is in flight. A read may run until the bound elapses,
        and the last one started at the bound gets one interval.
        """

        started = self._clock.monotonic()
        polls = 0
        while True:
            aborted = await self._pause(abort)
            if aborted:
                log.info("Deletion wait for %s aborted after %d polls", identity, polls)
                return self._timed_out(identity, started, polls)

            polls += 1
            remaining = self._policy.timeout_seconds - (self._clock.monotonic() - started)
            answer = await self._poll(
                identity, probe, abort, max(remaining, self._policy.interval_seconds)
            )
            if answer is _Answer.GONE:
                log.info("Deletion of %s confirmed after %d polls", identity, polls)
                return DeletionResult(identity, DeletionOutcome.CONFIRMED, polls)
            if abort is not None and abort.is_set():
                log.info("Deletion wait for %s aborted during poll %d", identity, polls)
                return self._timed_out(identity, started, polls)
            if answer is _Answer.UNANSWERED:
                return self._timed_out(identity, started, polls)

            if self._clock.monotonic() - started >= self._policy.timeout_seconds:
                return self._timed_out(identity, started, polls)

    async def _poll(
        self,
        identity: str,
        probe: Callable[[], Awaitable[object]],
        abort: asyncio.Event | None,
        budget: float,
    ) -> _Answer:
        """Run one probe, giving up after ``budget`` seconds or on abort."""

        poll = asyncio.ensure_future(probe())
        tasks: set[asyncio.Future[object]] = {poll}
        if abort is not None:
            tasks.add(asyncio.ensure_future(abort.wait()))
        try:
            await asyncio.wait(tasks, timeout=budget, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)

        if poll.cancelled():
            log.debug("Poll for %s did not answer within %.1fs", identity, budget)
            return _Answer.UNANSWERED
        error = poll.exception()
        if error is None:
            return _Answer.PRESENT
        if isinstance(error, NotFound):
            return _Answer.GONE
        if isinstance(error, ReconcileError):
            log.debug("Ignoring transient error while awaiting deletion: %s", error)
            return _Answer.PRESENT
        raise error

    async def _pause(self, abort: asyncio.Event | None) -> bool:
        if abort is None:
            await self._clock.sleep(self._policy.interval_seconds)
            return False
        if abort.is_set():
            return True
        sleeper = asyncio.ensure_future(self._clock.sleep(self._policy.interval_seconds))
        waiter = asyncio.ensure_future(abort.wait())
        try:
            await asyncio.wait({sleeper, waiter}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in (sleeper, waiter):
                if not task.done():
                    task.cancel()
            await asyncio.gather(sleeper, waiter, return_exceptions=True)
        return abort.is_set()

    def _timed_out(self, identity: str, started: float, polls: int) -> DeletionResult:
        waited = self._clock.monotonic() - started
        warning = TimedOutWarning(identity=identity, waited_seconds=waited)
        log.warning("%s", warning)
        return DeletionResult(identity, DeletionOutcome.TIMED_OUT, polls, warning=warning)


__all__ = [
    "Clock",
    "DeletionConfirmer",
    "DeletionOutcome",
    "DeletionResult",
    "SystemClock",
]
