from __future__ import annotations

import asyncio

from podstate.config import DeletionPolicy
from podstate.domain.deletion import DeletionConfirmer, DeletionOutcome
from podstate.domain.errors import NotFound, TimedOutWarning, TransportFailure
from podstate.domain.reconcilers import PodReconciler
from tests.helpers.remotes import FakeClock, FakePodRemote, HangingPodRemote, StalledClock


def _gone(identity: str) -> NotFound:
    return NotFound(status=404, body="pod not found", operation="read pod", identity=identity)


def test_confirms_when_first_poll_reports_not_found(
    clock: FakeClock, confirmer: DeletionConfirmer
) -> None:
    remote = FakePodRemote(get_responses=[_gone("p1")])
    reconciler = PodReconciler(remote, confirmer=confirmer)

    result = asyncio.run(reconciler.delete_and_confirm("p1"))

    assert result.confirmed
    assert result.outcome is DeletionOutcome.CONFIRMED
    assert result.polls == 1
    assert result.warning is None
    assert clock.sleeps == [1.0]
    assert remote.calls == [("delete", "p1"), ("get", "p1")]


def test_times_out_when_resource_never_disappears(
    clock: FakeClock, confirmer: DeletionConfirmer
) -> None:
    remote = FakePodRemote(get_responses=[{"id": "p1", "desired_status": "EXITED"}])
    reconciler = PodReconciler(remote, confirmer=confirmer)

    result = asyncio.run(reconciler.delete_and_confirm("p1"))

    assert result.outcome is DeletionOutcome.TIMED_OUT
    assert result.polls == 2
    assert isinstance(result.warning, TimedOutWarning)
    assert isinstance(result.warning, UserWarning)
    assert result.warning.waited_seconds == 2.0
    assert clock.now == 2.0


def test_transient_errors_do_not_end_the_wait(confirmer: DeletionConfirmer) -> None:
    failure = TransportFailure("connection reset", operation="read pod", identity="p1")
    remote = FakePodRemote(get_responses=[failure, _gone("p1")])

    result = asyncio.run(PodReconciler(remote, confirmer=confirmer).await_gone("p1"))

    assert result.confirmed
    assert result.polls == 2


def test_abort_before_first_poll() -> None:
    remote = FakePodRemote()
    reconciler = PodReconciler(remote, confirmer=DeletionConfirmer(clock=FakeClock()))

    async def scenario() -> object:
        abort = asyncio.Event()
        abort.set()
        return await reconciler.await_gone("p1", abort=abort)

    result = asyncio.run(scenario())

    assert result.outcome is DeletionOutcome.TIMED_OUT  # type: ignore[attr-defined]
    assert result.polls == 0  # type: ignore[attr-defined]
    assert remote.calls == []


def test_abort_interrupts_a_pending_pause() -> None:
    clock = StalledClock()
    confirmer = DeletionConfirmer(
        DeletionPolicy(interval_seconds=5.0, timeout_seconds=300.0), clock=clock
    )
    remote = FakePodRemote()

    async def scenario() -> object:
        abort = asyncio.Event()
        asyncio.get_running_loop().call_soon(abort.set)
        return await PodReconciler(remote, confirmer=confirmer).await_gone("p1", abort=abort)

    result = asyncio.run(scenario())

    assert result.outcome is DeletionOutcome.TIMED_OUT  # type: ignore[attr-defined]
    assert remote.calls == []


def test_abort_interrupts_a_poll_in_flight(confirmer: DeletionConfirmer) -> None:
    async def scenario() -> tuple[object, HangingPodRemote]:
        abort = asyncio.Event()
        remote = HangingPodRemote(on_get=abort.set)
        reconciler = PodReconciler(remote, confirmer=confirmer)
        result = await asyncio.wait_for(reconciler.await_gone("p1", abort=abort), timeout=5.0)
        return result, remote

    result, remote = asyncio.run(scenario())

    assert result.outcome is DeletionOutcome.TIMED_OUT  # type: ignore[attr-defined]
    assert result.polls == 1  # type: ignore[attr-defined]
    assert remote.calls == [("get", "p1")]
    assert remote.cancelled_reads == 1


def test_unanswered_poll_ends_at_the_bound() -> None:
    confirmer = DeletionConfirmer(
        DeletionPolicy(interval_seconds=0.01, timeout_seconds=0.02), clock=FakeClock()
    )
    remote = HangingPodRemote()

    async def scenario() -> object:
        reconciler = PodReconciler(remote, confirmer=confirmer)
        return await asyncio.wait_for(reconciler.await_gone("p1"), timeout=5.0)

    result = asyncio.run(scenario())

    assert result.outcome is DeletionOutcome.TIMED_OUT  # type: ignore[attr-defined]
    assert isinstance(result.warning, TimedOutWarning)  # type: ignore[attr-defined]
    assert result.polls == 1  # type: ignore[attr-defined]
    assert remote.cancelled_reads == 1


def test_default_policy_polls_every_five_seconds_for_five_minutes() -> None:
    policy = DeletionConfirmer().policy

    assert policy.interval_seconds == 5.0
    assert policy.timeout_seconds == 300.0
