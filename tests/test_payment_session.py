from __future__ import annotations

import asyncio

from conftest import ManualScheduler

from voltflow.models import PAYMENT_DELAY_MS, PaymentSession, PaymentStatus


def test_new_session_is_idle(scheduler: ManualScheduler) -> None:
    session = PaymentSession(scheduler=scheduler)
    assert session.is_processing is False
    assert session.succeeded is False
    assert session.status is PaymentStatus.IDLE
    assert session.delay_ms == PAYMENT_DELAY_MS == 1500


def test_start_payment_sets_processing_before_delay(
    scheduler: ManualScheduler,
) -> None:
    session = PaymentSession(scheduler=scheduler)
    session.start_payment()

    assert session.is_processing is True
    assert session.succeeded is False
    assert scheduler.pending == 1

    scheduler.advance(PAYMENT_DELAY_MS - 1)
    assert session.status is PaymentStatus.PROCESSING


def test_payment_succeeds_after_delay_then_clears(
    scheduler: ManualScheduler,
) -> None:
    session = PaymentSession(scheduler=scheduler)
    session.start_payment()
    assert session.is_processing is True
    assert session.succeeded is False

    scheduler.advance(1500)
    assert session.is_processing is False
    assert session.succeeded is True
    assert session.status is PaymentStatus.SUCCEEDED

    session.clear_success()
    assert session.succeeded is False
    assert session.status is PaymentStatus.IDLE


def test_double_start_schedules_one_completion(scheduler: ManualScheduler) -> None:
    session = PaymentSession(scheduler=scheduler)
    session.start_payment()
    session.start_payment()
    assert scheduler.pending == 1

    scheduler.advance(1500)

    assert scheduler.fired == 1
    assert session.succeeded is True
    assert session.is_processing is False


def test_repeat_start_does_not_extend_pending_completion(
    scheduler: ManualScheduler,
) -> None:
    session = PaymentSession(scheduler=scheduler)
    session.start_payment()
    scheduler.advance(1000)
    session.start_payment()
    scheduler.advance(500)

    assert session.succeeded is True
    assert scheduler.pending == 0


def test_clear_success_is_unconditional_and_leaves_processing(
    scheduler: ManualScheduler,
) -> None:
    session = PaymentSession(scheduler=scheduler)
    session.clear_success()
    assert session.succeeded is False

    session.start_payment()
    session.clear_success()
    assert session.is_processing is True
    assert session.succeeded is False

    scheduler.advance(1500)
    assert session.succeeded is True


def test_flags_are_never_both_true(scheduler: ManualScheduler) -> None:
    session = PaymentSession(scheduler=scheduler)
    snapshots: list[tuple[bool, bool]] = []
    session.subscribe(lambda s: snapshots.append((s.is_processing, s.succeeded)))

    session.start_payment()
    scheduler.advance(1500)
    # Starting again without consuming success
    session.start_payment()
    scheduler.advance(1500)

    assert (True, True) not in snapshots
    assert snapshots == [
        (True, False),
        (False, True),
        (True, False),
        (False, True),
    ]


def test_start_and_completion_notify_once_each(scheduler: ManualScheduler) -> None:
    session = PaymentSession(scheduler=scheduler)
    statuses: list[PaymentStatus] = []
    unsubscribe = session.subscribe(lambda s: statuses.append(s.status))

    session.start_payment()
    session.start_payment()
    scheduler.advance(1500)
    session.clear_success()
    session.clear_success()
    unsubscribe()
    session.start_payment()

    assert statuses == [
        PaymentStatus.PROCESSING,
        PaymentStatus.SUCCEEDED,
        PaymentStatus.IDLE,
    ]


def test_custom_delay_is_honoured(scheduler: ManualScheduler) -> None:
    session = PaymentSession(scheduler=scheduler, delay_ms=200)
    session.start_payment()
    scheduler.advance(199)
    assert session.is_processing is True
    scheduler.advance(1)
    assert session.succeeded is True


def test_default_scheduler_uses_running_loop() -> None:
    async def _scenario() -> tuple[bool, bool]:
        session = PaymentSession(delay_ms=10)
        session.start_payment()
        assert session.is_processing is True
        await asyncio.sleep(0.05)
        return session.is_processing, session.succeeded

    assert asyncio.run(_scenario()) == (False, True)
