from __future__ import annotations

import pytest

from broadside.game.infra.scheduler import Scheduler


def test_scheduler_call_later_runs_when_due() -> None:
    scheduler = Scheduler()
    calls: list[str] = []
    scheduler.call_later(0.2, lambda: calls.append("once"))

    assert scheduler.advance(0.1) == 0
    assert calls == []
    assert scheduler.advance(0.1) == 1
    assert calls == ["once"]
    assert scheduler.advance(1.0) == 0


def test_scheduler_cancel_prevents_execution() -> None:
    scheduler = Scheduler()
    calls: list[str] = []
    task_id = scheduler.call_later(0.1, lambda: calls.append("never"))
    scheduler.cancel(task_id)
    assert scheduler.advance(0.2) == 0
    assert calls == []


def test_scheduler_runs_due_tasks_in_time_order() -> None:
    scheduler = Scheduler()
    calls: list[str] = []
    scheduler.call_later(0.3, lambda: calls.append("late"))
    scheduler.call_later(0.1, lambda: calls.append("early"))
    assert scheduler.run_due(0.5) == 2
    assert calls == ["early", "late"]
    assert scheduler.now_seconds == pytest.approx(0.5)


def test_scheduler_validates_time_arguments() -> None:
    scheduler = Scheduler()
    with pytest.raises(ValueError):
        scheduler.call_later(-0.1, lambda: None)
    with pytest.raises(ValueError):
        scheduler.advance(-0.1)
    scheduler.advance(1.0)
    with pytest.raises(ValueError):
        scheduler.run_due(0.5)


def test_scheduler_queued_task_count_tracks_active_tasks() -> None:
    scheduler = Scheduler()
    first = scheduler.call_later(0.1, lambda: None)
    scheduler.call_later(0.2, lambda: None)
    assert scheduler.queued_task_count == 2
    scheduler.cancel(first)
    assert scheduler.queued_task_count == 1
    scheduler.advance(0.3)
    assert scheduler.queued_task_count == 0
