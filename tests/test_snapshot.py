import threading
from typing import Optional

from chronogrid.model.task import Task
from chronogrid.service.snapshot import TaskSnapshot


class FakeGateway:
    def __init__(self) -> None:
        self.tasks: list[Task] = []
        self.optimized: list[Task] = []
        self.error: Optional[Exception] = None
        self.optimize_calls = 0

    def list_tasks(self) -> list[Task]:
        if self.error is not None:
            raise self.error
        return list(self.tasks)

    def optimize_schedule(self) -> list[Task]:
        self.optimize_calls += 1
        if self.error is not None:
            raise self.error
        return list(self.optimized)


def test_refresh_replaces_snapshot(make_task) -> None:
    gateway = FakeGateway()
    gateway.tasks = [make_task(title="a")]
    snapshot = TaskSnapshot(gateway)

    assert snapshot.tasks == []
    assert snapshot.refresh()
    assert [task["title"] for task in snapshot.tasks] == ["a"]
    assert snapshot.last_error is None


def test_failed_refresh_keeps_previous_snapshot(make_task) -> None:
    gateway = FakeGateway()
    gateway.tasks = [make_task(title="a")]
    snapshot = TaskSnapshot(gateway)
    snapshot.refresh()

    gateway.error = OSError("disk unavailable")

    assert not snapshot.refresh()
    assert [task["title"] for task in snapshot.tasks] == ["a"]
    assert isinstance(snapshot.last_error, OSError)


def test_success_clears_last_error(make_task) -> None:
    gateway = FakeGateway()
    snapshot = TaskSnapshot(gateway)
    gateway.error = OSError("disk unavailable")
    snapshot.refresh()

    gateway.error = None
    gateway.tasks = [make_task()]

    assert snapshot.refresh()
    assert snapshot.last_error is None


def test_optimize_replaces_snapshot_with_response(make_task) -> None:
    gateway = FakeGateway()
    gateway.tasks = [make_task(title="before")]
    gateway.optimized = [make_task(title="after")]
    snapshot = TaskSnapshot(gateway)
    snapshot.refresh()

    assert snapshot.optimize()
    assert gateway.optimize_calls == 1
    assert [task["title"] for task in snapshot.tasks] == ["after"]


def test_response_completing_last_wins_even_for_older_request(make_task) -> None:
    snapshot = TaskSnapshot(FakeGateway())
    older = snapshot.issue_ticket()
    newer = snapshot.issue_ticket()

    snapshot.apply(newer, [make_task(title="completed-first")])
    snapshot.apply(older, [make_task(title="completed-last")])

    assert [task["title"] for task in snapshot.tasks] == ["completed-last"]


def test_concurrent_refreshes_apply_in_completion_order(make_task) -> None:
    release_first = threading.Event()
    first_started = threading.Event()
    calls = 0

    class SlowFirstGateway(FakeGateway):
        def list_tasks(self) -> list[Task]:
            nonlocal calls
            calls += 1
            if calls == 1:
                first_started.set()
                assert release_first.wait(5)
                return [make_task(title="completed-last")]
            return [make_task(title="completed-first")]

    snapshot = TaskSnapshot(SlowFirstGateway())
    worker = threading.Thread(target=snapshot.refresh)
    worker.start()
    assert first_started.wait(5)

    assert snapshot.refresh()
    assert [task["title"] for task in snapshot.tasks] == ["completed-first"]

    release_first.set()
    worker.join(5)

    assert [task["title"] for task in snapshot.tasks] == ["completed-last"]


def test_tasks_property_returns_a_new_list(make_task) -> None:
    gateway = FakeGateway()
    gateway.tasks = [make_task()]
    snapshot = TaskSnapshot(gateway)
    snapshot.refresh()

    snapshot.tasks.clear()

    assert len(snapshot.tasks) == 1
