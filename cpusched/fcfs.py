"""First-come first-served scheduling with simulated I/O blocking."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field, replace


@dataclass(eq=False)
class IoProcess:
    """A process that blocks once for I/O after running io_start ticks."""

    pid: int
    arrival_time: int
    burst_time: int
    io_start: int | None = None
    io_duration: int = 2
    remaining_time: int = field(init=False)
    executed_time: int = field(init=False, default=0)
    start_time: int | None = field(init=False, default=None)
    completion_time: int = field(init=False, default=0)
    io_remaining: int = field(init=False, default=0)
    in_io: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        if self.burst_time < 1:
            raise ValueError(f"process {self.pid}: burst time must be at least 1")
        if self.io_duration < 0:
            raise ValueError(f"process {self.pid}: I/O duration must not be negative")
        if self.io_start is None:
            self.io_start = self.burst_time // 2
        self.remaining_time = self.burst_time


@dataclass(frozen=True)
class FcfsRecord:
    pid: int
    arrival_time: int
    burst_time: int
    start_time: int
    completion_time: int

    @property
    def turnaround(self) -> int:
        return self.completion_time - self.arrival_time

    @property
    def waiting(self) -> int:
        return self.turnaround - self.burst_time

    @property
    def response(self) -> int:
        return self.start_time - self.arrival_time


def sort_by_arrival(processes: list[IoProcess]) -> list[IoProcess]:
    """Order by arrival time, keeping input order among equal arrivals."""
    return sorted(processes, key=lambda p: p.arrival_time)


def fcfs_io_aware(processes: list[IoProcess]) -> list[FcfsRecord]:
    """Simulate tick by tick and return records in completion order."""
    arrivals = deque(replace(p) for p in sort_by_arrival(processes))
    ready: deque[IoProcess] = deque()
    blocked: deque[IoProcess] = deque()
    running: IoProcess | None = None
    records: list[FcfsRecord] = []
    clock = 0

    while arrivals or ready or blocked or running is not None:
        while arrivals and arrivals[0].arrival_time <= clock:
            ready.append(arrivals.popleft())

        for _ in range(len(blocked)):
            p = blocked.popleft()
            p.io_remaining -= 1
            if p.io_remaining == 0:
                p.in_io = False
                ready.append(p)
            else:
                blocked.append(p)

        if running is None and ready:
            running = ready.popleft()
            if running.start_time is None:
                running.start_time = clock

        if running is not None:
            running.remaining_time -= 1
            running.executed_time += 1
            if (
                running.executed_time == running.io_start
                and running.remaining_time > 0
                and running.io_duration > 0
            ):
                running.io_remaining = running.io_duration
                running.in_io = True
                blocked.append(running)
                running = None
            elif running.remaining_time == 0:
                running.completion_time = clock + 1
                records.append(
                    FcfsRecord(
                        running.pid,
                        running.arrival_time,
                        running.burst_time,
                        running.start_time,
                        running.completion_time,
                    )
                )
                running = None

        clock += 1

    return records


def format_table(records: list[FcfsRecord]) -> str:
    """Render completed processes as a text table."""
    lines = [
        "\nPID | AT | BT | ST | CT | TAT | WT\n",
        "---------------------------------\n",
    ]
    for r in records:
        lines.append(
            f"{r.pid:3d} | {r.arrival_time:2d} | {r.burst_time:2d} | "
            f"{r.start_time:2d} | {r.completion_time:2d} | "
            f"{r.turnaround:3d} | {r.waiting:3d}\n"
        )
    return "".join(lines)