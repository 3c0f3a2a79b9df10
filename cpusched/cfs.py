"""Completely Fair Scheduler simulation driven by a red-black run queue."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .rbtree import RedBlackTree

SCHED_PERIOD = 10.0
BASE_WEIGHT = 1024.0
GANTT_LIMIT = 40
_DONE_EPSILON = 0.001


class TaskState(Enum):
    NEW = 0
    READY = 1
    RUNNING = 2
    FINISHED = 3


@dataclass(eq=False)
class CfsTask:
    """A task scheduled by CFS; its runtime fields change as it runs."""

    pid: int
    arrival_time: int
    burst_time: int
    weight: float = BASE_WEIGHT
    vruntime: float = 0.0
    remaining_time: float = field(init=False)
    start_time: float = 0.0
    completion_time: float = 0.0
    state: TaskState = TaskState.NEW

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError(f"task {self.pid}: weight must be positive")
        if self.burst_time < 0:
            raise ValueError(f"task {self.pid}: burst time must not be negative")
        self.remaining_time = float(self.burst_time)

    def charge(self, runtime: float) -> None:
        """Advance the virtual runtime for runtime units of CPU use."""
        self.vruntime += runtime * (BASE_WEIGHT / self.weight)

    @property
    def turnaround(self) -> float:
        return self.completion_time - self.arrival_time

    @property
    def waiting(self) -> float:
        return self.turnaround - self.burst_time

    @property
    def response(self) -> float:
        return self.start_time - self.arrival_time


@dataclass(frozen=True)
class GanttSlice:
    pid: int
    duration: float


@dataclass
class CfsResult:
    history: list[GanttSlice]
    finished: list[CfsTask]


def calc_slice(weight: float, nr: int) -> float:
    """Time slice for a task of the given weight among nr runnable tasks."""
    if nr > 0:
        return (SCHED_PERIOD * weight) / (BASE_WEIGHT * nr)
    return SCHED_PERIOD


def cfs_schedule(tasks: list[CfsTask]) -> CfsResult:
    """Run all tasks to completion; the task objects are updated in place."""
    runqueue = RedBlackTree()
    for task in tasks:
        task.state = TaskState.READY
        runqueue.insert(task.vruntime, task)
    active = len(tasks)

    clock = 0.0
    history: list[GanttSlice] = []
    finished: list[CfsTask] = []

    while runqueue and active > 0:
        _, task = runqueue.pop_min()
        task.state = TaskState.RUNNING
        if task.remaining_time == task.burst_time:
            task.start_time = clock

        run = min(task.remaining_time, calc_slice(task.weight, active))
        history.append(GanttSlice(task.pid, run))

        clock += run
        task.remaining_time -= run
        task.charge(run)

        if task.remaining_time > _DONE_EPSILON:
            task.state = TaskState.READY
            runqueue.insert(task.vruntime, task)
        else:
            active -= 1
            task.state = TaskState.FINISHED
            task.completion_time = clock
            finished.append(task)

    return CfsResult(history, finished)


def format_gantt(history: list[GanttSlice], limit: int = GANTT_LIMIT) -> str:
    """Render the first slices of the schedule as a text Gantt chart."""
    shown = history[:limit]
    count = len(shown)
    border = "+------" * count + "+\n"
    lines = [f"\n--- GANTT CHART (First {count} slices) ---\n\n", border]
    lines.append("".join(f"| P{s.pid:<3d}" for s in shown) + "|\n")
    lines.append(border)
    t = 0.0
    marks = [f"{t:<6.1f}"]
    for s in shown:
        t += s.duration
        marks.append(f"{t:<6.1f}")
    lines.append("".join(marks) + "\n")
    return "".join(lines)


def format_metrics(finished: list[CfsTask]) -> str:
    """Render the per-task metrics table with averages."""
    if not finished:
        raise ValueError("no finished tasks to report")
    lines = [
        "\n             PROCESS METRICS                 \n",
        "PID | AT | BT | CT  | TAT | WT  | RT\n",
        " " * 47 + "\n",
    ]
    for p in finished:
        lines.append(
            f"{p.pid:3d} | {p.arrival_time:2d} | {p.burst_time:2d} | "
            f"{p.completion_time:4.1f} | {p.turnaround:4.1f} | "
            f"{p.waiting:4.1f} | {p.response:4.1f}\n"
        )
    n = len(finished)
    avg_tat = sum(p.turnaround for p in finished) / n
    avg_wt = sum(p.waiting for p in finished) / n
    avg_rt = sum(p.response for p in finished) / n
    lines.append("-" * 47 + "\n")
    lines.append(f"AVG |    |    |      | {avg_tat:4.2f} | {avg_wt:4.2f} | {avg_rt:4.2f}\n")
    return "".join(lines)