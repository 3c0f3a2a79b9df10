"""Round-robin scheduling whose quantum adapts to the remaining burst times."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

MIN_QUANTUM = 2


@dataclass(frozen=True)
class RrProcess:
    """A process to be scheduled: a name, an arrival time and a CPU burst."""

    pid: str
    arrival_time: int
    burst_time: int

    def __post_init__(self) -> None:
        if self.burst_time < 1:
            raise ValueError(f"process {self.pid}: burst time must be at least 1")


@dataclass
class RoundRobinResult:
    """Dispatch order, the time of each dispatch plus the end time, and quanta."""

    order: list[str] = field(default_factory=list)
    times: list[int] = field(default_factory=list)
    quanta: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class RrMetrics:
    pid: str
    arrival_time: int
    burst_time: int
    completion_time: int
    turnaround: int
    waiting: int
    response: int


def _next_quantum(queue: deque[int], remaining: list[int]) -> int:
    """Harmonic mean of the remaining bursts in the queue, at least MIN_QUANTUM."""
    left = [remaining[i] for i in queue if remaining[i] > 0]
    inv_sum = sum(1.0 / r for r in left)
    if not left or inv_sum <= 0:
        return MIN_QUANTUM
    return max(int(len(left) / inv_sum), MIN_QUANTUM)


def round_robin(processes: list[RrProcess]) -> RoundRobinResult:
    """Run every process to completion and return the schedule."""
    pids = [p.pid for p in processes]
    if len(set(pids)) != len(pids):
        raise ValueError("process identifiers must be unique")

    remaining = [p.burst_time for p in processes]
    admitted = [False] * len(processes)
    queue: deque[int] = deque()
    result = RoundRobinResult()
    clock = 0
    completed = 0
    first = True

    def admit() -> None:
        for i, p in enumerate(processes):
            if p.arrival_time <= clock and remaining[i] > 0 and not admitted[i]:
                queue.append(i)
                admitted[i] = True

    while completed < len(processes):
        admit()
        if not queue:
            clock += 1
            continue

        if first:
            quantum = MIN_QUANTUM
            first = False
        else:
            quantum = _next_quantum(queue, remaining)
        result.quanta.append(quantum)

        j = queue.popleft()
        result.order.append(processes[j].pid)
        result.times.append(clock)

        if remaining[j] > quantum:
            clock += quantum
            remaining[j] -= quantum
        else:
            clock += remaining[j]
            remaining[j] = 0
            completed += 1

        admit()
        if remaining[j] > 0:
            queue.append(j)

    result.times.append(clock)
    return result


def compute_metrics(processes: list[RrProcess], result: RoundRobinResult) -> list[RrMetrics]:
    """Per-process completion, turnaround, waiting and response times."""
    metrics = []
    for p in processes:
        slots = [k for k, pid in enumerate(result.order) if pid == p.pid]
        if not slots:
            raise ValueError(f"process {p.pid} does not appear in the schedule")
        completion = result.times[slots[-1] + 1]
        turnaround = completion - p.arrival_time
        metrics.append(
            RrMetrics(
                pid=p.pid,
                arrival_time=p.arrival_time,
                burst_time=p.burst_time,
                completion_time=completion,
                turnaround=turnaround,
                waiting=turnaround - p.burst_time,
                response=result.times[slots[0]] - p.arrival_time,
            )
        )
    return metrics


def format_gantt(result: RoundRobinResult) -> str:
    """Render the quanta used and the Gantt chart as text."""
    lines = ["\nQuantum sizes used: " + "".join(f"{q}  " for q in result.quanta) + "\n"]
    lines.append("\nRound Robin Gantt Chart:\n|")
    lines.append("".join(f" {pid} |" for pid in result.order) + "\n")
    lines.append("".join(f"{t}    " if t < 10 else f"{t}   " for t in result.times) + "\n")
    return "".join(lines)


def format_metrics(metrics: list[RrMetrics]) -> str:
    """Render the metrics table followed by the averages."""
    if not metrics:
        raise ValueError("no processes to report")
    lines = ["\nPID  AT   BT   CT   TAT    WT   RT\n"]
    for m in metrics:
        lines.append(
            f"{m.pid}   {m.arrival_time}    {m.burst_time}    {m.completion_time}    "
            f"{m.turnaround}    {m.waiting}    {m.response}\n"
        )
    n = len(metrics)
    lines.append(f"\nAverage TAT = {sum(m.turnaround for m in metrics) / n:.2f}\n")
    lines.append(f"Average WT  = {sum(m.waiting for m in metrics) / n:.2f}\n")
    lines.append(f"Average RT  = {sum(m.response for m in metrics) / n:.2f}\n")
    return "".join(lines)