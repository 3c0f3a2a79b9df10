"""Non-preemptive shortest-job-first scheduling with aging."""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field, replace

AGING_FACTOR = 1
IDLE_PID = -1


@dataclass(eq=False)
class SjfProcess:
    """A process with its arrival, burst and the times filled in by scheduling."""

    pid: int
    arrival: int
    burst: int
    start: int = -1
    completion: int = 0
    waiting: int = 0
    turnaround: int = 0
    response: int = 0
    age: int = 0

    @property
    def effective_burst(self) -> int:
        return self.burst - self.age * AGING_FACTOR

    def __lt__(self, other: SjfProcess) -> bool:
        return has_higher_priority(self, other)


@dataclass(frozen=True)
class GanttEntry:
    pid: int
    start: int
    end: int

    @property
    def is_idle(self) -> bool:
        return self.pid == IDLE_PID


def has_higher_priority(a: SjfProcess, b: SjfProcess) -> bool:
    """True if a should run before b: shorter aged burst, then arrival, then pid."""
    if a.effective_burst != b.effective_burst:
        return a.effective_burst < b.effective_burst
    if a.arrival != b.arrival:
        return a.arrival < b.arrival
    return a.pid < b.pid


class ReadyQueue:
    """Priority queue of ready processes, best candidate first."""

    def __init__(self) -> None:
        self._heap: list[SjfProcess] = []

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, process: SjfProcess) -> None:
        heapq.heappush(self._heap, process)

    def pop(self) -> SjfProcess:
        if not self._heap:
            raise IndexError("ready queue is empty")
        return heapq.heappop(self._heap)

    def age_all(self) -> None:
        """Age every waiting process by one step; their relative order is kept."""
        for p in self._heap:
            p.age += 1


@dataclass
class SjfResult:
    chart: list[GanttEntry] = field(default_factory=list)
    completed: list[SjfProcess] = field(default_factory=list)

    def _average(self, attr: str) -> float:
        if not self.completed:
            raise ValueError("no completed processes")
        return sum(getattr(p, attr) for p in self.completed) / len(self.completed)

    @property
    def average_waiting(self) -> float:
        return self._average("waiting")

    @property
    def average_turnaround(self) -> float:
        return self._average("turnaround")

    @property
    def average_response(self) -> float:
        return self._average("response")


def schedule_sjf(processes: list[SjfProcess]) -> SjfResult:
    """Schedule copies of the processes; the inputs are left untouched."""
    if not processes:
        raise ValueError("no processes to schedule")
    pending = sorted((replace(p) for p in processes), key=lambda p: (p.arrival, p.pid))
    ready = ReadyQueue()
    result = SjfResult()
    clock = 0
    index = 0

    while len(result.completed) < len(pending):
        while index < len(pending) and pending[index].arrival <= clock:
            ready.push(pending[index])
            index += 1

        if not ready:
            next_time = pending[index].arrival
            result.chart.append(GanttEntry(IDLE_PID, clock, next_time))
            clock = next_time
            continue

        ready.age_all()
        current = ready.pop()
        current.start = clock
        current.response = clock - current.arrival
        current.waiting = current.response
        result.chart.append(GanttEntry(current.pid, clock, clock + current.burst))
        clock += current.burst
        current.completion = clock
        current.turnaround = current.completion - current.arrival
        result.completed.append(current)

    return result


def format_gantt(chart: list[GanttEntry]) -> str:
    """Render the Gantt chart as text."""
    if not chart:
        raise ValueError("empty chart")
    dashes = "-------" * len(chart)
    cells = "".join(" IDLE |" if e.is_idle else f"  P{e.pid}  |" for e in chart)
    ends = "".join(f"{e.end:7d}" for e in chart)
    return f"\nGantt Chart\n {dashes}\n|{cells}\n {dashes}\n{chart[0].start}{ends}\n\n"


def format_averages(result: SjfResult) -> str:
    """Render the average waiting, turnaround and response times."""
    return (
        f"Average Waiting Time    : {result.average_waiting:.2f}\n"
        f"Average Turnaround Time : {result.average_turnaround:.2f}\n"
        f"Average Response Time   : {result.average_response:.2f}\n"
    )