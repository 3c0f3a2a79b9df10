"""Command line entry point: run every scheduler over one process list."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from . import cfs, fcfs, round_robin, sjf

MAX_PROC = 100
DEFAULT_INPUT = "processes.txt"


@dataclass(frozen=True)
class ProcessSpec:
    """One process as read from the input: identifier, arrival and burst."""

    pid: int
    arrival: int
    burst: int


def _integers(lines: Iterable[str]) -> Iterator[int]:
    """Yield whitespace-separated integers until the first token that is not one."""
    for line in lines:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                return


def parse_processes(lines: Iterable[str]) -> list[ProcessSpec]:
    """Read "pid arrival burst" triples; stop at bad input or after MAX_PROC."""
    numbers = _integers(lines)
    specs: list[ProcessSpec] = []
    while len(specs) < MAX_PROC:
        triple = [n for _, n in zip(range(3), numbers)]
        if len(triple) < 3:
            break
        specs.append(ProcessSpec(*triple))
    return specs


def read_processes(path: str | Path) -> list[ProcessSpec]:
    """Parse the process list stored in a file."""
    with open(path, encoding="utf-8") as fh:
        return parse_processes(fh)


def run_all(specs: list[ProcessSpec]) -> str:
    """Run round robin, FCFS, CFS and SJF over the specs and return the report."""
    if not specs:
        raise ValueError("no processes to schedule")

    parts: list[str] = []

    rr_procs = [round_robin.RrProcess(f"P{s.pid}", s.arrival, s.burst) for s in specs]
    rr_result = round_robin.round_robin(rr_procs)
    parts.append("\n--- Starting Round Robin Scheduler ---")
    parts.append(round_robin.format_gantt(rr_result))
    parts.append(round_robin.format_metrics(round_robin.compute_metrics(rr_procs, rr_result)))

    io_procs = [fcfs.IoProcess(s.pid, s.arrival, s.burst) for s in specs]
    parts.append("\n--- Starting FCFS Scheduler ---\n")
    parts.append(fcfs.format_table(fcfs.fcfs_io_aware(io_procs)))

    tasks = [cfs.CfsTask(s.pid, s.arrival, s.burst) for s in specs]
    cfs_result = cfs.cfs_schedule(tasks)
    parts.append("\n--- Starting CFS Scheduler ---\n")
    parts.append(cfs.format_gantt(cfs_result.history))
    parts.append(cfs.format_metrics(cfs_result.finished))

    sjf_result = sjf.schedule_sjf([sjf.SjfProcess(s.pid, s.arrival, s.burst) for s in specs])
    parts.append("\n--- Starting SJF Scheduler ---\n")
    parts.append(sjf.format_gantt(sjf_result.chart))
    parts.append(sjf.format_averages(sjf_result))

    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Read the process file and print the report of every scheduler."""
    parser = argparse.ArgumentParser(
        prog="cpusched", description="Compare CPU scheduling algorithms."
    )
    parser.add_argument(
        "input", nargs="?", default=DEFAULT_INPUT,
        help="file of 'pid arrival burst' lines (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    try:
        specs = read_processes(args.input)
    except OSError as exc:
        print(f"File open failed: {exc}", file=sys.stderr)
        return 1

    try:
        report = run_all(specs)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(report)
    return 0