# cpusched

Simulators for four classic CPU scheduling policies, all run over the same
list of processes:

- **Round Robin** with a dynamic quantum (`cpusched.round_robin`): the first
  quantum is 2; after that it is the harmonic mean of the remaining bursts of
  the processes in the ready queue, truncated to an integer and never below 2.
- **FCFS, I/O aware** (`cpusched.fcfs`): simulated one tick at a time. By
  default each process blocks once for 2 ticks of I/O after running half of
  its burst (`burst // 2` ticks), and other processes run while it waits.
- **CFS** (`cpusched.cfs`): the run queue is a red-black tree
  (`cpusched.rbtree.RedBlackTree`) keyed on virtual runtime. Each slice is
  `10 * weight / (1024 * runnable_tasks)`; the default weight is 1024.
- **SJF** (`cpusched.sjf`): non-preemptive shortest job first with aging.
  Every time a job is picked, all waiting jobs age by one, which lowers their
  effective burst; ties go to the earlier arrival, then the lower pid.

Each simulator produces a Gantt chart and per-process metrics: completion,
turnaround, waiting and response times, with their averages.

## Installation

```
pip install .
```

## Command line

Write a process file of whitespace-separated `pid arrival burst` triples,
one process per line:

```
1 0 5
2 1 3
3 2 8
```

Run every scheduler over it:

```
cpusched processes.txt
```

Without a path the command reads `processes.txt` in the current directory.
Reading stops at the first token that is not an integer, or after 100
processes. The report of Round Robin, FCFS, CFS and SJF, in that order, is
written to standard output. If the file cannot be opened, or holds no
processes, an error goes to standard error and the exit status is 1.

## Library use

```python
from cpusched.cli import parse_processes, read_processes, run_all

specs = parse_processes(["1 0 5", "2 1 3", "3 2 8"])
print(run_all(specs))
```

`read_processes(path)` parses a file the same way. `run_all` returns the
whole report as a string.

Each scheduler can be used on its own. It returns a result object, and
separate functions turn that result into text:

```python
from cpusched.sjf import SjfProcess, schedule_sjf, format_gantt, format_averages

result = schedule_sjf([SjfProcess(1, 0, 5), SjfProcess(2, 1, 3)])
print(format_gantt(result.chart))
print(format_averages(result))
print(result.average_waiting)
```

| Module | Input | Scheduler | Result | Formatting |
| --- | --- | --- | --- | --- |
| `round_robin` | `RrProcess(pid, arrival_time, burst_time)` | `round_robin(processes)` | `RoundRobinResult` (`order`, `times`, `quanta`); `compute_metrics(processes, result)` gives `RrMetrics` | `format_gantt(result)`, `format_metrics(metrics)` |
| `fcfs` | `IoProcess(pid, arrival_time, burst_time, io_start=None, io_duration=2)` | `fcfs_io_aware(processes)` | list of `FcfsRecord` in completion order | `format_table(records)` |
| `cfs` | `CfsTask(pid, arrival_time, burst_time, weight=1024.0)` | `cfs_schedule(tasks)` | `CfsResult` (`history`, `finished`) | `format_gantt(history, limit=40)`, `format_metrics(finished)` |
| `sjf` | `SjfProcess(pid, arrival, burst)` | `schedule_sjf(processes)` | `SjfResult` (`chart`, `completed`) | `format_gantt(chart)`, `format_averages(result)` |

`fcfs_io_aware` and `schedule_sjf` work on copies and leave their inputs
untouched; `cfs_schedule` updates the given `CfsTask` objects in place.
Invalid input raises `ValueError`, for example a non-positive burst in Round
Robin and FCFS, duplicate Round Robin pids, or an empty process list for SJF.

## Limits

- These are simulations over a fixed process list; nothing here schedules
  real operating-system processes.
- CFS puts every task in the run queue at time 0: arrival times only enter
  its metrics, not the schedule. Its Gantt chart shows the first 40 slices.
- SJF never preempts a running job.
- The FCFS table has no response-time column, and each process does at most
  one I/O burst.

## Tests

```
pip install .[test]
pytest
```