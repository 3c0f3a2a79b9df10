import pytest

from cpusched.round_robin import (
    MIN_QUANTUM,
    RoundRobinResult,
    RrProcess,
    compute_metrics,
    format_gantt,
    format_metrics,
    round_robin,
)


@pytest.fixture
def mixed():
    return [
        RrProcess("P1", 0, 5),
        RrProcess("P2", 1, 3),
        RrProcess("P3", 2, 8),
        RrProcess("P4", 3, 6),
    ]


def test_first_quantum_is_minimum(mixed):
    result = round_robin(mixed)
    assert result.quanta[0] == MIN_QUANTUM
    assert result.order[0] == "P1"
    assert result.times[0] == 0


def test_quanta_never_below_minimum(mixed):
    result = round_robin(mixed)
    assert all(q >= MIN_QUANTUM for q in result.quanta)
    assert len(result.quanta) == len(result.order)


def test_times_length_and_monotonic(mixed):
    result = round_robin(mixed)
    assert len(result.times) == len(result.order) + 1
    assert result.times == sorted(result.times)


def test_total_time_equals_total_burst_without_idle(mixed):
    result = round_robin(mixed)
    assert result.times[-1] == sum(p.burst_time for p in mixed)


def test_equal_processes_alternate():
    procs = [RrProcess("P1", 0, 4), RrProcess("P2", 0, 4)]
    result = round_robin(procs)
    assert result.order == ["P1", "P2", "P1", "P2"]
    assert result.times[-1] == 8


def test_single_process_runs_alone():
    result = round_robin([RrProcess("P1", 0, 5)])
    assert set(result.order) == {"P1"}
    assert result.times[-1] == 5


def test_idle_until_first_arrival():
    result = round_robin([RrProcess("P7", 3, 1)])
    assert result.order == ["P7"]
    assert result.times == [3, 4]


def test_empty_input_gives_only_start_time():
    result = round_robin([])
    assert result.order == []
    assert result.times == [0]


def test_zero_burst_rejected():
    with pytest.raises(ValueError):
        RrProcess("P1", 0, 0)


def test_duplicate_pid_rejected():
    with pytest.raises(ValueError):
        round_robin([RrProcess("P1", 0, 2), RrProcess("P1", 1, 2)])


def test_metrics_invariants(mixed):
    result = round_robin(mixed)
    metrics = compute_metrics(mixed, result)
    assert [m.pid for m in metrics] == [p.pid for p in mixed]
    for m in metrics:
        assert m.turnaround == m.completion_time - m.arrival_time
        assert m.waiting == m.turnaround - m.burst_time
        assert m.waiting >= 0
        assert 0 <= m.response <= m.waiting
    assert max(m.completion_time for m in metrics) == result.times[-1]


def test_metrics_single_process():
    procs = [RrProcess("P1", 0, 5)]
    (m,) = compute_metrics(procs, round_robin(procs))
    assert (m.completion_time, m.turnaround, m.waiting, m.response) == (5, 5, 0, 0)


def test_metrics_missing_process_raises():
    procs = [RrProcess("P1", 0, 2)]
    with pytest.raises(ValueError):
        compute_metrics(procs, RoundRobinResult(order=[], times=[0]))


def test_format_gantt_layout():
    procs = [RrProcess("P1", 0, 4), RrProcess("P2", 0, 4)]
    text = format_gantt(round_robin(procs))
    assert "Round Robin Gantt Chart:\n| P1 | P2 | P1 | P2 |\n" in text
    assert text.startswith("\nQuantum sizes used: 2  ")
    assert text.endswith("0    2    4    6    8    \n")


def test_format_metrics_contains_rows_and_averages():
    procs = [RrProcess("P1", 0, 5)]
    text = format_metrics(compute_metrics(procs, round_robin(procs)))
    assert "PID  AT   BT   CT   TAT    WT   RT" in text
    assert "P1   0    5    5    5    0    0\n" in text
    assert "Average TAT = 5.00" in text
    assert "Average WT  = 0.00" in text


def test_format_metrics_empty_raises():
    with pytest.raises(ValueError):
        format_metrics([])