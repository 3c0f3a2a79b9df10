import pytest

from cpusched.sjf import (
    IDLE_PID,
    GanttEntry,
    ReadyQueue,
    SjfProcess,
    SjfResult,
    format_averages,
    format_gantt,
    has_higher_priority,
    schedule_sjf,
)


def test_shorter_burst_wins():
    assert has_higher_priority(SjfProcess(1, 0, 2), SjfProcess(2, 0, 5))
    assert not has_higher_priority(SjfProcess(2, 0, 5), SjfProcess(1, 0, 2))


def test_aging_lowers_effective_burst():
    old = SjfProcess(1, 0, 5, age=3)
    new = SjfProcess(2, 0, 3)
    assert has_higher_priority(old, new)


def test_ties_broken_by_arrival_then_pid():
    assert has_higher_priority(SjfProcess(9, 1, 4), SjfProcess(2, 2, 4))
    assert has_higher_priority(SjfProcess(2, 1, 4), SjfProcess(9, 1, 4))
    assert not has_higher_priority(SjfProcess(2, 1, 4), SjfProcess(2, 1, 4))


def test_ready_queue_pops_in_priority_order():
    rq = ReadyQueue()
    for pid, burst in [(1, 7), (2, 3), (3, 9), (4, 1), (5, 3)]:
        rq.push(SjfProcess(pid, 0, burst))
    assert len(rq) == 5
    popped = [rq.pop().pid for _ in range(5)]
    assert popped == [4, 2, 5, 1, 3]
    assert len(rq) == 0


def test_ready_queue_age_all():
    rq = ReadyQueue()
    rq.push(SjfProcess(1, 0, 4))
    rq.push(SjfProcess(2, 0, 6))
    rq.age_all()
    rq.age_all()
    ages = [rq.pop().age for _ in range(2)]
    assert ages == [2, 2]


def test_ready_queue_pop_empty_raises():
    with pytest.raises(IndexError):
        ReadyQueue().pop()


def test_all_arrive_together_shortest_first():
    procs = [SjfProcess(1, 0, 3), SjfProcess(2, 0, 1), SjfProcess(3, 0, 2)]
    result = schedule_sjf(procs)
    assert [e.pid for e in result.chart] == [2, 3, 1]
    assert result.chart[-1].end == sum(p.burst for p in procs)


def test_chart_is_contiguous():
    procs = [SjfProcess(1, 0, 4), SjfProcess(2, 2, 1), SjfProcess(3, 10, 3)]
    result = schedule_sjf(procs)
    for prev, nxt in zip(result.chart, result.chart[1:]):
        assert prev.end == nxt.start
    assert result.chart[0].start == 0


def test_idle_gap_recorded():
    result = schedule_sjf([SjfProcess(5, 4, 2)])
    assert result.chart[0] == GanttEntry(IDLE_PID, 0, 4)
    assert result.chart[1].pid == 5
    assert result.chart[1].start == 4


def test_completed_process_metrics():
    procs = [SjfProcess(1, 0, 4), SjfProcess(2, 1, 2), SjfProcess(3, 2, 6)]
    result = schedule_sjf(procs)
    assert sorted(p.pid for p in result.completed) == [1, 2, 3]
    for p in result.completed:
        assert p.waiting == p.response == p.start - p.arrival
        assert p.turnaround == p.completion - p.arrival
        assert p.completion == p.start + p.burst


def test_input_not_mutated():
    procs = [SjfProcess(2, 3, 4), SjfProcess(1, 0, 2)]
    schedule_sjf(procs)
    assert [p.start for p in procs] == [-1, -1]
    assert [p.age for p in procs] == [0, 0]
    assert [p.pid for p in procs] == [2, 1]


def test_empty_input_raises():
    with pytest.raises(ValueError):
        schedule_sjf([])


def test_averages_match_completed():
    procs = [SjfProcess(1, 0, 4), SjfProcess(2, 1, 2)]
    result = schedule_sjf(procs)
    n = len(result.completed)
    assert result.average_waiting == sum(p.waiting for p in result.completed) / n
    assert result.average_turnaround >= result.average_waiting


def test_averages_empty_raises():
    with pytest.raises(ValueError):
        SjfResult().average_waiting


def test_format_gantt_layout():
    chart = [GanttEntry(IDLE_PID, 0, 4), GanttEntry(5, 4, 6)]
    text = format_gantt(chart)
    assert text.startswith("\nGantt Chart\n " + "-------" * 2)
    assert "| IDLE |  P5  |" in text
    assert text.endswith("\n0      4      6\n\n")


def test_format_gantt_empty_raises():
    with pytest.raises(ValueError):
        format_gantt([])


def test_format_averages_single_process():
    text = format_averages(schedule_sjf([SjfProcess(1, 0, 3)]))
    assert "Average Waiting Time    : 0.00\n" in text
    assert "Average Turnaround Time : 3.00\n" in text
    assert "Average Response Time   : 0.00\n" in text