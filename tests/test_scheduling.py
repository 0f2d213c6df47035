import io

import pytest

from syslab.scheduling import (
    HEADER,
    Process,
    ScheduleEntry,
    average_turnaround,
    average_waiting,
    fcfs,
    format_report,
    main,
    sjf,
)


def _procs(pairs):
    return [Process(i + 1, at, bt) for i, (at, bt) in enumerate(pairs)]


SAMPLE = [(0, 5), (1, 3), (2, 8), (3, 6)]


@pytest.mark.parametrize("policy", [fcfs, sjf])
def test_metrics_are_consistent(policy):
    for entry in policy(_procs(SAMPLE)):
        assert entry.turnaround == entry.completion - entry.process.arrival
        assert entry.waiting == entry.turnaround - entry.process.burst
        assert entry.waiting >= 0


def test_fcfs_worked_example():
    entries = fcfs(_procs([(0, 5), (1, 3), (2, 8)]))
    assert [e.completion for e in entries] == [5, 8, 16]


def test_fcfs_keeps_input_order_and_completion_grows():
    entries = fcfs(_procs(SAMPLE))
    assert [e.process.pid for e in entries] == [1, 2, 3, 4]
    completions = [e.completion for e in entries]
    assert completions == sorted(completions)


def test_fcfs_idle_gap_means_no_wait():
    entries = fcfs(_procs([(0, 2), (10, 3)]))
    assert entries[1].waiting == 0
    assert entries[1].completion == entries[1].process.arrival + entries[1].process.burst


def test_fcfs_empty():
    assert fcfs([]) == []


def test_sjf_worked_example():
    entries = sjf(_procs([(0, 7), (1, 4), (2, 1)]))
    assert [e.completion for e in entries] == [7, 12, 8]


def test_sjf_idles_until_first_arrival():
    entries = sjf(_procs([(5, 2)]))
    assert entries[0].waiting == 0
    assert entries[0].turnaround == entries[0].process.burst


def test_sjf_ties_go_to_earlier_process():
    entries = sjf(_procs([(0, 3), (0, 3)]))
    assert entries[0].completion < entries[1].completion


def test_sjf_never_worse_average_wait_than_fcfs_on_sample():
    procs = _procs(SAMPLE)
    assert average_waiting(sjf(procs)) <= average_waiting(fcfs(procs))


def test_schedules_agree_when_all_arrive_sorted_by_burst():
    procs = _procs([(0, 1), (0, 2), (0, 3)])
    assert fcfs(procs) == sjf(procs)


def test_averages_on_single_process():
    entries = [ScheduleEntry(Process(1, 2, 4), 9)]
    assert average_waiting(entries) == entries[0].waiting
    assert average_turnaround(entries) == entries[0].turnaround


@pytest.mark.parametrize("func", [average_waiting, average_turnaround])
def test_averages_reject_empty(func):
    with pytest.raises(ValueError):
        func([])


def test_format_report_layout():
    entries = fcfs(_procs([(0, 5)]))
    report = format_report(entries)
    lines = report.split("\n")
    assert lines[1] == HEADER
    assert lines[2] == "1\t\t0\t\t\t5\t\t0\t\t\t5\t\t\t\t5"
    assert "Average Waiting Time (wt): 0.00" in report
    assert report.endswith("Average Turnaround Time (tat): 5.00\n")


def test_main_runs_sjf(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n0 7\n1 4\n2 1\n"))
    assert main(["sjf"]) == 0
    out = capsys.readouterr().out
    assert "Enter burst time for process 3 (bt): " in out
    assert HEADER in out
    assert "Average Turnaround Time (tat):" in out


def test_main_rejects_non_integer(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("two\n"))
    assert main([]) == 1
    assert "integer" in capsys.readouterr().err


def test_main_rejects_zero_processes(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main(["fcfs"]) == 1
    assert "positive" in capsys.readouterr().err