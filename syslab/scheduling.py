"""Non-preemptive CPU scheduling: first-come first-served and shortest job first."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Sequence

HEADER = (
    "Process ID\tArrival Time (at)\tBurst Time (bt)\tWaiting Time (wt)"
    "\tTurnaround Time (tat)\tCompletion Time (ct)"
)


@dataclass(frozen=True)
class Process:
    pid: int
    arrival: int
    burst: int


@dataclass(frozen=True)
class ScheduleEntry:
    process: Process
    completion: int

    @property
    def turnaround(self) -> int:
        return self.completion - self.process.arrival

    @property
    def waiting(self) -> int:
        return self.turnaround - self.process.burst


def fcfs(processes: Iterable[Process]) -> list[ScheduleEntry]:
    """Run the processes in the given order."""
    entries: list[ScheduleEntry] = []
    clock: int | None = None
    for process in processes:
        start = process.arrival if clock is None else max(clock, process.arrival)
        clock = start + process.burst
        entries.append(ScheduleEntry(process, clock))
    return entries


def sjf(processes: Iterable[Process]) -> list[ScheduleEntry]:
    """Shortest job first, ties to the earliest in input; results in input order."""
    ordered = list(processes)
    pending = list(enumerate(ordered))
    completion: dict[int, int] = {}
    clock = 0
    while pending:
        ready = [item for item in pending if item[1].arrival <= clock]
        if not ready:
            clock = min(process.arrival for _, process in pending)
            continue
        chosen = min(ready, key=lambda item: item[1].burst)
        clock += chosen[1].burst
        completion[chosen[0]] = clock
        pending.remove(chosen)
    return [ScheduleEntry(p, completion[i]) for i, p in enumerate(ordered)]


def average_waiting(entries: Sequence[ScheduleEntry]) -> float:
    if not entries:
        raise ValueError("no processes to average over")
    return sum(e.waiting for e in entries) / len(entries)


def average_turnaround(entries: Sequence[ScheduleEntry]) -> float:
    if not entries:
        raise ValueError("no processes to average over")
    return sum(e.turnaround for e in entries) / len(entries)


def format_report(entries: Sequence[ScheduleEntry]) -> str:
    """Render the schedule table followed by the two averages."""
    rows = [
        f"{e.process.pid}\t\t{e.process.arrival}\t\t\t{e.process.burst}\t\t"
        f"{e.waiting}\t\t\t{e.turnaround}\t\t\t\t{e.completion}"
        for e in entries
    ]
    return "\n".join([
        "", HEADER, *rows, "",
        f"Average Waiting Time (wt): {average_waiting(entries):.2f}", "",
        f"Average Turnaround Time (tat): {average_turnaround(entries):.2f}",
    ]) + "\n"


def _read_processes() -> list[Process]:
    tokens = (token for line in sys.stdin for token in line.split())

    def ask(prompt: str) -> int:
        sys.stdout.write(prompt)
        sys.stdout.flush()
        token = next(tokens, None)
        if token is None:
            raise ValueError("unexpected end of input")
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    count = ask("Enter the number of processes: ")
    if count <= 0:
        raise ValueError("the number of processes must be positive")
    return [
        Process(pid,
                ask(f"\nEnter arrival time for process {pid} (at): "),
                ask(f"Enter burst time for process {pid} (bt): "))
        for pid in range(1, count + 1)
    ]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate non-preemptive CPU scheduling.")
    parser.add_argument("algorithm", nargs="?", choices=("fcfs", "sjf"), default="fcfs")
    args = parser.parse_args(argv)
    try:
        processes = _read_processes()
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1
    schedule = sjf if args.algorithm == "sjf" else fcfs
    sys.stdout.write(format_report(schedule(processes)))
    return 0


if __name__ == "__main__":
    sys.exit(main())