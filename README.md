# syslab

A set of small operating-systems and networking exercises. Each one can be
used as a command-line tool or as a Python library.

## Installation

    pip install .

To install and run the tests:

    pip install .[test]
    pytest

## Commands

### CPU scheduling

    syslab-schedule          # first-come first-served (the default)
    syslab-schedule sjf      # non-preemptive shortest job first

The tool reads whitespace-separated integers from standard input. First it
asks for the number of processes. Then, for each process, it asks for the
arrival time and the burst time. It prints a table with each process's
waiting, turnaround and completion times, followed by the average waiting
time and the average turnaround time.

- First-come first-served runs the processes in the order they were
  entered.
- Shortest job first always picks the shortest burst among the processes
  that have arrived. When two bursts are equal, the one entered first wins.

If the input is not an integer, ends too early, or gives a process count that
is not positive, the tool prints an error and exits with status 1.

### Appending one file to another

    syslab-append

The tool asks for a source file name and then a destination file name. It
appends the source's bytes to the destination and creates the destination if
it does not exist. If either file cannot be opened, it prints
`Cannot open file` and stops.

### Running a program

    syslab-run PROGRAM ARGUMENT

The tool runs the executable at the path `PROGRAM` with the single argument
`ARGUMENT` and waits for it to finish. It then prints
`Process creation completed.`

- With fewer than two arguments it prints a usage message instead of running
  anything.
- If the program cannot be started, it reports the failure on standard error.

### Chat over TCP or UDP

    syslab-chat tcp-server [--host HOST] [--port PORT]
    syslab-chat tcp-client [--host HOST] [--port PORT]
    syslab-chat udp-server [--host HOST] [--port PORT]
    syslab-chat udp-client [--host HOST] [--port PORT]

The port defaults to 8888. Servers bind to all interfaces by default, and
clients connect to `127.0.0.1`. Every message travels as a fixed frame of
2000 bytes padded with NUL bytes.

In TCP mode the two sides take turns:

- The client sends first.
- Each whitespace-separated word typed on standard input is one message.
- The server accepts a single client.

In UDP mode each whole input line is one message, and the newline is sent with
it. The chat ends when the input runs out or the peer closes.

### Daytime service

    syslab-daytime serve [--host HOST] [--port PORT]
    syslab-daytime fetch [--host HOST] [--port PORT]

Both modes default to `127.0.0.1:8888`.

- The server sends each client the local time as `YYYY-MM-DD HH:MM:SS`, in a
  100-byte NUL-padded frame, and then closes the connection.
- The client prints `Server date and time: ...`.

### UDP echo

    syslab-echo serve [--host HOST] [--port PORT]
    syslab-echo send  [--host HOST] [--port PORT]

The server sends every datagram back to its sender and prints what it
received. The client reads one line from standard input, sends it without the
newline, and prints the reply.

## Library use

```python
from syslab.scheduling import Process, sjf, average_waiting, format_report

procs = [Process(1, 0, 5), Process(2, 1, 3), Process(3, 2, 1)]
entries = sjf(procs)
print(format_report(entries))
print(average_waiting(entries))
```

Each module also exposes its functions for library use:

- `syslab.scheduling`:
  - `Process` and `ScheduleEntry`, which has the `completion`, `turnaround`
    and `waiting` attributes
  - `fcfs` and `sjf`
  - `average_waiting` and `average_turnaround`, which raise `ValueError` for
    an empty schedule
  - `format_report`
- `syslab.fileappend`: `append_file(source, destination)` returns the number
  of bytes appended.
- `syslab.launcher`: `run_program(program, argument)` returns the exit status.
- `syslab.chat`:
  - `encode_message` and `decode_message`; `encode_message` rejects text with
    a NUL character or text of 2000 bytes or more
  - `serve_tcp_chat`, `run_tcp_chat_client`, `serve_udp_chat` and
    `run_udp_chat_client`. Each takes a host, a port, an iterable of input
    lines and an output stream, and returns the messages it received.
- `syslab.daytime`:
  - `format_daytime`
  - `serve_daytime(host, port, max_connections)`, which returns the number of
    clients served
  - `fetch_daytime(host, port)`
- `syslab.echo`:
  - `serve_echo(host, port, max_datagrams)`, which returns the messages
    received
  - `echo_request(text, host, port)`

## Limitations

- The servers handle one request at a time.
- The TCP chat server talks to a single client and then exits.
- The daytime and echo servers run until interrupted, unless a limit is given
  through the library functions.
- No encryption or authentication is offered.