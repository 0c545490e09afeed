# benchtimers

Small timing helpers for writing benchmarks, all in `benchtimers.timers`:

- `process_cpu_usage()`: CPU time (user + system) used by the current process, in seconds.
- `thread_cpu_usage()`: CPU time (user + system) used by the calling thread, in seconds.
- `chrono_clock_now()`: a reading of the steady, high-resolution clock in seconds. Only differences between two readings are meaningful.
- `local_date_time_string()`: the current local time as an RFC 3339 string such as `2024-05-01T13:45:07+02:00`, to whole seconds.
- `format_rfc3339(moment)`: the same formatting applied to a given `datetime`. Fractions of a second are dropped. A naive `datetime` is taken to be UTC and written with the offset `-00:00`; an offset that cannot be written in whole minutes (or is 100 hours or more) is converted to UTC and also written as `-00:00`.

If the operating system cannot report a CPU time, `TimerError` (a subclass of `RuntimeError`) is raised.

## Installation

```
pip install .
```

## Usage

```python
from datetime import datetime, timedelta, timezone

from benchtimers.timers import (
    chrono_clock_now,
    format_rfc3339,
    local_date_time_string,
    process_cpu_usage,
    thread_cpu_usage,
)

start_wall = chrono_clock_now()
start_cpu = thread_cpu_usage()

total = sum(i * i for i in range(1_000_000))

print("wall:", chrono_clock_now() - start_wall)
print("cpu: ", thread_cpu_usage() - start_cpu)
print("process cpu so far:", process_cpu_usage())
print("run at:", local_date_time_string())

moment = datetime(2024, 5, 1, 13, 45, 7, tzinfo=timezone(timedelta(hours=2)))
print(format_rfc3339(moment))  # 2024-05-01T13:45:07+02:00
```

## What it does not do

This package only supplies clocks and timestamps. It does not register or run benchmarks, repeat them, compute statistics, or write reports, and it provides no command-line tool.

## Running the tests

```
pip install ".[test]"
pytest
```